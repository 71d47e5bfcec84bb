"""Configuration file support for env-confirm."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field


class EnvConfirmConfig(BaseModel):
    """Main configuration for env-confirm."""

    mode_variable: str = Field(
        default="MODE",
        description="Variable naming the current mode, used for NAME_<MODE> fallback",
    )
    exit_on_failure: bool = Field(
        default=False,
        description="Log and exit the process on failure instead of raising",
    )
    exit_code: int = Field(default=1, description="Exit status used when exiting on failure")
    log_level: str = Field(default="WARNING", description="Log level for the CLI")
    log_format: Literal["plain", "structured"] = Field(
        default="plain",
        description="plain, or structured with timestamps and context fields like variable=NAME",
    )


def get_config_paths() -> list[Path]:
    """Get possible configuration file paths.

    Returns:
        List of paths to check for configuration files
    """
    paths = []

    # Current directory
    paths.append(Path.cwd() / ".env-confirm.yaml")
    paths.append(Path.cwd() / ".env-confirm.yml")

    # Home directory
    home = Path.home()
    paths.append(home / ".env-confirm.yaml")
    paths.append(home / ".config" / "env-confirm" / "config.yaml")

    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        paths.append(Path(xdg_config) / "env-confirm" / "config.yaml")

    return paths


def load_config(config_path: Path | str | None = None) -> EnvConfirmConfig:
    """Load configuration from file.

    Args:
        config_path: Explicit path to config file. If None, searches default locations.

    Returns:
        Loaded configuration
    """
    if config_path is not None:
        path = Path(config_path)
        if path.exists():
            return _load_config_file(path)
        raise FileNotFoundError(f"Config file not found: {config_path}")

    for path in get_config_paths():
        if path.exists():
            return _load_config_file(path)

    return EnvConfirmConfig()


def _load_config_file(path: Path) -> EnvConfirmConfig:
    """Load configuration from a specific file.

    Args:
        path: Path to config file

    Returns:
        Loaded configuration
    """
    try:
        data = yaml.safe_load(path.read_text())
        if data is None:
            return EnvConfirmConfig()
        return EnvConfirmConfig.model_validate(data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")
    except Exception as e:
        raise ValueError(f"Failed to load config file: {e}")


def save_config(config: EnvConfirmConfig, config_path: Path | str | None = None) -> Path:
    """Save configuration to file.

    Args:
        config: Configuration to save
        config_path: Path to save to. Defaults to ~/.config/env-confirm/config.yaml

    Returns:
        Path where config was saved
    """
    if config_path is None:
        config_path = Path.home() / ".config" / "env-confirm" / "config.yaml"
    else:
        config_path = Path(config_path)

    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = config.model_dump(mode="json", exclude_defaults=True)
    config_path.write_text(yaml.dump(data, default_flow_style=False, sort_keys=False))

    return config_path


def get_default_config() -> EnvConfirmConfig:
    """Get the default configuration."""
    return EnvConfirmConfig()


# Global config instance
_config: EnvConfirmConfig | None = None


def get_config() -> EnvConfirmConfig:
    """Get the global configuration instance.

    Loads from file on first call.
    """
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: EnvConfirmConfig | None) -> None:
    """Set the global configuration instance.

    Passing None discards it so the next get_config() reloads from file.
    """
    global _config
    _config = config
