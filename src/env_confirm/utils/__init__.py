"""Utility functions for env-confirm."""

from env_confirm.utils.logging import configure_logging, get_logger, get_logger_with_context
from env_confirm.utils.errors import (
    EnvConfirmError,
    ValidationError,
    ConfigurationError,
    fatal,
)
from env_confirm.utils.config import (
    EnvConfirmConfig,
    load_config,
    save_config,
    get_config,
    get_default_config,
    set_config,
)

__all__ = [
    # Logging
    "configure_logging",
    "get_logger",
    "get_logger_with_context",
    # Errors
    "EnvConfirmError",
    "ValidationError",
    "ConfigurationError",
    "fatal",
    # Config
    "EnvConfirmConfig",
    "load_config",
    "save_config",
    "get_config",
    "get_default_config",
    "set_config",
]
