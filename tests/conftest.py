"""Shared test fixtures for env-confirm tests."""

import logging

import pytest

import env_confirm.utils.config as config_module
from env_confirm.utils.config import EnvConfirmConfig


@pytest.fixture(autouse=True)
def default_config():
    """Use the default configuration instead of any config file on disk."""
    config = EnvConfirmConfig()
    config_module._config = config
    yield config
    config_module._config = None


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo configure_logging so log records reach caplog."""
    yield
    logger = logging.getLogger("env_confirm")
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def environ() -> dict[str, str]:
    """Create an isolated environment table for testing."""
    return {
        "SERVER_PORT": "4000",
        "SERVER_HOST": "api.example.com",
        "LOG_LEVEL": "info",
        "RATIO": "0.75",
        "EMPTY_VAR": "",
    }


@pytest.fixture
def sample_env_file(tmp_path) -> str:
    """Create a sample .env file for testing."""
    env_content = """
# Server
SERVER_PORT=4000
SERVER_HOST=api.example.com

# Quoted values
DATABASE_URL="postgres://localhost:5432/app"
LOG_PATH='./logs'
"""
    env_file = tmp_path / "test.env"
    env_file.write_text(env_content)
    return str(env_file)
