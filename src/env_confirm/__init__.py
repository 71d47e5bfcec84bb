"""env-confirm: fail-fast validation of environment variables at startup.

Each variable is resolved once, falling back to a mode-suffixed variant
(``NAME_<MODE>``) and then to a default, and checked by a chain of
predicates. The first predicate that does not hold stops the program.

Usage:
    from env_confirm import confirm

    confirm("SERVER_PORT").is_integer().is_ge(1000).is_le(60000)
    confirm("LOG_LEVEL", "info").is_in(["debug", "info", "warning"])
    confirm("LOG_PATH", "./logs").is_path(force=True)
    confirm("API_URL").not_.contains("localhost")

CLI:
    env-confirm check SERVER_PORT --ge 1000 --le 60000
    env-confirm check LOG_PATH --default ./logs --path --force
"""

__version__ = "0.1.0"

from env_confirm.core.confirm import Confirmation, confirm
from env_confirm.core.resolve import resolve_value

from env_confirm.models.common import ConfirmFailure

from env_confirm.utils.errors import ConfigurationError, EnvConfirmError, ValidationError
from env_confirm.utils.config import EnvConfirmConfig, get_config, load_config, set_config
from env_confirm.utils.logging import configure_logging

__all__ = [
    # Version
    "__version__",
    # Core
    "Confirmation",
    "confirm",
    "resolve_value",
    # Models
    "ConfirmFailure",
    # Errors
    "EnvConfirmError",
    "ConfigurationError",
    "ValidationError",
    # Config
    "EnvConfirmConfig",
    "get_config",
    "load_config",
    "set_config",
    # Logging
    "configure_logging",
]
