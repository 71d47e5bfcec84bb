"""Error handling utilities for env-confirm."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NoReturn

from env_confirm.models.common import ConfirmFailure
from env_confirm.utils.logging import get_logger

if TYPE_CHECKING:
    from env_confirm.utils.config import EnvConfirmConfig

logger = get_logger(__name__)


class EnvConfirmError(Exception):
    """Base exception for env-confirm."""

    def __init__(self, message: str, code: str = "UNKNOWN_ERROR", details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_failure(self) -> ConfirmFailure:
        """Convert to ConfirmFailure model."""
        return ConfirmFailure(code=self.code, message=self.message, details=self.details)


class ConfigurationError(EnvConfirmError):
    """A variable could not be resolved, or was asked for without a name."""

    def __init__(self, message: str, name: str | None = None):
        details = {"name": name} if name else {}
        super().__init__(message, code="CONFIG_ERROR", details=details)


class ValidationError(EnvConfirmError):
    """A predicate did not hold for a resolved value."""

    def __init__(
        self,
        message: str,
        name: str | None = None,
        value: str | None = None,
        predicate: str | None = None,
        negated: bool = False,
    ):
        details: dict[str, Any] = {}
        if name:
            details["name"] = name
        if value is not None:
            details["value"] = value
        if predicate:
            details["predicate"] = predicate
            details["negated"] = negated
        super().__init__(message, code="VALIDATION_ERROR", details=details)
        self.name = name
        self.value = value
        self.predicate = predicate
        self.negated = negated


def fatal(error: EnvConfirmError, config: "EnvConfirmConfig | None" = None) -> NoReturn:
    """Stop at a failed confirmation.

    The error is raised unless the configuration asks to halt the process, in
    which case the message is logged and SystemExit is raised instead.

    Args:
        error: The failure to report
        config: Active configuration. Defaults to the global configuration.

    Raises:
        EnvConfirmError: When exit_on_failure is disabled
        SystemExit: When exit_on_failure is enabled
    """
    if config is None:
        from env_confirm.utils.config import get_config

        config = get_config()

    if config.exit_on_failure:
        logger.error(error.message)
        raise SystemExit(config.exit_code) from error
    raise error
