"""Structured logging utilities."""

import logging
import sys
from typing import Any


class StructuredFormatter(logging.Formatter):
    """Formatter that appends context fields to log messages."""

    def format(self, record: logging.LogRecord) -> str:
        extra = ""
        fields = getattr(record, "extra_fields", None)
        if fields:
            extra = " " + " ".join(f"{k}={v}" for k, v in fields.items())

        message = super().format(record)
        return f"{message}{extra}"


def configure_logging(
    level: str = "WARNING",
    format_string: str | None = None,
    structured: bool = False,
) -> None:
    """Configure logging for env-confirm.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string
        structured: Use structured logging format
    """
    if format_string is None:
        if structured:
            format_string = "%(asctime)s %(levelname)s %(name)s %(message)s"
        else:
            format_string = "%(levelname)s: %(message)s"

    handler = logging.StreamHandler(sys.stderr)

    if structured:
        handler.setFormatter(StructuredFormatter(format_string))
    else:
        handler.setFormatter(logging.Formatter(format_string))

    logger = logging.getLogger("env_confirm")
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers = [handler]
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger for an env-confirm module.

    Args:
        name: Module name (will be prefixed with env_confirm)

    Returns:
        Configured logger
    """
    if not name.startswith("env_confirm"):
        name = f"env_confirm.{name}"
    return logging.getLogger(name)


class LoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that adds extra fields to log messages."""

    def process(
        self, msg: str, kwargs: dict[str, Any]
    ) -> tuple[str, dict[str, Any]]:
        extra = kwargs.get("extra", {})
        extra["extra_fields"] = self.extra
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger_with_context(name: str, **context: Any) -> LoggerAdapter:
    """Get a logger with additional context fields.

    Args:
        name: Module name
        **context: Context fields to include in all log messages

    Returns:
        LoggerAdapter with context
    """
    logger = get_logger(name)
    return LoggerAdapter(logger, context)
