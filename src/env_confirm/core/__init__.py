"""Core confirmation logic for env-confirm."""

from env_confirm.core.confirm import Confirmation, confirm
from env_confirm.core.resolve import resolve_value

__all__ = [
    "Confirmation",
    "confirm",
    "resolve_value",
]
