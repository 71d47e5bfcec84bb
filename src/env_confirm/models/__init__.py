"""Data models for env-confirm.

All models are Pydantic BaseModel with frozen=True for immutability.
"""

from env_confirm.models.common import ConfirmFailure

__all__ = [
    "ConfirmFailure",
]
