"""Common model types shared across modules."""

from typing import Any

from pydantic import BaseModel, Field


class ConfirmFailure(BaseModel):
    """Represents a failed confirmation of an environment variable."""

    model_config = {"frozen": True}

    code: str = Field(description="Error code for programmatic handling")
    message: str = Field(description="Human-readable error message")
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional error context",
    )

    @property
    def variable(self) -> str | None:
        """Name of the variable the failure concerns, if known."""
        return self.details.get("name")

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"
