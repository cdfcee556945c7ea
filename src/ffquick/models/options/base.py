"""Common base for per-operation option models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class OperationOptions(BaseModel):
    """Free-form string options where a blank value means "not given"."""

    model_config = ConfigDict(extra="forbid")

    @field_validator("*", mode="before")
    @classmethod
    def _strip_blank(cls, v: object) -> object:
        """Trim surrounding whitespace and treat empty strings as unset."""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v


__all__ = ["OperationOptions"]
