"""Container change option models."""

from __future__ import annotations

from typing import Annotated

from cyclopts import Parameter
from pydantic import Field, field_validator

from ffquick.models.annotations import Prompt

from .base import OperationOptions
from .groups import OUTPUT_GROUP

EXTENSION_SEPARATOR = "."


@Parameter(name="*", group=OUTPUT_GROUP)
class FileTypeOptions(OperationOptions):
    """Target extension for ``change_file_type``."""

    extension: Annotated[
        str | None,
        Prompt("Enter a valid video or audio extension (EX: .mp3): ", required=True),
    ] = Field(None, description="Target extension, with or without the leading dot. Example: '.mov'.")

    @field_validator("extension")
    @classmethod
    def ensure_leading_dot(cls, v: str | None) -> str | None:
        """Prefix the extension with ``.`` unless it already has one.

        A lone ``.`` names no extension and is treated as blank.
        """
        if v is None or v == EXTENSION_SEPARATOR:
            return None
        if v.startswith(EXTENSION_SEPARATOR):
            return v
        return f"{EXTENSION_SEPARATOR}{v}"


__all__ = ["EXTENSION_SEPARATOR", "FileTypeOptions"]
