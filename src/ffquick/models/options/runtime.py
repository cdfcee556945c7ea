"""Runtime option models."""

from __future__ import annotations

import os

from cyclopts import Parameter
from pydantic import BaseModel, Field, field_validator

from ffquick.models.verbosity import Verbosity

from .defaults import DEFAULT_FFMPEG, FFMPEG_ENV
from .groups import RUNTIME_GROUP


def _default_ffmpeg() -> str:
    """Return the ffmpeg executable from the environment or the search path."""
    return os.getenv(FFMPEG_ENV) or DEFAULT_FFMPEG


@Parameter(name="*", group=RUNTIME_GROUP)
class RuntimeOptions(BaseModel):
    """Runtime behavior options."""

    verbosity: Verbosity = Field(
        default=Verbosity.QUIET,
        description="Increase output verbosity. Commands: show the ffmpeg command before running it.",
    )
    dry_run: bool = Field(default=False, description="Print the ffmpeg command without executing it.")
    interactive: bool | None = Field(
        default=None,
        description=(
            "Prompt for options not given as flags. Answers may be piped on stdin. [default: whenever stdin is open]"
        ),
    )
    ffmpeg: str = Field(
        default_factory=_default_ffmpeg,
        description=f"ffmpeg executable to run. [default: ${FFMPEG_ENV} or {DEFAULT_FFMPEG}]",
    )

    @field_validator("verbosity", mode="before")
    @classmethod
    def _parse_verbosity(cls, v: object) -> Verbosity:
        """Accept numeric values or case-insensitive enum names.

        Allows CLI usage like ``--verbosity commands`` in addition to
        ``--verbosity 1``.
        """
        if isinstance(v, Verbosity):
            return v
        if isinstance(v, int):
            return Verbosity(v)
        if isinstance(v, str):
            token = v.strip()
            try:
                return Verbosity[token.upper()]
            except KeyError:
                try:
                    return Verbosity(int(token))
                except (ValueError, KeyError):
                    pass
        raise ValueError("verbosity must be one of quiet, commands, or 0/1")


__all__ = ["RuntimeOptions"]
