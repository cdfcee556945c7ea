"""Time selection option models."""

from __future__ import annotations

from typing import Annotated, ClassVar

from cyclopts import Parameter
from pydantic import Field

from ffquick.models.annotations import Prompt

from .base import OperationOptions
from .groups import TIME_GROUP

_PROMPT_TEMPLATE = "Enter {} time (hh:mm:ss or seconds or press enter to skip): "


@Parameter(name="*", group=TIME_GROUP)
class TimeOptions(OperationOptions):
    """Options related to time selection.

    Values are handed to ffmpeg untouched, so any duration syntax ffmpeg
    understands works.
    """

    TIME_DESC_TEMPLATE: ClassVar[str] = "{} for the trimmed output. Examples: '90', '00:01:30'. Omitted when empty."

    start: Annotated[
        str | None,
        Prompt(_PROMPT_TEMPLATE.format("start")),
    ] = Field(None, description=TIME_DESC_TEMPLATE.format("Start timestamp"))
    end: Annotated[
        str | None,
        Prompt(_PROMPT_TEMPLATE.format("end")),
    ] = Field(None, description=TIME_DESC_TEMPLATE.format("End timestamp"))


__all__ = ["TimeOptions"]
