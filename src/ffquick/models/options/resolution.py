"""Output resolution option models."""

from __future__ import annotations

from typing import Annotated

from cyclopts import Parameter
from pydantic import Field

from ffquick.models.annotations import Prompt

from .base import OperationOptions
from .defaults import DEFAULT_HEIGHT, DEFAULT_WIDTH
from .groups import RESOLUTION_GROUP


@Parameter(name="*", group=RESOLUTION_GROUP)
class ResolutionOptions(OperationOptions):
    """Target frame size for ``specify_resolution``."""

    width: Annotated[
        str | None,
        Prompt(f"Enter a width (press enter for {DEFAULT_WIDTH}): "),
    ] = Field(None, description=f"Output width in pixels. [default: {DEFAULT_WIDTH}]")
    height: Annotated[
        str | None,
        Prompt(f"Enter a height (press enter for {DEFAULT_HEIGHT}): "),
    ] = Field(None, description=f"Output height in pixels. [default: {DEFAULT_HEIGHT}]")


__all__ = ["ResolutionOptions"]
