"""GIF conversion option models."""

from __future__ import annotations

from typing import Annotated

from cyclopts import Parameter
from pydantic import Field

from ffquick.models.annotations import Prompt

from .base import OperationOptions
from .defaults import DEFAULT_GIF_FPS, DEFAULT_GIF_SCALE
from .groups import GIF_GROUP


@Parameter(name="*", group=GIF_GROUP)
class GifOptions(OperationOptions):
    """Frame rate and width for ``convert_to_gif``."""

    fps: Annotated[
        str | None,
        Prompt(f"Enter fps (press enter for {DEFAULT_GIF_FPS}): "),
    ] = Field(None, description=f"Frames per second of the GIF. [default: {DEFAULT_GIF_FPS}]")
    scale: Annotated[
        str | None,
        Prompt(f"Enter scale (press enter for {DEFAULT_GIF_SCALE}): "),
    ] = Field(
        None,
        description=f"GIF width in pixels; height follows the aspect ratio. [default: {DEFAULT_GIF_SCALE}]",
    )


__all__ = ["GifOptions"]
