"""Options package exports."""

from __future__ import annotations

from ffquick.models.verbosity import Verbosity

from .base import OperationOptions
from .defaults import (
    DEFAULT_FFMPEG,
    DEFAULT_GIF_FPS,
    DEFAULT_GIF_SCALE,
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    FFMPEG_ENV,
)
from .file_type import FileTypeOptions
from .gif import GifOptions
from .resolution import ResolutionOptions
from .runtime import RuntimeOptions
from .time import TimeOptions

__all__ = [
    "DEFAULT_FFMPEG",
    "DEFAULT_GIF_FPS",
    "DEFAULT_GIF_SCALE",
    "DEFAULT_HEIGHT",
    "DEFAULT_WIDTH",
    "FFMPEG_ENV",
    "FileTypeOptions",
    "GifOptions",
    "OperationOptions",
    "ResolutionOptions",
    "RuntimeOptions",
    "TimeOptions",
    "Verbosity",
]
