"""Default constants for option models."""

from __future__ import annotations

DEFAULT_WIDTH = "1920"
DEFAULT_HEIGHT = "1080"
DEFAULT_GIF_FPS = "10"
DEFAULT_GIF_SCALE = "320"
DEFAULT_FFMPEG = "ffmpeg"

FFMPEG_ENV = "FFQUICK_FFMPEG"  #: Environment variable overriding the ffmpeg executable.

__all__ = [
    "DEFAULT_FFMPEG",
    "DEFAULT_GIF_FPS",
    "DEFAULT_GIF_SCALE",
    "DEFAULT_HEIGHT",
    "DEFAULT_WIDTH",
    "FFMPEG_ENV",
]
