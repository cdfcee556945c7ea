"""Backend utilities for building and executing ffmpeg commands."""

from .builder import build_command
from .executor import run_operation

__all__ = [
    "build_command",
    "run_operation",
]
