"""ffmpeg argument builders for each operation."""

from .command_builder import HANDLERS, OPTIONS_TYPES, build_command

__all__ = ["HANDLERS", "OPTIONS_TYPES", "build_command"]
