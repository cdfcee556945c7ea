"""ffmpeg-related helper utilities."""

from .cli import format_ffmpeg_cmd, join_command, quote_arg, run, run_ffmpeg
from .helpers import FileParts, emit_status, split_file_parts

__all__ = [
    "FileParts",
    "emit_status",
    "format_ffmpeg_cmd",
    "join_command",
    "quote_arg",
    "run",
    "run_ffmpeg",
    "split_file_parts",
]
