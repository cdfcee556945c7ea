"""Helpers for executing ffmpeg."""

import logging
import os
import shlex
import subprocess
from collections.abc import Sequence
from pathlib import Path

from ffquick.models.options.defaults import DEFAULT_FFMPEG

_VIDEO_FILTER = "-vf"

logger = logging.getLogger(__name__)


def run(exe: str | Path, args: Sequence[str | Path]) -> int:
    """Run an executable in the foreground and return its exit status.

    The child inherits stdin, stdout and stderr so its own progress output
    and overwrite questions reach the terminal.

    Raises:
        OSError: If the executable cannot be started.

    """
    cmd = [str(exe), *[str(a) for a in args]]
    logger.debug("Launching %s", cmd)
    proc = subprocess.run(cmd, check=False)  # noqa: S603
    logger.debug("%s exited with status %d", cmd[0], proc.returncode)
    return proc.returncode


def run_ffmpeg(args: Sequence[str | Path], *, ffmpeg: str | Path = DEFAULT_FFMPEG) -> int:
    """Run ``ffmpeg`` with ``args`` and return its exit status."""
    return run(ffmpeg, args)


def quote_arg(arg: str, *, force: bool = False) -> str:
    """Quote argument if needed."""
    if os.name == "nt":
        quoted = subprocess.list2cmdline([arg])
        if force and quoted == arg:
            return f'"{arg}"'
        return quoted
    quoted = shlex.quote(arg)
    if force and quoted == arg:
        return f"'{arg}'"
    return quoted


def join_command(exe: str | Path, args: Sequence[str | Path]) -> str:
    """Format a command for display."""
    parts = [str(exe), *[str(a) for a in args]]
    return " ".join(quote_arg(part, force=i > 0 and parts[i - 1] == _VIDEO_FILTER) for i, part in enumerate(parts))


def format_ffmpeg_cmd(args: Sequence[str | Path], *, ffmpeg: str | Path = DEFAULT_FFMPEG) -> str:
    """Format an ``ffmpeg`` command for display."""
    return join_command(ffmpeg, args)


__all__ = [
    "format_ffmpeg_cmd",
    "join_command",
    "quote_arg",
    "run",
    "run_ffmpeg",
]
