"""Runtime context shared across ffquick components."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ffquick.models.options.defaults import DEFAULT_FFMPEG
from ffquick.models.verbosity import Verbosity

if TYPE_CHECKING:
    from collections.abc import Callable

    from ffquick.models.options import RuntimeOptions


def read_terminal_line(prompt: str) -> str | None:
    """Print ``prompt`` and read one line from stdin, ``None`` at end of input."""
    try:
        return input(prompt)
    except EOFError:
        return None


def _stdin_is_readable() -> bool:
    stdin = sys.stdin
    return stdin is not None and not stdin.closed


@dataclass(slots=True)
class RuntimeContext:
    """Runtime flags and I/O hooks for a single invocation.

    ``read_line`` is ``None`` when prompting is disabled. Otherwise it prints
    its argument as a prompt and returns the answer, or ``None`` at end of
    input.
    """

    verbosity: Verbosity = Verbosity.QUIET
    dry_run: bool = False
    ffmpeg: str = DEFAULT_FFMPEG
    status_callback: Callable[[str], None] | None = None
    read_line: Callable[[str], str | None] | None = None

    @classmethod
    def from_options(
        cls,
        runtime: RuntimeOptions,
        *,
        status_callback: Callable[[str], None] | None = None,
        read_line: Callable[[str], str | None] | None = None,
    ) -> RuntimeContext:
        """Build a context, enabling prompts per ``runtime.interactive``.

        With ``interactive`` unset, prompts are enabled when a ``read_line``
        hook is supplied or stdin is open. Piped answers are read the same
        way as typed ones, and end of input leaves the remaining fields at
        their defaults.
        """
        interactive = runtime.interactive
        if interactive is None:
            interactive = read_line is not None or _stdin_is_readable()
        if not interactive:
            read_line = None
        elif read_line is None:
            read_line = read_terminal_line
        return cls(
            verbosity=runtime.verbosity,
            dry_run=runtime.dry_run,
            ffmpeg=runtime.ffmpeg,
            status_callback=status_callback,
            read_line=read_line,
        )


__all__ = ["RuntimeContext", "read_terminal_line"]
