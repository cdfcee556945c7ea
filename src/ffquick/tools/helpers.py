"""Utility functions for file names and status emission."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NamedTuple

if TYPE_CHECKING:
    from collections.abc import Callable
else:
    from collections import abc

    Callable = abc.Callable

from ffquick.errors import InvalidPathError
from ffquick.models.verbosity import Verbosity

logger = logging.getLogger(__name__)

_EXTENSION_SEPARATOR = "."


class FileParts(NamedTuple):
    """Input path split at its final extension separator."""

    extension: str
    stem: str

    def derive(self, suffix: str, extension: str | None = None) -> str:
        """Return ``<stem><suffix>.<extension>``, keeping the input extension by default."""
        ext = self.extension if extension is None else extension
        return f"{self.stem}{suffix}{_EXTENSION_SEPARATOR}{ext}"


def split_file_parts(path: str) -> FileParts:
    """Split ``path`` into its extension and everything before it.

    The last ``.`` anywhere in the path is the separator, even when it sits
    in a directory name. The stem keeps everything before it,
    which means ``stem + "." + extension == path``.

    Raises:
        InvalidPathError: If the path has no ``.``.

    """
    dot = path.rfind(_EXTENSION_SEPARATOR)
    if dot < 0:
        raise InvalidPathError(path)
    return FileParts(extension=path[dot + 1 :], stem=path[:dot])


def emit_status(message: str, *, status_callback: Callable[[str], None] | None) -> None:
    """Send ``message`` to the CLI, logger, or a custom callback.

    The caller controls where status lines go:

    * ``print`` - used by the CLI for direct terminal output.
    * ``None`` - route messages through ``logger.info``.
    * Any other ``Callable[[str], None]`` - for tests that capture status
      output.
    """
    if status_callback is None:
        logger.info(message)
        return
    if status_callback is print:
        print(message, flush=True)  # noqa: T201
        return
    status_callback(message)


def format_action_label(*, dry_run: bool) -> str:
    """Return a short action label for command banners.

    - Command: when in dry-run mode
    - Running: otherwise
    """
    if dry_run:
        return "Command"
    return "Running"


def maybe_log_command(
    *,
    verbosity: Verbosity,
    dry_run: bool,
    status_callback: Callable[[str], None] | None,
    banner: str,
) -> None:
    """Log a command banner when appropriate for verbosity/dry-run.

    Logs when verbosity is at least ``Verbosity.COMMANDS`` or in dry-run mode.
    """
    if verbosity >= Verbosity.COMMANDS or dry_run:
        emit_status(banner, status_callback=status_callback)


__all__ = [
    "FileParts",
    "emit_status",
    "format_action_label",
    "maybe_log_command",
    "split_file_parts",
]
