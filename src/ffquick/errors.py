"""Error types and the exit codes they map to."""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit codes returned by the CLI."""

    SUCCESS = 0
    USAGE = 1
    UNKNOWN_OPERATION = 2
    TOOL_FAILED = 3
    TOOL_NOT_FOUND = 127


class FFQuickError(Exception):
    """Base class for failures reported by the CLI."""

    exit_code: ExitCode = ExitCode.USAGE


class UsageError(FFQuickError):
    """Missing or malformed command-line input."""


class InvalidPathError(FFQuickError):
    """Input path has no extension separator."""

    def __init__(self, path: str) -> None:
        super().__init__(f"Invalid file path: {path}")
        self.path = path


class UnknownOperationError(FFQuickError):
    """Operation selector does not name a known operation."""

    exit_code = ExitCode.UNKNOWN_OPERATION

    def __init__(self, selector: str) -> None:
        super().__init__(f"Unknown command: {selector}")
        self.selector = selector


class ToolLaunchError(FFQuickError):
    """The external tool could not be started."""

    exit_code = ExitCode.TOOL_NOT_FOUND


class ToolExecutionError(FFQuickError):
    """The external tool ran but exited with a non-zero status."""

    exit_code = ExitCode.TOOL_FAILED

    def __init__(self, message: str, returncode: int) -> None:
        super().__init__(message)
        self.returncode = returncode


__all__ = [
    "ExitCode",
    "FFQuickError",
    "InvalidPathError",
    "ToolExecutionError",
    "ToolLaunchError",
    "UnknownOperationError",
    "UsageError",
]
