"""Verbosity levels for status output."""

from enum import IntEnum


class Verbosity(IntEnum):
    """Status output verbosity levels."""

    QUIET = 0
    COMMANDS = 1


__all__ = ["Verbosity"]
