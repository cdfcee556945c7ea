"""Core package for ffquick utilities."""

from .backend import build_command, run_operation
from .errors import ExitCode, FFQuickError
from .models import Operation

__all__ = ["ExitCode", "FFQuickError", "Operation", "build_command", "run_operation"]
