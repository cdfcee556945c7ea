"""Expose models and type definitions."""

from .context import RuntimeContext
from .options import (
    FileTypeOptions,
    GifOptions,
    OperationOptions,
    ResolutionOptions,
    RuntimeOptions,
    TimeOptions,
)
from .plan import CommandPlan
from .types import Operation
from .verbosity import Verbosity

__all__ = [
    "CommandPlan",
    "FileTypeOptions",
    "GifOptions",
    "Operation",
    "OperationOptions",
    "ResolutionOptions",
    "RuntimeContext",
    "RuntimeOptions",
    "TimeOptions",
    "Verbosity",
]
