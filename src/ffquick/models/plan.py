"""Resolved ffmpeg invocation."""

from __future__ import annotations

from dataclasses import dataclass

from .types import Operation


@dataclass(frozen=True, slots=True)
class CommandPlan:
    """Operation, paths and the ordered ffmpeg arguments built for them."""

    operation: Operation
    source: str
    output: str
    args: tuple[str, ...]


__all__ = ["CommandPlan"]
