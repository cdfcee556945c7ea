"""Shared Cyclopts groups for option models."""

from __future__ import annotations

from cyclopts import Group

RESOLUTION_GROUP = Group.create_ordered("Resolution")
TIME_GROUP = Group.create_ordered("Time")
GIF_GROUP = Group.create_ordered("GIF")
OUTPUT_GROUP = Group.create_ordered("Output")
RUNTIME_GROUP = Group.create_ordered("Runtime")

__all__ = [
    "GIF_GROUP",
    "OUTPUT_GROUP",
    "RESOLUTION_GROUP",
    "RUNTIME_GROUP",
    "TIME_GROUP",
]
