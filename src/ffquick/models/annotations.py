"""Pydantic field annotations used to drive interactive prompting."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Prompt:
    """Question asked on stdin when a field was not given as a flag.

    ``required`` fields are asked again until a non-blank answer is read.
    """

    text: str
    required: bool = False
