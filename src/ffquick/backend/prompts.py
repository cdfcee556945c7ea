"""Fill unset option fields from prompts read on stdin.

Fields opt in by carrying a :class:`~ffquick.models.annotations.Prompt`
annotation. Prompts are asked in field declaration order and only for fields
that are still unset, so anything passed as a flag is never asked for.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from ffquick.errors import UsageError
from ffquick.models.annotations import Prompt
from ffquick.models.options import OperationOptions

if TYPE_CHECKING:
    from collections.abc import Callable

    from pydantic.fields import FieldInfo

    from ffquick.models.context import RuntimeContext

OptionsT = TypeVar("OptionsT", bound=OperationOptions)

logger = logging.getLogger(__name__)


def _prompt_for(field: FieldInfo) -> Prompt | None:
    return next((extra for extra in field.metadata if isinstance(extra, Prompt)), None)


def ask(prompt: Prompt, read_line: Callable[[str], str | None]) -> str | None:
    """Ask ``prompt`` once, or until answered when it is required.

    Returns the trimmed answer, or ``None`` for a blank answer or end of input.
    """
    while True:
        raw = read_line(prompt.text)
        if raw is None:
            return None
        answer = raw.strip()
        if answer or not prompt.required:
            return answer or None


def _flag_name(name: str) -> str:
    return f"--{name.replace('_', '-')}"


def _answer_field(options: OptionsT, name: str, prompt: Prompt, read_line: Callable[[str], str | None]) -> OptionsT:
    """Ask for one field until its validated value is set or it may stay unset."""
    while True:
        answer = ask(prompt, read_line)
        if answer is None:
            return options
        updated = type(options).model_validate({**options.model_dump(), name: answer})
        if getattr(updated, name) is not None or not prompt.required:
            return updated


def resolve(options: OptionsT, ctx: RuntimeContext) -> OptionsT:
    """Return ``options`` with unset prompted fields answered interactively.

    Answers are validated as they arrive, so a required field whose answer
    normalizes to nothing is asked again.

    Raises:
        UsageError: If a required field is still unset afterwards.

    """
    fields = type(options).model_fields
    if ctx.read_line is not None:
        for name, field in fields.items():
            prompt = _prompt_for(field)
            if prompt is None or getattr(options, name) is not None:
                continue
            options = _answer_field(options, name, prompt, ctx.read_line)
    else:
        logger.debug("Prompting disabled; using flags and defaults for %s", type(options).__name__)
    for name, field in fields.items():
        prompt = _prompt_for(field)
        if prompt is not None and prompt.required and getattr(options, name) is None:
            raise UsageError(f"Missing required option {_flag_name(name)}")
    logger.debug("Resolved %r", options)
    return options


__all__ = ["ask", "resolve"]
