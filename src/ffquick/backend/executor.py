"""Build and execute ffmpeg commands."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ffquick.errors import ToolExecutionError, ToolLaunchError
from ffquick.models import CommandPlan, Operation, OperationOptions, RuntimeContext, RuntimeOptions
from ffquick.tools import emit_status, format_ffmpeg_cmd, run_ffmpeg, split_file_parts
from ffquick.tools.helpers import format_action_label, maybe_log_command

from . import prompts
from .builder import OPTIONS_TYPES, build_command

if TYPE_CHECKING:
    from collections.abc import Callable

CONVERSION_FAILED = "Conversion failed"

logger = logging.getLogger(__name__)


def execute_ffmpeg(plan: CommandPlan, ctx: RuntimeContext) -> None:
    """Run the planned ffmpeg command in the foreground.

    Raises:
        ToolLaunchError: If ffmpeg cannot be started.
        ToolExecutionError: If ffmpeg exits with a non-zero status.

    """
    banner = f"{format_action_label(dry_run=False)}: {format_ffmpeg_cmd(plan.args, ffmpeg=ctx.ffmpeg)}"
    maybe_log_command(
        verbosity=ctx.verbosity,
        dry_run=False,
        status_callback=ctx.status_callback,
        banner=banner,
    )
    try:
        returncode = run_ffmpeg(plan.args, ffmpeg=ctx.ffmpeg)
    except OSError as e:
        raise ToolLaunchError(f"{CONVERSION_FAILED}: could not run {ctx.ffmpeg}: {e}") from e
    if returncode:
        raise ToolExecutionError(
            f"{CONVERSION_FAILED}: {ctx.ffmpeg} exited with status {returncode} while running {plan.operation.value}",
            returncode,
        )


def run_operation(
    operation: Operation,
    source: str,
    options: OperationOptions | None = None,
    runtime: RuntimeOptions | None = None,
    *,
    status_callback: Callable[[str], None] | None = None,
    read_line: Callable[[str], str | None] | None = None,
) -> CommandPlan:
    """Resolve options, build the command for ``operation`` and run it.

    Missing options are prompted for when the runtime context allows it.
    In dry-run mode the command is reported instead of executed.
    """
    runtime = runtime if runtime is not None else RuntimeOptions()
    ctx = RuntimeContext.from_options(runtime, status_callback=status_callback, read_line=read_line)
    # Reject a malformed path before asking any questions.
    split_file_parts(source)
    options_type = OPTIONS_TYPES.get(operation)
    if options_type is not None:
        options = prompts.resolve(options if options is not None else options_type(), ctx)
    plan = build_command(operation, source, options)
    if ctx.dry_run:
        banner = f"{format_action_label(dry_run=True)}: {format_ffmpeg_cmd(plan.args, ffmpeg=ctx.ffmpeg)}"
        maybe_log_command(
            verbosity=ctx.verbosity,
            dry_run=True,
            status_callback=ctx.status_callback,
            banner=banner,
        )
        return plan
    execute_ffmpeg(plan, ctx)
    emit_status(str(Path(plan.output).absolute()), status_callback=ctx.status_callback)
    return plan


__all__ = ["CONVERSION_FAILED", "execute_ffmpeg", "run_operation"]
