"""Command-line interface entry point."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from functools import partial
from typing import Annotated

from cyclopts import App, Parameter
from pydantic import ValidationError

from .backend import run_operation
from .errors import ExitCode, FFQuickError, UsageError
from .models import (
    FileTypeOptions,
    GifOptions,
    Operation,
    OperationOptions,
    ResolutionOptions,
    RuntimeOptions,
    TimeOptions,
)

HELP_FLAGS = frozenset({"--help", "-h", "--version"})

logger = logging.getLogger(__name__)

Source = Annotated[str, Parameter(help="Input media file. Output is written next to it.")]

app = App(name="ffquick", help="Run common ffmpeg operations on a media file.")


def usage() -> str:
    """Return the usage text listing every operation."""
    lines = ["Usage:"]
    for operation in Operation:
        lines.append(f"\t{operation.selector} <file_path>")
        lines.append(f"\t\t{operation.description}")
    return "\n".join(lines)


def _run(
    operation: Operation,
    source: str,
    options: OperationOptions | None = None,
    runtime: RuntimeOptions | None = None,
) -> int:
    run_operation(operation, source, options, runtime, status_callback=print)
    return ExitCode.SUCCESS


@app.command(name=Operation.HALF_RESOLUTION.value, help=Operation.HALF_RESOLUTION.description)
def half_resolution(source: Source, *, runtime: RuntimeOptions | None = None) -> int:
    return _run(Operation.HALF_RESOLUTION, source, runtime=runtime)


@app.command(name=Operation.STRIP_AUDIO.value, help=Operation.STRIP_AUDIO.description)
def strip_audio(source: Source, *, runtime: RuntimeOptions | None = None) -> int:
    return _run(Operation.STRIP_AUDIO, source, runtime=runtime)


@app.command(name=Operation.RE_ENCODE.value, help=Operation.RE_ENCODE.description)
def re_encode(source: Source, *, runtime: RuntimeOptions | None = None) -> int:
    return _run(Operation.RE_ENCODE, source, runtime=runtime)


@app.command(name=Operation.TRIM.value, help=Operation.TRIM.description)
def trim(source: Source, *, time: TimeOptions | None = None, runtime: RuntimeOptions | None = None) -> int:
    return _run(Operation.TRIM, source, time, runtime)


@app.command(name=Operation.SPECIFY_RESOLUTION.value, help=Operation.SPECIFY_RESOLUTION.description)
def specify_resolution(
    source: Source, *, resolution: ResolutionOptions | None = None, runtime: RuntimeOptions | None = None
) -> int:
    return _run(Operation.SPECIFY_RESOLUTION, source, resolution, runtime)


@app.command(name=Operation.CONVERT_TO_GIF.value, help=Operation.CONVERT_TO_GIF.description)
def convert_to_gif(source: Source, *, gif: GifOptions | None = None, runtime: RuntimeOptions | None = None) -> int:
    return _run(Operation.CONVERT_TO_GIF, source, gif, runtime)


@app.command(name=Operation.CHANGE_FILE_TYPE.value, help=Operation.CHANGE_FILE_TYPE.description)
def change_file_type(
    source: Source, *, file_type: FileTypeOptions | None = None, runtime: RuntimeOptions | None = None
) -> int:
    return _run(Operation.CHANGE_FILE_TYPE, source, file_type, runtime)


def dispatch(argv: Sequence[str]) -> list[str]:
    """Validate the operation selector and return tokens for the command parser.

    Raises:
        UsageError: If the operation or the file path is missing.
        UnknownOperationError: If the selector names no operation.

    """
    if not argv:
        raise UsageError(usage())
    if len(argv) < 2:
        raise UsageError(f"You need to provide a file path!\n{usage()}")
    operation = Operation.from_selector(argv[0])
    return [operation.value, *argv[1:]]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ffquick CLI and return its exit code."""
    argv = sys.argv[1:] if argv is None else list(argv)
    err = partial(print, file=sys.stderr, flush=True)
    if argv and argv[0] in HELP_FLAGS:
        return app(argv) or ExitCode.SUCCESS
    try:
        tokens = dispatch(argv)
        return app(tokens) or ExitCode.SUCCESS
    except ValidationError as e:
        logger.debug("Option validation failed", exc_info=True)
        err(str(e))
        return ExitCode.USAGE
    except FFQuickError as e:
        logger.debug("%s", type(e).__name__, exc_info=True)
        err(str(e))
        return e.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
