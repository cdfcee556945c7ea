"""Build ffmpeg command arguments for each operation."""

from __future__ import annotations

from collections.abc import Callable

from ffquick.errors import UsageError
from ffquick.models import (
    CommandPlan,
    FileTypeOptions,
    GifOptions,
    Operation,
    OperationOptions,
    ResolutionOptions,
    TimeOptions,
)
from ffquick.tools import split_file_parts

from . import audio, trim, video
from .command_args import INPUT_FLAG, OVERWRITE_OUTPUT

HALF_SUFFIX = "_half"
NO_AUDIO_SUFFIX = "_no_audio"
SIMPLE_SUFFIX = "_simple"
RESOLUTION_SUFFIX = "_res"
TRIMMED_SUFFIX = "_trimmed"
GIF_EXTENSION = "gif"

Handler = Callable[[str, OperationOptions | None], tuple[tuple[str, ...], str]]


def half_resolution(source: str, _opts: OperationOptions | None = None) -> tuple[tuple[str, ...], str]:
    """Halve the frame size, keeping the container."""
    output = split_file_parts(source).derive(HALF_SUFFIX)
    return (*INPUT_FLAG, source, *video.half(), output), output


def strip_audio(source: str, _opts: OperationOptions | None = None) -> tuple[tuple[str, ...], str]:
    """Drop every audio stream."""
    output = split_file_parts(source).derive(NO_AUDIO_SUFFIX)
    return (*INPUT_FLAG, source, *audio.DISABLE, output), output


def re_encode(source: str, _opts: OperationOptions | None = None) -> tuple[tuple[str, ...], str]:
    """Re-encode with ffmpeg's defaults for the container."""
    output = split_file_parts(source).derive(SIMPLE_SUFFIX)
    return (*INPUT_FLAG, source, output), output


def specify_resolution(source: str, opts: OperationOptions | None = None) -> tuple[tuple[str, ...], str]:
    """Scale to an explicit width and height."""
    output = split_file_parts(source).derive(RESOLUTION_SUFFIX)
    resolution = opts if isinstance(opts, ResolutionOptions) else ResolutionOptions()
    return (*INPUT_FLAG, source, *video.scale(resolution), output), output


def trim_range(source: str, opts: OperationOptions | None = None) -> tuple[tuple[str, ...], str]:
    """Keep only the requested time range."""
    output = split_file_parts(source).derive(TRIMMED_SUFFIX)
    time = opts if isinstance(opts, TimeOptions) else TimeOptions()
    return (*INPUT_FLAG, source, *trim.basic(time), output), output


def convert_to_gif(source: str, opts: OperationOptions | None = None) -> tuple[tuple[str, ...], str]:
    """Render an animated GIF next to the source."""
    output = split_file_parts(source).derive("", GIF_EXTENSION)
    gif = opts if isinstance(opts, GifOptions) else GifOptions()
    return (*INPUT_FLAG, source, *video.gif(gif), *OVERWRITE_OUTPUT, output), output


def change_file_type(source: str, opts: OperationOptions | None = None) -> tuple[tuple[str, ...], str]:
    """Remux or transcode into the container implied by the new extension.

    The output is named ``<stem>_<old ext>_to_<new ext>`` so the original
    extension stays visible.

    Raises:
        UsageError: If no target extension was given.

    """
    parts = split_file_parts(source)
    if not isinstance(opts, FileTypeOptions) or opts.extension is None:
        raise UsageError(f"{Operation.CHANGE_FILE_TYPE.value} requires a target extension (--extension)")
    output = f"{parts.stem}_{parts.extension}_to_{opts.extension}"
    return (*INPUT_FLAG, source, output), output


HANDLERS: dict[Operation, Handler] = {
    Operation.HALF_RESOLUTION: half_resolution,
    Operation.STRIP_AUDIO: strip_audio,
    Operation.RE_ENCODE: re_encode,
    Operation.TRIM: trim_range,
    Operation.SPECIFY_RESOLUTION: specify_resolution,
    Operation.CONVERT_TO_GIF: convert_to_gif,
    Operation.CHANGE_FILE_TYPE: change_file_type,
}

#: Option model each operation accepts; operations without options are absent.
OPTIONS_TYPES: dict[Operation, type[OperationOptions]] = {
    Operation.TRIM: TimeOptions,
    Operation.SPECIFY_RESOLUTION: ResolutionOptions,
    Operation.CONVERT_TO_GIF: GifOptions,
    Operation.CHANGE_FILE_TYPE: FileTypeOptions,
}


def build_command(
    operation: Operation, source: str, options: OperationOptions | None = None
) -> CommandPlan:
    """Return the ffmpeg arguments and output path for ``operation``."""
    args, output = HANDLERS[operation](source, options)
    return CommandPlan(operation=operation, source=source, output=output, args=args)


__all__ = ["HANDLERS", "OPTIONS_TYPES", "build_command"]
