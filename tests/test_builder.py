"""Tests for per-operation command builders."""

import pytest

from ffquick.backend.builder import HANDLERS, build_command
from ffquick.backend.builder.command_args import INPUT_FLAG
from ffquick.errors import InvalidPathError, UsageError
from ffquick.models import FileTypeOptions, GifOptions, Operation, ResolutionOptions, TimeOptions

SOURCE = "movie.mp4"


def test_every_operation_has_a_handler() -> None:
    """Each operation maps to a builder."""
    assert set(HANDLERS) == set(Operation)


@pytest.mark.parametrize(
    ("operation", "options"),
    [
        (Operation.HALF_RESOLUTION, None),
        (Operation.STRIP_AUDIO, None),
        (Operation.RE_ENCODE, None),
        (Operation.TRIM, TimeOptions(start="5", end="10")),
        (Operation.SPECIFY_RESOLUTION, ResolutionOptions()),
        (Operation.CONVERT_TO_GIF, GifOptions()),
        (Operation.CHANGE_FILE_TYPE, FileTypeOptions(extension="mov")),
    ],
)
def test_args_start_with_input_and_end_with_output(operation: Operation, options: object) -> None:
    """Commands read the source first and write the output last."""
    plan = build_command(operation, SOURCE, options)  # type: ignore[arg-type]
    assert plan.args[:2] == (*INPUT_FLAG, SOURCE)
    assert plan.args[-1] == plan.output
    assert plan.args.count(plan.output) == 1
    assert plan.operation is operation
    assert plan.source == SOURCE


def test_half_resolution_scenario() -> None:
    """Halve the resolution of ``movie.mp4``."""
    plan = build_command(Operation.HALF_RESOLUTION, SOURCE)
    assert plan.output == "movie_half.mp4"
    assert plan.args == ("-i", "movie.mp4", "-vf", "scale=iw/2:ih/2", "movie_half.mp4")


def test_strip_audio() -> None:
    """Drop audio with ``-an``."""
    plan = build_command(Operation.STRIP_AUDIO, SOURCE)
    assert plan.args == ("-i", "movie.mp4", "-an", "movie_no_audio.mp4")


def test_re_encode() -> None:
    """Re-encode with no extra arguments."""
    plan = build_command(Operation.RE_ENCODE, SOURCE)
    assert plan.args == ("-i", "movie.mp4", "movie_simple.mp4")


@pytest.mark.parametrize(
    ("opts", "expected"),
    [
        (ResolutionOptions(), "scale=1920:1080"),
        (ResolutionOptions(width=" ", height=""), "scale=1920:1080"),
        (ResolutionOptions(width="640", height="480"), "scale=640:480"),
        (ResolutionOptions(width="1280"), "scale=1280:1080"),
    ],
)
def test_specify_resolution(opts: ResolutionOptions, expected: str) -> None:
    """Fall back to 1920x1080 for missing dimensions."""
    plan = build_command(Operation.SPECIFY_RESOLUTION, SOURCE, opts)
    assert plan.args == ("-i", "movie.mp4", "-vf", expected, "movie_res.mp4")


@pytest.mark.parametrize(
    ("opts", "trim_args"),
    [
        (TimeOptions(), ()),
        (TimeOptions(start="", end=""), ()),
        (TimeOptions(end="00:00:30"), ("-to", "00:00:30")),
        (TimeOptions(start="12"), ("-ss", "12")),
        (TimeOptions(start="00:01:00", end="90"), ("-ss", "00:01:00", "-to", "90")),
    ],
)
def test_trim_omits_unset_bounds(opts: TimeOptions, trim_args: tuple[str, ...]) -> None:
    """Only pass ``-ss``/``-to`` for bounds that were given."""
    plan = build_command(Operation.TRIM, SOURCE, opts)
    assert plan.args == ("-i", "movie.mp4", *trim_args, "movie_trimmed.mp4")


@pytest.mark.parametrize(
    ("opts", "expected"),
    [
        (GifOptions(), "fps=10,scale=320:-1"),
        (GifOptions(fps="24"), "fps=24,scale=320:-1"),
        (GifOptions(fps="15", scale="480"), "fps=15,scale=480:-1"),
    ],
)
def test_convert_to_gif(opts: GifOptions, expected: str) -> None:
    """Build the GIF filter chain with defaults of 10 fps and 320 px."""
    plan = build_command(Operation.CONVERT_TO_GIF, "clips/movie.mp4", opts)
    assert plan.output == "clips/movie.gif"
    assert plan.args == (
        "-i",
        "clips/movie.mp4",
        "-vf",
        expected,
        "-gifflags",
        "+transdiff",
        "-y",
        "clips/movie.gif",
    )


@pytest.mark.parametrize("extension", ["mp3", ".mp3", "  mp3\n"])
def test_change_file_type_adds_leading_dot(extension: str) -> None:
    """Name the output after old and new extensions."""
    plan = build_command(Operation.CHANGE_FILE_TYPE, SOURCE, FileTypeOptions(extension=extension))
    assert plan.output == "movie_mp4_to_.mp3"
    assert plan.args == ("-i", "movie.mp4", "movie_mp4_to_.mp3")


def test_change_file_type_requires_extension() -> None:
    """Refuse to build a command without a target extension."""
    with pytest.raises(UsageError):
        build_command(Operation.CHANGE_FILE_TYPE, SOURCE, FileTypeOptions())


@pytest.mark.parametrize("operation", list(Operation))
def test_invalid_path_rejected_by_every_operation(operation: Operation) -> None:
    """No command is built for a path without an extension."""
    with pytest.raises(InvalidPathError):
        build_command(operation, "movie", FileTypeOptions(extension="mov"))
