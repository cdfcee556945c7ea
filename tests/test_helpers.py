"""Tests for file name and status helpers."""

import logging

import pytest

from ffquick.errors import ExitCode, InvalidPathError
from ffquick.tools import FileParts, emit_status, split_file_parts


@pytest.mark.parametrize(
    "path",
    [
        "movie.mp4",
        "archive.tar.gz",
        "clips/movie.final.mov",
        "/abs/dir.v2/take.mkv",
        ".hidden",
        "trailing.",
        "dir.v2/movie",
    ],
)
def test_split_file_parts_rejoins_to_path(path: str) -> None:
    """Stem and extension rejoin to the original path."""
    parts = split_file_parts(path)
    assert f"{parts.stem}.{parts.extension}" == path
    assert "." not in parts.extension


def test_split_file_parts_dot_in_directory() -> None:
    """A dot in a directory name splits there when the file name has none."""
    assert split_file_parts("dir.v2/movie") == FileParts(extension="v2/movie", stem="dir")


def test_split_file_parts_uses_last_dot() -> None:
    """Only the final extension is split off."""
    assert split_file_parts("archive.tar.gz") == FileParts(extension="gz", stem="archive.tar")


def test_split_file_parts_keeps_directory_in_stem() -> None:
    """Directory prefixes stay with the stem."""
    assert split_file_parts("clips/movie.mp4") == FileParts(extension="mp4", stem="clips/movie")


@pytest.mark.parametrize("path", ["movie", "clips/movie", ""])
def test_split_file_parts_requires_extension(path: str) -> None:
    """Reject file names without an extension separator."""
    with pytest.raises(InvalidPathError) as excinfo:
        split_file_parts(path)
    assert excinfo.value.exit_code == ExitCode.USAGE
    assert str(excinfo.value) == f"Invalid file path: {path}"


def test_derive_output_names() -> None:
    """Derive sibling names with a suffix and optional new extension."""
    parts = split_file_parts("clips/movie.mp4")
    assert parts.derive("_half") == "clips/movie_half.mp4"
    assert parts.derive("", "gif") == "clips/movie.gif"


def test_emit_status_callback() -> None:
    """Custom callbacks receive messages verbatim."""
    seen: list[str] = []
    emit_status("hello", status_callback=seen.append)
    assert seen == ["hello"]


def test_emit_status_logs_without_callback(caplog: pytest.LogCaptureFixture) -> None:
    """Fall back to the logger when no callback is set."""
    with caplog.at_level(logging.INFO, logger="ffquick.tools.helpers"):
        emit_status("to the log", status_callback=None)
    assert "to the log" in caplog.text


def test_emit_status_print(capsys: pytest.CaptureFixture[str]) -> None:
    """``print`` writes the message as one line on stdout."""
    emit_status("done", status_callback=print)
    assert capsys.readouterr().out == "done\n"
