"""Shared pytest fixtures.

Keeps tests away from the real ffmpeg binary and from the terminal: every
ffmpeg launch is recorded instead of executed, and stdin is empty unless a
test supplies its own ``read_line`` or input.
"""

from __future__ import annotations

import io
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

FfmpegCall = tuple[tuple[str, ...], str]


@pytest.fixture(autouse=True)
def ffmpeg_calls(monkeypatch: pytest.MonkeyPatch) -> list[FfmpegCall]:
    """Record ffmpeg invocations and report success without running anything."""
    calls: list[FfmpegCall] = []

    def fake_run_ffmpeg(args: Sequence[str | Path], *, ffmpeg: str | Path = "ffmpeg") -> int:
        calls.append((tuple(str(a) for a in args), str(ffmpeg)))
        return 0

    monkeypatch.setattr("ffquick.backend.executor.run_ffmpeg", fake_run_ffmpeg)
    return calls


@pytest.fixture(autouse=True)
def _empty_stdin(monkeypatch: pytest.MonkeyPatch) -> None:
    """Give prompts an exhausted stdin so unanswered options keep their defaults."""
    monkeypatch.setattr("sys.stdin", io.StringIO())


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ignore a developer's ffmpeg override."""
    monkeypatch.delenv("FFQUICK_FFMPEG", raising=False)


def scripted_input(*answers: str) -> tuple[Callable[[str], str | None], list[str]]:
    """Return a ``read_line`` hook replaying ``answers`` and the prompts it saw.

    Once the answers run out it behaves like end of input.
    """
    asked: list[str] = []
    remaining = iter(answers)

    def read_line(prompt: str) -> str | None:
        asked.append(prompt)
        return next(remaining, None)

    return read_line, asked
