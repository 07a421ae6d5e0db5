"""Shared fixtures: scripted input bytes and a fake terminal."""

from __future__ import annotations

from pathlib import Path

import pytest

from notec.cli.core.terminal import TerminalSize
from notec.core.escapes import CLEAR_SCREEN, CURSOR_HOME
from notec.errors import IOReadError


class ScriptedSource:
    """
    Byte source that replays a fixed script.

    Each non-empty chunk is handed out one byte per read; an empty chunk
    stands for one read that timed out. Reading past the end raises, so a
    test that forgets to quit fails instead of spinning forever.
    """

    def __init__(self, *chunks: bytes) -> None:
        self._reads: list[bytes] = []
        for chunk in chunks:
            if chunk:
                self._reads.extend(chunk[i:i + 1] for i in range(len(chunk)))
            else:
                self._reads.append(b"")
        self.reads = 0

    @property
    def remaining(self) -> int:
        return len(self._reads)

    def read_byte(self) -> bytes:
        if not self._reads:
            raise IOReadError("read", "input script exhausted")
        self.reads += 1
        return self._reads.pop(0)


class FakeTerminal(ScriptedSource):
    """In-memory stand-in for RawTerminal that records everything written."""

    def __init__(self, *chunks: bytes, rows: int = 24, cols: int = 80) -> None:
        super().__init__(*chunks)
        self.size = TerminalSize(rows, cols)
        self.writes: list[bytes] = []
        self.entered = False
        self.exited = False

    def __enter__(self) -> "FakeTerminal":
        self.entered = True
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.exited = True

    def write(self, data: bytes) -> None:
        self.writes.append(data)

    def clear_screen(self) -> None:
        self.write(CLEAR_SCREEN + CURSOR_HOME)

    def query_window_size(self) -> TerminalSize:
        return self.size

    @property
    def output(self) -> bytes:
        return b"".join(self.writes)


@pytest.fixture
def scripted():
    """Factory for ScriptedSource objects."""
    return ScriptedSource


@pytest.fixture
def fake_terminal():
    """Factory for FakeTerminal objects."""
    return FakeTerminal


@pytest.fixture
def three_line_file(tmp_path: Path) -> Path:
    path = tmp_path / "three.txt"
    path.write_bytes(b"first line\nsecond\nthird line here\n")
    return path
