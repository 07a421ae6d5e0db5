"""Render editor state to a single frame of VT100 escape sequences."""

from __future__ import annotations

from typing import Protocol

from notec import __version__
from notec.core.escapes import (
    CLEAR_LINE,
    CURSOR_HOME,
    HIDE_CURSOR,
    SHOW_CURSOR,
    move_cursor_seq,
)
from notec.core.viewport import EditorState


class Writer(Protocol):
    def write(self, data: bytes) -> None:
        ...


class RenderBuffer:
    """
    Append-only byte buffer for building one frame.

    A frame is assembled here and flushed with a single write, so the
    terminal never shows a half-drawn screen.
    """

    def __init__(self) -> None:
        self._buf = bytearray()

    def append(self, data: bytes) -> None:
        try:
            self._buf += data
        except MemoryError:
            # Drop this piece and keep the rest of the frame
            pass

    def __len__(self) -> int:
        return len(self._buf)

    def getvalue(self) -> bytes:
        return bytes(self._buf)


class ScreenRenderer:
    """
    Draws the visible part of the document.

    Rows past the end of the document show a ``~``. An empty document
    shows a centered welcome banner a third of the way down the screen.
    """

    def __init__(self, welcome: str | None = None) -> None:
        self.welcome = welcome or f"NoteC editor version -- version {__version__}"

    def render(self, state: EditorState) -> bytes:
        """Build the full frame for ``state``."""
        ab = RenderBuffer()
        ab.append(HIDE_CURSOR)
        ab.append(CURSOR_HOME)

        self.draw_rows(state, ab)

        row, col = state.screen_cursor
        ab.append(move_cursor_seq(row, col))
        ab.append(SHOW_CURSOR)
        return ab.getvalue()

    def refresh(self, state: EditorState, out: Writer) -> None:
        """Render and emit the frame in one write."""
        out.write(self.render(state))

    def draw_rows(self, state: EditorState, ab: RenderBuffer) -> None:
        doc, view = state.document, state.viewport

        for y in range(view.screenrows):
            filerow = y + view.rowoff
            row = doc.row_at(filerow)
            if row is None:
                if doc.is_empty() and y == view.screenrows // 3:
                    self._draw_welcome(ab, view.screencols)
                else:
                    ab.append(b'~')
            else:
                ab.append(row.slice(view.coloff, view.screencols))

            ab.append(CLEAR_LINE)
            if y < view.screenrows - 1:
                ab.append(b'\r\n')

    def _draw_welcome(self, ab: RenderBuffer, screencols: int) -> None:
        welcome = self.welcome.encode('utf-8')[:max(screencols, 0)]
        padding = (screencols - len(welcome)) // 2
        if padding:
            ab.append(b'~')
            padding -= 1
        ab.append(b' ' * padding)
        ab.append(welcome)
