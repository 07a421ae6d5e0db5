"""Cursor and viewport state, and the key-driven movement rules."""

from __future__ import annotations

from dataclasses import dataclass, field

from notec.core.document import Document, Row
from notec.core.keys import ARROW_KEYS, Key


@dataclass
class Cursor:
    """Cursor position in document coordinates (byte column, row index)."""
    cx: int = 0
    cy: int = 0


@dataclass
class Viewport:
    """Top-left document position shown on screen, and the screen size."""
    rowoff: int = 0
    coloff: int = 0
    screenrows: int = 24
    screencols: int = 80


@dataclass
class EditorState:
    """
    Everything the viewer loop mutates, owned in one place.

    The dispatch loop, the renderer and the input handling all receive
    this object; nothing is kept in module globals.

    Vertical movement is bounded by the screen height, as the first
    versions of the viewer did, but never stops short of the last row of
    a document taller than the screen.
    """
    document: Document = field(default_factory=Document)
    cursor: Cursor = field(default_factory=Cursor)
    viewport: Viewport = field(default_factory=Viewport)

    @classmethod
    def for_screen(cls, document: Document, rows: int, cols: int) -> "EditorState":
        return cls(document=document, viewport=Viewport(screenrows=rows, screencols=cols))

    def current_row(self) -> Row | None:
        return self.document.row_at(self.cursor.cy)

    def _bottom_limit(self) -> int:
        return max(self.viewport.screenrows, self.document.numrows) - 1

    def move_cursor(self, key: int) -> None:
        """Move one step in the direction of an arrow key."""
        cur = self.cursor
        row = self.current_row()

        if key == Key.ARROW_LEFT:
            if cur.cx > 0:
                cur.cx -= 1
            elif cur.cy > 0:
                cur.cy -= 1
                cur.cx = self.document.row_length(cur.cy)
        elif key == Key.ARROW_RIGHT:
            if row is not None:
                if cur.cx < row.size:
                    cur.cx += 1
                elif cur.cx == row.size and cur.cy + 1 < self.document.numrows:
                    cur.cy += 1
                    cur.cx = 0
        elif key == Key.ARROW_UP:
            if cur.cy > 0:
                cur.cy -= 1
        elif key == Key.ARROW_DOWN:
            if cur.cy < self._bottom_limit():
                cur.cy += 1

        # Snap into the new row, which may be shorter than the last one
        rowlen = self.document.row_length(cur.cy)
        if cur.cx > rowlen:
            cur.cx = rowlen

    def process_key(self, key: int) -> bool:
        """Apply a navigation key. Returns False for keys with no effect here."""
        if key == Key.HOME:
            self.cursor.cx = 0
        elif key == Key.END:
            # Right edge of the screen, not of the row
            self.cursor.cx = self.viewport.screencols - 1
        elif key in (Key.PAGE_UP, Key.PAGE_DOWN):
            direction = Key.ARROW_UP if key == Key.PAGE_UP else Key.ARROW_DOWN
            for _ in range(self.viewport.screenrows):
                self.move_cursor(direction)
        elif key in ARROW_KEYS:
            self.move_cursor(key)
        else:
            return False
        return True

    def adjust_scroll(self) -> None:
        """Shift the viewport so the cursor is on screen."""
        cur, view = self.cursor, self.viewport

        if cur.cy < view.rowoff:
            view.rowoff = cur.cy
        if cur.cy >= view.rowoff + view.screenrows:
            view.rowoff = cur.cy - view.screenrows + 1
        if cur.cx < view.coloff:
            view.coloff = cur.cx
        if cur.cx >= view.coloff + view.screencols:
            view.coloff = cur.cx - view.screencols + 1

    @property
    def screen_cursor(self) -> tuple[int, int]:
        """1-indexed (row, col) of the cursor on screen."""
        return (
            self.cursor.cy - self.viewport.rowoff + 1,
            self.cursor.cx - self.viewport.coloff + 1,
        )
