"""
notec: a small full-screen terminal text viewer

Opens a file, shows it a screenful at a time, and lets the cursor roam
with the arrow, Page Up/Down and Home/End keys. Ctrl-Q quits.

Quick Start:
    >>> import notec
    >>> doc = notec.load("notes.txt")
    >>> state = notec.EditorState.for_screen(doc, rows=24, cols=80)
    >>> frame = notec.ScreenRenderer().render(state)
"""

__version__ = "0.0.1"

from notec.core.document import Document, Row
from notec.core.keys import Key, QUIT_KEY, ctrl_key
from notec.core.viewport import Cursor, EditorState, Viewport
from notec.io.reader import load, load_bytes
from notec.render.screen import RenderBuffer, ScreenRenderer

__all__ = [
    "__version__",
    "Document",
    "Row",
    "Key",
    "QUIT_KEY",
    "ctrl_key",
    "Cursor",
    "EditorState",
    "Viewport",
    "load",
    "load_bytes",
    "RenderBuffer",
    "ScreenRenderer",
]
