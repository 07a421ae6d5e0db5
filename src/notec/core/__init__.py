"""Core data structures: document rows, key codes, cursor and viewport."""

from notec.core.document import Document, Row
from notec.core.keys import Key, QUIT_KEY, ctrl_key, describe_key
from notec.core.viewport import Cursor, EditorState, Viewport

__all__ = [
    "Document",
    "Row",
    "Key",
    "QUIT_KEY",
    "ctrl_key",
    "describe_key",
    "Cursor",
    "EditorState",
    "Viewport",
]
