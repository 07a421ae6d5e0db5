"""Logical key codes produced by the key decoder."""

from __future__ import annotations

from enum import IntEnum


class Key(IntEnum):
    """Named keys.

    Literal bytes decode to their own value (0-255), so named keys start
    at 1000 and can never be mistaken for a character.
    """
    ARROW_LEFT = 1000
    ARROW_RIGHT = 1001
    ARROW_UP = 1002
    ARROW_DOWN = 1003
    DELETE = 1004
    HOME = 1005
    END = 1006
    PAGE_UP = 1007
    PAGE_DOWN = 1008


ESC = 0x1b


def ctrl_key(ch: str) -> int:
    """Code produced by pressing Ctrl together with ``ch``."""
    return ord(ch) & 0x1f


QUIT_KEY = ctrl_key('q')

ARROW_KEYS = frozenset({Key.ARROW_LEFT, Key.ARROW_RIGHT, Key.ARROW_UP, Key.ARROW_DOWN})


def describe_key(code: int) -> str:
    """Human-readable name for a key code, e.g. ``"97 ('a')"``."""
    if code >= Key.ARROW_LEFT:
        try:
            return Key(code).name
        except ValueError:
            return str(code)
    if code == ESC:
        return "27 (ESC)"
    if code < 0x20:
        return f"{code} (^{chr(code + 0x40)})"
    if code == 0x7f:
        return "127 (DEL)"
    if code < 0x7f:
        return f"{code} ('{chr(code)}')"
    return str(code)
