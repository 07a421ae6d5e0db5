"""Keyboard input - decode raw terminal bytes into logical keys."""

from __future__ import annotations

import logging
from typing import Protocol

from notec.core.keys import ESC, Key

logger = logging.getLogger(__name__)


class ByteSource(Protocol):
    """Anything that yields one input byte at a time.

    ``read_byte`` returns ``b""`` when no byte arrived before the read
    timeout.
    """

    def read_byte(self) -> bytes:
        ...


class KeyReader:
    """
    Turns the terminal byte stream into one logical key per call.

    Plain bytes come back as their integer value. Escape sequences for
    arrows, Home/End, Page Up/Down and Delete come back as ``Key``
    members. An ESC that is not followed quickly by a known sequence is
    returned as a bare ESC.
    """

    # ESC [ <digit> ~
    TILDE_SEQUENCES: dict[bytes, Key] = {
        b'1': Key.HOME,
        b'3': Key.DELETE,
        b'4': Key.END,
        b'5': Key.PAGE_UP,
        b'6': Key.PAGE_DOWN,
        b'7': Key.HOME,
        b'8': Key.END,
    }

    # ESC [ <letter>
    CSI_SEQUENCES: dict[bytes, Key] = {
        b'A': Key.ARROW_UP,
        b'B': Key.ARROW_DOWN,
        b'C': Key.ARROW_RIGHT,
        b'D': Key.ARROW_LEFT,
        b'H': Key.HOME,
        b'F': Key.END,
    }

    # ESC O <letter>
    SS3_SEQUENCES: dict[bytes, Key] = {
        b'H': Key.HOME,
        b'F': Key.END,
    }

    def __init__(self, source: ByteSource) -> None:
        self.source = source

    def read_key(self) -> int:
        """Block until a key is available and return it."""
        while True:
            ch = self.source.read_byte()
            if ch:
                break

        if ch[0] != ESC:
            return ch[0]
        return self._read_escape()

    def _read_escape(self) -> int:
        first = self.source.read_byte()
        if not first:
            return ESC
        second = self.source.read_byte()
        if not second:
            return ESC

        key = None
        if first == b'[':
            if second.isdigit():
                third = self.source.read_byte()
                if not third:
                    return ESC
                if third == b'~':
                    key = self.TILDE_SEQUENCES.get(second)
            else:
                key = self.CSI_SEQUENCES.get(second)
        elif first == b'O':
            key = self.SS3_SEQUENCES.get(second)

        if key is None:
            logger.debug("Unrecognized escape sequence %r", b'\x1b' + first + second)
            return ESC
        return key
