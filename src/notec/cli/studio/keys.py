"""Key inspector: show the logical key decoded for each keypress."""

from __future__ import annotations

from typing import Optional

from notec.cli.core.input import KeyReader
from notec.cli.core.terminal import RawTerminal
from notec.cli.studio.viewer import ViewerTerminal
from notec.config import ViewerConfig
from notec.core.keys import describe_key

STOP_KEY = ord('q')


def inspect_keys(terminal: ViewerTerminal) -> list[int]:
    """
    Echo every decoded key until ``q`` is pressed.

    Output processing is off in raw mode, so each line ends with an
    explicit carriage return. Returns the keys seen, ``q`` included.
    """
    reader = KeyReader(terminal)
    seen: list[int] = []
    with terminal:
        terminal.write(b"Press keys to see how they decode. 'q' quits.\r\n")
        while True:
            key = reader.read_key()
            seen.append(key)
            terminal.write(f"{describe_key(key)}\r\n".encode("ascii"))
            if key == STOP_KEY:
                break
    return seen


def run_key_inspector(config: Optional[ViewerConfig] = None) -> None:
    config = config or ViewerConfig()
    inspect_keys(RawTerminal(read_timeout_ds=config.read_timeout_ds))
