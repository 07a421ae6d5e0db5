"""Terminal driver and key decoding."""

from notec.cli.core.terminal import RawTerminal, TerminalSize, die
from notec.cli.core.input import ByteSource, KeyReader

__all__ = [
    "RawTerminal",
    "TerminalSize",
    "die",
    "ByteSource",
    "KeyReader",
]
