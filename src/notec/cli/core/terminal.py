"""Low-level terminal operations - raw mode, window size, byte I/O."""

from __future__ import annotations

import atexit
import contextlib
import errno
import logging
import os
import re
import signal
import sys
import termios
from dataclasses import dataclass
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from notec.core.escapes import (
    CLEAR_SCREEN,
    CURSOR_FAR_CORNER,
    CURSOR_HOME,
    REPORT_CURSOR,
)
from notec.errors import (
    IOReadError,
    IOWriteError,
    NotecError,
    TerminalConfigError,
    TerminalQueryError,
)

logger = logging.getLogger(__name__)

# Positions of the fields in a termios attribute list
IFLAG, OFLAG, CFLAG, LFLAG, CC = 0, 1, 2, 3, 6

# Signals that would otherwise kill the process with the terminal still raw
_RESTORE_ON = (signal.SIGTERM, signal.SIGHUP)

_CURSOR_REPORT = re.compile(rb'\x1b\[(\d+);(\d+)')

_stderr = Console(stderr=True)


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class RawTerminal:
    """
    Owns the controlling terminal while the viewer runs.

    Use as a context manager: entering switches the terminal to raw mode,
    leaving restores the attributes captured on entry. An ``atexit`` hook
    and SIGTERM/SIGHUP handlers make sure the restore also happens when
    the process ends some other way.
    """

    def __init__(
        self,
        stdin_fd: Optional[int] = None,
        stdout_fd: Optional[int] = None,
        read_timeout_ds: int = 1,
    ) -> None:
        self.stdin_fd = sys.stdin.fileno() if stdin_fd is None else stdin_fd
        self.stdout_fd = sys.stdout.fileno() if stdout_fd is None else stdout_fd
        self.read_timeout_ds = read_timeout_ds
        self._snapshot: Optional[list] = None
        self._raw = False
        self._old_handlers: dict[int, object] = {}

    @property
    def is_raw(self) -> bool:
        return self._raw

    def __enter__(self) -> "RawTerminal":
        self.enable_raw_mode()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.restore()

    def enable_raw_mode(self) -> None:
        """Switch to raw input with a short read timeout. No-op if already raw."""
        if self._raw:
            return
        if self._snapshot is None:
            try:
                self._snapshot = termios.tcgetattr(self.stdin_fd)
            except termios.error as e:
                raise TerminalConfigError("tcgetattr") from e
            atexit.register(self.restore)

        raw = list(self._snapshot)
        raw[CC] = list(self._snapshot[CC])
        raw[IFLAG] &= ~(termios.BRKINT | termios.INPCK | termios.ISTRIP | termios.IXON | termios.ICRNL)
        raw[OFLAG] &= ~termios.OPOST
        raw[CFLAG] |= termios.CS8
        raw[LFLAG] &= ~(termios.ECHO | termios.ICANON | termios.ISIG | termios.IEXTEN)
        # read() returns after at most VTIME tenths of a second, even with no input
        raw[CC][termios.VMIN] = 0
        raw[CC][termios.VTIME] = self.read_timeout_ds

        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, raw)
        except termios.error as e:
            raise TerminalConfigError("tcsetattr") from e

        self._raw = True
        self._install_signal_handlers()
        logger.info("Raw mode enabled (VTIME=%d)", self.read_timeout_ds)

    def restore(self) -> None:
        """Put back the attributes captured by enable_raw_mode()."""
        if not self._raw or self._snapshot is None:
            return
        self._raw = False
        self._remove_signal_handlers()
        try:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._snapshot)
        except termios.error as e:
            raise TerminalConfigError("tcsetattr") from e
        logger.info("Terminal attributes restored")

    def _install_signal_handlers(self) -> None:
        for signum in _RESTORE_ON:
            if signum in self._old_handlers:
                continue
            try:
                self._old_handlers[signum] = signal.signal(signum, _exit_on_signal)
            except ValueError:
                # Not the main thread; atexit still covers normal exits
                break

    def _remove_signal_handlers(self) -> None:
        for signum, handler in self._old_handlers.items():
            signal.signal(signum, handler)
        self._old_handlers.clear()

    def read_byte(self) -> bytes:
        """
        Read one byte, or return b"" if the read timed out.

        Raises IOReadError for anything worse than a timeout.
        """
        try:
            return os.read(self.stdin_fd, 1)
        except OSError as e:
            if e.errno in (errno.EAGAIN, errno.EINTR):
                return b""
            raise IOReadError("read") from e

    def write(self, data: bytes) -> None:
        """Write all of ``data`` to the terminal."""
        view = memoryview(data)
        try:
            while view:
                written = os.write(self.stdout_fd, view)
                view = view[written:]
        except OSError as e:
            raise IOWriteError("write") from e

    def clear_screen(self) -> None:
        self.write(CLEAR_SCREEN + CURSOR_HOME)

    def query_window_size(self) -> TerminalSize:
        """
        Get the terminal size in rows and columns.

        Asks the OS first. If that fails or reports zero columns, pushes
        the cursor to the bottom-right corner and reads back where it
        ended up.
        """
        try:
            size = os.get_terminal_size(self.stdout_fd)
        except OSError:
            size = None

        if size is not None and size.columns > 0:
            logger.debug("Window size from OS: %dx%d", size.lines, size.columns)
            return TerminalSize(size.lines, size.columns)

        try:
            self.write(CURSOR_FAR_CORNER)
        except IOWriteError as e:
            raise TerminalQueryError("getWindowSize") from e
        result = self.cursor_position()
        logger.debug("Window size from cursor report: %dx%d", result.rows, result.cols)
        return result

    def cursor_position(self) -> TerminalSize:
        """Ask the terminal where the cursor is (1-indexed row, col)."""
        try:
            self.write(REPORT_CURSOR)
        except IOWriteError as e:
            raise TerminalQueryError("getCursorPosition") from e

        buf = bytearray()
        while len(buf) < 31:
            ch = self.read_byte()
            if not ch or ch == b'R':
                break
            buf += ch

        match = _CURSOR_REPORT.match(bytes(buf))
        if match is None:
            raise TerminalQueryError("getCursorPosition", f"unexpected reply {bytes(buf)!r}")
        rows, cols = int(match[1]), int(match[2])
        if rows <= 0 or cols <= 0:
            raise TerminalQueryError("getCursorPosition", f"degenerate size {rows}x{cols}")
        return TerminalSize(rows, cols)


def _exit_on_signal(signum: int, frame: object) -> None:
    raise SystemExit(128 + signum)


def die(error: NotecError, term: Optional[RawTerminal] = None) -> NoReturn:
    """
    Fatal error exit: clear the screen, report the cause, exit with 1.

    Every fatal error ends up here. By the time this runs the raw-mode
    context has already been left, so the message prints on a sane
    terminal.
    """
    with contextlib.suppress(OSError, NotecError):
        if term is not None:
            term.clear_screen()
        else:
            sys.stdout.buffer.write(CLEAR_SCREEN + CURSOR_HOME)
            sys.stdout.flush()

    message = error.describe()
    logger.error("Fatal: %s", message, exc_info=error)
    _stderr.print(f"[red]{escape(message)}[/]")
    raise typer.Exit(1)
