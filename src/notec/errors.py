"""Exception types for fatal terminal and file errors."""

from __future__ import annotations


class NotecError(Exception):
    """Base class for errors that end the viewer session.

    ``where`` names the failing operation (``"tcgetattr"``, ``"read"``, ...)
    and is printed before the underlying cause, perror-style.
    """

    def __init__(self, where: str, message: str | None = None) -> None:
        self.where = where
        self.message = message
        super().__init__(f"{where}: {message}" if message else where)

    def describe(self) -> str:
        """Return ``"<where>: <cause>"`` for display on the fatal path."""
        if self.message:
            return str(self)
        cause = self.__cause__
        if cause is None:
            return self.where
        detail = getattr(cause, "strerror", None)
        if not detail and len(cause.args) == 2 and isinstance(cause.args[1], str):
            # termios.error carries (errno, message) without strerror
            detail = cause.args[1]
        return f"{self.where}: {detail or str(cause) or type(cause).__name__}"


class TerminalConfigError(NotecError):
    """Getting or setting terminal attributes failed."""


class TerminalQueryError(NotecError):
    """Window size could not be determined by any method."""


class FileOpenError(NotecError):
    """The file to view could not be opened or read."""


class IOReadError(NotecError):
    """Reading from the terminal failed for a reason other than a timeout."""


class IOWriteError(NotecError):
    """Writing to the terminal failed."""
