"""Document - ordered rows of text loaded from a file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator


@dataclass
class Row:
    """One line of text, stored as raw bytes without its line terminator."""
    chars: bytearray = field(default_factory=bytearray)

    @property
    def size(self) -> int:
        return len(self.chars)

    def __len__(self) -> int:
        return len(self.chars)

    def slice(self, start: int, width: int) -> bytes:
        """Return up to ``width`` bytes starting at ``start``.

        Empty when ``start`` lies at or past the end of the row.
        """
        if width <= 0 or start >= len(self.chars):
            return b""
        start = max(0, start)
        return bytes(self.chars[start:start + width])


@dataclass
class Document:
    """
    The text being viewed, as an ordered list of rows.

    Row 0 is line 1 of the file. Rows are only ever appended, never
    reordered or removed, so ``numrows == len(rows)`` at all times.
    """
    rows: list[Row] = field(default_factory=list)
    source_path: Path | None = None

    @property
    def numrows(self) -> int:
        return len(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def is_empty(self) -> bool:
        return not self.rows

    def append_row(self, data: bytes) -> Row:
        """Copy ``data`` into a new row at the end of the document."""
        row = Row(bytearray(data))
        self.rows.append(row)
        return row

    def load_from_lines(self, lines: Iterable[bytes]) -> None:
        """Append each already-stripped line, in order."""
        for line in lines:
            self.append_row(line)

    def row_at(self, index: int) -> Row | None:
        """Get the row at ``index``, or None past either end."""
        if 0 <= index < len(self.rows):
            return self.rows[index]
        return None

    def row_length(self, index: int) -> int:
        """Length of row ``index`` in bytes; 0 when out of bounds."""
        row = self.row_at(index)
        return row.size if row is not None else 0
