"""Load text files into a Document."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import BinaryIO, Iterator

from notec.core.document import Document
from notec.errors import FileOpenError

logger = logging.getLogger(__name__)


def iter_lines(stream: BinaryIO) -> Iterator[bytes]:
    """
    Yield each line of a binary stream without its terminator.

    Both ``\\n`` and ``\\r\\n`` endings are stripped; every other byte is
    passed through untouched. A final line without a newline is still
    yielded.
    """
    for line in stream:
        yield line.rstrip(b'\r\n')


def load(path: str | Path) -> Document:
    """
    Load a file from disk, one row per line.

    Raises FileOpenError if the file cannot be opened or read.
    """
    path = Path(path)
    doc = Document(source_path=path)
    try:
        with open(path, 'rb') as f:
            doc.load_from_lines(iter_lines(f))
    except OSError as e:
        raise FileOpenError("fopen") from e

    logger.info("Loaded %s (%d rows)", path, doc.numrows)
    return doc


def load_bytes(data: bytes) -> Document:
    """Build a Document from in-memory file contents."""
    doc = Document()
    doc.load_from_lines(iter_lines(io.BytesIO(data)))
    return doc
