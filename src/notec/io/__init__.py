"""File input for the viewer."""

from notec.io.reader import load, load_bytes

__all__ = ["load", "load_bytes"]
