"""Runtime settings for the viewer."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class ViewerConfig:
    """Settings gathered from command-line options and NOTEC_* env vars."""
    read_timeout_ds: int = 1  # VTIME, in tenths of a second
    log_file: Path | None = None
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not 0 <= self.read_timeout_ds <= 255:
            raise ValueError(f"read timeout must be 0-255 deciseconds, got {self.read_timeout_ds}")
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}")
