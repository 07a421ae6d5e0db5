"""Logging setup.

The viewer owns the whole screen while it runs, so log records go to a
rotating file or nowhere at all, never to the terminal.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler

from notec.config import ViewerConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(config: ViewerConfig) -> logging.Logger:
    """Configure the ``notec`` logger from ``config``."""
    logger = logging.getLogger("notec")
    logger.setLevel(config.log_level.upper())
    logger.propagate = False

    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    if config.log_file is not None:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = RotatingFileHandler(
            config.log_file,
            maxBytes=1024 * 1024,
            backupCount=3,
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = logging.NullHandler()

    logger.addHandler(handler)
    return logger
