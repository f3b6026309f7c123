"""Diagnostic logging for vengo.

User-facing output goes to stdout through ``print``; everything here is
written to stderr and stays quiet at the default level.
"""

from __future__ import annotations

import logging
import sys

LOGGER_NAME = "vengo"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """Attach a single stderr handler to the ``vengo`` logger."""
    app_logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    if not app_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        app_logger.addHandler(handler)
        app_logger.propagate = False

    app_logger.setLevel(level)
    return app_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
