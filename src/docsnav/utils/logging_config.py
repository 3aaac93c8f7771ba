"""Logging setup shared by the CLI and the server."""

from __future__ import annotations

import logging
import sys

from docsnav.config import DOCSNAV_LOG_LEVEL

_PACKAGE_LOGGERS = ("docsnav", "server")
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a module logger."""
    return logging.getLogger(name)


def configure_logging(level: str | int | None = None) -> None:
    """Attach one stderr handler to each package logger.

    Calling this more than once only updates the level.

    Args:
        level: Level name or number. Defaults to ``DOCSNAV_LOG_LEVEL``.
    """
    if level is None:
        level = DOCSNAV_LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()

    for name in _PACKAGE_LOGGERS:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        if any(getattr(handler, "_docsnav", False) for handler in logger.handlers):
            continue
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        handler._docsnav = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
