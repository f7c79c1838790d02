"""Logging setup shared by outline2book modules."""

from __future__ import annotations

import logging

from outline2book.config import OUTLINE2BOOK_LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_configured = False


def configure_logging(level: str | int) -> None:
    """Give the package logger its own handler and level.

    The logger stops propagating once it has a handler, so records are not
    printed a second time by the application's root handler.
    """
    global _configured
    package_logger = logging.getLogger("outline2book")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    package_logger.setLevel(level)

    if not _configured:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        package_logger.addHandler(handler)
        package_logger.propagate = False
        _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger.

    The package logger is only configured when ``OUTLINE2BOOK_LOG_LEVEL`` is
    set; otherwise records flow to whatever the application has set up.
    """
    if OUTLINE2BOOK_LOG_LEVEL and not _configured:
        configure_logging(OUTLINE2BOOK_LOG_LEVEL)
    return logging.getLogger(name)
