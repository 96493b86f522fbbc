# ultimate_logger/core/logging.py
"""
Diagnostics logging for the library itself.

ultimate_logger reports its own lifecycle events (log file opened/closed) through
the standard `logging` module under the "ultimate_logger" name. A NullHandler is
attached so a host application sees nothing unless it opts in, either through
its own logging setup or by calling `configure_logging`.

Write failures are never reported here; they are raised to the caller.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from ultimate_logger.core.config import settings

LOGGER_NAME = "ultimate_logger"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())

_installed_handler: Optional[logging.Handler] = None


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or a child of it for `name`."""
    if not name or name == LOGGER_NAME:
        return logger
    return logger.getChild(name)


def configure_logging(level: Optional[str] = None) -> logging.Handler:
    """
    Send ultimate_logger diagnostics to stdout.

    Args:
        level: Logging level as a string (e.g. "DEBUG"). Defaults to
            `settings.LOG_LEVEL`.

    Behavior:
    - Installs a single stream handler on the package logger
    - Calling again replaces the handler installed previously
    - Leaves the root logger and any other handlers untouched
    """
    global _installed_handler

    log_level = getattr(logging, (level or settings.LOG_LEVEL).upper(), logging.WARNING)

    if _installed_handler is not None:
        logger.removeHandler(_installed_handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    logger.addHandler(handler)
    logger.setLevel(log_level)

    _installed_handler = handler
    return handler
