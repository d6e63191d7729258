"""
Logging setup for the lessons package.

Lesson output is printed; diagnostics go through logging:

    from lessons.log import get_logger
    logger = get_logger(__name__)
"""

import logging
import os
import sys


DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
LEVEL_ENV_VAR = "LESSONS_LOG_LEVEL"


def _level_from_env(default: int) -> int:
    name = os.environ.get(LEVEL_ENV_VAR, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for unknown names
    if isinstance(level, int):
        return level
    return default


def configure_logging(level: int = None, fmt: str = DEFAULT_FORMAT, stream=None):
    """
    Configure the package logger.

    Called once by entry points. Calling it again only updates the level,
    a second handler is never added.
    """
    if level is None:
        level = _level_from_env(logging.WARNING)

    root = logging.getLogger("lessons")
    if not root.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)
    return root


def get_logger(name: str) -> logging.Logger:
    """Modules call this with __name__; configuration lives in configure_logging()."""
    return logging.getLogger(name)
