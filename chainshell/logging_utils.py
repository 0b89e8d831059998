"""Diagnostic logging for the interpreter."""

import sys

from loguru import logger

from chainshell.config import LOG_LEVEL

_FORMAT = "{time:HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_CONFIGURED_LEVEL = None


def configure_logging(level=LOG_LEVEL):
    """Send loguru output to stderr at `level`. Safe to call more than once."""
    global _CONFIGURED_LEVEL
    level = level.upper()
    if level == _CONFIGURED_LEVEL:
        return
    logger.remove()
    logger.add(sys.stderr, level=level, format=_FORMAT, backtrace=False, diagnose=False)
    _CONFIGURED_LEVEL = level
