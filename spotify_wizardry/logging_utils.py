"""
Logging setup for the command-line entry points.

Library modules only call logging.getLogger(__name__); handlers are
installed here, once, by whoever runs the program.
"""
import logging
import sys
from typing import Optional, Union

from .config import LOG_LEVEL, LOG_FORMAT

PACKAGE_LOGGER = "spotify_wizardry"


def configure_logging(level: Optional[Union[str, int]] = None) -> logging.Logger:
    """
    Attach a stderr handler to the package logger (idempotent).

    Args:
        level: Level name or number; defaults to LOG_LEVEL

    Returns:
        The package logger
    """
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    if not any(getattr(h, "_wizardry_handler", False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._wizardry_handler = True
        logger.addHandler(handler)

    return logger
