"""Logging setup shared by the game entry points."""

import logging
import os
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL_ENV = "PARLOR_LOG_LEVEL"


def resolve_level(level: Union[str, int, None] = None) -> int:
    """
    Pick the log level from the argument, then PARLOR_LOG_LEVEL, then WARNING.

    Unknown level names fall back to WARNING.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.WARNING


def configure_logging(
    level: Union[str, int, None] = None, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Configure the ``parlor`` logger with a single stream or file handler.

    Calling it again replaces the previously installed handler.

    :param level: Level name or number; see resolve_level.
    :param log_file: Write log records to this file instead of stderr.
    :return: The configured ``parlor`` logger.
    """
    logger = logging.getLogger("parlor")
    logger.setLevel(resolve_level(level))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
