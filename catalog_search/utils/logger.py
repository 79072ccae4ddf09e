"""Logging configuration for the indexer."""
import logging
from typing import Optional, Union

from catalog_search.config import settings

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

# Console handler installed by setup_logger, created on first call
_console_handler: Optional[logging.Handler] = None


def setup_logger(level: Optional[Union[str, int]] = None) -> logging.Logger:
    """
    Configure the package logger with a console handler.

    Calling it again only updates the level.

    Args:
        level: Log level name or number (defaults to settings.log_level)

    Returns:
        The configured package logger
    """
    global _console_handler

    logger = logging.getLogger("catalog_search")
    if isinstance(level, str) or level is None:
        level = (level or settings.log_level).upper()
    logger.setLevel(level)

    if _console_handler is None:
        _console_handler = logging.StreamHandler()
        _console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if _console_handler not in logger.handlers:
        logger.addHandler(_console_handler)

    return logger
