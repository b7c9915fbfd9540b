"""Logging configuration.

Components only create loggers under the ``exposure_reader`` name. An
application that wants their output calls setup_logger() once.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

from ..config import Config

LEVEL_MAP = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL
}


def resolve_level(level: Union[int, str]) -> int:
    """
    Turn a level name or number into a logging level.

    Unknown names fall back to INFO.
    """
    if isinstance(level, int):
        return level
    return LEVEL_MAP.get(level.upper(), logging.INFO)


def _build_handlers(log_file: Optional[Path]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    return handlers


def setup_logger(
    name: str = Config.LOGGER_NAME,
    level: Union[int, str] = Config.LOG_LEVEL,
    log_file: Optional[Path] = None,
    format_string: str = Config.LOG_FORMAT
) -> logging.Logger:
    """
    Attach console (and optionally file) handlers to a reader logger.

    Args:
        name: Logger name (default: the package logger, parent of all components)
        level: Level name or number (default: Config.LOG_LEVEL)
        log_file: Optional file that also receives the output
        format_string: Record format (default: Config.LOG_FORMAT)

    Returns:
        The configured logger; calling again returns it without new handlers
    """
    logger = logging.getLogger(name)
    log_level = resolve_level(level)
    logger.setLevel(log_level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(format_string, datefmt='%Y-%m-%d %H:%M:%S')
    for handler in _build_handlers(log_file):
        handler.setLevel(log_level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug(f"Logging configured for {Config.APP_NAME} v{Config.VERSION}")
    return logger


def set_log_level(logger: logging.Logger, level: Union[int, str]):
    """Change the level of a logger and all of its handlers."""
    log_level = resolve_level(level)
    logger.setLevel(log_level)

    for handler in logger.handlers:
        handler.setLevel(log_level)
