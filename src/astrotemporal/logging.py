"""
Logging configuration for the astrotemporal package.

This module provides a standardized logging setup for all modules
within the package, ensuring consistent log formatting and control.
"""

import logging
import os
import sys

# Default logging level - Debug messages are suppressed by default
DEFAULT_LOG_LEVEL = logging.WARNING

# Environment variable that overrides the default level
LOG_LEVEL_ENV_VAR = "ASTROTEMPORAL_LOG_LEVEL"

FORMATTER = logging.Formatter(
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
)

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def get_logger(name: str) -> logging.Logger:
    """
    Get a configured logger for the given name.

    Args:
        name: Name for the logger, typically __name__ of the calling module

    Returns:
        A configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure the logger if it hasn't been already
    if not logger.handlers:
        root_logger = logging.getLogger("astrotemporal")
        if root_logger.level != logging.NOTSET:
            log_level = root_logger.level
        else:
            log_level = _get_log_level()
        logger.setLevel(log_level)

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(FORMATTER)
        logger.addHandler(handler)
        logger.propagate = False

    return logger


def _get_log_level() -> int:
    """
    Get the logging level based on environment variables.

    Returns:
        The appropriate logging level as an int
    """
    log_level_str = os.environ.get(LOG_LEVEL_ENV_VAR, "").upper()
    return _LEVELS.get(log_level_str, DEFAULT_LOG_LEVEL)


def set_log_level(level: int) -> None:
    """
    Set the logging level for all astrotemporal loggers.

    Args:
        level: The logging level to set (e.g., logging.DEBUG)
    """
    root_logger = logging.getLogger("astrotemporal")
    root_logger.setLevel(level)

    # Child loggers were given an explicit level by get_logger
    for name, logger in logging.Logger.manager.loggerDict.items():
        if name.startswith("astrotemporal.") and isinstance(logger, logging.Logger):
            logger.setLevel(level)
            for handler in logger.handlers:
                handler.setLevel(level)
