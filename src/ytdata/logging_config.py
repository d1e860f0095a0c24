"""Logging configuration for the ytdata package."""

import logging
import sys
from typing import Optional

from . import config

# Create logger
logger: logging.Logger = logging.getLogger("ytdata")
logger.setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))

# Create console handler
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))

# Create formatter
formatter = logging.Formatter(
    "%(asctime)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
)

console_handler.setFormatter(formatter)

logger.addHandler(console_handler)

# Prevent propagation to root logger
logger.propagate = False


def enable_debug() -> None:
    """Enable debug logging.

    Sets both the logger and console handler to DEBUG level.
    """
    logger.setLevel(logging.DEBUG)
    console_handler.setLevel(logging.DEBUG)


def disable_debug() -> None:
    """Disable debug logging.

    Sets both the logger and console handler back to INFO level.
    """
    logger.setLevel(logging.INFO)
    console_handler.setLevel(logging.INFO)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Name of the logger, typically __name__. Only the last dotted
            component is kept, so ``src.ytdata.api`` and ``ytdata.api`` share
            the ``ytdata.api`` logger. If None, returns the package logger.

    Returns:
        A Logger instance that hands its records to the package logger.
    """
    if name:
        return logging.getLogger(f"ytdata.{name.rsplit('.', 1)[-1]}")
    return logger
