"""Logging setup shared by the API and the maintenance scripts."""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the ``jobly`` logger with a single console handler.

    Safe to call more than once: existing handlers are replaced rather than
    stacked, so building several apps in one process does not duplicate output.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger("jobly")
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
