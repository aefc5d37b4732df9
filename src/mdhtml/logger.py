"""Logging setup for command-line runs"""

import logging


FORMAT = '{levelname}\t{asctime} {name:20}{message}'
TIME = '%Y-%m-%d %H:%M:%S'


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Send mdhtml.* records at or above level to stderr.

    Replaces previously installed handlers so repeated runs in one process
    write to the current stderr.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(FORMAT, TIME, style='{'))
    logger = logging.getLogger("mdhtml")
    logger.handlers[:] = [handler]
    logger.setLevel(level.upper())
    return logger
