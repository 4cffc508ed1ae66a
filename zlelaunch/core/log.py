"""Diagnostics go to stderr so stdout only ever carries commands."""
import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "zlelaunch"


def init_logging(verbose: bool = False, stream: Optional[TextIO] = None) -> logging.Logger:
    """Configure the package logger with a single stderr handler.

    Args:
        verbose: Lower the level to DEBUG
        stream: Stream for the handler, defaults to sys.stderr

    Returns:
        logging.Logger: The configured package logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
    return logger
