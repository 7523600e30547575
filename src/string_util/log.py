"""Console logging for the CLI.  Library modules only create loggers."""

from __future__ import annotations
import logging

LOGGER_NAME = "string_util"


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a console handler to the package logger.

    Subsequent calls only adjust the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger
