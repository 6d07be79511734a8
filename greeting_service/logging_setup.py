"""Process logger construction.

The logger built here is handed to every component explicitly instead of
being looked up globally inside request handlers.
"""

import logging
import sys
from typing import TextIO

LOGGER_NAME = "greeting_service"
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def logging_setup_logger(level: str = "INFO", stream: TextIO | None = None) -> logging.Logger:
    """Create the line-oriented process logger.

    Args:
        level: Threshold name such as `INFO` or `DEBUG`.
        stream: Optional output stream, defaults to stderr.

    Returns:
        logging.Logger: Configured logger with a single stream handler.
    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    for existing_handler in list(logger.handlers):
        logger.removeHandler(existing_handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
