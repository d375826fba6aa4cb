"""Logging setup for the command-line entry points"""

import logging


LOGGER_NAME = "mdindex"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a single stderr handler to the mdindex logger at the given level."""
    logger = logging.getLogger(LOGGER_NAME)

    # Avoid stacking handlers when called more than once
    if logger.handlers:
        logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = True
    return logger
