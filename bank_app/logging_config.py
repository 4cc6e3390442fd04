"""
Logging configuration.

One stream handler on the package logger. Modules log through
logging.getLogger(__name__) and inherit this setup.
"""

import logging

LOGGER_NAME = "bank_app"

LOG_FORMAT = "%(asctime)s level=%(levelname)s logger=%(name)s %(message)s"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """
    Configure the bank_app logger.

    Safe to call more than once: existing handlers are replaced
    rather than stacked.
    """
    logger = logging.getLogger(LOGGER_NAME)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    logger.propagate = False

    return logger
