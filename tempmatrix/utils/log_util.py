"""
Logging helpers shared across the temperature matrix application.

Usage:
    from tempmatrix.utils.log_util import app_logger
    logger = app_logger(__name__)
"""

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LEVEL = "INFO"


def app_logger(name: str, level: str = None) -> logging.Logger:
    """
    Return a module logger with a single stream handler.

    The level comes from the ``level`` argument, then the TEMPMATRIX_LOG_LEVEL
    environment variable, then INFO. Repeated calls for the same name reuse the
    existing handler so streamlit reruns don't duplicate log lines.

    :param name: Logger name, normally ``__name__``
    :param level: Optional level name override (e.g. "DEBUG")
    :return: Configured logger
    """
    logger = logging.getLogger(name)

    level_name = (level or os.environ.get("TEMPMATRIX_LOG_LEVEL", DEFAULT_LEVEL)).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    return logger
