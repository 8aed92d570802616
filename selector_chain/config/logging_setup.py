"""
Logging setup for selector-chain.

The library only logs through module loggers under ``selector_chain``;
handlers are left to the application.
"""

import logging
from typing import Optional

from .options import LoggingOptions

LOGGER_NAME = "selector_chain"


def configure_logging(options: Optional[LoggingOptions] = None) -> logging.Logger:
    """Apply logging options to the package logger.

    Args:
        options: Logging options; defaults to LoggingOptions().

    Returns:
        The ``selector_chain`` logger.
    """
    options = options or LoggingOptions()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(options.level)
    return logger
