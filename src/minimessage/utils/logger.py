"""Minimal logging utilities for MiniMessage.

Provides a get_logger function that wraps the standard library logging.
The library only emits records; configuring handlers is left to the
application.

Example:
    >>> from minimessage.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("resolved tag %s", "bold")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "minimessage." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'minimessage.mymodule'
    """
    if not (name == "minimessage" or name.startswith("minimessage.")):
        name = f"minimessage.{name}"
    return logging.getLogger(name)
