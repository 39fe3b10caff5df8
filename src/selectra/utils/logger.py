"""Minimal logging utilities for Selectra.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications configure logging.

Example:
    >>> from selectra.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Combining selectors")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "selectra." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'selectra.mymodule'
    """
    if not (name == "selectra" or name.startswith("selectra.")):
        name = f"selectra.{name}"
    return logging.getLogger(name)
