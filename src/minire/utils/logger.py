"""Minimal logging utilities for minire.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; the command-line front end does.

Example:
    >>> from minire.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Matching %r", pattern)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "minire." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'minire.mymodule'
    """
    # Ensure minire prefix for consistent namespacing
    if not (name == "minire" or name.startswith("minire.")):
        name = f"minire.{name}"
    return logging.getLogger(name)
