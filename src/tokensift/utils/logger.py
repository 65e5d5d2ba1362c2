"""Minimal logging utilities for tokensift.

Provides a simple get_logger function that wraps the standard library logging.
The library never installs handlers; applications configure output.

Example:
    >>> from tokensift.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Compiled pattern")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "tokensift." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'tokensift.mymodule'
    """
    if not (name == "tokensift" or name.startswith("tokensift.")):
        name = f"tokensift.{name}"
    return logging.getLogger(name)
