"""Minimal logging utilities for htmlwriter.

Provides a simple get_logger function that wraps the standard library logging.
The library never configures handlers; applications decide where records go.

Example:
    >>> from htmlwriter.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Installed tag methods")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "htmlwriter." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'htmlwriter.mymodule'
    """
    if not (name == "htmlwriter" or name.startswith("htmlwriter.")):
        name = f"htmlwriter.{name}"
    return logging.getLogger(name)
