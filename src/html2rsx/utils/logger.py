"""Minimal logging utilities for html2rsx.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from html2rsx.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Running converter")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "html2rsx." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'html2rsx.mymodule'
    """
    if not (name == "html2rsx" or name.startswith("html2rsx.")):
        name = f"html2rsx.{name}"
    return logging.getLogger(name)
