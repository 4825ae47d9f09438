"""Minimal logging utilities for pincel.

Wraps the standard library logging so every logger lives under the
``pincel`` namespace. The library never installs handlers; applications
decide where records go.

Example:
    >>> from pincel.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Built pipeline")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("mymodule").name
        'pincel.mymodule'
    """
    if not (name == "pincel" or name.startswith("pincel.")):
        name = f"pincel.{name}"
    return logging.getLogger(name)
