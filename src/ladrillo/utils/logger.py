"""Minimal logging utilities for Ladrillo.

Example:
    >>> from ladrillo.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Rendering page")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``ladrillo`` namespace.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("pages").name
        'ladrillo.pages'
    """
    if not (name == "ladrillo" or name.startswith("ladrillo.")):
        name = f"ladrillo.{name}"
    return logging.getLogger(name)
