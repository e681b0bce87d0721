"""Logging helpers for mdinline.

The library never installs handlers; it only hands out namespaced
standard library loggers so applications can route them as they like.

Example:
    >>> from mdinline.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Parsing line %d", 1)
"""

from __future__ import annotations

import logging

_ROOT = "mdinline"


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``mdinline`` namespace.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("engine").name
        'mdinline.engine'
        >>> get_logger("mdinline.parser").name
        'mdinline.parser'
    """
    if not (name == _ROOT or name.startswith(f"{_ROOT}.")):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)
