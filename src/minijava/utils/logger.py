"""Minimal logging utilities for MiniJava.

Provides a simple get_logger function that wraps the standard library logging.

Example:
    >>> from minijava.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Checking compilation unit")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "minijava." prefix.

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'minijava.mymodule'
    """
    if not (name == "minijava" or name.startswith("minijava.")):
        name = f"minijava.{name}"
    return logging.getLogger(name)
