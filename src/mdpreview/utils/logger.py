"""Minimal logging utilities for mdpreview.

Example:
    >>> from mdpreview.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning %d lines", 12)
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a standard library logger namespaced under ``mdpreview.``.

    Example:
        >>> get_logger("scanner").name
        'mdpreview.scanner'
    """
    if not (name == "mdpreview" or name.startswith("mdpreview.")):
        name = f"mdpreview.{name}"
    return logging.getLogger(name)
