"""Utility modules for mdpreview.

Provides:
- text: escape_html for code content
- hashing: hash_str for cache keys
- logger: get_logger for logging
"""

from mdpreview.utils.hashing import hash_str
from mdpreview.utils.logger import get_logger
from mdpreview.utils.text import escape_html

__all__ = [
    "escape_html",
    "get_logger",
    "hash_str",
]
