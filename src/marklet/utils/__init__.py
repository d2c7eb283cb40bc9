"""Utility modules for marklet.

Provides:
- text: escape_html for rendered text and attributes
- logger: get_logger for logging
"""

from marklet.utils.logger import get_logger
from marklet.utils.text import escape_html

__all__ = [
    "escape_html",
    "get_logger",
]
