"""Utility modules for html2rsx.

Provides:
- text: escape_html, is_blank
- logger: get_logger for logging
"""

from html2rsx.utils.logger import get_logger
from html2rsx.utils.text import escape_html, is_blank

__all__ = [
    "escape_html",
    "get_logger",
    "is_blank",
]
