"""Utility modules for Tinta.

Provides:
- text: escape_html, escape_latex, unescape_latex for output escaping
- logger: get_logger for logging
"""

from tinta.utils.logger import get_logger
from tinta.utils.text import escape_html, escape_latex, unescape_latex

__all__ = [
    "escape_html",
    "escape_latex",
    "get_logger",
    "unescape_latex",
]
