"""Utility functions and helpers package."""

from .exceptions import BadRequestError, WidgetError
from .html import escape_html
from .logging import setup_logging
from .url import add_query
from .validation import is_int_like, to_int, to_positive_int

__all__ = [
    "BadRequestError",
    "WidgetError",
    "add_query",
    "escape_html",
    "is_int_like",
    "setup_logging",
    "to_int",
    "to_positive_int",
]
