"""Expose the public utility surface for pressurelid.

What:
  Re-export the structured logger and the bounded-wait search helper.

Why:
  A stable facade lets the guard and downstream code import helpers without
  depending on internal filenames.

Interfaces:
  ``get_logger``, ``JsonLogger``, ``RegexTimeoutError``, and
  ``search_with_timeout``.
"""

from .logging import JsonLogger, get_logger
from .regexsafe import RegexTimeoutError, search_with_timeout

__all__ = [
    "JsonLogger",
    "get_logger",
    "RegexTimeoutError",
    "search_with_timeout",
]
