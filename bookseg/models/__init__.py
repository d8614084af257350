"""Shared typed data models for bookseg.

This package contains dataclasses used across stage modules to avoid
cross-module coupling and circular imports.
"""

from .datatypes import DEFAULT_BOOK_TITLE, Book, Chapter, ParseOptions

__all__ = ["Book", "Chapter", "DEFAULT_BOOK_TITLE", "ParseOptions"]
