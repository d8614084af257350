"""Top-level package for bookseg.

This package splits loosely structured generated book text into a title and
ordered chapters with teasers. The main entry point is `parse`, backed by
`BookParser`.
"""

from .models.datatypes import Book, Chapter, ParseOptions
from .parser import BookParser, parse

__all__ = ["Book", "BookParser", "Chapter", "ParseOptions", "parse", "__version__"]

__version__ = "0.1.0"
