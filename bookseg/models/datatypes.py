"""Core datatypes shared across bookseg modules.

Responsibilities:
- Represent immutable records produced by one parse invocation.
- Carry caller options with deterministic clamping of out-of-range values.

Key types:
- `Chapter`, `Book`, and `ParseOptions`.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..metrics import count_words


DEFAULT_BOOK_TITLE = "Generated Book"
DEFAULT_MAX_CHAPTERS = 8
DEFAULT_MIN_CHAPTER_CHARS = 120
MIN_CHAPTER_CHARS_FLOOR = 50


@dataclass(frozen=True, slots=True)
class Chapter:
    """A chapter recovered from generated book text.

    Attributes:
        title: Chapter title taken from the header or synthesized as `Chapter N`.
        content: Normalized chapter body.
        teaser: Short sentence-bounded preview of `content`.
    """

    title: str
    content: str
    teaser: str

    @property
    def word_count(self) -> int:
        """Return the number of words in the chapter body."""

        return count_words(self.content)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serializable mapping of this chapter."""

        return {"title": self.title, "content": self.content, "teaser": self.teaser}


@dataclass(frozen=True, slots=True)
class Book:
    """A parsed book: title plus ordered chapters.

    Attributes:
        title: Book title, or the configured placeholder when none was found.
        chapters: Ordered chapters; never empty for a completed parse.
    """

    title: str
    chapters: tuple[Chapter, ...]

    @property
    def word_count(self) -> int:
        """Return the total number of words across all chapter bodies."""

        return sum(chapter.word_count for chapter in self.chapters)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serializable mapping of this book."""

        return {
            "title": self.title,
            "chapters": [chapter.to_dict() for chapter in self.chapters],
        }


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Caller options for one parse invocation.

    Attributes:
        preview_mode: Return only the first chapter.
        max_chapters: Upper bound on returned chapters, floored at 1.
        min_chapter_chars: Minimum chapter body length, floored at 50.
        enable_heading_detection: Also split on keyword-free numbered headings.
        default_title: Title used when no standalone title line is found.
    """

    preview_mode: bool = False
    max_chapters: int = DEFAULT_MAX_CHAPTERS
    min_chapter_chars: int = DEFAULT_MIN_CHAPTER_CHARS
    enable_heading_detection: bool = True
    default_title: str = DEFAULT_BOOK_TITLE

    def resolved(self) -> ParseOptions:
        """Return a copy with out-of-range values clamped instead of rejected."""

        return ParseOptions(
            preview_mode=self.preview_mode,
            max_chapters=1 if self.preview_mode else max(1, self.max_chapters),
            min_chapter_chars=max(MIN_CHAPTER_CHARS_FLOOR, self.min_chapter_chars),
            enable_heading_detection=self.enable_heading_detection,
            default_title=self.default_title,
        )
