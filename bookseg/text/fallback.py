"""Paragraph-grouping fallback for text without any header lines."""

from __future__ import annotations

import math
import re

from ..metrics import clamp
from ..models.datatypes import DEFAULT_MIN_CHAPTER_CHARS, MIN_CHAPTER_CHARS_FLOOR, Chapter
from .teaser import create_teaser


MAX_FALLBACK_GROUPS = 6
PARAGRAPHS_PER_GROUP_TARGET = 6
PARAGRAPH_LENGTH_RATIO = 0.8

_PARAGRAPH_BREAK_RE = re.compile(r"\n\s*\n")


class FallbackGrouper:
    """Synthesize chapters by grouping paragraphs into fixed-size chunks."""

    def __init__(self, min_chapter_chars: int = DEFAULT_MIN_CHAPTER_CHARS) -> None:
        self._min_chapter_chars = min_chapter_chars

    @property
    def min_paragraph_chars(self) -> int:
        """Shortest paragraph kept for grouping."""

        return max(
            MIN_CHAPTER_CHARS_FLOOR,
            math.floor(self._min_chapter_chars * PARAGRAPH_LENGTH_RATIO),
        )

    def group(self, body: str) -> list[Chapter]:
        """Group paragraphs of `body` into at most six chapters; never empty.

        Titles follow chunk position, so a skipped short chunk leaves a gap in
        the numbering (`Chapter 1`, `Chapter 3`).
        """

        paragraphs = [
            paragraph.strip()
            for paragraph in _PARAGRAPH_BREAK_RE.split(body)
            if len(paragraph.strip()) >= self.min_paragraph_chars
        ]
        if not paragraphs:
            return [whole_body_chapter(body)]

        group_count = clamp(
            math.ceil(len(paragraphs) / PARAGRAPHS_PER_GROUP_TARGET), 1, MAX_FALLBACK_GROUPS
        )
        group_size = max(1, math.ceil(len(paragraphs) / group_count))

        chapters: list[Chapter] = []
        for offset in range(0, len(paragraphs), group_size):
            chunk = "\n\n".join(paragraphs[offset : offset + group_size]).strip()
            if len(chunk) < self._min_chapter_chars:
                continue
            chapters.append(
                Chapter(
                    title=f"Chapter {offset // group_size + 1}",
                    content=chunk,
                    teaser=create_teaser(chunk),
                )
            )

        return chapters or [whole_body_chapter(body)]


def whole_body_chapter(body: str) -> Chapter:
    """Return the last-resort single chapter holding the entire trimmed body."""

    content = body.strip()
    return Chapter(title="Chapter 1", content=content, teaser=create_teaser(content))
