"""Header-based chapter extraction.

Responsibilities:
- Locate header lines in the book body.
- Split the body into ordered chapters with titles, content, and teasers.
- Enforce the minimum chapter length by padding with the header or dropping.
"""

from __future__ import annotations

from ..models.datatypes import DEFAULT_MIN_CHAPTER_CHARS, Chapter
from .headers import HeaderClassifier, HeaderKind, HeaderMatch, strip_inline_noise
from .teaser import create_teaser


class ChapterExtractor:
    """Split a book body into chapter records at detected header lines."""

    def __init__(
        self,
        classifier: HeaderClassifier,
        min_chapter_chars: int = DEFAULT_MIN_CHAPTER_CHARS,
    ) -> None:
        self._classifier = classifier
        self._min_chapter_chars = min_chapter_chars

    def find_headers(self, lines: list[str]) -> list[tuple[int, HeaderMatch]]:
        """Return `(line_index, match)` pairs for every header line."""

        headers: list[tuple[int, HeaderMatch]] = []
        for index, line in enumerate(lines):
            match = self._classifier.classify(line)
            if match.is_header:
                headers.append((index, match))
        return headers

    def extract(self, body: str) -> list[Chapter]:
        """Extract chapters; an empty list means no header was found.

        Chapters whose content stays below the minimum length, even after
        prefixing the header line, are dropped.
        """

        lines = body.split("\n")
        headers = self.find_headers(lines)
        if not headers:
            return []

        chapters: list[Chapter] = []
        for position, (start, match) in enumerate(headers):
            end = headers[position + 1][0] if position + 1 < len(headers) else len(lines)
            header = strip_inline_noise(lines[start])

            body_lines = lines[start + 1 : end]
            while body_lines and not strip_inline_noise(body_lines[0]):
                body_lines.pop(0)
            content = "\n".join(body_lines).strip()

            if len(content) < self._min_chapter_chars:
                content = "\n".join(part for part in (header, content) if part).strip()
            if len(content) < self._min_chapter_chars:
                continue

            chapters.append(
                Chapter(
                    title=chapter_title(match, position + 1),
                    content=content,
                    teaser=create_teaser(content),
                )
            )
        return chapters


def chapter_title(match: HeaderMatch, position: int) -> str:
    """Derive a display title for a header at 1-based `position`.

    Explicit trailing titles win. Bare numbered headings become `Chapter <n>`
    with their own number; everything else is numbered by position.
    """

    if match.title:
        return match.title
    if match.kind is HeaderKind.HEADING and match.number:
        return f"Chapter {match.number}"
    return f"Chapter {position}"
