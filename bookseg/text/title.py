"""Book title detection from the opening lines.

The scan is first-candidate-wins: the first non-empty line that is either a
header or has a plausible title length decides the outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
import re

from ..models.datatypes import DEFAULT_BOOK_TITLE
from .headers import HeaderClassifier, strip_inline_noise, trim_hashes


TITLE_SCAN_LINES = 6
MIN_TITLE_CHARS = 6
MAX_TITLE_CHARS = 120

_BYLINE_RE = re.compile(r"\bby\s+.+$", re.IGNORECASE)


@dataclass(frozen=True, slots=True)
class TitleExtraction:
    """Detected title and the line offset where the body starts."""

    title: str
    body_start: int
    found: bool


class TitleExtractor:
    """Pick a standalone book title without consuming a chapter header."""

    def __init__(
        self,
        classifier: HeaderClassifier,
        default_title: str = DEFAULT_BOOK_TITLE,
    ) -> None:
        self._classifier = classifier
        self._default_title = default_title

    def extract(self, lines: list[str]) -> TitleExtraction:
        """Scan up to the first six non-empty lines for a title candidate."""

        scanned = 0
        for index, raw_line in enumerate(lines):
            if scanned >= TITLE_SCAN_LINES:
                break
            line = strip_inline_noise(raw_line)
            if not line:
                continue
            scanned += 1

            if self._classifier.is_header(line):
                break
            if MIN_TITLE_CHARS <= len(line) <= MAX_TITLE_CHARS:
                title = trim_hashes(_BYLINE_RE.sub("", line).strip())
                # a bare byline line is consumed but cannot serve as the title
                return TitleExtraction(
                    title=title or self._default_title,
                    body_start=index + 1,
                    found=bool(title),
                )

        return TitleExtraction(title=self._default_title, body_start=0, found=False)
