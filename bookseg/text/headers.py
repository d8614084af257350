"""Chapter and heading line classification.

Responsibilities:
- Recognize keyword chapter headers (`Chapter 3: Title`, `Kapitel IV`, ...).
- Recognize looser numbered headings (`3) Title`, `IV. Title`, `Part 2 - Title`).
- Return a tagged `HeaderMatch` instead of exposing raw regex matches.

Both grammars are anchored to the start of a noise-stripped line. The keyword
grammar always wins when a line satisfies both.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import re


_CHAPTER_KEYWORDS = r"(?:Chapter|Kapitel|Chapitre|Cap[ií]tulo|Capitolo)"
_PART_KEYWORDS = r"(?:Part|Teil|Parte)"
_ROMAN = r"(?=[MDCLXVI])M{0,4}(?:CM|CD|D?C{0,3})(?:XC|XL|L?X{0,3})(?:IX|IV|V?I{0,3})"
_WORD_NUMBER = r"(?:One|Two|Three|Four|Five|Six|Seven|Eight|Nine|Ten|Eleven|Twelve)"
_DIGIT_NUMBER = r"[0-9]{1,3}"
_ANY_NUMBER = rf"(?:{_DIGIT_NUMBER}|{_ROMAN}|{_WORD_NUMBER})"
_TITLE_SEPARATOR = r"(?::|\.|—|–|-|\)|\])"
_TRAILING_TITLE = rf"(?:\s*{_TITLE_SEPARATOR}\s*(?P<title>.+))?$"
_HEADER_PREFIX = r"\s{0,3}#{0,3}\s*"

CHAPTER_HEADER_RE = re.compile(
    rf"^{_HEADER_PREFIX}{_CHAPTER_KEYWORDS}\s+(?P<number>{_ANY_NUMBER}){_TRAILING_TITLE}",
    re.IGNORECASE,
)
NUMBERED_HEADING_RE = re.compile(
    rf"^{_HEADER_PREFIX}(?:{_PART_KEYWORDS}\s+{_ANY_NUMBER}|(?P<number>{_ANY_NUMBER}))"
    rf"{_TRAILING_TITLE}",
    re.IGNORECASE,
)
_BARE_NUMBER_RE = re.compile(rf"^(?:{_DIGIT_NUMBER}|{_ROMAN})$", re.IGNORECASE)

MAX_HEADING_LINE_CHARS = 160

_INLINE_SPACE_RE = re.compile(r"[^\S\r\n]+")
_LEADING_HASHES_RE = re.compile(r"^#+\s*")
_TRAILING_HASHES_RE = re.compile(r"\s*#+\s*$")
_TITLE_DECORATION_RE = re.compile(r"[#*]+")


def trim_hashes(text: str) -> str:
    """Remove Markdown heading hashes from both ends of `text`."""

    text = _LEADING_HASHES_RE.sub("", text)
    return _TRAILING_HASHES_RE.sub("", text).strip()


def strip_inline_noise(line: str) -> str:
    """Collapse inline whitespace runs and trim heading hashes from one line."""

    return trim_hashes(_INLINE_SPACE_RE.sub(" ", line).strip())


class HeaderKind(Enum):
    """Classification outcome for a single line."""

    NONE = "none"
    CHAPTER = "chapter"
    HEADING = "heading"


@dataclass(frozen=True, slots=True)
class HeaderMatch:
    """Tagged classification result for one line.

    Attributes:
        kind: Which grammar matched, or `HeaderKind.NONE`.
        title: Trailing title text after the number, cleaned of decoration.
        number: Bare numeric token of a heading (`"3"`, `"IV"`), when present.
    """

    kind: HeaderKind
    title: str | None = None
    number: str | None = None

    @property
    def is_header(self) -> bool:
        """Return whether the line opens a chapter."""

        return self.kind is not HeaderKind.NONE


NO_HEADER = HeaderMatch(kind=HeaderKind.NONE)


class HeaderClassifier:
    """Classify lines as chapter headers, numbered headings, or ordinary text."""

    def __init__(self, enable_heading_detection: bool = True) -> None:
        """Initialize with the secondary heading grammar switched on or off."""

        self.enable_heading_detection = enable_heading_detection

    def classify(self, line: str) -> HeaderMatch:
        """Classify one raw line."""

        clean = strip_inline_noise(line)
        if not clean:
            return NO_HEADER

        chapter = CHAPTER_HEADER_RE.match(clean)
        if chapter is not None:
            return HeaderMatch(kind=HeaderKind.CHAPTER, title=_clean_title(chapter.group("title")))

        if not self.enable_heading_detection or len(clean) > MAX_HEADING_LINE_CHARS:
            return NO_HEADER

        heading = NUMBERED_HEADING_RE.match(clean)
        if heading is None:
            return NO_HEADER
        return HeaderMatch(
            kind=HeaderKind.HEADING,
            title=_clean_title(heading.group("title")),
            number=_normalize_number(heading.group("number")),
        )

    def is_header(self, line: str) -> bool:
        """Return whether `line` matches any enabled grammar."""

        return self.classify(line).is_header


def _clean_title(raw: str | None) -> str | None:
    """Strip stray `#`/`*` decoration from a captured title; blank becomes `None`."""

    if raw is None:
        return None
    title = _TITLE_DECORATION_RE.sub("", raw).strip()
    return title or None


def _normalize_number(token: str | None) -> str | None:
    """Render digits as an Arabic numeral and Roman numerals upper-cased.

    Spelled-out numbers yield `None`.
    """

    if token is None or not _BARE_NUMBER_RE.match(token):
        return None
    if token.isdigit():
        return str(int(token))
    return token.upper()
