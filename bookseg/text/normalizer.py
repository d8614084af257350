"""Deterministic normalization of generated book text.

Responsibilities:
- Turn raw generator output into canonical, line-oriented text.
- Keep reader-visible content intact while removing Markdown control noise.

Rules run in a fixed order and the sequence is repeated until the text is
stable, so normalizing normalized text is a no-op.
"""

from __future__ import annotations

import re
from typing import Protocol


# Chapter keyword + number token that must start its own line.
_CHAPTER_TOKEN_AHEAD = (
    r"(?=[*_]{0,2}(?:Chapter|Kapitel)[^\S\n]+(?:\d+|[IVXLCDM]+)[^\S\n]*[:.\-–—]?)"
)


class NormalizationRule(Protocol):
    """Protocol for text normalization rules."""

    def apply(self, text: str) -> str:
        """Apply a single normalization transformation."""


class UnifyLineEndings:
    """Convert CRLF/CR to LF and trim the document edges, including BOM and NBSP."""

    _EDGE_RE = re.compile(r"^[\s\ufeff\xa0]+|[\s\ufeff\xa0]+$")

    def apply(self, text: str) -> str:
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        return self._EDGE_RE.sub("", text)


class UnwrapCodeFences:
    """Drop triple-backtick fence markers and keep the fenced text verbatim."""

    _FENCE_RE = re.compile(r"```[\s\S]*?```")

    def apply(self, text: str) -> str:
        return self._FENCE_RE.sub(lambda match: self._unwrap(match.group(0)), text)

    def _unwrap(self, block: str) -> str:
        inner = block[3:-3]
        if "\n" in inner:
            # first fence line is the info string (`python`, `text`, ...)
            return inner.split("\n", 1)[1]
        return inner


class ReplaceNonBreakingSpaces:
    """Replace non-breaking spaces with plain spaces."""

    def apply(self, text: str) -> str:
        return text.replace("\xa0", " ")


class SplitGluedChapterHeaders:
    """Move chapter headers glued to preceding text onto their own line.

    Two cases are handled:
    - a sentence end, optionally inside closing emphasis or quotes, followed on
      the same line by `Chapter 3 ...`;
    - a short title at the very start followed on the same line by `Chapter 1`.
    """

    _AFTER_SENTENCE_RE = re.compile(
        r"([.!?][*_]{0,2}[\"’”)\]]?[*_]{0,2})[^\S\n]+" + _CHAPTER_TOKEN_AHEAD
    )
    _AFTER_TITLE_RE = re.compile(
        r"^(?![*_#\s]*(?:Chapter|Kapitel)\s)(.{1,140}?)[^\S\n]+" + _CHAPTER_TOKEN_AHEAD,
        re.IGNORECASE,
    )

    def apply(self, text: str) -> str:
        text = self._AFTER_SENTENCE_RE.sub(r"\1\n", text)
        return self._AFTER_TITLE_RE.sub(lambda match: match.group(1).rstrip() + "\n", text, count=1)


class StripMarkdownEmphasis:
    """Remove bold/italic markers and keep the emphasized text."""

    _PATTERNS = (
        re.compile(r"\*\*(.+?)\*\*"),
        re.compile(r"\*(.+?)\*"),
        re.compile(r"__([^_]+)__"),
        re.compile(r"_([^_]+)_"),
    )

    def apply(self, text: str) -> str:
        for pattern in self._PATTERNS:
            text = pattern.sub(r"\1", text)
        return text


class CollapseBlankLines:
    """Collapse runs of blank lines into a single blank line."""

    def apply(self, text: str) -> str:
        return re.sub(r"\n{3,}", "\n\n", text).strip()


class TextNormalizer:
    """Apply a sequence of deterministic normalization rules."""

    def __init__(self, rules: list[NormalizationRule] | None = None) -> None:
        """Initialize with custom rules or the default rule sequence."""

        self.rules = rules or [
            UnifyLineEndings(),
            UnwrapCodeFences(),
            ReplaceNonBreakingSpaces(),
            SplitGluedChapterHeaders(),
            StripMarkdownEmphasis(),
            CollapseBlankLines(),
        ]

    def normalize(self, text: str) -> str:
        """Normalize raw text; empty or missing input yields an empty string."""

        if not text:
            return ""
        current = text
        while True:
            updated = self._apply_rules(current)
            if updated == current:
                return updated
            current = updated

    def _apply_rules(self, text: str) -> str:
        # Rules only shorten text or rewrite characters one way (CR, NBSP and
        # spaces to LF or space), so repeated passes reach a fixed point.
        for rule in self.rules:
            text = rule.apply(text)
        return text
