"""Sentence-bounded chapter teasers."""

from __future__ import annotations

import re


TEASER_MAX_CHARS = 240
TEASER_MAX_SENTENCES = 3
FALLBACK_TEASER_CHARS = 200
ELLIPSIS = "…"

_WHITESPACE_RE = re.compile(r"\s+")
_SENTENCE_BOUNDARY_RE = re.compile(r"(?<=[.!?…])\s+")
_TERMINAL_RE = re.compile(r"[.!?…]$")


def create_teaser(content: str) -> str:
    """Build a short preview from the leading sentences of `content`.

    Sentences are accumulated while the result stays within 240 characters and
    at most three sentences. Without any usable sentence the first 200
    characters are used instead. A teaser without terminal punctuation gets
    an ellipsis.
    """

    text = _WHITESPACE_RE.sub(" ", content).strip()
    sentences = [part for part in _SENTENCE_BOUNDARY_RE.split(text) if part]

    teaser = ""
    for position, sentence in enumerate(sentences):
        candidate = f"{teaser} {sentence}" if teaser else sentence
        if len(candidate) > TEASER_MAX_CHARS or position >= TEASER_MAX_SENTENCES:
            break
        teaser = candidate

    if not teaser:
        suffix = ELLIPSIS if len(text) > FALLBACK_TEASER_CHARS else ""
        return text[:FALLBACK_TEASER_CHARS].strip() + suffix
    if not _TERMINAL_RE.search(teaser):
        teaser += ELLIPSIS
    return teaser
