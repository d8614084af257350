"""Small numeric and counting helpers shared by models, config, and CLI output."""

from __future__ import annotations


def count_words(text: str) -> int:
    """Return the number of whitespace-separated tokens in `text`."""

    return len(text.split())


def clamp(value: int, low: int, high: int) -> int:
    """Clamp `value` into the inclusive range `[low, high]`."""

    return max(low, min(high, value))
