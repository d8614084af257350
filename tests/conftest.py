"""Shared pytest fixtures for the bookseg test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest


PARAGRAPH_A = (
    "The harbor town woke slowly under a grey sky, and Mara walked the length of the "
    "pier twice before she admitted that the boat was not coming back. She counted the "
    "gulls instead."
)
PARAGRAPH_B = (
    "Years later the lighthouse keeper still told the story of that winter, when the "
    "ice closed the bay for forty days and the whole village learned to share bread, "
    "fire, and silence."
)


@pytest.fixture
def paragraph_a() -> str:
    """Provide a prose paragraph longer than the default chapter minimum."""

    return PARAGRAPH_A


@pytest.fixture
def paragraph_b() -> str:
    """Provide a second prose paragraph longer than the default chapter minimum."""

    return PARAGRAPH_B


@pytest.fixture
def make_book() -> Callable[..., str]:
    """Build book text from a title and `(header, body)` pairs."""

    def _make_book(title: str | None, sections: list[tuple[str, str]]) -> str:
        blocks = [title] if title else []
        blocks.extend(f"{header}\n{body}" for header, body in sections)
        return "\n\n".join(blocks)

    return _make_book
