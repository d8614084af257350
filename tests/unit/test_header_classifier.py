"""Unit tests for chapter/heading line classification."""

from __future__ import annotations

import pytest

from bookseg.text.headers import (
    HeaderClassifier,
    HeaderKind,
    HeaderMatch,
    strip_inline_noise,
)


@pytest.mark.parametrize(
    ("line", "title"),
    [
        ("Chapter 1: Beginnings", "Beginnings"),
        ("CHAPTER 12 - The Long Night", "The Long Night"),
        ("## Kapitel IV — Die Reise", "Die Reise"),
        ("Chapitre 3. Le départ", "Le départ"),
        ("Capítulo 2) El viaje", "El viaje"),
        ("Capitolo Three: La fine", "La fine"),
        ("chapter xix] Late", "Late"),
        ("Chapter 7", None),
        ("Chapter 2: **", None),
    ],
)
def test_chapter_grammar_recognizes_localized_keywords(line: str, title: str | None) -> None:
    """Keyword headers match with or without a trailing title."""

    match = HeaderClassifier().classify(line)

    assert match.kind is HeaderKind.CHAPTER
    assert match.title == title


@pytest.mark.parametrize(
    ("line", "title", "number"),
    [
        ("3) The Awakening", "The Awakening", "3"),
        ("# 2. Into the Woods", "Into the Woods", "2"),
        ("IV. Return", "Return", "IV"),
        ("Part 2 - Exile", "Exile", None),
        ("Teil III: Heimkehr", "Heimkehr", None),
        ("07", None, "7"),
        ("xii", None, "XII"),
        ("Eleven", None, None),
    ],
)
def test_heading_grammar_recognizes_numbered_headings(
    line: str, title: str | None, number: str | None
) -> None:
    """Keyword-free numbered headings match when heading detection is enabled."""

    match = HeaderClassifier(enable_heading_detection=True).classify(line)

    assert match == HeaderMatch(kind=HeaderKind.HEADING, title=title, number=number)


def test_heading_grammar_is_disabled_by_flag() -> None:
    """Numbered headings are ordinary text when heading detection is off."""

    classifier = HeaderClassifier(enable_heading_detection=False)

    assert classifier.classify("3) The Awakening").kind is HeaderKind.NONE
    assert classifier.classify("Chapter 3: The Awakening").kind is HeaderKind.CHAPTER


def test_chapter_grammar_takes_precedence_over_heading_grammar() -> None:
    """A line satisfying both grammars is classified as a chapter header."""

    match = HeaderClassifier(enable_heading_detection=True).classify("Chapter 4. Storm")

    assert match.kind is HeaderKind.CHAPTER
    assert match.number is None


def test_heading_grammar_rejects_overlong_lines() -> None:
    """Lines over 160 characters are never numbered headings."""

    line = "1. " + "word " * 40

    assert len(strip_inline_noise(line)) > 160
    assert HeaderClassifier().classify(line).kind is HeaderKind.NONE


def test_chapter_grammar_has_no_length_limit() -> None:
    """Keyword headers are accepted regardless of length."""

    line = "Chapter 9: " + "very " * 40 + "long"

    assert HeaderClassifier().classify(line).kind is HeaderKind.CHAPTER


@pytest.mark.parametrize(
    "line",
    [
        "",
        "   ",
        "She walked home.",
        "In chapter 3 we meet her.",
        "Chapter 3 begins with rain",
        "2024 was a strange year.",
        "I went to the market.",
        "The Part 2 of the plan",
    ],
)
def test_ordinary_lines_are_not_headers(line: str) -> None:
    """Prose lines are not classified as headers."""

    assert not HeaderClassifier().is_header(line)


def test_strip_inline_noise_collapses_spaces_and_trims_hashes() -> None:
    """Whitespace runs collapse and Markdown hashes are removed from both ends."""

    assert strip_inline_noise("  ##  Chapter   1:\tStart  ## ") == "Chapter 1: Start"
