"""Unit tests for first-candidate-wins book title detection."""

from __future__ import annotations

from bookseg.text.headers import HeaderClassifier
from bookseg.text.title import TitleExtraction, TitleExtractor


def _extract(text: str, enable_heading_detection: bool = True) -> TitleExtraction:
    classifier = HeaderClassifier(enable_heading_detection)
    return TitleExtractor(classifier).extract(text.split("\n"))


def test_title_is_taken_from_first_plausible_line() -> None:
    """A standalone line of plausible length becomes the title."""

    extraction = _extract("My Book\n\nChapter 1: Start\nBody")

    assert extraction == TitleExtraction(title="My Book", body_start=1, found=True)


def test_title_strips_hash_decoration_and_byline() -> None:
    """Markdown hashes and a trailing `by <author>` clause are removed."""

    extraction = _extract("# The Glass Orchard BY Jane Doe #\nText")

    assert extraction.title == "The Glass Orchard"
    assert extraction.body_start == 1


def test_leading_chapter_header_means_no_title() -> None:
    """A header before any title candidate stops the scan without a title."""

    extraction = _extract("Chapter 1: Start\nThe Real Title Line")

    assert extraction == TitleExtraction(title="Generated Book", body_start=0, found=False)


def test_leading_numbered_heading_stops_scan_only_when_enabled() -> None:
    """Numbered headings count as headers only with heading detection enabled."""

    text = "1. Arrival\nSome body text here."

    assert _extract(text, enable_heading_detection=True).found is False
    assert _extract(text, enable_heading_detection=False).title == "1. Arrival"


def test_short_and_overlong_lines_are_skipped() -> None:
    """Lines outside the 6..120 character window are skipped, not decisive."""

    long_line = "x" * 121
    extraction = _extract(f"Hi\n{long_line}\nThe Actual Title\nBody")

    assert extraction.title == "The Actual Title"
    assert extraction.body_start == 3


def test_scan_window_is_limited_to_six_non_empty_lines() -> None:
    """A candidate after six non-empty lines is not considered."""

    text = "\n".join(["ab"] * 6 + ["Too Late Title"])

    assert _extract(text).found is False


def test_bare_byline_is_consumed_with_placeholder_title() -> None:
    """A line that is only a byline keeps the placeholder but is not body text."""

    extraction = _extract("by Someone Famous\nChapter 1: Go")

    assert extraction == TitleExtraction(title="Generated Book", body_start=1, found=False)


def test_custom_default_title_is_used() -> None:
    """The placeholder title is configurable."""

    extractor = TitleExtractor(HeaderClassifier(), default_title="Untitled")

    assert extractor.extract([""]).title == "Untitled"
