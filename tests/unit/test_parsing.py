"""Unit tests for shared config value parsing helpers."""

import pytest

from bookseg.parsing import (
    normalize_optional_string,
    parse_integer,
    parse_permissive_boolean,
)


def test_normalize_optional_string_handles_blank_values() -> None:
    """Normalization should return `None` for `None` and blank textual values."""

    assert normalize_optional_string(None) is None
    assert normalize_optional_string("") is None
    assert normalize_optional_string("   ") is None
    assert normalize_optional_string("  value  ") == "value"
    assert normalize_optional_string(42) == "42"


@pytest.mark.parametrize(
    ("token", "expected"),
    [("TrUe", True), ("  ON ", True), ("1", True), ("FALSE", False), (" oFf ", False), (0, False)],
)
def test_parse_permissive_boolean_accepts_mixed_case_tokens(
    token: object, expected: bool
) -> None:
    """Permissive parsing should accept valid tokens case-insensitively."""

    assert parse_permissive_boolean(token) is expected


@pytest.mark.parametrize("value", ["", "   ", "maybe", "2", object()])
def test_parse_permissive_boolean_returns_none_for_invalid_tokens(value: object) -> None:
    """Permissive parsing should return `None` for invalid or blank inputs."""

    assert parse_permissive_boolean(value) is None


@pytest.mark.parametrize(("value", "expected"), [(3, 3), (" 12 ", 12), ("-4", -4)])
def test_parse_integer_accepts_ints_and_numeric_strings(value: object, expected: int) -> None:
    """Integer parsing keeps sign and strips whitespace; no range checks apply."""

    assert parse_integer(value, "max_chapters") == expected


@pytest.mark.parametrize("value", [True, None, "", "3.5", "eight"])
def test_parse_integer_rejects_non_integers(value: object) -> None:
    """Booleans, blanks, and non-integer tokens are rejected."""

    with pytest.raises(ValueError, match=r"`max_chapters` must be an integer\."):
        parse_integer(value, "max_chapters")
