"""Shared parsing helpers for configuration value normalization."""

from __future__ import annotations


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Return `value` as a stripped string, or `None` when it is missing or blank."""

    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_integer(value: object, field_name: str) -> int:
    """Parse an integer option value.

    Range checks are not applied here; options clamp out-of-range values.

    Raises:
        ValueError: If the value is a boolean, blank, or not an integer token.
    """

    if isinstance(value, bool):
        raise ValueError(f"`{field_name}` must be an integer.")
    if isinstance(value, int):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        raise ValueError(f"`{field_name}` must be an integer.")
    try:
        return int(normalized)
    except ValueError as exc:
        raise ValueError(f"`{field_name}` must be an integer.") from exc
