"""Configuration model and loaders for bookseg.

Responsibilities:
- Define parser defaults as a typed dataclass.
- Provide loader entry points for YAML- and environment-based configuration.

Key types:
- `BooksegConfig`: normalized parser settings.
- `ConfigLoader`: static construction helpers for `BooksegConfig`.

Out-of-range numbers are accepted here and clamped by `ParseOptions.resolved()`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .models.datatypes import (
    DEFAULT_BOOK_TITLE,
    DEFAULT_MAX_CHAPTERS,
    DEFAULT_MIN_CHAPTER_CHARS,
    ParseOptions,
)
from .parsing import normalize_optional_string, parse_integer, parse_permissive_boolean


_ENV_PREFIX = "BOOKSEG_"


@dataclass(frozen=True, slots=True)
class BooksegConfig:
    """Parser settings resolved from config sources.

    Attributes:
        preview_mode: Return only the first chapter.
        max_chapters: Maximum number of chapters returned.
        min_chapter_chars: Minimum chapter body length.
        enable_heading_detection: Split on keyword-free numbered headings.
        default_title: Placeholder title for books without a title line.
    """

    preview_mode: bool = False
    max_chapters: int = DEFAULT_MAX_CHAPTERS
    min_chapter_chars: int = DEFAULT_MIN_CHAPTER_CHARS
    enable_heading_detection: bool = True
    default_title: str = DEFAULT_BOOK_TITLE

    def validate(self) -> None:
        """Validate settings that cannot be clamped."""

        if normalize_optional_string(self.default_title) is None:
            raise ValueError("`default_title` must be a non-empty string.")

    def to_parse_options(self) -> ParseOptions:
        """Return the equivalent `ParseOptions` for one parse call."""

        return ParseOptions(
            preview_mode=self.preview_mode,
            max_chapters=self.max_chapters,
            min_chapter_chars=self.min_chapter_chars,
            enable_heading_detection=self.enable_heading_detection,
            default_title=self.default_title,
        )


class ConfigLoader:
    """Factory methods for building `BooksegConfig` objects."""

    _SUPPORTED_KEYS = frozenset(
        {
            "preview_mode",
            "max_chapters",
            "min_chapter_chars",
            "enable_heading_detection",
            "default_title",
        }
    )
    _BOOLEAN_KEYS = frozenset({"preview_mode", "enable_heading_detection"})
    _INTEGER_KEYS = frozenset({"max_chapters", "min_chapter_chars"})

    @staticmethod
    def from_yaml(path: Path, defaults: BooksegConfig | None = None) -> BooksegConfig:
        """Load config from a YAML mapping, layered over `defaults`.

        Raises:
            FileNotFoundError: If `path` does not exist.
            ValueError: If the payload is not a mapping or holds invalid values.
        """

        raw_text = path.read_text(encoding="utf-8")
        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping.")

        unknown = sorted(str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_KEYS))
        if unknown:
            raise ValueError(
                f"YAML config `{path}` includes unsupported key(s): {', '.join(unknown)}."
            )
        return ConfigLoader._build(payload, defaults or BooksegConfig(), f"YAML config `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> BooksegConfig:
        """Load config from `BOOKSEG_*` environment variables."""

        source = env if env is not None else os.environ
        payload: dict[str, Any] = {}
        for key in ConfigLoader._SUPPORTED_KEYS:
            env_key = f"{_ENV_PREFIX}{key.upper()}"
            value = normalize_optional_string(source.get(env_key))
            if value is not None:
                payload[key] = value
        return ConfigLoader._build(payload, BooksegConfig(), "Environment")

    @staticmethod
    def _build(
        payload: Mapping[str, Any], defaults: BooksegConfig, source_label: str
    ) -> BooksegConfig:
        """Apply validated payload values on top of `defaults`."""

        overrides: dict[str, Any] = {}
        for key, raw_value in payload.items():
            if key in ConfigLoader._BOOLEAN_KEYS:
                overrides[key] = ConfigLoader._boolean(raw_value, key, source_label)
            elif key in ConfigLoader._INTEGER_KEYS:
                try:
                    overrides[key] = parse_integer(raw_value, key)
                except ValueError as exc:
                    raise ValueError(f"{source_label}: {exc}") from exc
            else:
                overrides[key] = normalize_optional_string(raw_value) or ""

        config = replace(defaults, **overrides)
        try:
            config.validate()
        except ValueError as exc:
            raise ValueError(f"{source_label}: {exc}") from exc
        return config

    @staticmethod
    def _boolean(value: object, key: str, source_label: str) -> bool:
        """Read a permissive boolean value or fail with an actionable message."""

        parsed = parse_permissive_boolean(value)
        if parsed is None:
            raise ValueError(
                f"{source_label}: `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed
