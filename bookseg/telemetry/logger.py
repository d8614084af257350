"""Structured run logging utilities.

Responsibilities:
- Emit concise, deterministic stage-level parse logs through `loguru`.
- Keep records single-line `key=value` so they stay grep-friendly.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    return " " + " ".join(
        f"{key}={_sanitize_context_value(context[key])}" for key in sorted(context)
    )


class RunLogger:
    """Emit deterministic stage logs for one parser or CLI session."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Route `loguru` output to `sink` (stdout by default) at `level`."""

        self._sink = sink or sys.stdout
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level=level, colorize=False)

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one structured log line."""

        line = f"[phase] level={level} stage={stage} event={event}{_format_context(context)}"
        _loguru_logger.log(level, line)

    def log_stage_start(self, stage: str, **context: object) -> None:
        """Emit a stage-start event."""

        self._emit("DEBUG", "start", stage, **context)

    def log_stage_complete(self, stage: str, **context: object) -> None:
        """Emit a stage-complete event with result counts as context."""

        self._emit("INFO", "complete", stage, **context)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Emit a stage-failure event without payload details."""

        self._emit("ERROR", "failure", stage, error_type=error_type)
