"""Filesystem access for CLI input and output artifacts.

Responsibilities:
- Read source book text files as UTF-8, tolerating a byte-order mark.
- Write parse results as deterministic, human-readable JSON.
"""

from __future__ import annotations

import json
from pathlib import Path


class ArtifactStore:
    """Filesystem-backed reader/writer rooted at one directory."""

    def __init__(self, root: Path) -> None:
        """Initialize the store with a root directory; absolute paths bypass it."""

        self.root = root

    def load_text(self, relative_path: Path) -> str:
        """Load a UTF-8 text file; a leading BOM is dropped."""

        return (self.root / relative_path).read_text(encoding="utf-8-sig")

    def save_text(self, relative_path: Path, content: str) -> Path:
        """Save text content and return the final path."""

        path = self.root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    def save_json(self, relative_path: Path, payload: dict[str, object]) -> Path:
        """Save a JSON-serializable payload and return the final path."""

        return self.save_text(relative_path, dump_json(payload))

    def exists(self, relative_path: Path) -> bool:
        """Return whether the given file exists."""

        return (self.root / relative_path).exists()


def dump_json(payload: dict[str, object]) -> str:
    """Serialize `payload` with stable key order and readable non-ASCII text."""

    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True)
