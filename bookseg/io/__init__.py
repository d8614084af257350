"""Input/output helpers for bookseg command-line use.

The parse engine performs no I/O; this package reads source files and
writes result artifacts for the CLI.
"""

from .storage import ArtifactStore, dump_json

__all__ = ["ArtifactStore", "dump_json"]
