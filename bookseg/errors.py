"""Domain exceptions for CLI, config, and file diagnostics.

The parse engine itself never raises; these errors belong to the outer
surfaces that read input files, load configuration, and write results.
"""

from __future__ import annotations


class BooksegError(RuntimeError):
    """Raised when a specific command stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
