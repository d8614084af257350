"""Book segmentation facade.

Responsibilities:
- Define the stage order: normalize, title, header extraction, fallback.
- Apply option clamping and the chapter limit.
- Stay pure: no file, network, or storage access; logging is optional.

Key public API:
- `BookParser`: stage composition with optional run logging.
- `parse`: module-level convenience entry point.
"""

from __future__ import annotations

from dataclasses import replace

from .models.datatypes import Book, ParseOptions
from .telemetry.logger import RunLogger
from .text.chapters import ChapterExtractor
from .text.fallback import FallbackGrouper
from .text.headers import HeaderClassifier
from .text.normalizer import TextNormalizer
from .text.title import TitleExtractor


class BookParser:
    """Turn raw generated book text into a titled, chaptered `Book`."""

    def __init__(
        self,
        normalizer: TextNormalizer | None = None,
        run_logger: RunLogger | None = None,
    ) -> None:
        """Initialize with an optional custom normalizer and run logger."""

        self._normalizer = normalizer or TextNormalizer()
        self._run_logger = run_logger

    def parse(
        self,
        text: str,
        options: ParseOptions | None = None,
        *,
        should_limit: bool = False,
    ) -> Book:
        """Parse `text` into a book; never raises for string input.

        `should_limit` is the legacy preview switch and is equivalent to
        `ParseOptions(preview_mode=True)`.
        """

        requested = options or ParseOptions()
        if should_limit and not requested.preview_mode:
            requested = replace(requested, preview_mode=True)
        resolved = requested.resolved()
        classifier = HeaderClassifier(resolved.enable_heading_detection)

        self._log_start("normalize")
        content = self._normalizer.normalize(text)
        lines = content.split("\n")
        self._log_complete("normalize", chars=len(content), lines=len(lines))

        self._log_start("title")
        extraction = TitleExtractor(classifier, resolved.default_title).extract(lines)
        body = "\n".join(lines[extraction.body_start :]).strip()
        self._log_complete("title", found=extraction.found, body_start=extraction.body_start)

        self._log_start("extract")
        chapters = ChapterExtractor(classifier, resolved.min_chapter_chars).extract(body)
        self._log_complete("extract", chapters=len(chapters))

        if not chapters:
            self._log_start("fallback")
            chapters = FallbackGrouper(resolved.min_chapter_chars).group(body)
            self._log_complete("fallback", chapters=len(chapters))

        return Book(
            title=extraction.title,
            chapters=tuple(chapters[: resolved.max_chapters]),
        )

    def _log_start(self, stage: str) -> None:
        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage)

    def _log_complete(self, stage: str, **context: object) -> None:
        if self._run_logger is not None:
            self._run_logger.log_stage_complete(stage, **context)


def parse(
    text: str,
    options: ParseOptions | None = None,
    *,
    should_limit: bool = False,
) -> Book:
    """Parse `text` with a default `BookParser`."""

    return BookParser().parse(text, options, should_limit=should_limit)
