"""Text normalization and segmentation stages.

This package provides the deterministic building blocks composed by
`BookParser`: normalization, title detection, header classification,
chapter extraction, paragraph fallback grouping, and teasers.
"""

from .chapters import ChapterExtractor
from .fallback import FallbackGrouper
from .headers import HeaderClassifier, HeaderKind, HeaderMatch
from .normalizer import TextNormalizer
from .teaser import create_teaser
from .title import TitleExtraction, TitleExtractor

__all__ = [
    "ChapterExtractor",
    "FallbackGrouper",
    "HeaderClassifier",
    "HeaderKind",
    "HeaderMatch",
    "TextNormalizer",
    "TitleExtraction",
    "TitleExtractor",
    "create_teaser",
]
