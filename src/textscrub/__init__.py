"""Textscrub - dictionary-driven word replacement with text statistics."""

__version__ = "0.1.0"

from .dictionary import DictionaryStore, available_variants
from .engine import ProcessResult, TextSanitizer, resolve_markers
from .errors import (
    DictionaryLoadError,
    EmptyDictionaryError,
    MalformedDataError,
    NotInitializedError,
    ProcessError,
    ProcessingFailureError,
    ResourceNotFoundError,
    TextScrubError,
)
from .models import DictionaryEntry, PartOfSpeech, SegmentPoint, TextStatistics, WordCategory

__all__ = [
    "DictionaryStore",
    "available_variants",
    "ProcessResult",
    "TextSanitizer",
    "resolve_markers",
    "DictionaryLoadError",
    "EmptyDictionaryError",
    "MalformedDataError",
    "NotInitializedError",
    "ProcessError",
    "ProcessingFailureError",
    "ResourceNotFoundError",
    "TextScrubError",
    "DictionaryEntry",
    "PartOfSpeech",
    "SegmentPoint",
    "TextStatistics",
    "WordCategory",
]
