"""Exceptions raised by the dictionary store and the sanitization engine."""

from typing import Optional


class TextScrubError(Exception):
    """Base class for all textscrub errors."""


# =============================================================================
# Dictionary loading
# =============================================================================

class DictionaryLoadError(TextScrubError):
    """A dictionary variant could not be loaded."""

    def __init__(self, message: str, variant: Optional[str] = None):
        super().__init__(message)
        self.variant = variant


class ResourceNotFoundError(DictionaryLoadError, FileNotFoundError):
    """The word list backing a variant does not exist."""


class EmptyDictionaryError(DictionaryLoadError):
    """The word list parsed cleanly but produced no entries."""


class MalformedDataError(DictionaryLoadError):
    """The word list could not be parsed into records."""


# =============================================================================
# Processing
# =============================================================================

class ProcessError(TextScrubError):
    """Text processing was aborted."""


class NotInitializedError(ProcessError):
    """Processing was requested before a dictionary was loaded."""


class ProcessingFailureError(ProcessError):
    """Unexpected failure during the scan, e.g. a raising progress callback."""
