"""
Single-pass text sanitization.

Every word token is looked up in the loaded dictionary. Flagged words are
swapped for one of their replacement options and wrapped in marker tokens,
which are turned into markup only after the whole text has been scanned.
Replacements are never scanned again, so a replacement that is itself a
dictionary word stays as written. Only markers inserted by the scan are
resolved; marker sequences already present in the input pass through as text.

The same pass collects the statistics returned alongside the processed text:
word/sentence/paragraph counts, replacement frequency, per-segment
replacement density, reading time and a readability score.
"""

import asyncio
import logging
import random
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, NamedTuple, Optional

from .config import ScrubConfig, get_config
from .dictionary import DictionaryStore
from .errors import ProcessingFailureError, TextScrubError
from .models import SegmentPoint, TextStatistics
from .readability import (
    WORD_PATTERN,
    count_paragraphs,
    count_sentences,
    estimate_syllables,
    flesch_reading_ease,
    reading_time_minutes,
)

logger = logging.getLogger(__name__)

MARKER_OPEN = "⟦mark⟧"
MARKER_CLOSE = "⟦/mark⟧"

ProgressCallback = Callable[[float], None]

# Thread pool for background processing
_executor = ThreadPoolExecutor(max_workers=2)


class ProcessResult(NamedTuple):
    """Processed text and the statistics gathered while producing it."""

    processed_text: str
    statistics: TextStatistics


def resolve_markers(text: str, open_tag: str, close_tag: str) -> str:
    """Replace marker tokens with the given markup."""
    return text.replace(MARKER_OPEN, open_tag).replace(MARKER_CLOSE, close_tag)


class _SegmentTracker:
    """Groups replacement counts into roughly equal word-count segments."""

    def __init__(self, total_words: int, segment_count: int = 10):
        self.total_words = total_words
        self.segment_size = max(1, total_words // segment_count)
        self.points: list[SegmentPoint] = []
        self._pending = 0

    def add_replacement(self) -> None:
        self._pending += 1

    def advance(self, word_index: int) -> None:
        """Flush the current segment if ``word_index`` closes it."""
        if word_index % self.segment_size == 0 or word_index == self.total_words:
            self.points.append(SegmentPoint(
                segment_index=len(self.points),
                inappropriate_word_count=self._pending,
                percentage_complete=word_index / self.total_words * 100,
            ))
            self._pending = 0


class TextSanitizer:
    """
    Replaces dictionary words in text and computes text statistics.

    A sanitizer may be shared between threads. Each call to ``process`` works
    on call-local counters and a snapshot of the store's dictionary.
    """

    def __init__(
        self,
        store: DictionaryStore,
        config: Optional[ScrubConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize sanitizer.

        Args:
            store: Dictionary store supplying replacements
            config: ScrubConfig object (default: global config)
            rng: Source of replacement choices; anything with ``choice(seq)``.
                Pass a seeded ``random.Random`` for reproducible output.
        """
        self.store = store
        self.config = config if config is not None else get_config()
        self.rng = rng if rng is not None else random.Random()

    def is_ready(self) -> bool:
        return self.store.is_ready()

    @property
    def active_variant(self) -> str:
        return self.store.active_variant

    def load(self, variant: str = "default") -> None:
        """Load a dictionary variant into the underlying store."""
        self.store.load(variant)

    def process(
        self,
        text: str,
        on_progress: Optional[ProgressCallback] = None,
    ) -> ProcessResult:
        """
        Sanitize text and gather statistics.

        Args:
            text: Input text
            on_progress: Optional callback receiving the processed fraction
                (0-1) after each word; called synchronously from the scan

        Returns:
            ProcessResult of (processed_text, statistics)

        Raises:
            NotInitializedError: If no dictionary is loaded
            ProcessingFailureError: If the scan fails part way through
        """
        entries = self.store.snapshot()

        try:
            pieces, marked, statistics = self._scan(text, entries, on_progress)
        except TextScrubError:
            raise
        except Exception as e:
            logger.error(f"Text processing failed: {e}")
            raise ProcessingFailureError(f"Text processing failed: {e}") from e

        markup = self.config.markup
        processed = "".join(
            resolve_markers(piece, markup.open_tag, markup.close_tag) if i in marked else piece
            for i, piece in enumerate(pieces)
        )
        return ProcessResult(processed, statistics)

    async def process_async(
        self,
        text: str,
        on_progress: Optional[ProgressCallback] = None,
    ) -> ProcessResult:
        """Run ``process`` on a background thread."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(_executor, self.process, text, on_progress)

    def _scan(self, text, entries, on_progress) -> tuple[list[str], set[int], TextStatistics]:
        """Split text into output pieces; ``marked`` holds the indexes of replacements."""
        stats_config = self.config.statistics
        tokens = list(WORD_PATTERN.finditer(text))
        total_words = len(tokens)

        statistics = TextStatistics(
            total_words=total_words,
            total_characters=len(text),
            sentence_count=count_sentences(text),
            paragraph_count=count_paragraphs(text),
        )
        segments = _SegmentTracker(total_words, stats_config.segment_count)

        pieces: list[str] = []
        marked: set[int] = set()
        position = 0
        total_syllables = 0

        for word_index, match in enumerate(tokens, start=1):
            word = match.group()
            pieces.append(text[position:match.start()])
            position = match.end()

            total_syllables += estimate_syllables(word)

            entry = entries.get(word.lower())
            if entry is not None:
                statistics.replaced_words_count += 1
                statistics.record_replacement(word)
                segments.add_replacement()
                replacement = self.rng.choice(entry.replacement_options)
                marked.add(len(pieces))
                pieces.append(f"{MARKER_OPEN}{replacement}{MARKER_CLOSE}")
            else:
                pieces.append(word)

            segments.advance(word_index)

            if on_progress is not None:
                on_progress(word_index / total_words)

        pieces.append(text[position:])

        statistics.graph_data = segments.points
        statistics.reading_time_minutes = reading_time_minutes(
            total_words, stats_config.words_per_minute
        )
        statistics.readability_score = flesch_reading_ease(
            total_words, statistics.sentence_count, total_syllables
        )
        logger.debug(
            f"Processed {total_words} words, {statistics.replaced_words_count} replaced, "
            f"{total_syllables} syllables, readability {statistics.readability_score:.2f}"
        )

        return pieces, marked, statistics
