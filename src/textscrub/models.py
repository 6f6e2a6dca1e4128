"""Data models for textscrub."""

import threading
from dataclasses import dataclass, field
from enum import Enum


class WordCategory(Enum):
    """Why a dictionary word is flagged."""

    PROFANITY = "Profanity"
    SLUR = "Slur"
    INAPPROPRIATE = "Inappropriate"
    OFFENSIVE = "Offensive"
    MILD = "Mild"


class PartOfSpeech(Enum):
    """Grammatical role of a dictionary word."""

    NOUN = "Noun"
    VERB = "Verb"
    ADJECTIVE = "Adjective"
    ADVERB = "Adverb"
    PRONOUN = "Pronoun"
    PREPOSITION = "Preposition"
    CONJUNCTION = "Conjunction"
    INTERJECTION = "Interjection"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class DictionaryEntry:
    """A flagged word and the alternatives it may be replaced with."""

    original_word: str
    replacement_options: tuple[str, ...]
    category: WordCategory = WordCategory.INAPPROPRIATE
    part_of_speech: PartOfSpeech = PartOfSpeech.UNKNOWN

    @property
    def normalized(self) -> str:
        """Lookup key for this entry."""
        return self.original_word.lower()


@dataclass(frozen=True)
class SegmentPoint:
    """Replacement density for one segment of the processed text."""

    segment_index: int
    inappropriate_word_count: int
    percentage_complete: float


@dataclass
class TextStatistics:
    """Statistics gathered during a single processing call."""

    total_words: int = 0
    total_characters: int = 0
    replaced_words_count: int = 0
    sentence_count: int = 0
    paragraph_count: int = 0
    replacement_frequency: dict[str, int] = field(default_factory=dict)
    graph_data: list[SegmentPoint] = field(default_factory=list)
    reading_time_minutes: float = 0.0
    readability_score: float = 0.0

    def __post_init__(self):
        # Not a field, so asdict() and deepcopy() never see it
        self._lock = threading.Lock()

    def __getstate__(self) -> dict:
        state = dict(self.__dict__)
        state.pop("_lock", None)
        return state

    def __setstate__(self, state: dict) -> None:
        self.__dict__.update(state)
        self._lock = threading.Lock()

    def record_replacement(self, word: str) -> None:
        """Count one replacement of ``word`` (surface form, not normalized)."""
        with self._lock:
            self.replacement_frequency[word] = self.replacement_frequency.get(word, 0) + 1

    def top_replacements(self, n: int = 5) -> list[tuple[str, int]]:
        """Most frequently replaced words, highest count first."""
        with self._lock:
            items = list(self.replacement_frequency.items())
        # sorted() is stable, so ties keep first-seen order
        return sorted(items, key=lambda item: item[1], reverse=True)[:n]

    def summary(self) -> str:
        """Return a summary string."""
        lines = [
            f"Total words: {self.total_words}",
            f"Total characters: {self.total_characters}",
            f"Replaced words: {self.replaced_words_count}",
            f"Sentences: {self.sentence_count}",
            f"Paragraphs: {self.paragraph_count}",
            f"Reading time: {self.reading_time_minutes:.2f} min",
            f"Readability: {self.readability_score:.1f}",
        ]
        top = self.top_replacements()
        if top:
            lines.append("")
            lines.append(f"Top {len(top)} replaced words:")
            for word, count in top:
                lines.append(f"  {word}: {count} times")
        return "\n".join(lines)
