"""
Word replacement dictionaries.

A dictionary variant is a JSON word list of the form::

    {"words": [{"originalWord": "darn",
                "replacementOptions": ["dang", "drat"],
                "category": "Mild",
                "partOfSpeech": "Interjection"}]}

The store keeps one variant loaded at a time. Each load builds a fresh
read-only mapping and swaps it in only once it is complete, so readers holding
a snapshot never observe a half-built dictionary.
"""

import json
import logging
import threading
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import (
    EmptyDictionaryError,
    MalformedDataError,
    NotInitializedError,
    ResourceNotFoundError,
)
from .models import DictionaryEntry, PartOfSpeech, WordCategory

logger = logging.getLogger(__name__)

DEFAULT_VARIANT = "default"

VARIANT_FILES = {
    "default": "word_replacements.json",
    "buzzwords": "word_replacements_buzzwords.json",
}

PACKAGE_DATA_DIR = Path(__file__).parent / "data"


class WordRecord(BaseModel):
    """One record of a word list as found on disk."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    original_word: str = Field(alias="originalWord", min_length=1)
    replacement_options: list[str] = Field(alias="replacementOptions", min_length=1)
    category: WordCategory = WordCategory.INAPPROPRIATE
    part_of_speech: PartOfSpeech = Field(default=PartOfSpeech.UNKNOWN, alias="partOfSpeech")

    def to_entry(self) -> DictionaryEntry:
        return DictionaryEntry(
            original_word=self.original_word,
            replacement_options=tuple(self.replacement_options),
            category=self.category,
            part_of_speech=self.part_of_speech,
        )


class WordList(BaseModel):
    """Top-level word list document."""

    words: list[WordRecord]


def resolve_variant(variant: Optional[str]) -> str:
    """Map a requested variant name onto a known one (unknown names use the default)."""
    name = (variant or DEFAULT_VARIANT).strip().lower()
    if name not in VARIANT_FILES:
        logger.info(f"Unknown dictionary variant '{variant}', using '{DEFAULT_VARIANT}'")
        return DEFAULT_VARIANT
    return name


def available_variants() -> list[str]:
    """Names of the known dictionary variants."""
    return list(VARIANT_FILES)


def parse_word_list(raw: str, variant: Optional[str] = None) -> list[DictionaryEntry]:
    """
    Parse a JSON word list into dictionary entries.

    Args:
        raw: JSON text, either ``{"words": [...]}`` or a bare list of records
        variant: Variant name, used for error reporting

    Returns:
        Entries in file order (duplicates are not removed here)

    Raises:
        MalformedDataError: If the text is not valid JSON or a record is invalid
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedDataError(f"Word list is not valid JSON: {e}", variant) from e

    if isinstance(data, list):
        data = {"words": data}

    try:
        word_list = WordList.model_validate(data)
    except ValidationError as e:
        raise MalformedDataError(f"Word list has invalid records: {e}", variant) from e

    return [record.to_entry() for record in word_list.words]


class DictionaryStore:
    """Holds the active word replacement mapping."""

    def __init__(self, data_dir: Optional[Path | str] = None):
        """
        Initialize an empty, not-ready store.

        Args:
            data_dir: Directory holding the variant word lists
                (default: the word lists shipped with the package)
        """
        self.data_dir = Path(data_dir) if data_dir else PACKAGE_DATA_DIR

        self._entries: Optional[Mapping[str, DictionaryEntry]] = None
        self._active_variant = DEFAULT_VARIANT
        self._load_lock = threading.Lock()

    @property
    def active_variant(self) -> str:
        """Variant of the most recent successful load."""
        return self._active_variant

    def is_ready(self) -> bool:
        return self._entries is not None

    def __len__(self) -> int:
        entries = self._entries
        return len(entries) if entries is not None else 0

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.lookup(word) is not None

    def path_for(self, variant: Optional[str]) -> Path:
        """Word list file backing a variant."""
        return self.data_dir / VARIANT_FILES[resolve_variant(variant)]

    def load(self, variant: str = DEFAULT_VARIANT) -> None:
        """
        Load a dictionary variant, replacing whatever was loaded before.

        Args:
            variant: Variant name ("default" or "buzzwords"); unknown names
                fall back to "default"

        Raises:
            ResourceNotFoundError: If the variant's word list is missing
            MalformedDataError: If the word list cannot be parsed
            EmptyDictionaryError: If the word list holds no entries
        """
        name = resolve_variant(variant)
        self._load(self.path_for(name), name)

    def load_path(self, path: Path | str, variant: Optional[str] = None) -> None:
        """
        Load a word list from an explicit file.

        Args:
            path: JSON word list
            variant: Name recorded as the active variant (default: file stem)
        """
        path = Path(path)
        self._load(path, variant or path.stem)

    def _load(self, path: Path, variant: str) -> None:
        with self._load_lock:
            logger.info(f"Initializing dictionary '{variant}' from {path}")

            # Fail closed: nothing stays visible while the new list is read
            self._entries = None

            if not path.is_file():
                logger.error(f"Word list not found: {path}")
                raise ResourceNotFoundError(f"Word list not found: {path}", variant)

            try:
                raw = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                raise MalformedDataError(f"Cannot read word list {path}: {e}", variant) from e

            entries: dict[str, DictionaryEntry] = {}
            for entry in parse_word_list(raw, variant):
                key = entry.normalized
                if key in entries:
                    logger.warning(f"Skipping duplicate word: {entry.original_word}")
                    continue
                entries[key] = entry

            if not entries:
                logger.error(f"No words found in {path}")
                raise EmptyDictionaryError(f"No words found in word list {path}", variant)

            self._entries = MappingProxyType(entries)
            self._active_variant = variant
            logger.info(f"Dictionary '{variant}' initialized with {len(entries)} words")

    def snapshot(self) -> Mapping[str, DictionaryEntry]:
        """
        Current mapping of normalized word to entry.

        The returned mapping is immutable and unaffected by later loads.

        Raises:
            NotInitializedError: If no dictionary is loaded
        """
        entries = self._entries
        if entries is None:
            raise NotInitializedError("Dictionary must be loaded before processing text")
        return entries

    def lookup(self, word: str) -> Optional[DictionaryEntry]:
        """Case-insensitive exact lookup; None if absent or not loaded."""
        entries = self._entries
        if entries is None:
            return None
        return entries.get(word.lower())
