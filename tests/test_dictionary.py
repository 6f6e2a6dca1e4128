"""Tests for the dictionary store."""

import json
import logging

import pytest

from textscrub.dictionary import (
    DictionaryStore,
    available_variants,
    parse_word_list,
    resolve_variant,
)
from textscrub.errors import (
    DictionaryLoadError,
    EmptyDictionaryError,
    MalformedDataError,
    NotInitializedError,
    ResourceNotFoundError,
)
from textscrub.models import PartOfSpeech, WordCategory


def write_word_list(path, words):
    """Write a word list in the on-disk record format."""
    path.write_text(json.dumps({"words": words}), encoding="utf-8")
    return path


def record(word, options, category="Inappropriate", pos="Unknown"):
    return {
        "originalWord": word,
        "replacementOptions": options,
        "category": category,
        "partOfSpeech": pos,
    }


class TestParseWordList:
    """Test parsing of JSON word lists."""

    def test_parse_records(self):
        raw = json.dumps({"words": [record("darn", ["drat", "dang"], "Mild", "Interjection")]})
        entries = parse_word_list(raw)

        assert len(entries) == 1
        entry = entries[0]
        assert entry.original_word == "darn"
        assert entry.replacement_options == ("drat", "dang")
        assert entry.category == WordCategory.MILD
        assert entry.part_of_speech == PartOfSpeech.INTERJECTION

    def test_snake_case_keys(self):
        raw = json.dumps([{
            "original_word": "bad",
            "replacement_options": ["poor"],
            "category": "Offensive",
            "part_of_speech": "Adjective",
        }])
        entries = parse_word_list(raw)
        assert entries[0].original_word == "bad"
        assert entries[0].category == WordCategory.OFFENSIVE
        assert entries[0].part_of_speech == PartOfSpeech.ADJECTIVE

    def test_optional_fields_default(self):
        raw = json.dumps({"words": [{"originalWord": "meh", "replacementOptions": ["okay"]}]})
        entry = parse_word_list(raw)[0]
        assert entry.category == WordCategory.INAPPROPRIATE
        assert entry.part_of_speech == PartOfSpeech.UNKNOWN

    def test_invalid_json(self):
        with pytest.raises(MalformedDataError):
            parse_word_list("{not json")

    def test_empty_replacement_options(self):
        raw = json.dumps({"words": [record("bad", [])]})
        with pytest.raises(MalformedDataError):
            parse_word_list(raw)

    def test_unknown_category(self):
        raw = json.dumps({"words": [record("bad", ["poor"], category="Spicy")]})
        with pytest.raises(MalformedDataError):
            parse_word_list(raw)

    def test_missing_words_key(self):
        with pytest.raises(MalformedDataError):
            parse_word_list(json.dumps({"entries": []}))


class TestVariants:

    def test_known_variants(self):
        assert available_variants() == ["default", "buzzwords"]

    def test_resolve_variant(self):
        assert resolve_variant("buzzwords") == "buzzwords"
        assert resolve_variant("BuzzWords") == "buzzwords"
        assert resolve_variant("default") == "default"

    def test_unknown_variant_falls_back(self):
        assert resolve_variant("missing-variant-resource") == "default"
        assert resolve_variant(None) == "default"


class TestDictionaryStore:
    """Test loading and lookup."""

    @pytest.fixture
    def data_dir(self, tmp_path):
        write_word_list(tmp_path / "word_replacements.json", [
            record("bad", ["unpleasant"]),
            record("Darn", ["drat"], "Mild"),
        ])
        write_word_list(tmp_path / "word_replacements_buzzwords.json", [
            record("synergy", ["teamwork"]),
        ])
        return tmp_path

    def test_not_ready_before_load(self):
        store = DictionaryStore()
        assert store.is_ready() is False
        assert len(store) == 0
        assert store.lookup("bad") is None
        with pytest.raises(NotInitializedError):
            store.snapshot()

    def test_load_default(self, data_dir):
        store = DictionaryStore(data_dir)
        store.load("default")

        assert store.is_ready()
        assert store.active_variant == "default"
        assert len(store) == 2

    def test_lookup_case_insensitive(self, data_dir):
        store = DictionaryStore(data_dir)
        store.load()

        assert store.lookup("bad").replacement_options == ("unpleasant",)
        assert store.lookup("BAD") is not None
        assert store.lookup("darn").original_word == "Darn"
        assert "DaRn" in store

    def test_lookup_is_exact(self, data_dir):
        store = DictionaryStore(data_dir)
        store.load()

        assert store.lookup("badly") is None
        assert store.lookup("ba") is None
        assert "badness" not in store

    def test_switch_variant(self, data_dir):
        store = DictionaryStore(data_dir)
        store.load("default")
        store.load("buzzwords")

        assert store.active_variant == "buzzwords"
        assert store.lookup("synergy") is not None
        assert store.lookup("bad") is None

    def test_unknown_variant_loads_default(self, data_dir):
        store = DictionaryStore(data_dir)
        store.load("corporate")

        assert store.active_variant == "default"
        assert store.lookup("bad") is not None

    def test_missing_resource(self, tmp_path):
        store = DictionaryStore(tmp_path)

        with pytest.raises(ResourceNotFoundError) as exc_info:
            store.load("missing-variant-resource")

        assert store.is_ready() is False
        assert exc_info.value.variant == "default"
        assert isinstance(exc_info.value, FileNotFoundError)
        assert isinstance(exc_info.value, DictionaryLoadError)

    def test_failed_load_clears_previous(self, data_dir):
        store = DictionaryStore(data_dir)
        store.load("default")
        (data_dir / "word_replacements_buzzwords.json").unlink()

        with pytest.raises(ResourceNotFoundError):
            store.load("buzzwords")

        assert store.is_ready() is False
        assert store.lookup("bad") is None
        assert store.active_variant == "default"

    def test_empty_dictionary(self, tmp_path):
        write_word_list(tmp_path / "word_replacements.json", [])
        store = DictionaryStore(tmp_path)

        with pytest.raises(EmptyDictionaryError):
            store.load()
        assert store.is_ready() is False

    def test_malformed_dictionary(self, tmp_path):
        (tmp_path / "word_replacements.json").write_text("[{]", encoding="utf-8")
        store = DictionaryStore(tmp_path)

        with pytest.raises(MalformedDataError):
            store.load()
        assert store.is_ready() is False

    def test_duplicate_words_skipped(self, tmp_path, caplog):
        write_word_list(tmp_path / "word_replacements.json", [
            record("bad", ["unpleasant"]),
            record("BAD", ["awful"]),
            record("worse", ["poorer"]),
        ])
        store = DictionaryStore(tmp_path)

        with caplog.at_level(logging.WARNING, logger="textscrub.dictionary"):
            store.load()

        assert len(store) == 2
        assert store.lookup("bad").replacement_options == ("unpleasant",)
        assert "Skipping duplicate word: BAD" in caplog.text

    def test_load_path(self, tmp_path):
        path = write_word_list(tmp_path / "custom.json", [record("meh", ["fine"])])
        store = DictionaryStore()
        store.load_path(path)

        assert store.active_variant == "custom"
        assert store.lookup("meh") is not None

    def test_snapshot_unaffected_by_reload(self, data_dir):
        store = DictionaryStore(data_dir)
        store.load("default")
        snapshot = store.snapshot()

        store.load("buzzwords")

        assert "bad" in snapshot
        assert "synergy" not in snapshot
        with pytest.raises(TypeError):
            snapshot["new"] = None


class TestPackagedWordLists:
    """Test the word lists shipped with the package."""

    def test_default(self):
        store = DictionaryStore()
        store.load("default")

        entry = store.lookup("DAMN")
        assert entry is not None
        assert entry.category == WordCategory.PROFANITY
        assert all(entry.replacement_options)

    def test_buzzwords(self):
        store = DictionaryStore()
        store.load("buzzwords")

        assert store.active_variant == "buzzwords"
        assert store.lookup("synergy") is not None
        assert store.lookup("damn") is None
