"""
Text structure and readability estimates.

Syllables are counted with a rough vowel-group heuristic rather than a
pronunciation dictionary. The score is the Flesch reading ease formula:

    206.835 - 1.015 * (words / sentences) - 84.6 * (syllables / words)

Higher scores indicate easier text.
"""

import logging
import math
import re

logger = logging.getLogger(__name__)

# Compiled once, shared by every caller
WORD_PATTERN = re.compile(r"\b\w+\b")
VOWEL_GROUP_PATTERN = re.compile(r"[aeiouy]+", re.IGNORECASE)
SENTENCE_SPLIT_PATTERN = re.compile(r"[.!?]")
PARAGRAPH_SPLIT_PATTERN = re.compile(r"\r\n\r\n|\n\n")

VOWELS = "aeiouy"
STRIP_CHARS = "'\".,!?:;"

DEFAULT_WORDS_PER_MINUTE = 225.0


def estimate_syllables(word: str) -> int:
    """
    Estimate the number of syllables in a word.

    Args:
        word: Word to analyze

    Returns:
        Estimated syllable count, at least 1 for any non-blank word
    """
    if not word or not word.strip():
        return 0

    word = word.lower().strip(STRIP_CHARS)

    # Short words are almost always one syllable
    if len(word) <= 3:
        return 1

    count = len(VOWEL_GROUP_PATTERN.findall(word))

    # Silent trailing 'e' after a consonant ("make", "stone").
    # Words ending in "-le" keep their vowel-group count.
    if (
        word.endswith("e")
        and not word.endswith("le")
        and count > 1
        and word[-2] not in VOWELS
    ):
        count -= 1

    return max(1, count)


def count_sentences(text: str) -> int:
    """Number of non-empty pieces between '.', '!' and '?'."""
    return sum(1 for piece in SENTENCE_SPLIT_PATTERN.split(text) if piece)


def count_paragraphs(text: str) -> int:
    """Number of blank-line separated paragraphs (at least 1)."""
    return len(PARAGRAPH_SPLIT_PATTERN.split(text))


def reading_time_minutes(
    total_words: int,
    words_per_minute: float = DEFAULT_WORDS_PER_MINUTE,
) -> float:
    """Estimated reading time at a fixed reading rate."""
    if total_words <= 0:
        return 0.0
    return total_words / words_per_minute


def flesch_reading_ease(
    total_words: int,
    sentence_count: int,
    total_syllables: int,
) -> float:
    """
    Compute the Flesch reading ease score.

    Args:
        total_words: Number of word tokens
        sentence_count: Number of sentences
        total_syllables: Sum of estimated syllables over all tokens

    Returns:
        Score, or 0.0 when there are no words or no sentences, or when the
        arithmetic does not produce a finite number
    """
    if sentence_count <= 0 or total_words <= 0:
        logger.warning(
            f"Cannot calculate readability score: sentences={sentence_count}, words={total_words}"
        )
        return 0.0

    try:
        words_per_sentence = total_words / sentence_count
        syllables_per_word = total_syllables / total_words
        score = 206.835 - (1.015 * words_per_sentence) - (84.6 * syllables_per_word)
    except OverflowError:
        logger.exception("Overflow calculating readability score")
        return 0.0

    if not math.isfinite(score):
        logger.error(f"Readability score is not finite: {score!r}")
        return 0.0

    return score
