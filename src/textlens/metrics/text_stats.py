"""Text-level statistics for submitted documents.

Every helper here is a pure function of its input string and never raises for
``str`` input: empty or degenerate text maps to ``0`` or an empty list.

Two tokenisers coexist on purpose.  :func:`count_words` splits raw text on
whitespace and keeps punctuation attached (``"hello,"`` is one word), while
:func:`normalize_words` lower-cases and strips punctuation before splitting.
Unique-word counts and frequency lists use the normalised form.
"""

from __future__ import annotations

import math
import re
import unicodedata
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Union

from .stopwords import STOP_WORDS

READING_WORDS_PER_MINUTE = 200
SPEAKING_WORDS_PER_MINUTE = 150
MIN_FREQUENT_WORD_LENGTH = 3

_WHITESPACE_PATTERN = re.compile(r"\s+")
_SENTENCE_PATTERN = re.compile(r"[.!?]+")
_NON_WORD_PATTERN = re.compile(r"[^\w\s]")


@dataclass(frozen=True)
class WordFrequency:
    """A normalised word and how often it occurs."""

    word: str
    count: int

    def to_dict(self) -> Dict[str, Union[str, int]]:
        return {"word": self.word, "count": self.count}


def _tokenize(text: str) -> List[str]:
    stripped = text.strip()
    if not stripped:
        return []
    return _WHITESPACE_PATTERN.split(stripped)


def _sentences(text: str) -> List[str]:
    return [segment.strip() for segment in _SENTENCE_PATTERN.split(text) if segment.strip()]


def _minutes_at(word_count: int, words_per_minute: float) -> int:
    if words_per_minute <= 0:
        return 1
    return max(1, math.ceil(word_count / words_per_minute))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def count_words(text: str) -> int:
    """Return the number of whitespace-separated tokens in ``text``."""

    return len(_tokenize(text))


def calculate_reading_time(text: str, words_per_minute: float = READING_WORDS_PER_MINUTE) -> int:
    """Estimate silent reading time in whole minutes (never less than one)."""

    return _minutes_at(count_words(text), words_per_minute)


def calculate_speaking_time(text: str, words_per_minute: float = SPEAKING_WORDS_PER_MINUTE) -> int:
    """Estimate read-aloud time in whole minutes (never less than one)."""

    return _minutes_at(count_words(text), words_per_minute)


def _keeps(char: str) -> bool:
    # combining marks belong to the preceding letter even though \w rejects them
    return not _NON_WORD_PATTERN.match(char) or unicodedata.category(char).startswith("M")


def normalize_words(text: str) -> List[str]:
    """Lower-case ``text``, drop punctuation and split it into tokens.

    Text is brought to NFC first so precomposed and decomposed spellings of
    the same word compare equal.
    """

    composed = unicodedata.normalize("NFC", text.lower())
    cleaned = "".join(char for char in composed if _keeps(char))
    return [token for token in _WHITESPACE_PATTERN.split(cleaned) if token]


def count_unique_words(text: str) -> int:
    """Return the number of distinct normalised tokens."""

    return len(set(normalize_words(text)))


def calculate_average_sentence_length(text: str) -> int:
    """Return the mean number of words per sentence, rounded half up.

    Sentences are the non-empty segments between runs of ``.``, ``!`` and
    ``?``.  Text without terminal punctuation counts as a single sentence.
    """

    sentences = _sentences(text)
    if not sentences:
        return 0
    total = sum(count_words(sentence) for sentence in sentences)
    return _round_half_up(total / len(sentences))


def get_most_frequent_words(text: str, limit: int) -> List[WordFrequency]:
    """Return up to ``limit`` content words ordered by descending frequency.

    Tokens shorter than three characters and stop words are ignored.  Words
    with equal counts keep the order of their first occurrence.
    """

    if limit <= 0:
        return []
    counts = Counter(
        token
        for token in normalize_words(text)
        if len(token) >= MIN_FREQUENT_WORD_LENGTH and token not in STOP_WORDS
    )
    ranked = sorted(counts.items(), key=lambda item: -item[1])
    return [WordFrequency(word, count) for word, count in ranked[:limit]]


__all__ = [
    "MIN_FREQUENT_WORD_LENGTH",
    "READING_WORDS_PER_MINUTE",
    "SPEAKING_WORDS_PER_MINUTE",
    "WordFrequency",
    "calculate_average_sentence_length",
    "calculate_reading_time",
    "calculate_speaking_time",
    "count_unique_words",
    "count_words",
    "get_most_frequent_words",
    "normalize_words",
]
