"""Descriptive statistics computed locally from submitted text."""

from .formatting import DEFAULT_LOCALE, format_count, truncate_text
from .stopwords import STOP_WORDS
from .text_stats import (
    READING_WORDS_PER_MINUTE,
    SPEAKING_WORDS_PER_MINUTE,
    WordFrequency,
    calculate_average_sentence_length,
    calculate_reading_time,
    calculate_speaking_time,
    count_unique_words,
    count_words,
    get_most_frequent_words,
    normalize_words,
)

__all__ = [
    "DEFAULT_LOCALE",
    "READING_WORDS_PER_MINUTE",
    "SPEAKING_WORDS_PER_MINUTE",
    "STOP_WORDS",
    "WordFrequency",
    "calculate_average_sentence_length",
    "calculate_reading_time",
    "calculate_speaking_time",
    "count_unique_words",
    "count_words",
    "format_count",
    "get_most_frequent_words",
    "normalize_words",
    "truncate_text",
]
