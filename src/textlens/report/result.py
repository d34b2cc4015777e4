"""Assembly of statistics and model output into a single analysis result."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from ..config import DEFAULT_CONFIG, StatsConfig
from ..metrics import (
    WordFrequency,
    calculate_average_sentence_length,
    calculate_reading_time,
    calculate_speaking_time,
    count_unique_words,
    count_words,
    get_most_frequent_words,
)
from .reply import parse_model_reply
from .validation import validate_input_text

logger = logging.getLogger(__name__)

DEFAULT_SUMMARY = "No summary available"
DEFAULT_EXPLANATION = "No explanation available"
DEFAULT_READING_LEVEL = "General audience"


@dataclass
class TextStatistics:
    """Locally computed metrics for one text."""

    word_count: int
    reading_time_minutes: int
    speaking_time_minutes: int
    unique_word_count: int
    average_sentence_length: int
    top_words: List[WordFrequency] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "wordCount": self.word_count,
            "readingTimeMinutes": self.reading_time_minutes,
            "speakingTimeMinutes": self.speaking_time_minutes,
            "uniqueWordCount": self.unique_word_count,
            "averageSentenceLength": self.average_sentence_length,
            "topWords": [entry.to_dict() for entry in self.top_words],
        }


@dataclass
class AnalysisResult:
    """Model-generated fields merged with :class:`TextStatistics`."""

    summary: str
    key_points: List[str]
    explanation: str
    reading_time: Any
    word_count: int
    reading_level: str
    speaking_time: int
    unique_words: int
    average_sentence_length: int
    top_words: List[WordFrequency] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary,
            "keyPoints": list(self.key_points),
            "explanation": self.explanation,
            "readingTime": self.reading_time,
            "wordCount": self.word_count,
            "readingLevel": self.reading_level,
            "speakingTime": self.speaking_time,
            "uniqueWords": self.unique_words,
            "averageSentenceLength": self.average_sentence_length,
            "topWords": [entry.to_dict() for entry in self.top_words],
        }


def compute_statistics(
    text: str,
    *,
    top_n: Optional[int] = None,
    config: Optional[StatsConfig] = None,
) -> TextStatistics:
    """Run every text metric over ``text``."""

    cfg = config or DEFAULT_CONFIG
    limit = cfg.top_words_limit if top_n is None else top_n
    return TextStatistics(
        word_count=count_words(text),
        reading_time_minutes=calculate_reading_time(text, cfg.reading_wpm),
        speaking_time_minutes=calculate_speaking_time(text, cfg.speaking_wpm),
        unique_word_count=count_unique_words(text),
        average_sentence_length=calculate_average_sentence_length(text),
        top_words=get_most_frequent_words(text, limit),
    )


def _reply_value(reply: Mapping[str, Any], key: str, default: Any) -> Any:
    value = reply.get(key)
    return default if value is None else value


def build_analysis_result(
    text: str,
    reply: Mapping[str, Any],
    *,
    config: Optional[StatsConfig] = None,
) -> AnalysisResult:
    """Combine a decoded model reply with statistics computed from ``text``.

    Missing reply fields fall back to fixed placeholders; a missing reading
    time is estimated locally.
    """

    stats = compute_statistics(text, config=config)
    key_points = reply.get("key_points")
    return AnalysisResult(
        summary=_reply_value(reply, "summary", DEFAULT_SUMMARY),
        key_points=list(key_points) if isinstance(key_points, list) else [],
        explanation=_reply_value(reply, "explanation", DEFAULT_EXPLANATION),
        reading_time=_reply_value(reply, "reading_time_minutes", stats.reading_time_minutes),
        word_count=stats.word_count,
        reading_level=_reply_value(reply, "reading_level", DEFAULT_READING_LEVEL),
        speaking_time=stats.speaking_time_minutes,
        unique_words=stats.unique_word_count,
        average_sentence_length=stats.average_sentence_length,
        top_words=stats.top_words,
    )


def analyze(text: str, raw_reply: str | None, *, config: Optional[StatsConfig] = None) -> AnalysisResult:
    """Validate ``text``, decode ``raw_reply`` and build the combined result."""

    cfg = config or DEFAULT_CONFIG
    validate_input_text(text, max_chars=cfg.max_chars, min_chars=cfg.min_chars, locale=cfg.locale)
    logger.debug("validated %d characters of input", len(text))
    reply = parse_model_reply(raw_reply)
    logger.debug("decoded model reply with keys: %s", ", ".join(sorted(reply)))
    result = build_analysis_result(text, reply, config=cfg)
    logger.debug("built analysis result: %d words, %d unique", result.word_count, result.unique_words)
    return result


__all__ = [
    "AnalysisResult",
    "DEFAULT_EXPLANATION",
    "DEFAULT_READING_LEVEL",
    "DEFAULT_SUMMARY",
    "TextStatistics",
    "analyze",
    "build_analysis_result",
    "compute_statistics",
]
