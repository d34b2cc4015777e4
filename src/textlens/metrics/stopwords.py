"""English function words excluded from frequency analysis."""

from __future__ import annotations

from typing import FrozenSet

STOP_WORDS: FrozenSet[str] = frozenset(
    {
        # articles and conjunctions
        "the", "a", "an", "and", "or", "but",
        # prepositions
        "in", "on", "at", "to", "for", "of", "with", "by", "from", "as",
        # auxiliaries
        "is", "was", "are", "were", "been", "be",
        "have", "has", "had", "do", "does", "did",
        "will", "would", "could", "should", "may", "might", "can",
        # determiners and pronouns
        "this", "that", "these", "those",
        "i", "you", "he", "she", "it", "we", "they",
        # question words
        "what", "which", "who", "when", "where", "why", "how",
        "not", "no", "yes",
    }
)

__all__ = ["STOP_WORDS"]
