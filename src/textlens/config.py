"""Runtime settings for statistics and report assembly."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Dict, Mapping, Optional

from .exceptions import ConfigurationError
from .metrics import DEFAULT_LOCALE, READING_WORDS_PER_MINUTE, SPEAKING_WORDS_PER_MINUTE

DEFAULT_TOP_WORDS = 15
DEFAULT_MAX_CHARS = 50_000
DEFAULT_MIN_CHARS = 10

ENV_PREFIX = "TEXTLENS_"

_INT_FIELDS: Dict[str, str] = {
    "READING_WPM": "reading_wpm",
    "SPEAKING_WPM": "speaking_wpm",
    "TOP_WORDS": "top_words_limit",
    "MAX_CHARS": "max_chars",
    "MIN_CHARS": "min_chars",
}


@dataclass(frozen=True)
class StatsConfig:
    """Rates and limits shared by the statistics and report layers."""

    reading_wpm: int = READING_WORDS_PER_MINUTE
    speaking_wpm: int = SPEAKING_WORDS_PER_MINUTE
    top_words_limit: int = DEFAULT_TOP_WORDS
    locale: str = DEFAULT_LOCALE
    max_chars: int = DEFAULT_MAX_CHARS
    min_chars: int = DEFAULT_MIN_CHARS

    def validate(self) -> None:
        if self.reading_wpm <= 0:
            raise ConfigurationError("reading_wpm must be positive")
        if self.speaking_wpm <= 0:
            raise ConfigurationError("speaking_wpm must be positive")
        if self.top_words_limit <= 0:
            raise ConfigurationError("top_words_limit must be positive")
        if self.min_chars < 0:
            raise ConfigurationError("min_chars must not be negative")
        if self.min_chars > self.max_chars:
            raise ConfigurationError("min_chars must not exceed max_chars")


DEFAULT_CONFIG = StatsConfig()


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc


def load_config(environ: Optional[Mapping[str, str]] = None) -> StatsConfig:
    """Build a :class:`StatsConfig` from ``TEXTLENS_*`` environment variables."""

    env = os.environ if environ is None else environ
    overrides: Dict[str, object] = {}
    for suffix, field_name in _INT_FIELDS.items():
        key = ENV_PREFIX + suffix
        raw = env.get(key)
        if raw:
            overrides[field_name] = _parse_int(key, raw)
    locale = env.get(ENV_PREFIX + "LOCALE")
    if locale:
        overrides["locale"] = locale

    config = replace(DEFAULT_CONFIG, **overrides)
    config.validate()
    return config


__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_MAX_CHARS",
    "DEFAULT_MIN_CHARS",
    "DEFAULT_TOP_WORDS",
    "StatsConfig",
    "load_config",
]
