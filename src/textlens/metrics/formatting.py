"""Display helpers for counts and long passages."""

from __future__ import annotations

import logging

from babel.core import UnknownLocaleError
from babel.numbers import format_decimal

DEFAULT_LOCALE = "en_US"
ELLIPSIS = "..."

logger = logging.getLogger(__name__)


def truncate_text(text: str, max_length: int) -> str:
    """Cut ``text`` to ``max_length`` characters and append an ellipsis.

    The cut is purely positional and may split a word.  Text that already fits
    is returned unchanged.
    """

    if len(text) <= max_length:
        return text
    return text[: max(0, max_length)].rstrip() + ELLIPSIS


def _normalise_locale(locale: str | None) -> str:
    if not locale:
        return DEFAULT_LOCALE
    return locale.replace("-", "_")


def format_count(count: int, locale: str | None = DEFAULT_LOCALE) -> str:
    """Format ``count`` with the thousands grouping of ``locale``."""

    identifier = _normalise_locale(locale)
    try:
        return format_decimal(count, locale=identifier)
    except (UnknownLocaleError, ValueError):
        logger.warning("Unknown locale %r; formatting with %s", locale, DEFAULT_LOCALE)
        return format_decimal(count, locale=DEFAULT_LOCALE)


__all__ = ["DEFAULT_LOCALE", "ELLIPSIS", "format_count", "truncate_text"]
