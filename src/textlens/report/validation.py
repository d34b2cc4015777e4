"""Length checks applied to text before it is analysed."""

from __future__ import annotations

from ..config import DEFAULT_MAX_CHARS, DEFAULT_MIN_CHARS
from ..exceptions import EmptyInputError, TextTooLongError, TextTooShortError
from ..metrics import DEFAULT_LOCALE, format_count


def validate_input_text(
    text: str | None,
    *,
    max_chars: int = DEFAULT_MAX_CHARS,
    min_chars: int = DEFAULT_MIN_CHARS,
    locale: str = DEFAULT_LOCALE,
) -> str:
    """Return ``text`` unchanged or raise an :class:`InputValidationError`."""

    if not text or not text.strip():
        raise EmptyInputError()
    if len(text) > max_chars:
        raise TextTooLongError(len(text), max_chars, format_count(max_chars, locale))
    if len(text.strip()) < min_chars:
        raise TextTooShortError(
            f"Text is too short. Please provide at least {min_chars} characters."
        )
    return text


__all__ = ["validate_input_text"]
