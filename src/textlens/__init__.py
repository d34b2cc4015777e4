"""Local text statistics and analysis-report assembly."""

from .exceptions import (
    ConfigurationError,
    EmptyInputError,
    EmptyReplyError,
    InputReadError,
    InputValidationError,
    ReplyError,
    ReplyParseError,
    TextLensError,
    TextTooLongError,
    TextTooShortError,
)

__all__ = [
    "ConfigurationError",
    "EmptyInputError",
    "EmptyReplyError",
    "InputReadError",
    "InputValidationError",
    "ReplyError",
    "ReplyParseError",
    "TextLensError",
    "TextTooLongError",
    "TextTooShortError",
]
