"""Custom exception hierarchy for the textlens toolkit."""
from __future__ import annotations

from dataclasses import dataclass


class TextLensError(Exception):
    """Base class for all textlens errors."""

    status_code = 500


class ConfigurationError(TextLensError):
    """Raised when user-supplied configuration is invalid."""


class InputValidationError(TextLensError):
    """Raised when submitted text cannot be analysed."""

    status_code = 400


class EmptyInputError(InputValidationError):
    """Raised when no usable text was submitted."""

    def __init__(self, message: str = "Invalid input: text or a valid media source is required") -> None:
        super().__init__(message)


class TextTooShortError(InputValidationError):
    """Raised when the trimmed text is below the minimum length."""


@dataclass
class TextTooLongError(InputValidationError):
    length: int
    limit: int
    formatted_limit: str = ""

    def __str__(self) -> str:
        limit = self.formatted_limit or str(self.limit)
        return f"Text exceeds maximum length of {limit} characters"


class ReplyError(TextLensError):
    """Raised when a language-model reply cannot be used."""

    status_code = 500


class EmptyReplyError(ReplyError):
    """Raised when the model returned nothing."""

    def __init__(self, message: str = "No response from the server. Please try again.") -> None:
        super().__init__(message)


class ReplyParseError(ReplyError):
    """Raised when the model reply is not a JSON object."""

    status_code = 400


class InputReadError(TextLensError):
    """Raised when an input file cannot be read as text."""

    status_code = 400


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
