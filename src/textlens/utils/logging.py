"""Logging setup shared by the CLI and library callers."""

from __future__ import annotations

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from ..exceptions import ConfigurationError

DEFAULT_LOG_LEVEL = "INFO"
LOG_LEVEL_ENV = "TEXTLENS_LOG_LEVEL"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def resolve_log_level(level: Optional[str] = None) -> int:
    """Map an explicit level, ``TEXTLENS_LOG_LEVEL`` or the default to a number."""

    name = (level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).strip().upper()
    if name not in LOG_LEVELS:
        raise ConfigurationError(f"unknown log level {name!r}; expected one of {', '.join(LOG_LEVELS)}")
    return getattr(logging, name)


def configure_logging(level: Optional[str] = None) -> None:
    """Send log records to stderr through rich so stdout stays machine-readable."""

    handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=False)
    logging.basicConfig(level=resolve_log_level(level), format="%(name)s: %(message)s", handlers=[handler])
