import logging

import pytest

from textlens.exceptions import ConfigurationError
from textlens.utils import resolve_log_level


def test_explicit_level_wins_over_environment(monkeypatch):
    monkeypatch.setenv("TEXTLENS_LOG_LEVEL", "ERROR")
    assert resolve_log_level("debug") == logging.DEBUG


def test_environment_level_is_used(monkeypatch):
    monkeypatch.setenv("TEXTLENS_LOG_LEVEL", " warning ")
    assert resolve_log_level() == logging.WARNING


def test_default_level_is_info(monkeypatch):
    monkeypatch.delenv("TEXTLENS_LOG_LEVEL", raising=False)
    assert resolve_log_level() == logging.INFO


def test_unknown_level_is_rejected():
    with pytest.raises(ConfigurationError):
        resolve_log_level("verbose")
