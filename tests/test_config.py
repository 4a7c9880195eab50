"""Tests for configuration loading (subwrap.config).

WHY: The CLI and API fall back to configured defaults. A bad value must
fail loudly with the variable name, not silently wrap at a wrong width.

HOW: monkeypatch sets environment variables per test; conftest clears
all SUBWRAP_* variables first.
"""

import logging

import pytest

from autowrap import WrapMode
from subwrap.config import (
    DEFAULT_API_PORT,
    DEFAULT_MAX_CHARACTERS_PER_LINE,
    configure_logging,
    load_api_bind,
    load_default_mode,
    load_max_characters_per_line,
)


class TestMaxCharactersPerLine:

    def test_default(self):
        assert load_max_characters_per_line() == DEFAULT_MAX_CHARACTERS_PER_LINE == 40

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("SUBWRAP_MAX_CHARACTERS_PER_LINE", " 32 ")
        assert load_max_characters_per_line() == 32

    def test_blank_uses_default(self, monkeypatch):
        monkeypatch.setenv("SUBWRAP_MAX_CHARACTERS_PER_LINE", "  ")
        assert load_max_characters_per_line() == 40

    @pytest.mark.parametrize("raw, message", [
        ("abc", "must be an integer"),
        ("0", "at least 1"),
        ("-5", "at least 1"),
    ])
    def test_invalid(self, monkeypatch, raw, message):
        monkeypatch.setenv("SUBWRAP_MAX_CHARACTERS_PER_LINE", raw)
        with pytest.raises(ValueError, match=message):
            load_max_characters_per_line()


class TestDefaultMode:

    def test_default(self):
        assert load_default_mode() is WrapMode.WIDE

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("SUBWRAP_DEFAULT_MODE", "Evenly")
        assert load_default_mode() is WrapMode.EVENLY

    def test_invalid(self, monkeypatch):
        monkeypatch.setenv("SUBWRAP_DEFAULT_MODE", "sideways")
        with pytest.raises(ValueError, match="SUBWRAP_DEFAULT_MODE"):
            load_default_mode()


class TestApiBind:

    def test_default(self):
        assert load_api_bind() == ("0.0.0.0", DEFAULT_API_PORT)

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("SUBWRAP_API_HOST", "127.0.0.1")
        monkeypatch.setenv("SUBWRAP_API_PORT", "9001")
        assert load_api_bind() == ("127.0.0.1", 9001)

    def test_invalid_port(self, monkeypatch):
        monkeypatch.setenv("SUBWRAP_API_PORT", "http")
        with pytest.raises(ValueError, match="SUBWRAP_API_PORT"):
            load_api_bind()


class TestConfigureLogging:

    def test_calls_basic_config_with_level(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
        monkeypatch.setenv("SUBWRAP_LOG_LEVEL", "debug")
        configure_logging()
        assert calls[0]["level"] == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
        monkeypatch.setenv("SUBWRAP_LOG_LEVEL", "chatty")
        configure_logging()
        assert calls[0]["level"] == logging.INFO
