"""Shared test fixtures for the wrapper test suite.

WHY: The SRT, wrapping, CLI and API tests all work on the same small
subtitle file. Centralizing it here keeps the expected wraps in one place.

HOW: SAMPLE_SRT is a three-cue document in canonical layout (blank line
after every block). Fixtures provide the raw text and the parsed document.
An autouse fixture clears SUBWRAP_* variables so a developer's .env never
changes test results.

RULES:
- Cue 1 spans two lines and needs rewrapping at 20 characters
- Cue 2 already fits at 20 characters
- Cue 3 is one long line that wraps into three lines at 20 characters
"""

import pytest

from subwrap.core.srt import parse_srt

SAMPLE_SRT = (
    "1\n"
    "00:00:01,000 --> 00:00:03,500\n"
    "The quick brown fox jumps\n"
    "over the lazy dog\n"
    "\n"
    "2\n"
    "00:00:04,000 --> 00:00:06,000\n"
    "Short line\n"
    "\n"
    "3\n"
    "00:00:06,500 --> 00:00:09,250\n"
    "This is a fairly long subtitle line that needs wrapping\n"
    "\n"
)

SUBWRAP_ENV_VARS = (
    "SUBWRAP_MAX_CHARACTERS_PER_LINE",
    "SUBWRAP_DEFAULT_MODE",
    "SUBWRAP_API_HOST",
    "SUBWRAP_API_PORT",
    "SUBWRAP_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _clean_subwrap_env(monkeypatch):
    """Remove configuration variables so defaults apply unless a test sets them."""
    for name in SUBWRAP_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_srt():
    """The raw three-cue SRT sample."""
    return SAMPLE_SRT


@pytest.fixture
def sample_document():
    """The three-cue SRT sample parsed into a SubtitleDocument."""
    return parse_srt(SAMPLE_SRT, source_filename="sample.srt")
