"""Tests for the FastAPI wrapping API.

WHY: Validates that every endpoint behaves correctly — happy paths,
defaults taken from configuration, and error responses.

HOW: Uses the FastAPI TestClient for synchronous in-process requests.
Configuration defaults are controlled with monkeypatch (the conftest
fixture clears SUBWRAP_* variables before each test).

RULES:
- Tests cover: happy paths, config fallbacks, 400 bad SRT/selection,
  422 validation errors, 500 misconfiguration
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from subwrap import __version__
from subwrap.core.srt import parse_srt
from subwrap.server.app import app


@pytest.fixture
def client():
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)


# ---------------------------------------------------------------------------
# POST /wrap
# ---------------------------------------------------------------------------


class TestWrapText:
    """Tests for POST /wrap."""

    def test_evenly(self, client):
        resp = client.post("/wrap", json={
            "text": "the quick brown fox jumps",
            "max_characters_per_line": 11,
            "mode": "evenly",
        })
        assert resp.status_code == 200
        body = resp.json()
        assert body["text"] == "the quick\nbrown\nfox jumps"
        assert body["lines"] == ["the quick", "brown", "fox jumps"]
        assert body["mode"] == "evenly"
        assert body["max_characters_per_line"] == 11

    def test_defaults_from_config(self, client, monkeypatch):
        monkeypatch.setenv("SUBWRAP_MAX_CHARACTERS_PER_LINE", "11")
        resp = client.post("/wrap", json={"text": "the quick brown fox jumps"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["lines"] == ["the quick", "brown fox", "jumps"]
        assert body["mode"] == "wide"
        assert body["max_characters_per_line"] == 11

    def test_default_mode_from_config(self, client, monkeypatch):
        monkeypatch.setenv("SUBWRAP_DEFAULT_MODE", "balanced")
        resp = client.post("/wrap", json={
            "text": "the quick brown fox jumps",
            "max_characters_per_line": 11,
        })
        assert resp.json()["mode"] == "evenly"

    def test_empty_text(self, client):
        resp = client.post("/wrap", json={"text": "", "max_characters_per_line": 10})
        assert resp.status_code == 200
        assert resp.json()["text"] == ""
        assert resp.json()["lines"] == []

    def test_overlong_word(self, client):
        resp = client.post("/wrap", json={
            "text": "aaaaaaaaaaaa",
            "max_characters_per_line": 5,
        })
        assert resp.json()["text"] == "aaaaaaaaaaaa"

    @pytest.mark.parametrize("maxcpl", [0, -3])
    def test_invalid_limit_returns_422(self, client, maxcpl):
        resp = client.post("/wrap", json={"text": "a b", "max_characters_per_line": maxcpl})
        assert resp.status_code == 422

    def test_unknown_mode_returns_422(self, client):
        resp = client.post("/wrap", json={"text": "a b", "mode": "sideways"})
        assert resp.status_code == 422

    def test_missing_text_returns_422(self, client):
        resp = client.post("/wrap", json={"max_characters_per_line": 10})
        assert resp.status_code == 422

    def test_misconfigured_server_returns_500(self, client, monkeypatch):
        monkeypatch.setenv("SUBWRAP_MAX_CHARACTERS_PER_LINE", "lots")
        resp = client.post("/wrap", json={"text": "a b"})
        assert resp.status_code == 500
        assert "SUBWRAP_MAX_CHARACTERS_PER_LINE" in resp.json()["detail"]


# ---------------------------------------------------------------------------
# POST /subtitles/wrap
# ---------------------------------------------------------------------------


class TestWrapSubtitles:
    """Tests for POST /subtitles/wrap."""

    def test_wraps_all_cues(self, client, sample_srt):
        resp = client.post("/subtitles/wrap", json={
            "srt": sample_srt,
            "max_characters_per_line": 20,
        })
        assert resp.status_code == 200
        body = resp.json()
        assert body["wrapped"] == [1, 2, 3]
        assert body["changed"] == [1, 3]
        assert body["mode"] == "wide"
        doc = parse_srt(body["srt"])
        assert doc.subtitles[0].text == "The quick brown fox\njumps over the lazy\ndog"
        assert doc.subtitles[0].start == "00:00:01,000"

    def test_selection_and_mode(self, client, sample_srt):
        resp = client.post("/subtitles/wrap", json={
            "srt": sample_srt,
            "selection": [1],
            "max_characters_per_line": 20,
            "mode": "evenly",
        })
        assert resp.status_code == 200
        body = resp.json()
        assert body["wrapped"] == [1]
        doc = parse_srt(body["srt"])
        assert doc.subtitles[0].text == "The quick brown\nfox jumps over\nthe lazy dog"
        assert doc.subtitles[2].text == (
            "This is a fairly long subtitle line that needs wrapping"
        )

    def test_empty_selection_returns_400(self, client, sample_srt):
        resp = client.post("/subtitles/wrap", json={"srt": sample_srt, "selection": []})
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Please select at least one subtitle."

    def test_selection_out_of_range_returns_400(self, client, sample_srt):
        resp = client.post("/subtitles/wrap", json={"srt": sample_srt, "selection": [7]})
        assert resp.status_code == 400
        assert "outside the document" in resp.json()["detail"]

    def test_invalid_srt_returns_400(self, client):
        resp = client.post("/subtitles/wrap", json={"srt": "hello"})
        assert resp.status_code == 400
        assert resp.json()["detail"].startswith("Invalid SRT")

    def test_invalid_limit_returns_422(self, client, sample_srt):
        resp = client.post("/subtitles/wrap", json={
            "srt": sample_srt,
            "max_characters_per_line": 0,
        })
        assert resp.status_code == 422


# ---------------------------------------------------------------------------
# GET /modes, GET /health
# ---------------------------------------------------------------------------


class TestModes:
    """Tests for GET /modes."""

    def test_lists_both_modes(self, client):
        resp = client.get("/modes")
        assert resp.status_code == 200
        modes = {m["key"]: m for m in resp.json()}
        assert set(modes) == {"wide", "evenly"}
        assert modes["wide"]["aliases"] == ["greedy"]
        assert modes["evenly"]["aliases"] == ["balanced", "even"]
        assert "similar width" in modes["evenly"]["description"]


class TestHealth:
    """Tests for GET /health."""

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok", "version": __version__}
