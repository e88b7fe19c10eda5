"""Tests for Gemini credential resolution."""
from __future__ import annotations

import pytest

from blogstudio.core.config import Settings
from blogstudio.services.errors import ConfigurationError
from blogstudio.services.genai_client import resolve_api_key


def test_resolve_api_key_returns_configured_key() -> None:
    assert resolve_api_key(Settings(gemini_api_key=" secret ")) == "secret"


def test_resolve_api_key_raises_when_missing() -> None:
    with pytest.raises(ConfigurationError):
        resolve_api_key(Settings(gemini_api_key=None))


def test_settings_accept_api_key_fallback(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    monkeypatch.setenv("API_KEY", "from-host")

    assert Settings(_env_file=None).gemini_api_key == "from-host"
