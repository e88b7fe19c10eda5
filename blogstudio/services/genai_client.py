"""Helpers for creating Gemini (google-genai) clients."""
from __future__ import annotations

from google import genai
from google.genai import types

from blogstudio.core.config import Settings
from blogstudio.services.errors import ConfigurationError


def resolve_api_key(settings: Settings) -> str:
    """Return the configured API key or raise :class:`ConfigurationError`."""

    api_key = (settings.gemini_api_key or "").strip()
    if not api_key:
        raise ConfigurationError(
            "Gemini API key is not configured. Set GEMINI_API_KEY (or API_KEY) "
            "in the environment or .env file."
        )
    return api_key


def create_genai_client(settings: Settings) -> genai.Client:
    """Return a `genai.Client` configured from settings."""

    return genai.Client(
        api_key=resolve_api_key(settings),
        http_options=types.HttpOptions(timeout=settings.gemini_request_timeout_ms),
    )


__all__ = ["create_genai_client", "resolve_api_key"]
