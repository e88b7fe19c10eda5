"""FastAPI dependency helpers."""
from __future__ import annotations

from functools import lru_cache

from fastapi import Depends
from google import genai

from blogstudio.core.config import Settings, get_settings
from blogstudio.services.genai_client import create_genai_client, resolve_api_key
from blogstudio.services.generation import PostGenerator
from blogstudio.services.ideas import IdeaBrainstormer


@lru_cache
def _create_genai_client(api_key: str, timeout_ms: int) -> genai.Client:
    return create_genai_client(
        Settings(gemini_api_key=api_key, gemini_request_timeout_ms=timeout_ms)
    )


def get_genai_client(settings: Settings = Depends(get_settings)) -> genai.Client:
    """Return the shared Gemini client, built on first use."""

    return _create_genai_client(
        resolve_api_key(settings), settings.gemini_request_timeout_ms
    )


def get_post_generator(
    settings: Settings = Depends(get_settings),
    client: genai.Client = Depends(get_genai_client),
) -> PostGenerator:
    """Provide a post generator instance per request."""

    return PostGenerator(client, settings)


def get_idea_brainstormer(
    settings: Settings = Depends(get_settings),
    client: genai.Client = Depends(get_genai_client),
) -> IdeaBrainstormer:
    return IdeaBrainstormer(client, settings)
