"""Application-wide settings and Gemini client configuration helpers."""
from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global application configuration."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # GEMINI_API_KEY wins; API_KEY is accepted for hosts that only expose that name
    gemini_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("gemini_api_key", "GEMINI_API_KEY", "API_KEY"),
    )
    gemini_text_model: str = Field(default="gemini-2.5-pro")
    gemini_idea_model: str = Field(default="gemini-2.5-flash")
    gemini_image_model: str = Field(default="imagen-4.0-generate-001")
    gemini_request_timeout_ms: int = Field(default=300_000)
    upload_allowed_mime_prefixes: tuple[str, ...] = Field(default=("image/",))
    upload_max_bytes: int = Field(default=10 * 1024 * 1024)
    disconnect_poll_seconds: float = Field(default=0.5)


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance."""

    return Settings()


__all__ = ["Settings", "get_settings"]
