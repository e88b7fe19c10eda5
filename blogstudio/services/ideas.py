"""Single-shot title brainstorming."""
from __future__ import annotations

import logging
from typing import Any
from uuid import uuid4

from blogstudio.core.config import Settings
from blogstudio.schemas.posts import Language
from blogstudio.services.errors import GenerationError
from blogstudio.services.prompts import build_idea_prompt

logger = logging.getLogger(__name__)

AGENT_ID = "IdeaBrainstormer"


class IdeaBrainstormer:
    """Turn a loose theme into a candidate post title."""

    def __init__(self, client: Any, settings: Settings) -> None:
        self._client = client
        self._settings = settings

    async def brainstorm(self, theme: str, language: Language) -> str:
        prompt = build_idea_prompt(theme, language)
        request_id = uuid4().hex

        try:
            response = await self._client.aio.models.generate_content(
                model=self._settings.gemini_idea_model,
                contents=prompt,
            )
        except Exception as exc:
            logger.exception(
                "Gemini idea generation failed",
                extra={"agent_id": AGENT_ID, "request_id": request_id},
            )
            raise GenerationError("Failed to generate an idea.", step="idea") from exc

        title = (response.text or "").strip()
        if not title:
            raise GenerationError("Failed to generate an idea.", step="idea")

        logger.info(
            "Idea generated",
            extra={"agent_id": AGENT_ID, "request_id": request_id, "language": language.value},
        )
        return title


__all__ = ["IdeaBrainstormer"]
