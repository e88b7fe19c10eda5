"""Tests for title brainstorming."""
from __future__ import annotations

import pytest

pytestmark = pytest.mark.anyio("asyncio")

from blogstudio.core.config import Settings
from blogstudio.schemas.posts import Language
from blogstudio.services.errors import GenerationError, InputError
from blogstudio.services.ideas import IdeaBrainstormer
from genai_stubs import StubGenaiClient, text_response


async def test_brainstorm_returns_trimmed_title() -> None:
    client = StubGenaiClient(text=text_response("  Weekend Escapes Near You \n"))
    settings = Settings(gemini_api_key="test", gemini_idea_model="idea-model")

    title = await IdeaBrainstormer(client, settings).brainstorm("weekend trips", Language.ES)

    assert title == "Weekend Escapes Near You"
    call = client.models.content_calls[0]
    assert call["model"] == "idea-model"
    assert "Spanish" in call["contents"]
    assert "config" not in call


async def test_brainstorm_wraps_remote_failure() -> None:
    client = StubGenaiClient(text=RuntimeError("quota"))

    with pytest.raises(GenerationError) as excinfo:
        await IdeaBrainstormer(client, Settings(gemini_api_key="test")).brainstorm(
            "weekend trips", Language.EN
        )

    assert excinfo.value.step == "idea"


async def test_brainstorm_rejects_empty_reply() -> None:
    client = StubGenaiClient(text=text_response("   \n"))

    with pytest.raises(GenerationError) as excinfo:
        await IdeaBrainstormer(client, Settings(gemini_api_key="test")).brainstorm(
            "weekend trips", Language.EN
        )

    assert excinfo.value.step == "idea"


async def test_brainstorm_rejects_blank_theme() -> None:
    client = StubGenaiClient(text=text_response("unused"))

    with pytest.raises(InputError):
        await IdeaBrainstormer(client, Settings(gemini_api_key="test")).brainstorm(
            " ", Language.EN
        )

    assert client.models.content_calls == []
