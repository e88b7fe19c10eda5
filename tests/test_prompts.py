"""Tests for prompt construction."""
from __future__ import annotations

import pytest

from blogstudio.schemas.posts import GenerationMode, Language, Tier
from blogstudio.services.errors import InputError
from blogstudio.services.prompts import (
    build_idea_prompt,
    build_image_generation_prompt,
    build_image_prompts,
    build_prompt,
)

PRO_MARKERS = ["[TITLE]", "[SUBTITLE]", "[METADESC]", "[KEYWORDS]", "[IMAGE_ALT_TEXTS]", "[CONTENT]"]


def test_pro_prompt_lists_markers_in_order() -> None:
    prompt = build_prompt(GenerationMode.TOPIC, Tier.PRO, Language.EN, "Urban gardening")

    positions = [prompt.index(marker) for marker in PRO_MARKERS]
    assert positions == sorted(positions)
    assert "at least 1500 words" in prompt
    assert '"### "' in prompt
    assert 'this topic: "Urban gardening"' in prompt


def test_lite_prompt_omits_seo_markers() -> None:
    prompt = build_prompt(GenerationMode.IMAGE, Tier.LITE, Language.ES, "")

    assert "[TITLE]" in prompt and "[SUBTITLE]" in prompt and "[CONTENT]" in prompt
    for marker in ("[METADESC]", "[KEYWORDS]", "[IMAGE_ALT_TEXTS]"):
        assert marker not in prompt
    assert "approximately 1000 words" in prompt
    assert "Spanish" in prompt
    assert "create one based on the image" in prompt


def test_image_prompt_uses_title_hint() -> None:
    prompt = build_prompt(GenerationMode.IMAGE, Tier.PRO, Language.EN, "  Alpine lakes ")

    assert 'guide the theme: "Alpine lakes"' in prompt


def test_topic_prompt_requires_context() -> None:
    with pytest.raises(InputError):
        build_prompt(GenerationMode.TOPIC, Tier.LITE, Language.EN, "   ")


def test_idea_prompt_requires_theme() -> None:
    assert "weekend trips" in build_idea_prompt("weekend trips", Language.EN)
    with pytest.raises(InputError):
        build_idea_prompt("", Language.EN)


@pytest.mark.parametrize("count", [0, 1, 2, 3])
def test_image_prompts_pad_to_three(count: int) -> None:
    alt_texts = [f"alt {index}" for index in range(count)]

    prompts = build_image_prompts("Growing Up", alt_texts)

    assert len(prompts) == 3
    assert prompts[:count] == alt_texts
    for fallback in prompts[count:]:
        assert '"Growing Up"' in fallback


def test_image_prompts_truncate_extra_alt_texts() -> None:
    assert build_image_prompts("T", ["a", "b", "c", "d"]) == ["a", "b", "c"]


def test_image_generation_prompt_numbers_descriptions() -> None:
    prompt = build_image_generation_prompt("Growing Up", ["a", "b", "c"])

    assert 'Image 1: "a". Image 2: "b". Image 3: "c".' in prompt
    assert "photorealistic" in prompt
