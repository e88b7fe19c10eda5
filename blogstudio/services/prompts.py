"""Prompt construction for text, idea and image generation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence

from blogstudio.schemas.posts import GenerationMode, Language, Tier
from blogstudio.services.errors import InputError
from blogstudio.services.post_format import captured_sections

IMAGE_COUNT = 3
IMAGE_STYLE = "photorealistic"
SUBHEADING_PREFIX = "### "


@dataclass(frozen=True, slots=True)
class TierProfile:
    persona: str
    post_style: str
    length: str
    structure: str
    title_style: str
    content_length: str


TIER_PROFILES: Dict[Tier, TierProfile] = {
    Tier.LITE: TierProfile(
        persona="",
        post_style="a comprehensive, well-structured, and engaging blog post",
        length="The post should be approximately 1000 words.",
        structure="Write in plain paragraphs without subheadings.",
        title_style="A compelling and relevant title",
        content_length="approximately 1000 words",
    ),
    Tier.PRO: TierProfile(
        persona="Act as an expert content creator and SEO specialist. ",
        post_style=(
            "a highly detailed, comprehensive, SEO-optimized, and engaging blog post"
        ),
        length="The post must be at least 1500 words long.",
        structure=(
            "The post must be well-structured with a clear hierarchy and include "
            f'multiple subheadings for main topics, each on its own line starting with "{SUBHEADING_PREFIX}" '
            f'(e.g., "{SUBHEADING_PREFIX}Main Topic"). Within these sections, use bullet points, '
            "numbered lists, or bold text to improve readability and SEO."
        ),
        title_style="A compelling, SEO-friendly title",
        content_length=f'at least 1500 words, using "{SUBHEADING_PREFIX}" subheadings',
    ),
}

FALLBACK_IMAGE_PROMPT = 'An image that captures the essence of the blog post titled "{title}"'


def build_prompt(
    mode: GenerationMode, tier: Tier, language: Language, context: str
) -> str:
    """Return the instruction text for a grounded blog post generation call."""

    context = (context or "").strip()
    profile = TIER_PROFILES[tier]
    language_name = language.language_name

    if mode is GenerationMode.IMAGE:
        subject = "this image"
        basis = "the image"
        if context:
            guidance = (
                f'The user has provided a title to guide the theme: "{context}". '
                "The generated title should be inspired by this."
            )
        else:
            guidance = "The user has not provided a title, so create one based on the image."
    elif mode is GenerationMode.TOPIC:
        if not context:
            raise InputError("Please enter a topic or title.")
        subject = f'this topic: "{context}"'
        basis = "the topic"
        guidance = "The generated title should be inspired by the user's topic."
    else:
        raise InputError(f"Unsupported generation mode for a blog post: {mode.value}")

    lines = [
        f"{profile.persona}Analyze {subject}. Use Google Search to gather up-to-date information.",
        f"Based on {basis} and search results, generate {profile.post_style} in {language_name}.",
        profile.length,
        profile.structure,
        guidance,
        "Generate the output in the following format, using the exact separators shown. "
        "Do not add any other text, explanations, or markdown formatting before or after this structure.",
        "",
    ]
    instructions = _section_instructions(profile, language_name, basis)
    for section in captured_sections(tier):
        lines.append(section.marker)
        lines.append(instructions[section.field])
        lines.append("")

    return "\n".join(lines).rstrip() + "\n"


def _section_instructions(
    profile: TierProfile, language_name: str, basis: str
) -> Dict[str, str]:
    return {
        "title": f"{profile.title_style} for the blog post based on {basis}, in {language_name}.",
        "subtitle": f"An engaging subtitle that complements the title, in {language_name}.",
        "meta_description": "A compelling meta description, between 120 and 155 characters.",
        "seo_keywords": "A comma-separated list of 5-7 relevant SEO keywords.",
        "image_alt_texts": (
            f"Exactly {IMAGE_COUNT} distinct, descriptive, and keyword-rich alt texts for "
            f"{IMAGE_COUNT} images that would accompany this post. Each alt text should be on a new line."
        ),
        "content": (
            f"The full content of the blog post, {profile.content_length}, in {language_name}."
        ),
    }


def build_idea_prompt(theme: str, language: Language) -> str:
    theme = (theme or "").strip()
    if not theme:
        raise InputError("Please enter a theme to brainstorm from.")
    return (
        f"Brainstorm a catchy and interesting blog post title in {language.language_name} "
        f'based on the following theme: "{theme}". Return only the title, with no extra '
        "text, explanations, or quotation marks."
    )


def build_image_prompts(title: str, alt_texts: Sequence[str] | None) -> List[str]:
    """Return exactly three image descriptions, padding with title-based fallbacks."""

    prompts = list(alt_texts or [])[:IMAGE_COUNT]
    while len(prompts) < IMAGE_COUNT:
        prompts.append(FALLBACK_IMAGE_PROMPT.format(title=title))
    return prompts


def build_image_generation_prompt(title: str, prompts: Sequence[str]) -> str:
    descriptions = " ".join(
        f'Image {index}: "{prompt}".' for index, prompt in enumerate(prompts, start=1)
    )
    return (
        f"Generate three distinct, {IMAGE_STYLE}, high-quality images for a blog post "
        f'titled "{title}". The images should be based on the following descriptions: '
        f"{descriptions}"
    )


__all__ = [
    "IMAGE_COUNT",
    "build_prompt",
    "build_idea_prompt",
    "build_image_prompts",
    "build_image_generation_prompt",
]
