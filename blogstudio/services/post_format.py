"""Section layout of the delimited text format shared by prompts and parser."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from blogstudio.schemas.posts import Tier


@dataclass(frozen=True, slots=True)
class Section:
    """A marker-delimited field of the generated text."""

    field: str
    marker: str
    required: bool = True
    # Uncaptured sections only delimit their neighbours
    captured: bool = True


TITLE = Section("title", "[TITLE]")
SUBTITLE = Section("subtitle", "[SUBTITLE]")
CONTENT = Section("content", "[CONTENT]")

_SEO_FIELDS = (
    ("meta_description", "[METADESC]"),
    ("seo_keywords", "[KEYWORDS]"),
    ("image_alt_texts", "[IMAGE_ALT_TEXTS]"),
)

TIER_SECTIONS: Dict[Tier, Tuple[Section, ...]] = {
    Tier.LITE: (
        TITLE,
        SUBTITLE,
        *(Section(f, m, required=False, captured=False) for f, m in _SEO_FIELDS),
        CONTENT,
    ),
    Tier.PRO: (
        TITLE,
        SUBTITLE,
        *(Section(f, m) for f, m in _SEO_FIELDS),
        CONTENT,
    ),
}

NON_EMPTY_FIELDS = ("title", "subtitle", "content")


def captured_sections(tier: Tier) -> Tuple[Section, ...]:
    """Return the sections a tier asks the model to fill in."""

    return tuple(section for section in TIER_SECTIONS[tier] if section.captured)


__all__ = ["Section", "TIER_SECTIONS", "NON_EMPTY_FIELDS", "captured_sections"]
