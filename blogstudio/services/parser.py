"""Extract structured post fields from the delimited text response."""
from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from blogstudio.schemas.posts import ParsedText, Tier
from blogstudio.services.errors import ParseError
from blogstudio.services.post_format import NON_EMPTY_FIELDS, TIER_SECTIONS, Section

PARSE_FAILURE_MESSAGE = (
    "Failed to parse the response from the AI. The structure was not as expected."
)


def parse_post_text(raw_text: str, tier: Tier) -> ParsedText:
    """Return the fields of ``raw_text`` for ``tier`` or raise :class:`ParseError`.

    Markers are located in schema order, each one searched after the previous
    one, so marker-like text inside ``[CONTENT]`` never splits the post.
    """

    raw_text = raw_text or ""
    located = _locate_sections(raw_text, TIER_SECTIONS[tier])

    values: Dict[str, str] = {}
    for index, (section, body_start) in enumerate(located):
        if index + 1 < len(located):
            next_section, next_body_start = located[index + 1]
            body_end = next_body_start - len(next_section.marker)
        else:
            body_end = len(raw_text)
        if section.captured:
            values[section.field] = raw_text[body_start:body_end].strip()

    for field in NON_EMPTY_FIELDS:
        if not values.get(field):
            raise ParseError(PARSE_FAILURE_MESSAGE, raw_text=raw_text)

    return ParsedText(
        title=values["title"],
        subtitle=values["subtitle"],
        content=values["content"],
        meta_description=values.get("meta_description", ""),
        seo_keywords=split_keywords(values.get("seo_keywords", "")),
        image_alt_texts=split_alt_texts(values.get("image_alt_texts", "")),
    )


def _locate_sections(
    raw_text: str, sections: Sequence[Section]
) -> List[Tuple[Section, int]]:
    located: List[Tuple[Section, int]] = []
    cursor = 0
    for index, section in enumerate(sections):
        if section.required:
            start = raw_text.find(section.marker, cursor)
            if start < 0:
                raise ParseError(PARSE_FAILURE_MESSAGE, raw_text=raw_text)
        else:
            bound = _next_required_offset(raw_text, sections[index + 1 :], cursor)
            start = raw_text.find(section.marker, cursor, bound)
            if start < 0:
                continue
        cursor = start + len(section.marker)
        located.append((section, cursor))
    return located


def _next_required_offset(
    raw_text: str, remaining: Sequence[Section], cursor: int
) -> int:
    for section in remaining:
        if section.required:
            offset = raw_text.find(section.marker, cursor)
            return offset if offset >= 0 else len(raw_text)
    return len(raw_text)


def split_keywords(value: str) -> List[str]:
    return [token.strip() for token in value.split(",") if token.strip()]


def split_alt_texts(value: str) -> List[str]:
    return [line.strip() for line in value.splitlines() if line.strip()]


__all__ = ["parse_post_text", "split_keywords", "split_alt_texts", "PARSE_FAILURE_MESSAGE"]
