"""Render generated posts as standalone HTML for download or clipboard copy."""
from __future__ import annotations

import re
from html import escape

from blogstudio.schemas.posts import Language, Post, Tier
from blogstudio.services.prompts import SUBHEADING_PREFIX

_ACCENTS = {
    Tier.LITE: ("38BDF8", "67e8f9"),
    Tier.PRO: ("d946ef", "a78bfa"),
}

_FIGURE = (
    '<figure><img src="{src}" alt="{alt}" style="width: 100%; height: auto; '
    'border-radius: 8px; margin: 1em 0;" /></figure>\n'
)

_DOCUMENT = """<!DOCTYPE html>
<html lang="{lang}">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>{meta_tags}
    <style>
        body {{ font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Helvetica, Arial, sans-serif; line-height: 1.6; color: #E2E8F0; background-color: #0F172A; max-width: 800px; margin: 40px auto; padding: 20px; }}
        h1 {{ color: #{h1_color}; font-size: 2.5em; }}
        h2 {{ color: #94A3B8; font-size: 1.5em; border-bottom: 1px solid #334155; padding-bottom: 10px; }}
        h3 {{ color: #{h3_color}; font-size: 1.3em; margin-top: 1.5em; }}
        img {{ max-width: 100%; height: auto; border-radius: 8px; margin: 20px 0; }}
        p {{ margin-bottom: 1em; font-size: 1.1em; color: #CBD5E1; }}
        main {{ background-color: #1E293B; padding: 20px 40px; border-radius: 12px; }}
    </style>
</head>
<body>
    <main>{body}</main>
</body>
</html>
"""


def render_post_fragment(post: Post, tier: Tier) -> str:
    """Return the post body with images spread evenly between paragraphs."""

    html = f"<h1>{escape(post.title)}</h1>\n<h2>{escape(post.subtitle)}</h2>\n"
    paragraphs = [para for para in re.split(r"\n+", post.content) if para.strip()]
    images = post.images
    interval = (
        max(1, len(paragraphs) // len(images)) if images else len(paragraphs) + 1
    )

    image_index = 0
    for index, para in enumerate(paragraphs):
        if tier is Tier.PRO and para.startswith(SUBHEADING_PREFIX):
            html += f"<h3>{escape(para[len(SUBHEADING_PREFIX):])}</h3>\n"
        else:
            html += f"<p>{escape(para)}</p>\n"

        if (index + 1) % interval == 0 and image_index < len(images):
            html += _figure(post, image_index)
            image_index += 1

    while image_index < len(images):
        html += _figure(post, image_index)
        image_index += 1
    return html


def render_post_document(post: Post, tier: Tier, language: Language) -> str:
    meta_tags = ""
    if tier is Tier.PRO:
        meta_tags = (
            f'\n    <meta name="description" content="{escape(post.meta_description)}">'
            f'\n    <meta name="keywords" content="{escape(", ".join(post.seo_keywords))}">'
        )
    h1_color, h3_color = _ACCENTS[tier]
    return _DOCUMENT.format(
        lang=language.value,
        title=escape(post.title),
        meta_tags=meta_tags,
        h1_color=h1_color,
        h3_color=h3_color,
        body=render_post_fragment(post, tier),
    )


def post_slug(title: str) -> str:
    slug = re.sub(r"\s+", "-", title.lower())
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    return slug or "blog-post"


def _figure(post: Post, index: int) -> str:
    image = post.images[index]
    return _FIGURE.format(src=escape(image.data), alt=escape(image.alt))


__all__ = ["render_post_fragment", "render_post_document", "post_slug"]
