"""Tests for HTML export of generated posts."""
from __future__ import annotations

from blogstudio.schemas.posts import GeneratedImage, Language, Post, Tier
from blogstudio.services.export import post_slug, render_post_document, render_post_fragment


def _post(content: str, image_count: int = 3) -> Post:
    return Post(
        title="Growing <Up>",
        subtitle="City gardens rise",
        content=content,
        meta_description='Roofs "and" beds',
        seo_keywords=["gardens", "city"],
        images=[
            GeneratedImage(data=f"data:image/jpeg;base64,{index}", alt=f"alt {index}")
            for index in range(image_count)
        ],
    )


def test_fragment_spreads_images_between_paragraphs() -> None:
    html = render_post_fragment(_post("p1\n\np2\np3\np4\np5\np6"), Tier.LITE)

    assert html.startswith("<h1>Growing &lt;Up&gt;</h1>\n<h2>City gardens rise</h2>\n")
    assert html.count("<p>") == 6
    assert html.count("<figure>") == 3
    assert html.index("alt 0") > html.index("<p>p2</p>")
    assert html.index("alt 0") < html.index("<p>p3</p>")


def test_fragment_appends_leftover_images() -> None:
    html = render_post_fragment(_post("only one paragraph"), Tier.LITE)

    assert html.count("<figure>") == 3
    assert html.index("<p>only one paragraph</p>") < html.index("alt 0")


def test_fragment_renders_subheadings_for_pro_only() -> None:
    content = "### Why now\nBody"

    assert "<h3>Why now</h3>" in render_post_fragment(_post(content, 0), Tier.PRO)
    assert "<p>### Why now</p>" in render_post_fragment(_post(content, 0), Tier.LITE)


def test_document_includes_meta_tags_for_pro() -> None:
    pro = render_post_document(_post("Body"), Tier.PRO, Language.ES)
    lite = render_post_document(_post("Body"), Tier.LITE, Language.EN)

    assert '<html lang="es">' in pro
    assert '<meta name="description" content="Roofs &quot;and&quot; beds">' in pro
    assert '<meta name="keywords" content="gardens, city">' in pro
    assert 'name="description"' not in lite
    assert "<title>Growing &lt;Up&gt;</title>" in lite


def test_post_slug() -> None:
    assert post_slug("Growing Up: City Gardens!") == "growing-up-city-gardens"
    assert post_slug("¡¿!?") == "blog-post"
