#!/usr/bin/env python3
"""Generate a blog post with Gemini and save it as a standalone HTML page.

Usage:
  python bin/generate_post.py --image path/to/photo.jpg [--title-hint "Optional title"] \
    [--language en|es] [--tier lite|pro] [--out post.html]
  python bin/generate_post.py --topic "Urban gardening" [--tier pro] [--out post.html]
  python bin/generate_post.py --idea "weekend trips"

Press Ctrl+C while a post is generating to cancel it after the current step.
"""
from __future__ import annotations

import argparse
import asyncio
import contextlib
import logging
import mimetypes
import signal
from pathlib import Path


async def _run(args: argparse.Namespace) -> int:
    from blogstudio.core.config import get_settings
    from blogstudio.schemas.posts import (
        ImagePostRequest,
        Language,
        Tier,
        TopicPostRequest,
    )
    from blogstudio.services.errors import (
        ConfigurationError,
        GenerationError,
        InputError,
        ParseError,
    )
    from blogstudio.services.export import post_slug, render_post_document
    from blogstudio.services.genai_client import create_genai_client
    from blogstudio.services.generation import CancellationToken, PostGenerator
    from blogstudio.services.ideas import IdeaBrainstormer

    settings = get_settings()
    language = Language(args.language)
    tier = Tier(args.tier)

    try:
        client = create_genai_client(settings)
        if args.idea is not None:
            title = await IdeaBrainstormer(client, settings).brainstorm(args.idea, language)
            print(title)
            return 0

        token = CancellationToken()
        loop = asyncio.get_running_loop()
        with contextlib.suppress(NotImplementedError):
            loop.add_signal_handler(signal.SIGINT, token.cancel)

        if args.image:
            image_path = Path(args.image)
            mime_type, _ = mimetypes.guess_type(image_path.name)
            image_bytes = await asyncio.to_thread(image_path.read_bytes)
            request = ImagePostRequest(
                image_bytes=image_bytes,
                mime_type=mime_type or "image/jpeg",
                title_hint=args.title_hint,
                language=language,
                tier=tier,
            )
        else:
            request = TopicPostRequest(topic=args.topic, language=language, tier=tier)

        post = await PostGenerator(client, settings).generate(request, token)
    except (ConfigurationError, InputError, OSError) as exc:
        print("FATAL:", exc)
        return 2
    except (GenerationError, ParseError) as exc:
        print("ERROR:", exc)
        return 1

    if post is None:
        print("Cancelled.")
        return 130

    out_path = Path(args.out or f"{post_slug(post.title)}.html")
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(render_post_document(post, tier, language), encoding="utf-8")
    print("Saved:", out_path)
    for source in post.sources:
        print(" -", source.title, source.uri)
    return 0


def main() -> int:
    ap = argparse.ArgumentParser(description="Generate a blog post with Gemini")
    source = ap.add_mutually_exclusive_group(required=True)
    source.add_argument("--image", help="Path to the image the post is based on")
    source.add_argument("--topic", help="Topic or working title for the post")
    source.add_argument("--idea", help="Theme to brainstorm a post title from")
    ap.add_argument("--title-hint", default="", help="Optional title guiding an image post")
    ap.add_argument("--language", default="en", choices=["en", "es"], help="Output language")
    ap.add_argument("--tier", default="lite", choices=["lite", "pro"], help="Product tier")
    ap.add_argument("--out", default=None, help="Output HTML file (defaults to <slug>.html)")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO)
    return asyncio.run(_run(args))


if __name__ == "__main__":
    raise SystemExit(main())
