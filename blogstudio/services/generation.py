"""Business workflow for generating a grounded blog post with images."""
from __future__ import annotations

import base64
import logging
import time
from enum import Enum
from typing import Any, List, Optional, Sequence
from uuid import uuid4

from google.genai import types

from blogstudio.core.config import Settings
from blogstudio.schemas.posts import (
    GeneratedImage,
    GenerationMode,
    ImagePostRequest,
    ParsedText,
    Post,
    PostRequest,
    Source,
    TopicPostRequest,
)
from blogstudio.services.errors import GenerationError, InputError, ParseError
from blogstudio.services.parser import parse_post_text
from blogstudio.services.prompts import (
    IMAGE_COUNT,
    build_image_generation_prompt,
    build_image_prompts,
    build_prompt,
)

logger = logging.getLogger(__name__)

AGENT_ID = "PostGenerator"
IMAGE_MIME_TYPE = "image/jpeg"
IMAGE_ASPECT_RATIO = "16:9"
UNTITLED_SOURCE = "Untitled Source"


class GenerationState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    AWAITING_IMAGES = "awaiting_images"
    ASSEMBLING = "assembling"
    DONE = "done"


class CancellationToken:
    """Cooperative cancellation flag checked between pipeline steps.

    Cancelling does not interrupt an in-flight remote call; it only stops the
    generator from acting on its result.
    """

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class PostGenerator:
    """Coordinate grounded text generation, image generation and assembly."""

    def __init__(self, client: Any, settings: Settings) -> None:
        self._client = client
        self._settings = settings
        self._state = GenerationState.IDLE
        self.last_error: Exception | None = None

    @property
    def state(self) -> GenerationState:
        return self._state

    async def generate(
        self, request: PostRequest, token: CancellationToken | None = None
    ) -> Optional[Post]:
        """Run the pipeline and return the post, or ``None`` when cancelled."""

        token = token or CancellationToken()
        request_id = uuid4().hex
        self._validate_request(request)
        self.last_error = None

        log_extra = {
            "agent_id": AGENT_ID,
            "request_id": request_id,
            "mode": request.mode,
            "tier": request.tier.value,
        }
        logger.info("Starting post generation", extra=log_extra)

        if token.cancelled:
            return self._cancel(log_extra)

        timings: dict[str, float] = {}
        try:
            self._state = GenerationState.SUBMITTING
            text_started = time.perf_counter()
            parsed, sources = await self._generate_text(request, request_id=request_id)
            timings["text_ms"] = (time.perf_counter() - text_started) * 1000

            if token.cancelled:
                return self._cancel(log_extra)

            self._state = GenerationState.AWAITING_IMAGES
            image_started = time.perf_counter()
            image_data = await self._generate_images(
                parsed.title, parsed.image_alt_texts, request_id=request_id
            )
            timings["image_ms"] = (time.perf_counter() - image_started) * 1000

            if token.cancelled:
                return self._cancel(log_extra)
        except Exception as exc:
            self._state = GenerationState.IDLE
            self.last_error = exc
            raise

        self._state = GenerationState.ASSEMBLING
        post = assemble_post(parsed, image_data, sources)
        self._state = GenerationState.DONE

        logger.info(
            "Post generation completed",
            extra={
                **log_extra,
                "source_count": len(post.sources),
                "image_count": len(post.images),
                "timings_ms": timings,
            },
        )
        return post

    def _validate_request(self, request: PostRequest) -> None:
        if isinstance(request, ImagePostRequest):
            if not request.image_bytes:
                raise InputError("Please select an image first.")
        elif isinstance(request, TopicPostRequest):
            if not request.topic.strip():
                raise InputError("Please enter a topic or title.")
        else:
            raise InputError("Blog posts can only be generated from an image or a topic.")

    def _cancel(self, log_extra: dict[str, Any]) -> None:
        self._state = GenerationState.IDLE
        self.last_error = None
        logger.info("Post generation cancelled by user", extra=log_extra)
        return None

    async def _generate_text(
        self, request: PostRequest, *, request_id: str
    ) -> tuple[ParsedText, List[Source]]:
        contents: List[types.Part] = []
        if isinstance(request, ImagePostRequest):
            prompt = build_prompt(
                GenerationMode.IMAGE, request.tier, request.language, request.title_hint
            )
            contents.append(
                types.Part.from_bytes(data=request.image_bytes, mime_type=request.mime_type)
            )
        else:
            prompt = build_prompt(
                GenerationMode.TOPIC, request.tier, request.language, request.topic
            )
        contents.append(types.Part.from_text(text=prompt))

        logger.debug(
            "Submitting text generation request to Gemini",
            extra={
                "text_model": self._settings.gemini_text_model,
                "request_id": request_id,
            },
        )

        try:
            response = await self._client.aio.models.generate_content(
                model=self._settings.gemini_text_model,
                contents=contents,
                config=types.GenerateContentConfig(
                    tools=[types.Tool(google_search=types.GoogleSearch())],
                ),
            )
        except Exception as exc:
            logger.exception(
                "Gemini text generation failed",
                extra={"agent_id": AGENT_ID, "request_id": request_id},
            )
            raise GenerationError(
                "Failed to generate the blog post. Please try again.", step="text"
            ) from exc

        raw_text = response.text or ""
        try:
            parsed = parse_post_text(raw_text, request.tier)
        except ParseError:
            logger.error(
                "Failed to parse Gemini post response: %s",
                raw_text,
                extra={"agent_id": AGENT_ID, "request_id": request_id},
            )
            raise

        return parsed, extract_sources(response)

    async def _generate_images(
        self, title: str, alt_texts: Sequence[str], *, request_id: str
    ) -> List[str]:
        prompt = build_image_generation_prompt(title, build_image_prompts(title, alt_texts))

        logger.debug(
            "Generating images via Gemini",
            extra={
                "image_model": self._settings.gemini_image_model,
                "request_id": request_id,
            },
        )

        try:
            response = await self._client.aio.models.generate_images(
                model=self._settings.gemini_image_model,
                prompt=prompt,
                config=types.GenerateImagesConfig(
                    number_of_images=IMAGE_COUNT,
                    output_mime_type=IMAGE_MIME_TYPE,
                    aspect_ratio=IMAGE_ASPECT_RATIO,
                ),
            )
        except Exception as exc:
            logger.exception(
                "Gemini image generation failed",
                extra={"agent_id": AGENT_ID, "request_id": request_id},
            )
            raise GenerationError(
                "Failed to generate images for the blog post.", step="images"
            ) from exc

        generated = [
            item.image.image_bytes
            for item in (response.generated_images or [])
            if item.image is not None and item.image.image_bytes
        ]
        if len(generated) < IMAGE_COUNT:
            logger.warning(
                "Gemini returned too few images",
                extra={
                    "agent_id": AGENT_ID,
                    "request_id": request_id,
                    "expected": IMAGE_COUNT,
                    "actual": len(generated),
                },
            )
            raise GenerationError(
                "Failed to generate images for the blog post.", step="images"
            )

        return [_to_data_uri(data) for data in generated[:IMAGE_COUNT]]


def extract_sources(response: Any) -> List[Source]:
    """Return web citations from the grounding metadata of a text response."""

    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []

    sources: List[Source] = []
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        uri = getattr(web, "uri", None)
        if not uri:
            continue
        sources.append(Source(uri=uri, title=getattr(web, "title", None) or UNTITLED_SOURCE))
    return sources


def assemble_post(
    parsed: ParsedText, image_data: Sequence[str], sources: Sequence[Source]
) -> Post:
    """Merge parsed text, image payloads and sources into a single post."""

    alt_texts = parsed.image_alt_texts
    images = [
        GeneratedImage(
            data=data,
            alt=alt_texts[index] if index < len(alt_texts) else f"{parsed.title} - Image {index + 1}",
        )
        for index, data in enumerate(image_data)
    ]
    return Post(**parsed.model_dump(), images=images, sources=list(sources))


def _to_data_uri(data: bytes | str) -> str:
    if isinstance(data, str):
        encoded = data
    else:
        encoded = base64.b64encode(data).decode("ascii")
    return f"data:{IMAGE_MIME_TYPE};base64,{encoded}"


__all__ = [
    "CancellationToken",
    "GenerationState",
    "PostGenerator",
    "assemble_post",
    "extract_sources",
]
