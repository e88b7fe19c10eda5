"""Blog post generation and export endpoints."""
from __future__ import annotations

import asyncio
import contextlib
import mimetypes

from fastapi import (
    APIRouter,
    Depends,
    File,
    Form,
    HTTPException,
    Request,
    Response,
    UploadFile,
    status,
)
from fastapi.responses import HTMLResponse

from blogstudio.core.config import Settings, get_settings
from blogstudio.deps import get_post_generator
from blogstudio.schemas.posts import (
    ImagePostRequest,
    Language,
    Post,
    PostExportRequest,
    PostRequest,
    Tier,
    TopicPostRequest,
)
from blogstudio.services.errors import GenerationError, InputError, ParseError
from blogstudio.services.export import post_slug, render_post_document, render_post_fragment
from blogstudio.services.generation import CancellationToken, PostGenerator

router = APIRouter(prefix="/posts", tags=["posts"])

CLIENT_CLOSED_REQUEST = 499
GENERIC_FAILURE_DETAIL = "Generation failed, please try again."
UPLOAD_READ_CHUNK_SIZE = 64 * 1024  # 64 KiB per chunk


@router.post(
    "/from-image",
    response_model=Post,
    status_code=status.HTTP_201_CREATED,
    summary="Generate a blog post from an uploaded image",
)
async def generate_post_from_image(
    request: Request,
    image: UploadFile = File(..., description="Image the post is based on"),
    title_hint: str = Form("", description="Optional title guiding the theme"),
    language: Language = Form(Language.EN),
    tier: Tier = Form(Tier.LITE),
    settings: Settings = Depends(get_settings),
    generator: PostGenerator = Depends(get_post_generator),
):
    content_type = _resolve_content_type(image)
    if not content_type or not any(
        content_type.startswith(prefix) for prefix in settings.upload_allowed_mime_prefixes
    ):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"File {image.filename or 'uploaded-image'} is not a supported image format",
        )

    data = await _read_upload_bytes(image, limit=settings.upload_max_bytes)
    if not data:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please select an image first.",
        )

    post_request = ImagePostRequest(
        image_bytes=data,
        mime_type=content_type,
        title_hint=title_hint,
        language=language,
        tier=tier,
    )
    return await _run_generation(request, generator, post_request, settings=settings)


@router.post(
    "/from-topic",
    response_model=Post,
    status_code=status.HTTP_201_CREATED,
    summary="Generate a blog post from a topic or working title",
)
async def generate_post_from_topic(
    payload: TopicPostRequest,
    request: Request,
    settings: Settings = Depends(get_settings),
    generator: PostGenerator = Depends(get_post_generator),
):
    return await _run_generation(request, generator, payload, settings=settings)


@router.post("/export/html", response_class=HTMLResponse, summary="Download a post as HTML")
async def export_post_html(payload: PostExportRequest) -> HTMLResponse:
    document = render_post_document(payload.post, payload.tier, payload.language)
    filename = f"{post_slug(payload.post.title)}.html"
    return HTMLResponse(
        content=document,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post(
    "/export/fragment",
    response_class=HTMLResponse,
    summary="Render a post as an HTML fragment for pasting into a CMS",
)
async def export_post_fragment(payload: PostExportRequest) -> HTMLResponse:
    return HTMLResponse(content=render_post_fragment(payload.post, payload.tier))


async def _run_generation(
    request: Request,
    generator: PostGenerator,
    post_request: PostRequest,
    *,
    settings: Settings,
):
    token = CancellationToken()
    watcher = asyncio.create_task(
        _cancel_on_disconnect(request, token, interval=settings.disconnect_poll_seconds)
    )
    try:
        post = await generator.generate(post_request, token)
    except InputError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ParseError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail=GENERIC_FAILURE_DETAIL
        ) from exc
    except GenerationError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    finally:
        watcher.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await watcher

    if post is None:
        return Response(status_code=CLIENT_CLOSED_REQUEST)
    return post


async def _cancel_on_disconnect(
    request: Request, token: CancellationToken, *, interval: float
) -> None:
    while not token.cancelled:
        if await request.is_disconnected():
            token.cancel()
            return
        await asyncio.sleep(interval)


def _resolve_content_type(file: UploadFile) -> str | None:
    if file.content_type:
        return file.content_type
    guessed_type, _ = mimetypes.guess_type(file.filename or "")
    return guessed_type


async def _read_upload_bytes(file: UploadFile, *, limit: int) -> bytes:
    total = 0
    chunks: list[bytes] = []
    try:
        while True:
            remaining = limit - total
            if remaining <= 0:
                # one more byte tells a file of exactly `limit` bytes from a larger one
                if await file.read(1):
                    raise _payload_too_large(limit)
                break

            chunk = await file.read(min(UPLOAD_READ_CHUNK_SIZE, remaining))
            if not chunk:
                break

            total += len(chunk)
            chunks.append(chunk)
    finally:
        await file.close()

    return b"".join(chunks)


def _payload_too_large(limit: int) -> HTTPException:
    size_mb = limit / (1024 * 1024)
    if size_mb.is_integer():
        size_label = f"{int(size_mb)}MB"
    else:
        size_label = f"{size_mb:.1f}MB"
    return HTTPException(
        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
        detail=f"Images cannot be larger than {size_label}",
    )
