"""Hand-written stand-ins mirroring the google-genai client surface."""
from __future__ import annotations

from types import SimpleNamespace
from typing import Any, List, Sequence


def text_response(text: str, chunks: Sequence[tuple[str | None, str | None]] = ()) -> Any:
    grounding_chunks = [
        SimpleNamespace(web=SimpleNamespace(uri=uri, title=title)) for uri, title in chunks
    ]
    candidate = SimpleNamespace(
        grounding_metadata=SimpleNamespace(grounding_chunks=grounding_chunks or None)
    )
    return SimpleNamespace(text=text, candidates=[candidate])


def images_response(payloads: Sequence[bytes]) -> Any:
    return SimpleNamespace(
        generated_images=[
            SimpleNamespace(image=SimpleNamespace(image_bytes=payload)) for payload in payloads
        ]
    )


class _StubModels:
    def __init__(self, text: Any = None, images: Any = None) -> None:
        self._text = text
        self._images = images
        self.content_calls: List[dict] = []
        self.image_calls: List[dict] = []
        self.on_content = None
        self.on_images = None

    async def generate_content(self, **kwargs: Any):
        self.content_calls.append(kwargs)
        if self.on_content is not None:
            self.on_content()
        if isinstance(self._text, Exception):
            raise self._text
        return self._text

    async def generate_images(self, **kwargs: Any):
        self.image_calls.append(kwargs)
        if self.on_images is not None:
            self.on_images()
        if isinstance(self._images, Exception):
            raise self._images
        return self._images


class StubGenaiClient:
    def __init__(self, *, text: Any = None, images: Any = None) -> None:
        self.models = _StubModels(text=text, images=images)
        self.aio = SimpleNamespace(models=self.models)
