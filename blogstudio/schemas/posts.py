"""Schemas for the blog post generation workflow."""
from __future__ import annotations

from enum import Enum
from typing import Annotated, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Language(str, Enum):
    EN = "en"
    ES = "es"

    @property
    def language_name(self) -> str:
        return "Spanish" if self is Language.ES else "English"


class Tier(str, Enum):
    LITE = "lite"
    PRO = "pro"


class GenerationMode(str, Enum):
    IMAGE = "image"
    TOPIC = "topic"
    IDEA = "idea"


class _RequestBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    language: Language = Field(default=Language.EN, description="Output language")
    tier: Tier = Field(default=Tier.LITE, description="Product tier")


class ImagePostRequest(_RequestBase):
    mode: Literal["image"] = "image"
    image_bytes: bytes = Field(..., description="Raw bytes of the uploaded image")
    mime_type: str = Field(..., description="MIME type of the uploaded image")
    title_hint: str = Field(default="", description="Optional title guiding the theme")


class TopicPostRequest(_RequestBase):
    mode: Literal["topic"] = "topic"
    topic: str = Field(..., description="Topic or working title for the post")


class IdeaRequest(_RequestBase):
    mode: Literal["idea"] = "idea"
    theme: str = Field(..., description="Loose theme to brainstorm a title from")


PostRequest = Annotated[
    Union[ImagePostRequest, TopicPostRequest], Field(discriminator="mode")
]
GenerationRequest = Annotated[
    Union[ImagePostRequest, TopicPostRequest, IdeaRequest],
    Field(discriminator="mode"),
]


class Source(BaseModel):
    uri: str
    title: str


class GeneratedImage(BaseModel):
    data: str = Field(..., description="Base64 data URI of the generated JPEG")
    alt: str


class ParsedText(BaseModel):
    title: str
    subtitle: str
    content: str
    meta_description: str = ""
    seo_keywords: List[str] = Field(default_factory=list)
    image_alt_texts: List[str] = Field(default_factory=list)


class Post(ParsedText):
    images: List[GeneratedImage] = Field(default_factory=list)
    sources: List[Source] = Field(default_factory=list)


class IdeaResponse(BaseModel):
    title: str


class PostExportRequest(BaseModel):
    post: Post
    language: Language = Language.EN
    tier: Tier = Tier.LITE
