"""Error taxonomy shared by the generation services."""
from __future__ import annotations


class BlogGenerationError(RuntimeError):
    """Base class for failures surfaced by the generation workflow."""


class ConfigurationError(BlogGenerationError):
    """Raised when the Gemini API key is not configured."""


class InputError(BlogGenerationError):
    """Raised when required user input is missing, before any remote call."""


class ParseError(BlogGenerationError):
    """Raised when the text response does not follow the marker format."""

    def __init__(self, message: str, *, raw_text: str = "") -> None:
        super().__init__(message)
        self.raw_text = raw_text


class GenerationError(BlogGenerationError):
    """Raised when a remote Gemini call fails."""

    def __init__(self, message: str, *, step: str) -> None:
        super().__init__(message)
        self.step = step


__all__ = [
    "BlogGenerationError",
    "ConfigurationError",
    "GenerationError",
    "InputError",
    "ParseError",
]
