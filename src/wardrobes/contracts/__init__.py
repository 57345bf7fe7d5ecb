"""Contracts between the wardrobe core and its collaborators."""

from .protocols import (
    IntentParserProtocol,
    LayoutRepositoryProtocol,
    TextGenerationBackend,
)

__all__ = [
    "IntentParserProtocol",
    "LayoutRepositoryProtocol",
    "TextGenerationBackend",
]
