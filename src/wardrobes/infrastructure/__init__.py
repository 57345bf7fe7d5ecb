"""Infrastructure layer - language model access and layout storage."""

from .llm import LLMIntentParser, OllamaHealthCheck, OllamaTextBackend
from .repository import InMemoryLayoutRepository, JsonFileLayoutRepository

__all__ = [
    "InMemoryLayoutRepository",
    "JsonFileLayoutRepository",
    "LLMIntentParser",
    "OllamaHealthCheck",
    "OllamaTextBackend",
]
