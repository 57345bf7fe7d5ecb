"""LLM integration for parsing wardrobe commands.

Model-backed parsing uses pydantic-ai with Ollama as the local inference
backend, and always falls back to the deterministic keyword parser.

Submodules:
    models: Pydantic schema for model replies
    prompts: System instructions for intent parsing
    backend: pydantic-ai text-generation backend
    ollama_client: Health checks for the Ollama server
    intent_parser: Model-backed parser with fallback
"""

from __future__ import annotations

from .models import (
    IntentParametersResponse,
    IntentResponse,
    extract_json_object,
    parse_intent_reply,
)
from .ollama_client import OllamaHealthCheck, check_ollama_sync
from .prompts import INTENT_SYSTEM_PROMPT, LOW_CONFIDENCE_CLARIFICATION
from .backend import OllamaTextBackend, create_ollama_model
from .intent_parser import LLMIntentParser

__all__ = [
    # Reply schema
    "IntentParametersResponse",
    "IntentResponse",
    "extract_json_object",
    "parse_intent_reply",
    # Ollama client
    "OllamaHealthCheck",
    "check_ollama_sync",
    # Prompts
    "INTENT_SYSTEM_PROMPT",
    "LOW_CONFIDENCE_CLARIFICATION",
    # Backend
    "OllamaTextBackend",
    "create_ollama_model",
    # Parser
    "LLMIntentParser",
]
