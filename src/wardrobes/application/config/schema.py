"""Pydantic schema for wardrobe pipeline settings.

Settings decide whether a language model is used at all, where it is
served, and the confidence policy of the pipeline. Every field has a
default, so an empty JSON object is a valid settings file.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from wardrobes.domain.value_objects import (
    CLARIFICATION_THRESHOLD,
    MAX_COUNT,
    MIN_CONFIDENCE,
)


class LLMSettings(BaseModel):
    """Model-backed parsing settings.

    Attributes:
        enabled: Use the language model; when False only the keyword parser runs.
        ollama_url: Ollama server URL.
        model: Ollama model name.
        timeout: Seconds to wait for one completion before falling back.
        temperature: Sampling temperature.
        max_tokens: Upper bound on reply length.
    """

    model_config = ConfigDict(extra="forbid")

    enabled: bool = False
    ollama_url: str = "http://localhost:11434"
    model: str = "llama3.2"
    timeout: float = Field(default=10.0, gt=0)
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    max_tokens: int = Field(default=200, ge=1)


class PipelineSettings(BaseModel):
    """Root settings object.

    Attributes:
        clarification_threshold: Intents below this confidence ask the user
            to rephrase.
        min_confidence: Intents below this confidence fail validation.
        max_count: Largest count an add/remove command may carry.
        llm: Model-backed parsing settings.
    """

    model_config = ConfigDict(extra="forbid")

    clarification_threshold: float = Field(
        default=CLARIFICATION_THRESHOLD, ge=0.0, le=1.0
    )
    min_confidence: float = Field(default=MIN_CONFIDENCE, ge=0.0, le=1.0)
    max_count: int = Field(default=MAX_COUNT, ge=1)
    llm: LLMSettings = Field(default_factory=LLMSettings)
