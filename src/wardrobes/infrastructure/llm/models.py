"""Pydantic schema for intents returned by the language model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from wardrobes.domain.entities import Intent, IntentParameters
from wardrobes.domain.value_objects import IntentAction


class IntentParametersResponse(BaseModel):
    """Parameters block of a model reply. Dimensions are centimeters."""

    model_config = ConfigDict(extra="ignore")

    count: int | None = None
    material: str | None = None
    width: float | None = None
    height: float | None = None
    depth: float | None = None


class IntentResponse(BaseModel):
    """One intent object as emitted by the model.

    Unknown top-level keys are ignored; an unknown action or an out of range
    confidence fails validation and sends the caller to the fallback parser.
    """

    model_config = ConfigDict(extra="ignore")

    action: IntentAction
    confidence: float = Field(ge=0.0, le=1.0)
    parameters: IntentParametersResponse = Field(
        default_factory=IntentParametersResponse
    )
    clarification: str | None = None

    def to_intent(self) -> Intent:
        """Convert to the domain intent."""
        return Intent(
            action=self.action,
            confidence=self.confidence,
            parameters=IntentParameters(**self.parameters.model_dump()),
            clarification=self.clarification or None,
        )


def extract_json_object(text: str) -> str:
    """Cut the outermost JSON object out of a model reply.

    Models sometimes wrap the object in prose or a fenced code block.

    Raises:
        ValueError: If the reply holds no ``{...}`` span.
    """
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end < start:
        raise ValueError("No JSON object in model reply")
    return text[start : end + 1]


def parse_intent_reply(text: str) -> Intent:
    """Parse a raw model reply into an intent.

    Raises:
        ValueError: If the reply holds no JSON object.
        pydantic.ValidationError: If the object does not match IntentResponse.
    """
    return IntentResponse.model_validate_json(extract_json_object(text)).to_intent()
