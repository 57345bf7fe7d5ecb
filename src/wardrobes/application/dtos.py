"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from wardrobes.application.serialization import state_to_dict
from wardrobes.domain.entities import Intent, LayoutState


class OutcomeKind(str, Enum):
    """How a command run ended."""

    NEEDS_CLARIFICATION = "needs_clarification"
    INVALID = "invalid"
    APPLIED = "applied"


@dataclass(frozen=True)
class Outcome:
    """Result of running one command through the pipeline.

    Every outcome carries the intent that produced it so a client can explain
    why the layout did or did not change.

    Attributes:
        kind: Which of the three outcomes occurred.
        intent: The parsed intent.
        state: The resulting layout. For anything but APPLIED this is the
            input layout, unchanged.
        message: The clarification (NEEDS_CLARIFICATION) or the validation
            error (INVALID); None when APPLIED.
    """

    kind: OutcomeKind
    intent: Intent
    state: LayoutState
    message: str | None = None

    @property
    def applied(self) -> bool:
        return self.kind is OutcomeKind.APPLIED

    @property
    def error(self) -> str | None:
        """The validation error, for INVALID outcomes."""
        return self.message if self.kind is OutcomeKind.INVALID else None

    @property
    def new_state(self) -> LayoutState | None:
        """The post-command layout, for APPLIED outcomes."""
        return self.state if self.applied else None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "kind": self.kind.value,
            "intent": self.intent.to_dict(),
        }
        if self.message is not None:
            data["message"] = self.message
        if self.applied:
            data["state"] = state_to_dict(self.state)
        return data
