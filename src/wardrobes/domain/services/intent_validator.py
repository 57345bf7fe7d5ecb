"""Domain rules an intent must satisfy before it is applied."""

from __future__ import annotations

from dataclasses import dataclass

from ..entities import Intent
from ..value_objects import MAX_COUNT, MIN_CONFIDENCE, IntentAction, Material


# Accepted dimension ranges in centimeters, inclusive.
WIDTH_RANGE_CM = (100.0, 400.0)
HEIGHT_RANGE_CM = (150.0, 300.0)
DEPTH_RANGE_CM = (40.0, 80.0)


@dataclass(frozen=True)
class IntentValidation:
    """Result of validating an intent.

    Attributes:
        valid: Whether the intent may be applied.
        error: Stable, human-readable reason when ``valid`` is False.
    """

    valid: bool
    error: str | None = None

    @classmethod
    def ok(cls) -> IntentValidation:
        return cls(valid=True)

    @classmethod
    def fail(cls, error: str) -> IntentValidation:
        return cls(valid=False, error=error)


def _out_of_range(value: float | None, bounds: tuple[float, float]) -> bool:
    # Zero counts as "not given", like a missing value.
    if not value:
        return False
    low, high = bounds
    return value < low or value > high


class IntentValidator:
    """Checks intent parameters against wardrobe constraints.

    The validator is a pure function of the intent; it does not know or care
    which parser produced it.

    Attributes:
        min_confidence: Intents below this confidence are rejected.
        max_count: Largest count an add/remove intent may carry.
    """

    def __init__(
        self, min_confidence: float = MIN_CONFIDENCE, max_count: int = MAX_COUNT
    ) -> None:
        self.min_confidence = min_confidence
        self.max_count = max_count

    def validate(self, intent: Intent) -> IntentValidation:
        """Validate an intent.

        Args:
            intent: The intent to check.

        Returns:
            IntentValidation describing the first rule that failed, if any.
        """
        if intent.confidence < self.min_confidence:
            return IntentValidation.fail("Confidence too low")

        action = intent.action
        params = intent.parameters

        if action.is_count_action:
            if params.count is not None and params.count < 1:
                return IntentValidation.fail("Count must be at least 1")
            if params.count is not None and params.count > self.max_count:
                return IntentValidation.fail(f"Count must be at most {self.max_count}")

        elif action is IntentAction.CHANGE_MATERIAL:
            if not params.material:
                return IntentValidation.fail("Material name required")
            allowed = Material.names()
            if params.material.lower() not in allowed:
                return IntentValidation.fail(
                    f"Material must be one of: {', '.join(allowed)}"
                )

        elif action.is_dimension_action:
            if not (params.width or params.height or params.depth):
                return IntentValidation.fail("At least one dimension required")
            if _out_of_range(params.width, WIDTH_RANGE_CM):
                return IntentValidation.fail("Width must be 100-400cm")
            if _out_of_range(params.height, HEIGHT_RANGE_CM):
                return IntentValidation.fail("Height must be 150-300cm")
            if _out_of_range(params.depth, DEPTH_RANGE_CM):
                return IntentValidation.fail("Depth must be 40-80cm")

        elif action is IntentAction.UNKNOWN:
            return IntentValidation.fail("Unknown action")

        return IntentValidation.ok()
