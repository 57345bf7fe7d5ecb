"""Domain layer - wardrobe model and pure intent services."""

from .entities import Intent, IntentParameters, LayoutState
from .exceptions import StateNotFoundError, StateShapeError, WardrobeError
from .services import (
    IntentValidation,
    IntentValidator,
    KeywordIntentParser,
    LayoutEngine,
)
from .value_objects import (
    CLARIFICATION_THRESHOLD,
    MAX_COUNT,
    MIN_CONFIDENCE,
    Column,
    CountChange,
    DimensionChange,
    Dimensions,
    Door,
    IntentAction,
    Material,
    MaterialChange,
    Shelf,
)

__all__ = [
    "CLARIFICATION_THRESHOLD",
    "MAX_COUNT",
    "MIN_CONFIDENCE",
    "Column",
    "CountChange",
    "DimensionChange",
    "Dimensions",
    "Door",
    "Intent",
    "IntentAction",
    "IntentParameters",
    "IntentValidation",
    "IntentValidator",
    "KeywordIntentParser",
    "LayoutEngine",
    "LayoutState",
    "Material",
    "MaterialChange",
    "Shelf",
    "StateNotFoundError",
    "StateShapeError",
    "WardrobeError",
]
