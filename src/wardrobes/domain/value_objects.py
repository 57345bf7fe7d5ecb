"""Value objects for the wardrobe layout model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# Structural thickness used when a layout does not specify one (meters).
DEFAULT_THICKNESS = 0.02

# Axis lengths used when a layout has no dimensions yet (meters).
FALLBACK_WIDTH = 1.8
FALLBACK_HEIGHT = 2.2

# Minimum clearances between laid-out elements (meters).
DOOR_MIN_SPACING = 0.10
COLUMN_MIN_SPACING = 0.10
SHELF_MIN_SPACING = 0.04

# Confidence policy. Below CLARIFICATION_THRESHOLD the user is asked to
# rephrase; below MIN_CONFIDENCE an intent is never valid.
CLARIFICATION_THRESHOLD = 0.7
MIN_CONFIDENCE = 0.5

# Largest element count a single add/remove command may carry.
MAX_COUNT = 1000


class Material(str, Enum):
    """Wood species a wardrobe can be finished in."""

    OAK = "oak"
    WALNUT = "walnut"
    PINE = "pine"
    BIRCH = "birch"
    CHERRY = "cherry"

    @classmethod
    def names(cls) -> list[str]:
        """Material names in their canonical order."""
        return [m.value for m in cls]


class IntentAction(str, Enum):
    """Closed set of actions a parsed command can request."""

    ADD_DOOR = "add_door"
    REMOVE_DOOR = "remove_door"
    ADD_SHELF = "add_shelf"
    REMOVE_SHELF = "remove_shelf"
    ADD_COLUMN = "add_column"
    REMOVE_COLUMN = "remove_column"
    CHANGE_MATERIAL = "change_material"
    SET_DIMENSIONS = "set_dimensions"
    MODIFY_GRID = "modify_grid"
    UNKNOWN = "unknown"

    @property
    def is_count_action(self) -> bool:
        return self in COUNT_ACTIONS

    @property
    def is_dimension_action(self) -> bool:
        return self in DIMENSION_ACTIONS


COUNT_ACTIONS: frozenset[IntentAction] = frozenset(
    {
        IntentAction.ADD_DOOR,
        IntentAction.REMOVE_DOOR,
        IntentAction.ADD_SHELF,
        IntentAction.REMOVE_SHELF,
        IntentAction.ADD_COLUMN,
        IntentAction.REMOVE_COLUMN,
    }
)

DIMENSION_ACTIONS: frozenset[IntentAction] = frozenset(
    {IntentAction.SET_DIMENSIONS, IntentAction.MODIFY_GRID}
)


@dataclass(frozen=True)
class Dimensions:
    """Immutable outer dimensions in meters."""

    width: float
    height: float
    depth: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.depth <= 0:
            raise ValueError("All dimensions must be positive")


# Seeded when a dimension command arrives for a layout without dimensions.
DEFAULT_DIMENSIONS = Dimensions(width=2.0, height=2.4, depth=0.6)


@dataclass(frozen=True)
class Door:
    """A door panel positioned along the width axis."""

    id: str
    x: float
    width: float


@dataclass(frozen=True)
class Shelf:
    """A shelf positioned along the height axis (center line)."""

    id: str
    y: float


@dataclass(frozen=True)
class Column:
    """A vertical divider positioned along the width axis.

    Columns have no drawn width of their own; only their offset is stored.
    """

    id: str
    x: float


@dataclass(frozen=True)
class CountChange:
    """Payload of the add/remove actions."""

    count: int = 1


@dataclass(frozen=True)
class MaterialChange:
    """Payload of change_material."""

    material: str | None


@dataclass(frozen=True)
class DimensionChange:
    """Payload of set_dimensions and modify_grid, in centimeters."""

    width: float | None = None
    height: float | None = None
    depth: float | None = None

    def is_empty(self) -> bool:
        return not (self.width or self.height or self.depth)


IntentPayload = CountChange | MaterialChange | DimensionChange
