"""Domain entities for the wardrobe intent pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from .value_objects import (
    DEFAULT_THICKNESS,
    FALLBACK_HEIGHT,
    FALLBACK_WIDTH,
    Column,
    CountChange,
    DimensionChange,
    Dimensions,
    Door,
    IntentAction,
    IntentPayload,
    Material,
    MaterialChange,
    Shelf,
)


def _thickness(value: float | None) -> float:
    # Unset and zero both fall back to the default.
    return value or DEFAULT_THICKNESS


@dataclass(frozen=True)
class LayoutState:
    """The parametric description of a wardrobe.

    Instances are immutable; every change produces a new state through
    ``with_changes``. Dimensions are meters, element offsets are measured
    from the left (doors, columns) or bottom (shelves) outer edge.

    Attributes:
        dimensions: Outer width/height/depth, absent until first set.
        doors: Doors ordered left to right.
        shelves: Shelves in insertion order.
        columns: Columns ordered left to right.
        material: Finish species, absent when not chosen yet.
        frame_thickness: Frame panel thickness, 0.02 when unset.
        door_thickness: Door panel thickness, 0.02 when unset.
        shelf_thickness: Shelf panel thickness, 0.02 when unset.
        column_thickness: Column panel thickness, kept for round-tripping.
    """

    dimensions: Dimensions | None = None
    doors: tuple[Door, ...] = ()
    shelves: tuple[Shelf, ...] = ()
    columns: tuple[Column, ...] = ()
    material: Material | None = None
    frame_thickness: float | None = None
    door_thickness: float | None = None
    shelf_thickness: float | None = None
    column_thickness: float | None = None

    @property
    def effective_frame_thickness(self) -> float:
        return _thickness(self.frame_thickness)

    @property
    def effective_door_thickness(self) -> float:
        return _thickness(self.door_thickness)

    @property
    def effective_shelf_thickness(self) -> float:
        return _thickness(self.shelf_thickness)

    @property
    def layout_width(self) -> float:
        """Width used for laying out doors and columns."""
        if self.dimensions is None:
            return FALLBACK_WIDTH
        return self.dimensions.width

    @property
    def layout_height(self) -> float:
        """Height used for laying out shelves."""
        if self.dimensions is None:
            return FALLBACK_HEIGHT
        return self.dimensions.height

    def with_changes(self, **changes: Any) -> LayoutState:
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)


@dataclass(frozen=True)
class IntentParameters:
    """Raw parameters attached to an intent.

    Width, height and depth are centimeters as spoken by the user.
    """

    count: int | None = None
    material: str | None = None
    width: float | None = None
    height: float | None = None
    depth: float | None = None

    def to_dict(self) -> dict[str, Any]:
        """Only the parameters that are present."""
        values = {
            "count": self.count,
            "material": self.material,
            "width": self.width,
            "height": self.height,
            "depth": self.depth,
        }
        return {key: value for key, value in values.items() if value is not None}


@dataclass(frozen=True)
class Intent:
    """A parsed user command.

    Attributes:
        action: What the user asked for.
        confidence: Parser confidence in [0, 1].
        parameters: Parameters extracted from the command.
        clarification: Message for the user when the command was not
            understood well enough to act on.
    """

    action: IntentAction
    confidence: float
    parameters: IntentParameters = field(default_factory=IntentParameters)
    clarification: str | None = None

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError("Confidence must be between 0 and 1")

    @property
    def payload(self) -> IntentPayload | None:
        """The typed payload for this intent's action variant."""
        params = self.parameters
        if self.action.is_count_action:
            return CountChange(count=params.count if params.count is not None else 1)
        if self.action is IntentAction.CHANGE_MATERIAL:
            return MaterialChange(material=params.material)
        if self.action.is_dimension_action:
            return DimensionChange(
                width=params.width, height=params.height, depth=params.depth
            )
        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the JSON shape shared with the language model."""
        data: dict[str, Any] = {
            "action": self.action.value,
            "confidence": self.confidence,
            "parameters": self.parameters.to_dict(),
        }
        if self.clarification is not None:
            data["clarification"] = self.clarification
        return data
