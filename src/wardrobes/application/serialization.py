"""Versioned JSON representation of a wardrobe layout.

Stored and client-supplied layouts are checked against a strict pydantic
schema before the core touches them. A document with a different version,
unknown keys or wrong types is rejected with StateShapeError; nothing is
coerced into shape.
"""

from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr
from pydantic import ValidationError as PydanticValidationError

from wardrobes.application.config.loader import (
    extract_validation_errors,
    format_validation_message,
)
from wardrobes.domain.entities import LayoutState
from wardrobes.domain.exceptions import StateShapeError
from wardrobes.domain.value_objects import Column, Dimensions, Door, Material, Shelf

# Current document version. Bump when the shape changes.
STATE_VERSION = "1"


class _StrictModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class DimensionsDocument(_StrictModel):
    width: StrictFloat = Field(gt=0)
    height: StrictFloat = Field(gt=0)
    depth: StrictFloat = Field(gt=0)


class DoorDocument(_StrictModel):
    id: StrictStr
    x: StrictFloat
    width: StrictFloat = Field(ge=0)


class ShelfDocument(_StrictModel):
    id: StrictStr
    y: StrictFloat


class ColumnDocument(_StrictModel):
    id: StrictStr
    x: StrictFloat


class LayoutStateDocument(_StrictModel):
    """Persisted layout, keyed the way the configurator front end stores it."""

    version: Literal["1"]
    dimensions: DimensionsDocument | None = None
    doors: list[DoorDocument] = Field(default_factory=list)
    shelves: list[ShelfDocument] = Field(default_factory=list)
    columns: list[ColumnDocument] = Field(default_factory=list)
    material: Material | None = None
    frame_thickness: StrictFloat | None = Field(default=None, alias="frameThickness", ge=0)
    door_thickness: StrictFloat | None = Field(default=None, alias="doorThickness", ge=0)
    shelf_thickness: StrictFloat | None = Field(default=None, alias="shelfThickness", ge=0)
    column_thickness: StrictFloat | None = Field(default=None, alias="columnThickness", ge=0)

    def to_state(self) -> LayoutState:
        dims = self.dimensions
        return LayoutState(
            dimensions=(
                Dimensions(width=dims.width, height=dims.height, depth=dims.depth)
                if dims is not None
                else None
            ),
            doors=tuple(Door(id=d.id, x=d.x, width=d.width) for d in self.doors),
            shelves=tuple(Shelf(id=s.id, y=s.y) for s in self.shelves),
            columns=tuple(Column(id=c.id, x=c.x) for c in self.columns),
            material=self.material,
            frame_thickness=self.frame_thickness,
            door_thickness=self.door_thickness,
            shelf_thickness=self.shelf_thickness,
            column_thickness=self.column_thickness,
        )

    @classmethod
    def from_state(cls, state: LayoutState) -> LayoutStateDocument:
        dims = state.dimensions
        return cls(
            version=STATE_VERSION,
            dimensions=(
                DimensionsDocument(width=dims.width, height=dims.height, depth=dims.depth)
                if dims is not None
                else None
            ),
            doors=[DoorDocument(id=d.id, x=d.x, width=d.width) for d in state.doors],
            shelves=[ShelfDocument(id=s.id, y=s.y) for s in state.shelves],
            columns=[ColumnDocument(id=c.id, x=c.x) for c in state.columns],
            material=state.material,
            frame_thickness=state.frame_thickness,
            door_thickness=state.door_thickness,
            shelf_thickness=state.shelf_thickness,
            column_thickness=state.column_thickness,
        )


def _shape_error(error: PydanticValidationError) -> StateShapeError:
    details = extract_validation_errors(error)
    message = format_validation_message(
        f"Layout state does not match schema version {STATE_VERSION}:", details
    )
    return StateShapeError(message, details=details)


def state_from_dict(data: Any) -> LayoutState:
    """Validate a decoded JSON document and build a LayoutState.

    Raises:
        StateShapeError: If the document is not a current layout.
    """
    if not isinstance(data, dict):
        raise StateShapeError(
            "Layout state must be a JSON object",
            details=[
                {
                    "path": "",
                    "message": "expected object",
                    "value": data,
                    "error_type": "type",
                }
            ],
        )
    try:
        document = LayoutStateDocument.model_validate(data)
    except PydanticValidationError as e:
        raise _shape_error(e) from e
    return document.to_state()


def state_from_json(text: str) -> LayoutState:
    """Parse JSON text into a LayoutState.

    Raises:
        StateShapeError: If the text is not JSON or not a current layout.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise StateShapeError(
            f"Layout state is not valid JSON: {e.msg} (line {e.lineno}, column {e.colno})",
            details=[
                {
                    "path": "",
                    "message": e.msg,
                    "value": None,
                    "error_type": "json_parse",
                }
            ],
        ) from e
    return state_from_dict(data)


def state_to_dict(state: LayoutState) -> dict[str, Any]:
    """Serialize a LayoutState to its JSON document."""
    return LayoutStateDocument.from_state(state).model_dump(
        mode="json", by_alias=True, exclude_none=True
    )


def state_to_json(state: LayoutState, indent: int | None = 2) -> str:
    return json.dumps(state_to_dict(state), indent=indent)

