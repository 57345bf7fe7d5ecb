"""Applies validated intents to a wardrobe layout.

The engine is pure: ``apply`` builds a new LayoutState and leaves its input
untouched. Doors and columns are re-flowed across the full width on every
add or remove; shelves are only appended (at add time) or truncated (at
remove time), and dimension changes do not move any element.
"""

from __future__ import annotations

import logging
import uuid
from typing import Callable

from ..entities import Intent, LayoutState
from ..value_objects import (
    DEFAULT_DIMENSIONS,
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
from .spacing import column_offsets, door_offsets, shelf_offsets

logger = logging.getLogger(__name__)

IdFactory = Callable[[str], str]


def uuid_id_factory(kind: str) -> str:
    """Default id strategy: ``<kind>-<uuid4 hex>``."""
    return f"{kind}-{uuid.uuid4().hex}"


def _count(intent: Intent) -> int:
    payload = intent.payload
    if isinstance(payload, CountChange):
        return payload.count
    return 1


class LayoutEngine:
    """Deterministic re-layout of doors, shelves and columns.

    Attributes:
        id_factory: Produces a fresh identifier for a new element given its
            kind ("door", "shelf", "column"). Must not repeat within a call.

    Example:
        >>> engine = LayoutEngine()
        >>> state = engine.apply(LayoutState(), intent)
    """

    def __init__(self, id_factory: IdFactory | None = None) -> None:
        self.id_factory = id_factory or uuid_id_factory
        self._handlers: dict[
            IntentAction, Callable[[LayoutState, Intent], LayoutState]
        ] = {
            IntentAction.ADD_DOOR: self._add_doors,
            IntentAction.REMOVE_DOOR: self._remove_doors,
            IntentAction.ADD_SHELF: self._add_shelves,
            IntentAction.REMOVE_SHELF: self._remove_shelves,
            IntentAction.ADD_COLUMN: self._add_columns,
            IntentAction.REMOVE_COLUMN: self._remove_columns,
            IntentAction.CHANGE_MATERIAL: self._change_material,
            IntentAction.SET_DIMENSIONS: self._set_dimensions,
            IntentAction.MODIFY_GRID: self._set_dimensions,
            IntentAction.UNKNOWN: self._unchanged,
        }
        missing = set(IntentAction) - set(self._handlers)
        if missing:
            raise RuntimeError(
                f"No layout handler for: {', '.join(sorted(a.value for a in missing))}"
            )

    def apply(self, state: LayoutState, intent: Intent) -> LayoutState:
        """Apply an intent and return the resulting layout.

        Args:
            state: Current layout. Never modified.
            intent: An intent that has passed validation.

        Returns:
            A new LayoutState reflecting the command.
        """
        logger.debug(f"Applying {intent.action.value} with {intent.parameters}")
        return self._handlers[intent.action](state, intent)

    # -- doors -------------------------------------------------------------

    def _layout_doors(
        self, state: LayoutState, doors: list[Door], door_width: float
    ) -> tuple[Door, ...]:
        offsets = door_offsets(
            width=state.layout_width,
            door_thickness=state.effective_door_thickness,
            door_width=door_width,
            count=len(doors),
        )
        return tuple(
            Door(id=door.id, x=x, width=door_width) for door, x in zip(doors, offsets)
        )

    def _add_doors(self, state: LayoutState, intent: Intent) -> LayoutState:
        door_width = (
            state.doors[0].width if state.doors else state.effective_door_thickness
        )
        new_doors = [
            Door(id=self.id_factory("door"), x=0.0, width=door_width)
            for _ in range(_count(intent))
        ]
        doors = self._layout_doors(state, [*state.doors, *new_doors], door_width)
        return state.with_changes(doors=doors)

    def _remove_doors(self, state: LayoutState, intent: Intent) -> LayoutState:
        if not state.doors:
            return state.with_changes()
        remaining = list(state.doors[: max(0, len(state.doors) - _count(intent))])
        if not remaining:
            return state.with_changes(doors=())
        doors = self._layout_doors(state, remaining, remaining[0].width)
        return state.with_changes(doors=doors)

    # -- shelves -----------------------------------------------------------

    def _add_shelves(self, state: LayoutState, intent: Intent) -> LayoutState:
        current = len(state.shelves)
        offsets = shelf_offsets(
            height=state.layout_height,
            frame_thickness=state.effective_frame_thickness,
            shelf_thickness=state.effective_shelf_thickness,
            total=current + _count(intent),
            first_index=current,
        )
        new_shelves = tuple(Shelf(id=self.id_factory("shelf"), y=y) for y in offsets)
        return state.with_changes(shelves=state.shelves + new_shelves)

    def _remove_shelves(self, state: LayoutState, intent: Intent) -> LayoutState:
        keep = max(0, len(state.shelves) - _count(intent))
        return state.with_changes(shelves=state.shelves[:keep])

    # -- columns -----------------------------------------------------------

    def _layout_columns(
        self, state: LayoutState, columns: list[Column]
    ) -> tuple[Column, ...]:
        offsets = column_offsets(
            width=state.layout_width,
            frame_thickness=state.effective_frame_thickness,
            count=len(columns),
        )
        return tuple(Column(id=column.id, x=x) for column, x in zip(columns, offsets))

    def _add_columns(self, state: LayoutState, intent: Intent) -> LayoutState:
        new_columns = [
            Column(id=self.id_factory("column"), x=0.0) for _ in range(_count(intent))
        ]
        columns = self._layout_columns(state, [*state.columns, *new_columns])
        return state.with_changes(columns=columns)

    def _remove_columns(self, state: LayoutState, intent: Intent) -> LayoutState:
        keep = max(0, len(state.columns) - _count(intent))
        columns = self._layout_columns(state, list(state.columns[:keep]))
        return state.with_changes(columns=columns)

    # -- material and dimensions ---------------------------------------------

    def _change_material(self, state: LayoutState, intent: Intent) -> LayoutState:
        payload = intent.payload
        if not isinstance(payload, MaterialChange) or not payload.material:
            return state.with_changes()
        return state.with_changes(material=Material(payload.material.lower()))

    def _set_dimensions(self, state: LayoutState, intent: Intent) -> LayoutState:
        payload = intent.payload
        if not isinstance(payload, DimensionChange):
            return state.with_changes()
        dims = state.dimensions or DEFAULT_DIMENSIONS
        width, height, depth = dims.width, dims.height, dims.depth
        # Zero means "not given", as in the validator.
        if payload.width:
            width = payload.width / 100
        if payload.height:
            height = payload.height / 100
        if payload.depth:
            depth = payload.depth / 100
        return state.with_changes(
            dimensions=Dimensions(width=width, height=height, depth=depth)
        )

    def _unchanged(self, state: LayoutState, intent: Intent) -> LayoutState:
        return state.with_changes()
