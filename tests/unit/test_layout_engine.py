"""Unit tests for LayoutEngine."""

from __future__ import annotations

import re
from typing import Callable

import pytest

from wardrobes.domain import (
    Dimensions,
    Door,
    Intent,
    IntentAction,
    IntentParameters,
    LayoutEngine,
    LayoutState,
    Material,
)
from wardrobes.domain.services.layout_engine import uuid_id_factory


def _intent(action: IntentAction, **params: object) -> Intent:
    return Intent(
        action=action,
        confidence=0.9,
        parameters=IntentParameters(**params),  # type: ignore[arg-type]
    )


@pytest.fixture
def engine(sequential_ids: Callable[[str], str]) -> LayoutEngine:
    return LayoutEngine(id_factory=sequential_ids)


class TestDoors:
    def test_first_door_on_empty_layout(
        self, engine: LayoutEngine, empty_state: LayoutState
    ) -> None:
        result = engine.apply(empty_state, _intent(IntentAction.ADD_DOOR, count=1))

        assert len(result.doors) == 1
        assert result.doors[0].id == "door-1"
        assert result.doors[0].width == pytest.approx(0.02)
        assert result.doors[0].x == pytest.approx(0.89)

    def test_two_doors_on_empty_layout(
        self, engine: LayoutEngine, empty_state: LayoutState
    ) -> None:
        result = engine.apply(empty_state, _intent(IntentAction.ADD_DOOR, count=2))

        assert [d.id for d in result.doors] == ["door-1", "door-2"]
        assert [d.x for d in result.doors] == pytest.approx([0.59333, 1.18667], abs=1e-5)

    def test_adding_reflows_existing_doors(
        self, engine: LayoutEngine, furnished_state: LayoutState
    ) -> None:
        result = engine.apply(furnished_state, _intent(IntentAction.ADD_DOOR, count=1))

        assert [d.id for d in result.doors] == ["d1", "d2", "door-1"]
        assert [d.x for d in result.doors] == pytest.approx([0.12, 0.72, 1.32])
        assert all(d.width == 0.5 for d in result.doors)

    def test_missing_count_adds_one(
        self, engine: LayoutEngine, empty_state: LayoutState
    ) -> None:
        result = engine.apply(empty_state, _intent(IntentAction.ADD_DOOR))
        assert len(result.doors) == 1

    def test_remove_reflows_remaining(
        self, engine: LayoutEngine, furnished_state: LayoutState
    ) -> None:
        result = engine.apply(furnished_state, _intent(IntentAction.REMOVE_DOOR, count=1))

        assert [d.id for d in result.doors] == ["d1"]
        assert result.doors[0].x == pytest.approx(0.65)

    def test_remove_more_than_present(
        self, engine: LayoutEngine, furnished_state: LayoutState
    ) -> None:
        result = engine.apply(furnished_state, _intent(IntentAction.REMOVE_DOOR, count=5))
        assert result.doors == ()

    def test_remove_from_empty_is_noop(
        self, engine: LayoutEngine, empty_state: LayoutState
    ) -> None:
        result = engine.apply(empty_state, _intent(IntentAction.REMOVE_DOOR, count=1))
        assert result == empty_state

    def test_layout_without_dimensions_uses_fallback_width(
        self, engine: LayoutEngine
    ) -> None:
        result = engine.apply(LayoutState(), _intent(IntentAction.ADD_DOOR, count=1))
        assert result.doors[0].x == pytest.approx(0.89)


class TestShelves:
    def test_three_shelves_on_empty_layout(
        self, engine: LayoutEngine, empty_state: LayoutState
    ) -> None:
        result = engine.apply(empty_state, _intent(IntentAction.ADD_SHELF, count=3))

        assert [s.id for s in result.shelves] == ["shelf-1", "shelf-2", "shelf-3"]
        assert [s.y for s in result.shelves] == pytest.approx([0.585, 1.1, 1.615])

    def test_existing_shelves_do_not_move(
        self, engine: LayoutEngine, furnished_state: LayoutState
    ) -> None:
        result = engine.apply(furnished_state, _intent(IntentAction.ADD_SHELF, count=1))

        assert result.shelves[:3] == furnished_state.shelves
        assert result.shelves[3].y == pytest.approx(1.718)

    def test_remove_truncates_without_reflow(
        self, engine: LayoutEngine, furnished_state: LayoutState
    ) -> None:
        result = engine.apply(furnished_state, _intent(IntentAction.REMOVE_SHELF, count=2))
        assert result.shelves == furnished_state.shelves[:1]

    def test_remove_all(self, engine: LayoutEngine, furnished_state: LayoutState) -> None:
        result = engine.apply(furnished_state, _intent(IntentAction.REMOVE_SHELF, count=10))
        assert result.shelves == ()


class TestColumns:
    def test_single_column(self, engine: LayoutEngine, empty_state: LayoutState) -> None:
        result = engine.apply(empty_state, _intent(IntentAction.ADD_COLUMN, count=1))
        assert result.columns[0].x == pytest.approx(0.12)

    def test_four_columns(self, engine: LayoutEngine, empty_state: LayoutState) -> None:
        result = engine.apply(empty_state, _intent(IntentAction.ADD_COLUMN, count=4))
        assert [c.x for c in result.columns] == pytest.approx([0.12, 0.535, 0.95, 1.365])

    def test_adding_reflows_existing_columns(
        self, engine: LayoutEngine, furnished_state: LayoutState
    ) -> None:
        result = engine.apply(furnished_state, _intent(IntentAction.ADD_COLUMN, count=1))

        assert [c.id for c in result.columns] == ["c1", "column-1"]
        assert [c.x for c in result.columns] == pytest.approx([0.12, 0.95])

    def test_remove_reflows_remaining(
        self, engine: LayoutEngine, empty_state: LayoutState
    ) -> None:
        three = engine.apply(empty_state, _intent(IntentAction.ADD_COLUMN, count=3))
        result = engine.apply(three, _intent(IntentAction.REMOVE_COLUMN, count=2))

        assert [c.id for c in result.columns] == ["column-1"]
        assert result.columns[0].x == pytest.approx(0.12)

    def test_remove_last_column(
        self, engine: LayoutEngine, furnished_state: LayoutState
    ) -> None:
        result = engine.apply(furnished_state, _intent(IntentAction.REMOVE_COLUMN))
        assert result.columns == ()


class TestMaterialAndDimensions:
    def test_material_is_normalized(
        self, engine: LayoutEngine, empty_state: LayoutState
    ) -> None:
        result = engine.apply(
            empty_state, _intent(IntentAction.CHANGE_MATERIAL, material="Walnut")
        )
        assert result.material is Material.WALNUT

    def test_dimensions_seeded_from_defaults(self, engine: LayoutEngine) -> None:
        result = engine.apply(
            LayoutState(), _intent(IntentAction.SET_DIMENSIONS, width=200)
        )
        assert result.dimensions == Dimensions(width=2.0, height=2.4, depth=0.6)

    def test_dimensions_converted_to_meters(
        self, engine: LayoutEngine, empty_state: LayoutState
    ) -> None:
        result = engine.apply(
            empty_state, _intent(IntentAction.MODIFY_GRID, height=240, depth=55)
        )

        assert result.dimensions is not None
        assert result.dimensions.width == pytest.approx(1.8)
        assert result.dimensions.height == pytest.approx(2.4)
        assert result.dimensions.depth == pytest.approx(0.55)

    def test_zero_dimension_is_ignored(
        self, engine: LayoutEngine, empty_state: LayoutState
    ) -> None:
        result = engine.apply(
            empty_state, _intent(IntentAction.SET_DIMENSIONS, width=0, height=250)
        )
        assert result.dimensions is not None
        assert result.dimensions.width == pytest.approx(1.8)

    def test_dimensions_do_not_move_elements(
        self, engine: LayoutEngine, furnished_state: LayoutState
    ) -> None:
        result = engine.apply(furnished_state, _intent(IntentAction.SET_DIMENSIONS, width=300))

        assert result.doors == furnished_state.doors
        assert result.shelves == furnished_state.shelves
        assert result.columns == furnished_state.columns

    def test_unknown_leaves_state_unchanged(
        self, engine: LayoutEngine, furnished_state: LayoutState
    ) -> None:
        result = engine.apply(furnished_state, _intent(IntentAction.UNKNOWN))
        assert result == furnished_state


class TestPurity:
    def test_input_is_not_modified(
        self, engine: LayoutEngine, furnished_state: LayoutState
    ) -> None:
        before = furnished_state.with_changes()

        result = engine.apply(furnished_state, _intent(IntentAction.ADD_DOOR, count=2))

        assert furnished_state == before
        assert result is not furnished_state
        assert len(furnished_state.doors) == 2

    def test_other_collections_untouched(
        self, engine: LayoutEngine, furnished_state: LayoutState
    ) -> None:
        result = engine.apply(furnished_state, _intent(IntentAction.ADD_SHELF, count=1))

        assert result.doors == furnished_state.doors
        assert result.columns == furnished_state.columns
        assert result.material == furnished_state.material

    def test_every_action_has_a_handler(
        self, engine: LayoutEngine, empty_state: LayoutState
    ) -> None:
        for action in IntentAction:
            params = {}
            if action is IntentAction.CHANGE_MATERIAL:
                params = {"material": "oak"}
            elif action.is_dimension_action:
                params = {"width": 200}
            engine.apply(empty_state, _intent(action, **params))

    @pytest.mark.parametrize("count", [1, 2, 5])
    def test_add_then_remove_restores_count(
        self, engine: LayoutEngine, furnished_state: LayoutState, count: int
    ) -> None:
        added = engine.apply(furnished_state, _intent(IntentAction.ADD_SHELF, count=count))
        removed = engine.apply(added, _intent(IntentAction.REMOVE_SHELF, count=count))
        assert removed.shelves == furnished_state.shelves


class TestIdFactory:
    def test_default_ids_are_unique(self, empty_state: LayoutState) -> None:
        result = LayoutEngine().apply(empty_state, _intent(IntentAction.ADD_DOOR, count=3))
        ids = [d.id for d in result.doors]
        assert len(set(ids)) == 3

    def test_uuid_format(self) -> None:
        assert re.fullmatch(r"shelf-[0-9a-f]{32}", uuid_id_factory("shelf"))

    def test_door_widths_shared(self, engine: LayoutEngine) -> None:
        state = LayoutState(doors=(Door(id="a", x=0.1, width=0.4),))
        result = engine.apply(state, _intent(IntentAction.ADD_DOOR, count=1))
        assert {d.width for d in result.doors} == {0.4}


class TestSpacingProperties:
    """Count and pairwise-gap laws after sequences of adds and removes."""

    PAIRS = [(0, 1), (1, 3), (3, 2), (2, 5), (0, 7), (4, 4), (6, 1)]

    @staticmethod
    def _assert_door_gaps(state: LayoutState) -> None:
        doors = state.doors
        for left, right in zip(doors, doors[1:]):
            assert right.x - left.x >= 0.10 + left.width - 1e-9
        if doors:
            thickness = state.effective_door_thickness
            assert doors[0].x >= thickness
            assert doors[-1].x + doors[-1].width <= state.layout_width - thickness + 1e-9

    @staticmethod
    def _assert_column_gaps(state: LayoutState) -> None:
        columns = state.columns
        for left, right in zip(columns, columns[1:]):
            assert right.x - left.x >= 0.10 - 1e-9

    @pytest.mark.parametrize(("m", "k"), PAIRS)
    def test_doors_after_add_and_remove(
        self, engine: LayoutEngine, empty_state: LayoutState, m: int, k: int
    ) -> None:
        start = (
            engine.apply(empty_state, _intent(IntentAction.ADD_DOOR, count=m))
            if m
            else empty_state
        )
        assert len(start.doors) == m

        added = engine.apply(start, _intent(IntentAction.ADD_DOOR, count=k))
        assert len(added.doors) == m + k
        self._assert_door_gaps(added)

        removed = engine.apply(start, _intent(IntentAction.REMOVE_DOOR, count=k))
        assert len(removed.doors) == max(0, m - k)
        self._assert_door_gaps(removed)

    @pytest.mark.parametrize(("m", "k"), PAIRS)
    def test_columns_after_add_and_remove(
        self, engine: LayoutEngine, empty_state: LayoutState, m: int, k: int
    ) -> None:
        start = (
            engine.apply(empty_state, _intent(IntentAction.ADD_COLUMN, count=m))
            if m
            else empty_state
        )

        added = engine.apply(start, _intent(IntentAction.ADD_COLUMN, count=k))
        assert len(added.columns) == m + k
        self._assert_column_gaps(added)

        removed = engine.apply(start, _intent(IntentAction.REMOVE_COLUMN, count=k))
        assert len(removed.columns) == max(0, m - k)
        self._assert_column_gaps(removed)

    @pytest.mark.parametrize(("m", "k"), PAIRS)
    def test_wide_doors_keep_minimum_gap(
        self, engine: LayoutEngine, m: int, k: int
    ) -> None:
        state = LayoutState(doors=(Door(id="a", x=0.1, width=0.4),))
        state = engine.apply(state, _intent(IntentAction.ADD_DOOR, count=m + k))

        assert len(state.doors) == 1 + m + k
        for left, right in zip(state.doors, state.doors[1:]):
            assert right.x - left.x >= 0.10 + 0.4 - 1e-9
