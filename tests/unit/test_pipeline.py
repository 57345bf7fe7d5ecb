"""Unit tests for IntentPipeline."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from wardrobes.application import IntentPipeline, OutcomeKind
from wardrobes.application.pipeline import FALLBACK_CLARIFICATION
from wardrobes.domain import (
    Intent,
    IntentAction,
    IntentParameters,
    IntentValidator,
    LayoutEngine,
    LayoutState,
)
from wardrobes.infrastructure import LLMIntentParser


def _parser_returning(intent: Intent) -> MagicMock:
    parser = MagicMock()
    parser.parse = AsyncMock(return_value=intent)
    return parser


@pytest.fixture
def keyword_pipeline(sequential_ids) -> IntentPipeline:
    return IntentPipeline(
        parser=LLMIntentParser(backend=None),
        engine=LayoutEngine(id_factory=sequential_ids),
    )


class TestApplied:
    @pytest.mark.asyncio
    async def test_add_door(
        self, keyword_pipeline: IntentPipeline, empty_state: LayoutState
    ) -> None:
        outcome = await keyword_pipeline.run("add a door", empty_state)

        assert outcome.kind is OutcomeKind.APPLIED
        assert outcome.applied
        assert outcome.message is None
        assert outcome.error is None
        assert outcome.new_state is outcome.state
        assert len(outcome.state.doors) == 1
        assert outcome.intent.action is IntentAction.ADD_DOOR

    @pytest.mark.asyncio
    async def test_input_state_untouched(
        self, keyword_pipeline: IntentPipeline, furnished_state: LayoutState
    ) -> None:
        before = furnished_state.with_changes()
        await keyword_pipeline.run("add 3 shelves", furnished_state)
        assert furnished_state == before


class TestNeedsClarification:
    @pytest.mark.asyncio
    async def test_unknown_command(
        self, keyword_pipeline: IntentPipeline, empty_state: LayoutState
    ) -> None:
        outcome = await keyword_pipeline.run("asdkjhasd", empty_state)

        assert outcome.kind is OutcomeKind.NEEDS_CLARIFICATION
        assert outcome.state is empty_state
        assert outcome.new_state is None
        assert outcome.message is not None
        assert "add a door" in outcome.message

    @pytest.mark.asyncio
    async def test_below_threshold(self, empty_state: LayoutState) -> None:
        intent = Intent(action=IntentAction.ADD_DOOR, confidence=0.6, clarification="Which?")
        pipeline = IntentPipeline(parser=_parser_returning(intent))

        outcome = await pipeline.run("door?", empty_state)

        assert outcome.kind is OutcomeKind.NEEDS_CLARIFICATION
        assert outcome.message == "Which?"

    @pytest.mark.asyncio
    async def test_fallback_message(self, empty_state: LayoutState) -> None:
        intent = Intent(action=IntentAction.UNKNOWN, confidence=0.95)
        pipeline = IntentPipeline(parser=_parser_returning(intent))

        outcome = await pipeline.run("hmm", empty_state)

        assert outcome.kind is OutcomeKind.NEEDS_CLARIFICATION
        assert outcome.message == FALLBACK_CLARIFICATION

    @pytest.mark.asyncio
    async def test_validator_not_consulted(self, empty_state: LayoutState) -> None:
        intent = Intent(action=IntentAction.ADD_DOOR, confidence=0.3)
        validator = MagicMock(spec=IntentValidator)
        pipeline = IntentPipeline(parser=_parser_returning(intent), validator=validator)

        await pipeline.run("door", empty_state)

        validator.validate.assert_not_called()


class TestInvalid:
    @pytest.mark.asyncio
    async def test_out_of_range_width(self, empty_state: LayoutState) -> None:
        intent = Intent(
            action=IntentAction.SET_DIMENSIONS,
            confidence=0.88,
            parameters=IntentParameters(width=500),
        )
        engine = MagicMock(spec=LayoutEngine)
        pipeline = IntentPipeline(parser=_parser_returning(intent), engine=engine)

        outcome = await pipeline.run("make it 500cm wide", empty_state)

        assert outcome.kind is OutcomeKind.INVALID
        assert outcome.error == "Width must be 100-400cm"
        assert outcome.state is empty_state
        engine.apply.assert_not_called()


class TestOutcomeToDict:
    @pytest.mark.asyncio
    async def test_applied_includes_state(
        self, keyword_pipeline: IntentPipeline, empty_state: LayoutState
    ) -> None:
        outcome = await keyword_pipeline.run("add a shelf", empty_state)
        data = outcome.to_dict()

        assert data["kind"] == "applied"
        assert data["intent"]["action"] == "add_shelf"
        assert data["state"]["shelves"][0]["id"] == "shelf-1"
        assert "message" not in data

    @pytest.mark.asyncio
    async def test_clarification_omits_state(
        self, keyword_pipeline: IntentPipeline, empty_state: LayoutState
    ) -> None:
        data = (await keyword_pipeline.run("asdkjhasd", empty_state)).to_dict()

        assert data["kind"] == "needs_clarification"
        assert "state" not in data
        assert data["message"]


class TestSyncWrapper:
    def test_run_sync(self, keyword_pipeline: IntentPipeline, empty_state: LayoutState) -> None:
        outcome = keyword_pipeline.run_sync("add 2 columns", empty_state)
        assert [c.id for c in outcome.state.columns] == ["column-1", "column-2"]
