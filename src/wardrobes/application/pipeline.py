"""Intent pipeline: parse, gate on confidence, validate, apply."""

from __future__ import annotations

import asyncio
import logging

from wardrobes.application.dtos import Outcome, OutcomeKind
from wardrobes.contracts.protocols import IntentParserProtocol
from wardrobes.domain.entities import LayoutState
from wardrobes.domain.services import IntentValidator, LayoutEngine
from wardrobes.domain.value_objects import CLARIFICATION_THRESHOLD, IntentAction

logger = logging.getLogger(__name__)

FALLBACK_CLARIFICATION = "Could not understand command"


class IntentPipeline:
    """Runs one command against one layout.

    The pipeline holds no mutable state and performs no I/O of its own; the
    parser may await a language model. Concurrent runs are independent.

    Attributes:
        parser: Produces intents from command text.
        validator: Checks intents against wardrobe constraints.
        engine: Applies valid intents.
        clarification_threshold: Intents below this confidence are returned
            for clarification instead of being validated.
    """

    def __init__(
        self,
        parser: IntentParserProtocol,
        validator: IntentValidator | None = None,
        engine: LayoutEngine | None = None,
        clarification_threshold: float = CLARIFICATION_THRESHOLD,
    ) -> None:
        self.parser = parser
        self.validator = validator or IntentValidator()
        self.engine = engine or LayoutEngine()
        self.clarification_threshold = clarification_threshold

    async def run(self, command: str, state: LayoutState) -> Outcome:
        """Run a command.

        Args:
            command: Free-text command.
            state: Current layout; never modified.

        Returns:
            NEEDS_CLARIFICATION, INVALID or APPLIED outcome.
        """
        intent = await self.parser.parse(command)

        if (
            intent.confidence < self.clarification_threshold
            or intent.action is IntentAction.UNKNOWN
        ):
            logger.info(
                f"Command {command!r} needs clarification "
                f"({intent.action.value}, confidence {intent.confidence})"
            )
            return Outcome(
                kind=OutcomeKind.NEEDS_CLARIFICATION,
                intent=intent,
                state=state,
                message=intent.clarification or FALLBACK_CLARIFICATION,
            )

        validation = self.validator.validate(intent)
        if not validation.valid:
            logger.info(f"Rejected {intent.action.value}: {validation.error}")
            return Outcome(
                kind=OutcomeKind.INVALID,
                intent=intent,
                state=state,
                message=validation.error,
            )

        new_state = self.engine.apply(state, intent)
        logger.info(f"Applied {intent.action.value} {intent.parameters.to_dict()}")
        return Outcome(kind=OutcomeKind.APPLIED, intent=intent, state=new_state)

    def run_sync(self, command: str, state: LayoutState) -> Outcome:
        """Synchronous wrapper for run()."""
        return asyncio.run(self.run(command, state))
