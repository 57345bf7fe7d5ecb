"""Application commands (use cases) for wardrobe editing."""

from __future__ import annotations

import asyncio
import logging

from wardrobes.application.dtos import Outcome
from wardrobes.application.pipeline import IntentPipeline
from wardrobes.contracts.protocols import LayoutRepositoryProtocol
from wardrobes.domain.entities import LayoutState

logger = logging.getLogger(__name__)


class ProcessCommand:
    """Apply a free-text command to an inline or stored layout.

    A layout passed inline is only transformed; the caller decides what to
    do with the result. A layout referenced by id is loaded from the
    repository and, when the command is applied, saved back under the same id.
    """

    def __init__(
        self,
        pipeline: IntentPipeline,
        repository: LayoutRepositoryProtocol | None = None,
    ) -> None:
        self.pipeline = pipeline
        self.repository = repository

    async def execute(
        self,
        command: str,
        state: LayoutState | None = None,
        state_id: str | None = None,
    ) -> Outcome:
        """Execute the command.

        Args:
            command: Free-text command.
            state: Inline layout. Takes precedence over ``state_id``.
            state_id: Identifier of a stored layout.

        Returns:
            The pipeline outcome.

        Raises:
            ValueError: If the command is blank, or neither a layout nor an id
                is given, or an id is given without a repository.
            StateNotFoundError: If ``state_id`` is not stored.
            StateShapeError: If the stored layout is not a current document.
        """
        if not command or not command.strip():
            raise ValueError("Command text is required")

        from_storage = state is None
        if state is None:
            if state_id is None:
                raise ValueError("Either state or state_id is required")
            if self.repository is None:
                raise ValueError("A repository is required to load states by id")
            state = self.repository.load(state_id)

        outcome = await self.pipeline.run(command, state)

        if outcome.applied and from_storage and state_id is not None:
            assert self.repository is not None
            self.repository.save(state_id, outcome.state)
            logger.info(f"Saved layout {state_id}")

        return outcome

    def execute_sync(
        self,
        command: str,
        state: LayoutState | None = None,
        state_id: str | None = None,
    ) -> Outcome:
        """Synchronous wrapper for execute()."""
        return asyncio.run(self.execute(command, state=state, state_id=state_id))
