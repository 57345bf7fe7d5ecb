"""Service protocols for dependency injection.

This module defines the contracts between the wardrobe core and its
collaborators. Infrastructure implementations depend on these protocols,
so the pipeline can be wired with real services or test doubles.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from wardrobes.domain.entities import Intent, LayoutState


@runtime_checkable
class TextGenerationBackend(Protocol):
    """Protocol for a text-generation service.

    Implementations send fixed system instructions and the user's text to a
    language model and return its raw reply. The reply is expected, but not
    guaranteed, to be a single JSON object shaped like an intent.

    Example:
        ```python
        class EchoBackend:
            async def complete(self, system_instructions: str, user_text: str) -> str:
                return '{"action": "unknown", "confidence": 0, "parameters": {}}'
        ```
    """

    async def complete(self, system_instructions: str, user_text: str) -> str:
        """Generate a reply.

        Args:
            system_instructions: Instructions describing the task and output shape.
            user_text: The user's command.

        Returns:
            The model's raw text reply.

        Raises:
            Exception: Any transport or model error; callers recover from it.
        """
        ...


@runtime_checkable
class IntentParserProtocol(Protocol):
    """Protocol for turning command text into an intent.

    Implementations must never raise: any internal failure resolves to a
    well-formed intent.
    """

    async def parse(self, command: str) -> Intent:
        """Parse a command into an intent."""
        ...


@runtime_checkable
class LayoutRepositoryProtocol(Protocol):
    """Protocol for storing layouts by identifier.

    Example:
        ```python
        repo = InMemoryLayoutRepository()
        repo.save("abc", state)
        assert repo.load("abc") == state
        ```
    """

    def load(self, state_id: str) -> LayoutState:
        """Fetch a stored layout.

        Raises:
            StateNotFoundError: When nothing is stored under ``state_id``.
            StateShapeError: When the stored document is not a current layout.
        """
        ...

    def save(self, state_id: str, state: LayoutState) -> None:
        """Store a layout under ``state_id``, replacing any previous one."""
        ...
