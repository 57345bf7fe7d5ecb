"""Exceptions raised by the wardrobe core."""

from __future__ import annotations

from typing import Any


class WardrobeError(Exception):
    """Base class for errors surfaced to callers of the wardrobe core."""


class StateShapeError(WardrobeError):
    """A supplied or stored layout document does not match the current schema.

    Attributes:
        message: Summary of the problem.
        details: One entry per offending field, with ``path``, ``message``,
            ``value`` and ``error_type`` keys.
    """

    def __init__(self, message: str, details: list[dict[str, Any]] | None = None) -> None:
        self.message = message
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class StateNotFoundError(WardrobeError):
    """No layout is stored under the requested identifier."""

    def __init__(self, state_id: str) -> None:
        self.state_id = state_id
        super().__init__(f"State not found: {state_id}")
