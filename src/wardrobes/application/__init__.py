"""Application layer - use cases and orchestration."""

from .commands import ProcessCommand
from .dtos import Outcome, OutcomeKind
from .factory import ServiceFactory
from .pipeline import IntentPipeline
from .serialization import (
    STATE_VERSION,
    state_from_dict,
    state_from_json,
    state_to_dict,
    state_to_json,
)

__all__ = [
    "STATE_VERSION",
    "IntentPipeline",
    "Outcome",
    "OutcomeKind",
    "ProcessCommand",
    "ServiceFactory",
    "state_from_dict",
    "state_from_json",
    "state_to_dict",
    "state_to_json",
]
