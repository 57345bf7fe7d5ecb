"""Layout repositories.

Both repositories keep layouts as serialized documents and read them back
through the strict state schema, so a corrupted or outdated record fails
with StateShapeError instead of being coerced.

Classes:
    InMemoryLayoutRepository: Dictionary-backed repository
    JsonFileLayoutRepository: One JSON file per layout in a directory
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

from wardrobes.application.serialization import state_from_dict, state_from_json, state_to_dict
from wardrobes.domain.entities import LayoutState
from wardrobes.domain.exceptions import StateNotFoundError

logger = logging.getLogger(__name__)

_STATE_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


class InMemoryLayoutRepository:
    """Repository backed by a dictionary of documents."""

    def __init__(self, documents: dict[str, dict[str, Any]] | None = None) -> None:
        self._documents: dict[str, dict[str, Any]] = dict(documents or {})

    def load(self, state_id: str) -> LayoutState:
        document = self._documents.get(state_id)
        if document is None:
            raise StateNotFoundError(state_id)
        return state_from_dict(document)

    def save(self, state_id: str, state: LayoutState) -> None:
        self._documents[state_id] = state_to_dict(state)

    def __contains__(self, state_id: object) -> bool:
        return state_id in self._documents

    def __len__(self) -> int:
        return len(self._documents)


class JsonFileLayoutRepository:
    """Repository storing each layout as ``<state_id>.json`` under a directory.

    Attributes:
        directory: Directory holding the documents; created on first save.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def _path(self, state_id: str) -> Path:
        if not _STATE_ID_PATTERN.match(state_id):
            raise ValueError(f"Invalid state id: {state_id!r}")
        return self.directory / f"{state_id}.json"

    def load(self, state_id: str) -> LayoutState:
        path = self._path(state_id)
        if not path.exists():
            raise StateNotFoundError(state_id)
        logger.debug(f"Loading layout {state_id} from {path}")
        return state_from_json(path.read_text(encoding="utf-8"))

    def save(self, state_id: str, state: LayoutState) -> None:
        path = self._path(state_id)
        self.directory.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(json.dumps(state_to_dict(state), indent=2), encoding="utf-8")
        tmp_path.replace(path)
        logger.debug(f"Saved layout {state_id} to {path}")
