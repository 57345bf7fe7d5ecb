"""Pytest configuration and shared fixtures for wardrobe tests."""

from __future__ import annotations

import itertools
from typing import Callable

import pytest

from wardrobes.domain import Column, Dimensions, Door, LayoutState, Shelf


# =============================================================================
# pytest-httpx fixture integration
# =============================================================================

# pytest-httpx provides the httpx_mock fixture automatically when installed.


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests requiring external services (Ollama, etc.)"
    )
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared layout fixtures
# =============================================================================


@pytest.fixture
def sequential_ids() -> Callable[[str], str]:
    """Deterministic id factory: door-1, shelf-2, ..."""
    counter = itertools.count(1)
    return lambda kind: f"{kind}-{next(counter)}"


@pytest.fixture
def empty_state() -> LayoutState:
    """A 1.8m wide layout with default thicknesses and no elements."""
    return LayoutState(
        dimensions=Dimensions(width=1.8, height=2.2, depth=0.6),
        door_thickness=0.02,
        frame_thickness=0.02,
        shelf_thickness=0.02,
    )


@pytest.fixture
def furnished_state(empty_state: LayoutState) -> LayoutState:
    """Layout with two doors, three shelves and one column."""
    return empty_state.with_changes(
        doors=(
            Door(id="d1", x=0.3, width=0.5),
            Door(id="d2", x=1.0, width=0.5),
        ),
        shelves=(
            Shelf(id="s1", y=0.585),
            Shelf(id="s2", y=1.1),
            Shelf(id="s3", y=1.615),
        ),
        columns=(Column(id="c1", x=0.9),),
    )
