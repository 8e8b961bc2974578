"""Pytest configuration and shared fixtures for perimeter ordering tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from perimeters.domain import AdaptiveWallEntity, WallEntity, WallSequence

FIXTURES_PATH = Path(__file__).parent / "fixtures"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture(params=list(WallSequence), ids=lambda s: s.name)
def any_sequence(request: pytest.FixtureRequest) -> WallSequence:
    """Every wall sequence policy, one test run each."""
    return request.param


@pytest.fixture
def five_walls() -> list[WallEntity]:
    """One wall per depth 0..4, in generator order."""
    return [WallEntity(geometry=f"loop-{d}", depth=d) for d in range(5)]


@pytest.fixture
def split_island_walls() -> list[WallEntity]:
    """Three walls whose inner walls split into two loops each.

    Depths as generated: 0, 1a, 2a, 1b, 2b.
    """
    return [
        WallEntity(geometry="outer", depth=0),
        WallEntity(geometry="first-a", depth=1),
        WallEntity(geometry="second-a", depth=2),
        WallEntity(geometry="first-b", depth=1),
        WallEntity(geometry="second-b", depth=2),
    ]


@pytest.fixture
def arachne_walls() -> list[AdaptiveWallEntity]:
    """Variable-width walls with an interleaved contour and a transition line."""
    return [
        AdaptiveWallEntity(geometry="w1", depth=1),
        AdaptiveWallEntity(geometry="t12", depth=1, is_closed=False, transition_depth=2),
        AdaptiveWallEntity(geometry="w0", depth=0, is_contour=True),
        AdaptiveWallEntity(geometry="w2", depth=2),
        AdaptiveWallEntity(geometry="w3", depth=3),
    ]
