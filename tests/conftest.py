"""Shared test fixtures."""

from unittest.mock import MagicMock

import pytest

from quadpath.domain import CubicSegment, Point

# Symmetric arch; needs subdivision at every practical bound
ARCH = CubicSegment(Point(0, 0), Point(0, 1), Point(1, 1), Point(1, 0))

# Self-crossing cubic with a near-cusp
CUSP = CubicSegment(Point(0, 0), Point(1, 1), Point(0, 1), Point(1, 0))

# Wide S-curve that spends the default iteration cap at tight bounds
WAVE = CubicSegment(Point(10, 10), Point(40, 90), Point(60, -50), Point(90, 30))


@pytest.fixture
def arch() -> CubicSegment:
    return ARCH


@pytest.fixture
def cusp() -> CubicSegment:
    return CUSP


@pytest.fixture
def wave() -> CubicSegment:
    return WAVE


@pytest.fixture
def mock_logger() -> MagicMock:
    """Create a mock bound logger."""
    return MagicMock()
