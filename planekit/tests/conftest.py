import pytest

from planekit import Point, Polygon


def _square():
    # clockwise
    return Polygon([Point(1, 1), Point(1, -1), Point(-1, -1), Point(-1, 1)])


@pytest.fixture
def square():
    """2x2 square centred on the origin."""
    return _square()


@pytest.fixture
def make_square():
    """Factory for tests that need several independent squares."""
    return _square


@pytest.fixture
def diamond():
    return Polygon([Point(1, 0), Point(0, -1), Point(-1, 0), Point(0, 1)])
