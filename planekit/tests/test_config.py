import pytest

from planekit import (
    COARSE_EPS,
    FINE_EPS,
    PROBE_MARGIN,
    Point,
    Segment,
    Tolerances,
    get_tolerances,
    set_tolerances,
    tolerance_override,
)


def test_defaults_match_constants():
    tol = Tolerances()
    assert tol.fine_eps == FINE_EPS
    assert tol.coarse_eps == COARSE_EPS
    assert tol.probe_margin == PROBE_MARGIN
    assert get_tolerances() == tol


def test_rejects_non_positive():
    with pytest.raises(ValueError, match="fine_eps must be positive"):
        Tolerances(fine_eps=0)
    with pytest.raises(ValueError, match="probe_margin"):
        Tolerances(probe_margin=-1)


def test_frozen():
    with pytest.raises(AttributeError):
        Tolerances().fine_eps = 1.0


def test_set_tolerances_returns_previous():
    previous = set_tolerances(Tolerances(fine_eps=0.5))
    try:
        assert previous == Tolerances()
        assert Point(0, 0) == Point(0.4, 0)
    finally:
        set_tolerances(previous)
    assert Point(0, 0) != Point(0.4, 0)


def test_set_tolerances_type_check():
    with pytest.raises(TypeError):
        set_tolerances({'fine_eps': 1.0})


class TestOverride:

    def test_restores_on_exit(self):
        with tolerance_override(fine_eps=0.1) as tol:
            assert tol.fine_eps == 0.1
            assert get_tolerances().coarse_eps == COARSE_EPS
        assert get_tolerances().fine_eps == FINE_EPS

    def test_restores_on_error(self):
        with pytest.raises(RuntimeError):
            with tolerance_override(fine_eps=0.1):
                raise RuntimeError("boom")
        assert get_tolerances() == Tolerances()

    def test_coarse_tolerance_changes_colinearity(self):
        s = Segment(Point(0, 0), Point(10, 0))
        p = Point(5, 0.01)   # sub-segment slopes differ by ~0.23 degrees
        assert not s.point_on_segment(p)
        with tolerance_override(coarse_eps=1.0, fine_eps=0.05):
            assert s.point_on_segment(p)
