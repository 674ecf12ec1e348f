"""Unit tests for the pairwise distance dispatch and parallel check."""
import pytest

from planekit import Point, Segment, check_parallel_segments, distance


class TestDistance:
    """distance routes to the owning primitive regardless of argument order."""

    def test_point_point(self):
        assert distance(Point(1, 0), Point(-1, 0)) == pytest.approx(4.0)

    def test_point_segment_both_orders(self):
        s = Segment(Point(1, 0), Point(1, 1))
        p = Point(2, 0.5)
        assert distance(s, p) == pytest.approx(1.0)
        assert distance(p, s) == pytest.approx(1.0)

    def test_segment_segment(self):
        a = Segment(Point(0, 0), Point(1, 0))
        b = Segment(Point(0, 3), Point(1, 3))
        assert distance(a, b) == pytest.approx(9.0)

    def test_polygon_point_both_orders(self, square):
        assert distance(square, Point(3, 0)) == pytest.approx(4.0)
        assert distance(Point(3, 0), square) == pytest.approx(4.0)
        assert distance(square, Point(0, 0)) == 0.0

    def test_polygon_segment_both_orders(self, square):
        s = Segment(Point(3, -5), Point(3, 5))
        assert distance(square, s) == pytest.approx(4.0)
        assert distance(s, square) == pytest.approx(4.0)

    def test_polygon_polygon(self, square, make_square):
        other = make_square()
        other.translate(3, 3)
        assert distance(square, other) == pytest.approx(2.0)
        assert distance(other, square) == pytest.approx(2.0)

    def test_unsupported_kind(self):
        with pytest.raises(TypeError, match="not defined"):
            distance(Point(0, 0), (1, 1))


def test_check_parallel_segments():
    a = Segment(Point(0, 1), Point(1, 0))
    b = Segment(Point(0, 2), Point(2, 0))
    c = Segment(Point(0, 0), Point(1, 1))
    assert check_parallel_segments(a, b)
    assert not check_parallel_segments(a, c)
