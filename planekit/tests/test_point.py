"""Unit tests for Point."""
import logging
import math
import sys

import numpy as np
import pytest

from planekit import CoordinateOverflowError, FINE_EPS, GeometryError, Point


class TestTransforms:
    """Translate, scale and rotate act in place."""

    def test_translate(self):
        p = Point(1, 1)
        p.translate(2, -3)
        assert p == Point(3, -2)

    def test_translate_round_trip(self):
        """Translating back restores the coordinates within the fine tolerance."""
        p = Point(0.3, -7.1)
        p.translate(123.456, -0.001)
        p.translate(-123.456, 0.001)
        assert abs(p.x - 0.3) < FINE_EPS
        assert abs(p.y + 7.1) < FINE_EPS

    def test_scale_from_origin(self):
        p = Point(1, 1)
        p.scale_from_point(Point(0, 0), 3)
        assert p == Point(3, 3)

    def test_scale_from_other_point(self):
        p = Point(10, 10)
        p.scale_from_point(Point(12, 15), 2)
        assert p == Point(8, 5)

    def test_scale_without_center_is_noop(self, caplog):
        p = Point(2, 5)
        with caplog.at_level(logging.WARNING, logger='planekit'):
            p.scale(10)
        assert p == Point(2, 5)
        assert any('scale_from_point' in r.getMessage() for r in caplog.records)

    def test_rotate_around_origin(self):
        p = Point(1, 0)
        p.rotate_around_point(Point(0, 0), math.pi / 2)
        assert p == Point(0, 1)

    def test_rotate_clockwise_around_other_point(self):
        p = Point(1, 0)
        p.rotate_around_point(Point(-1, 1), -math.pi / 2)
        assert p == Point(-2, -1)

    def test_rotate_without_center_is_noop(self, caplog):
        p = Point(1, 0)
        with caplog.at_level(logging.WARNING, logger='planekit'):
            p.rotate(1.0)
        assert p == Point(1, 0)
        assert caplog.records

    def test_center_is_self(self):
        p = Point(4, 4)
        assert p.center() is p


class TestMeasurements:
    """Bearings and squared distances."""

    def test_distance_squared(self):
        assert Point(1, 0).distance_squared_to_point(Point(-1, 0)) == pytest.approx(4.0)

    @pytest.mark.parametrize("a,b,expected", [
        ((1, 0), (-1, 0), math.pi),
        ((-1, 0), (0, 1), math.pi / 4),
        ((0, 1), (1, 0), -math.pi / 4),
    ])
    def test_angle_to_other_point(self, a, b, expected):
        assert Point(*a).angle_to_other_point(Point(*b)) == pytest.approx(expected)

    def test_angle_degrees(self):
        assert Point(0, 0).angle_to_other_point_degrees(Point(0, 5)) == pytest.approx(90.0)


class TestConstruction:

    def test_from_polar(self):
        assert Point.from_polar(Point(4, 1), 5, -math.pi / 2) == Point(4, -4)

    def test_copy_is_independent(self):
        a = Point(1, 2)
        b = Point.from_point(a)
        b.translate(1, 1)
        assert a == Point(1, 2)

    def test_array_round_trip(self):
        p = Point.from_array(np.array([1.5, -2.0]))
        np.testing.assert_allclose(p.as_array(), [1.5, -2.0])
        assert p.as_tuple() == (1.5, -2.0)

    def test_from_array_rejects_wrong_length(self):
        with pytest.raises(ValueError, match="expected 2 coordinates"):
            Point.from_array([1, 2, 3])


class TestEquality:

    def test_within_tolerance(self):
        assert Point(0, 0) == Point(FINE_EPS / 2, -FINE_EPS / 2)

    def test_outside_tolerance(self):
        assert Point(0, 0) != Point(FINE_EPS * 2, 0)

    def test_not_equal_to_other_types(self):
        assert Point(0, 0) != (0, 0)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Point(0, 0))


class TestOverflow:

    def test_translate_to_float_max_raises(self):
        p = Point(1, 1)
        with pytest.raises(CoordinateOverflowError, match="has reached the bounds"):
            p.translate(sys.float_info.max, 1)

    def test_overflow_is_geometry_and_overflow_error(self):
        p = Point(sys.float_info.max / 2, 0)
        with pytest.raises(GeometryError):
            p.scale_from_point(Point(0, 0), 4)
        with pytest.raises(OverflowError):
            Point(0, 1).translate(0, math.inf)
