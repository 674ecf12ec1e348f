"""Mutable 2D point with tolerant equality and overflow validation."""
from __future__ import annotations

import math
import sys

import numpy as np

from .config import get_tolerances
from .errors import CoordinateOverflowError
from .logging_utils import get_logger

logger = get_logger('planekit.point')

__all__ = ['Point']

_FLOAT_MAX = sys.float_info.max


class Point:
    """A single location in the plane.

    Points are mutable and shared by reference: a Segment or Polygon built from
    a Point holds that very instance, so transforming it through any holder is
    visible to all of them.
    """
    __slots__ = ('_x', '_y')

    def __init__(self, x: float, y: float):
        self._x = float(x)
        self._y = float(y)

    @classmethod
    def from_point(cls, other: 'Point') -> 'Point':
        return cls(other.x, other.y)

    @classmethod
    def from_polar(cls, base: 'Point', distance: float, direction: float) -> 'Point':
        """New point ``distance`` away from ``base`` along ``direction`` (radians)."""
        return cls(base.x + math.cos(direction) * distance,
                   base.y + math.sin(direction) * distance)

    @classmethod
    def from_array(cls, arr) -> 'Point':
        a = np.asarray(arr, dtype=np.float64).reshape(-1)
        if a.shape[0] != 2:
            raise ValueError(f"expected 2 coordinates, got {a.shape[0]}")
        return cls(a[0], a[1])

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def as_tuple(self) -> tuple[float, float]:
        return (self._x, self._y)

    def as_array(self) -> np.ndarray:
        return np.array([self._x, self._y], dtype=np.float64)

    # ------------------------------------------------------------------
    # transforms
    # ------------------------------------------------------------------
    def translate(self, dx: float, dy: float) -> None:
        self._x += dx
        self._y += dy
        self._validate()

    def scale(self, factor: float) -> None:
        """No-op: scaling a lone point needs a reference point."""
        logger.warning("Scaling a point without a reference point is meaningless; use scale_from_point")

    def scale_from_point(self, center: 'Point', factor: float) -> None:
        dx = self._x - center.x
        dy = self._y - center.y
        self._x = center.x + factor * dx
        self._y = center.y + factor * dy
        self._validate()

    def rotate(self, angle: float) -> None:
        """No-op: rotating a lone point needs a center of rotation."""
        logger.warning("Rotating a point without a center of rotation is meaningless; use rotate_around_point")

    def rotate_around_point(self, center: 'Point', angle: float) -> None:
        """Rotate by ``angle`` radians about ``center``; positive is counter-clockwise."""
        bearing = center.angle_to_other_point(self)
        radius = math.sqrt(self.distance_squared_to_point(center))
        bearing += angle
        self._x = center.x + math.cos(bearing) * radius
        self._y = center.y + math.sin(bearing) * radius
        self._validate()

    def center(self) -> 'Point':
        return self

    # ------------------------------------------------------------------
    # measurements
    # ------------------------------------------------------------------
    def angle_to_other_point(self, other: 'Point') -> float:
        """Bearing to ``other`` in radians: 0 is east, pi/2 north, -pi/2 south."""
        return math.atan2(other.y - self._y, other.x - self._x)

    def angle_to_other_point_degrees(self, other: 'Point') -> float:
        return math.degrees(self.angle_to_other_point(other))

    def distance_squared_to_point(self, other: 'Point') -> float:
        dx = self._x - other.x
        dy = self._y - other.y
        return dx * dx + dy * dy

    # ------------------------------------------------------------------
    def _validate(self) -> None:
        if not math.isfinite(self._x) or abs(self._x) >= _FLOAT_MAX:
            raise CoordinateOverflowError(
                f"X coordinate of a point has reached the bounds of the float type ({self._x!r})")
        if not math.isfinite(self._y) or abs(self._y) >= _FLOAT_MAX:
            raise CoordinateOverflowError(
                f"Y coordinate of a point has reached the bounds of the float type ({self._y!r})")

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, Point):
            return NotImplemented
        eps = get_tolerances().fine_eps
        return abs(self._x - other.x) < eps and abs(self._y - other.y) < eps

    __hash__ = None  # mutable, tolerant equality

    def __repr__(self) -> str:
        return f"Point({self._x!r}, {self._y!r})"
