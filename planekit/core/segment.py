"""Straight line segment between two shared Points.

Intercepts are reported through a tagged ``Intercept`` result rather than by
raising, so callers that have a meaningful fallback for parallel lines
(``Segment.intersects``, the polygon intercept collectors) branch on it
explicitly. ``Segment.intercept_point`` is the raising unwrap for callers
that have none.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from .config import get_tolerances
from .errors import ParallelSegmentsError
from .logging_utils import get_logger
from .point import Point

logger = get_logger('planekit.segment')

__all__ = ['Segment', 'Intercept']

_HALF_PI = math.pi / 2


@dataclass(frozen=True, eq=False)
class Intercept:
    """Outcome of intersecting the infinite lines through two segments.

    Either ``point`` holds the unique crossing, or the lines are parallel and
    ``point`` is None with ``reason`` describing the pair.
    """
    point: Optional[Point] = None
    reason: str = ''

    @property
    def is_degenerate(self) -> bool:
        return self.point is None

    @classmethod
    def found(cls, point: Point) -> 'Intercept':
        return cls(point=point)

    @classmethod
    def parallel(cls, first: 'Segment', second: 'Segment') -> 'Intercept':
        return cls(reason=f"Can not calculate an intercept point between 2 parallel lines: {first!r} and {second!r}")

    def unwrap(self) -> Point:
        if self.point is None:
            raise ParallelSegmentsError(self.reason)
        return self.point


class Segment:
    """Segment from ``start`` to ``end``.

    The endpoints are the caller's Point instances, not copies.
    """
    __slots__ = ('_start', '_end')

    def __init__(self, start: Point, end: Point):
        self._start = start
        self._end = end

    @classmethod
    def from_angle(cls, start: Point, angle: float, distance: float) -> 'Segment':
        """Segment leaving ``start`` at ``angle`` degrees (0 east, 90 north) for ``distance``."""
        radians = math.radians(angle)
        return cls(start, Point(start.x + math.cos(radians) * distance,
                                start.y + math.sin(radians) * distance))

    @classmethod
    def from_segment(cls, other: 'Segment') -> 'Segment':
        """Deep copy with fresh endpoint Points."""
        return cls(Point.from_point(other.start), Point.from_point(other.end))

    @classmethod
    def offset_from(cls, other: 'Segment', distance: float, direction: float) -> 'Segment':
        """Copy of ``other`` shifted ``distance`` along ``direction`` (radians)."""
        return cls(Point.from_polar(other.start, distance, direction),
                   Point.from_polar(other.end, distance, direction))

    @property
    def start(self) -> Point:
        return self._start

    @property
    def end(self) -> Point:
        return self._end

    @property
    def points(self) -> tuple[Point, Point]:
        return (self._start, self._end)

    def _distinct_points(self):
        return (self._start,) if self._end is self._start else (self._start, self._end)

    # ------------------------------------------------------------------
    # transforms (act on the shared endpoints)
    # ------------------------------------------------------------------
    def translate(self, dx: float, dy: float) -> None:
        for point in self._distinct_points():
            point.translate(dx, dy)

    def scale(self, factor: float) -> None:
        self.scale_from_point(self.center(), factor)

    def scale_from_point(self, center: Point, factor: float) -> None:
        for point in self._distinct_points():
            point.scale_from_point(center, factor)

    def rotate(self, angle: float) -> None:
        self.rotate_around_point(self.center(), angle)

    def rotate_around_point(self, center: Point, angle: float) -> None:
        for point in self._distinct_points():
            point.rotate_around_point(center, angle)

    def center(self) -> Point:
        return Point((self._start.x + self._end.x) / 2, (self._start.y + self._end.y) / 2)

    # ------------------------------------------------------------------
    # slope
    # ------------------------------------------------------------------
    def slope_in_ratio(self) -> float:
        """Rise over run; vertical segments give +inf."""
        dx = self._start.x - self._end.x
        dy = self._start.y - self._end.y
        if dx == 0:
            return math.inf
        return dy / dx

    def slope_in_radians(self) -> float:
        """Slope angle in (-pi/2, pi/2]; agnostic of which endpoint is the start."""
        return math.atan(self.slope_in_ratio())

    def slope_in_degrees(self) -> float:
        return math.degrees(self.slope_in_radians())

    def is_parallel(self, other: 'Segment') -> bool:
        return self.slope_in_degrees() == other.slope_in_degrees()

    def length_squared(self) -> float:
        return self._start.distance_squared_to_point(self._end)

    # ------------------------------------------------------------------
    # predicates
    # ------------------------------------------------------------------
    def point_on_segment(self, point: Point) -> bool:
        """True if ``point`` lies on the segment, within the active tolerances.

        The two sub-segments start->point and point->end must share a slope
        (both near vertical counts as shared), and the point must fall in the
        segment's bounding box grown by the fine tolerance.
        """
        if self._start == point or self._end == point:
            return True

        tol = get_tolerances()
        first = Segment(self._start, point)
        second = Segment(point, self._end)

        same_slope = abs(first.slope_in_degrees() - second.slope_in_degrees()) <= tol.coarse_eps
        if not same_slope:
            same_slope = (_HALF_PI - abs(first.slope_in_radians()) <= tol.right_angle_tolerance_rad
                          and _HALF_PI - abs(second.slope_in_radians()) <= tol.right_angle_tolerance_rad)
        if not same_slope:
            return False

        eps = tol.fine_eps
        min_x = min(self._start.x, self._end.x) - eps
        max_x = max(self._start.x, self._end.x) + eps
        min_y = min(self._start.y, self._end.y) - eps
        max_y = max(self._start.y, self._end.y) + eps
        return min_x <= point.x <= max_x and min_y <= point.y <= max_y

    def intercept(self, other: 'Segment') -> Intercept:
        """Crossing of the lines through both segments as a tagged result.

        Equal degree slopes yield a degenerate result. A segment within the
        vertical tolerance of 90 degrees fixes x and the other segment's
        point-slope form gives y; otherwise both point-slope equations are
        solved together.
        """
        this_degrees = self.slope_in_degrees()
        other_degrees = other.slope_in_degrees()
        if this_degrees == other_degrees:
            return Intercept.parallel(self, other)

        vertical_tol = get_tolerances().vertical_tolerance_deg
        vertical = sloped = None
        if 90 - abs(this_degrees) <= vertical_tol:
            vertical, sloped = self, other
        elif 90 - abs(other_degrees) <= vertical_tol:
            vertical, sloped = other, self

        if vertical is not None:
            x = vertical.start.x
            y = sloped.slope_in_ratio() * (x - sloped.start.x) + sloped.start.y
            return Intercept.found(Point(x, y))

        this_slope = self.slope_in_ratio()
        other_slope = other.slope_in_ratio()
        x = ((this_slope * self._start.x - other_slope * other.start.x
              + other.start.y - self._start.y)
             / (this_slope - other_slope))
        y = this_slope * (x - self._start.x) + self._start.y
        return Intercept.found(Point(x, y))

    def intercept_point(self, other: 'Segment') -> Point:
        """Crossing of the lines through both segments.

        Raises
        ------
        ParallelSegmentsError
            If the segments are parallel (no unique solution).
        """
        return self.intercept(other).unwrap()

    def intersects(self, other: 'Segment') -> bool:
        """True if the two segments share at least one point.

        Parallel segments intersect when any endpoint of one lies on the other,
        which covers colinear overlaps the algebraic intercept can't represent.
        """
        result = self.intercept(other)
        if result.is_degenerate:
            return (self.point_on_segment(other.start) or self.point_on_segment(other.end)
                    or other.point_on_segment(self._start) or other.point_on_segment(self._end))
        return self.point_on_segment(result.point) and other.point_on_segment(result.point)

    def segment_connected(self, other: 'Segment') -> bool:
        """True iff the segments share an endpoint (by value)."""
        return (self._end == other.end or self._end == other.start
                or self._start == other.start or self._start == other.end)

    # ------------------------------------------------------------------
    # distances (squared)
    # ------------------------------------------------------------------
    def distance_squared_to_point(self, point: Point) -> float:
        perpendicular = Segment.from_angle(point, self.slope_in_degrees() + 90, 1)
        result = self.intercept(perpendicular)
        if result.is_degenerate:
            logger.warning("Perpendicular through %r came out parallel to %r", point, self)
        elif self.point_on_segment(result.point):
            return result.point.distance_squared_to_point(point)
        return min(self._start.distance_squared_to_point(point),
                   self._end.distance_squared_to_point(point))

    def distance_squared_to_segment(self, other: 'Segment') -> float:
        """Minimum of the endpoint-to-opposite-segment squared distances.

        Crossing segments are not detected here; the projection of interior
        closest points is only approximated by the endpoint projections.
        """
        return min(
            other.distance_squared_to_point(self._start),
            other.distance_squared_to_point(self._end),
            self.distance_squared_to_point(other.start),
            self.distance_squared_to_point(other.end),
        )

    # ------------------------------------------------------------------
    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, Segment):
            return NotImplemented
        if self._start == other.start:
            return self._end == other.end
        if self._start == other.end:
            return self._end == other.start
        return False

    __hash__ = None

    def __repr__(self) -> str:
        return f"Segment({self._start!r} -> {self._end!r})"
