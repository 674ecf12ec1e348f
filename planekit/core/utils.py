"""Stateless pairwise queries across primitive kinds."""
from __future__ import annotations

from typing import Union

from .point import Point
from .polygon import Polygon
from .segment import Segment

__all__ = ['distance', 'check_parallel_segments']

Geometry = Union[Point, Segment, Polygon]

# (kind of a, kind of b) -> method name on a; lookups try both orders
_DISTANCE_METHODS = {
    (Point, Point): 'distance_squared_to_point',
    (Segment, Point): 'distance_squared_to_point',
    (Segment, Segment): 'distance_squared_to_segment',
    (Polygon, Point): 'distance_squared_to_point',
    (Polygon, Segment): 'distance_squared_to_segment',
    (Polygon, Polygon): 'distance_squared_to_polygon',
}


def _kind(obj) -> type:
    for kind in (Point, Segment, Polygon):
        if isinstance(obj, kind):
            return kind
    raise TypeError(f"distance is not defined for {type(obj).__name__}")


def distance(a: Geometry, b: Geometry) -> float:
    """Squared distance between any two primitives, in either argument order."""
    ka, kb = _kind(a), _kind(b)
    method = _DISTANCE_METHODS.get((ka, kb))
    if method is not None:
        return getattr(a, method)(b)
    return getattr(b, _DISTANCE_METHODS[(kb, ka)])(a)


def check_parallel_segments(a: Segment, b: Segment) -> bool:
    """Exact equality of the degree slopes."""
    return a.is_parallel(b)
