"""Ear clipping and winding helpers working on vertex indices.

The ear test is injected by the caller (``contains``) so this module stays
independent of the Polygon class: the polygon hands in its own point-in-polygon
predicate and receives triangles as index triples into its vertex arena.
"""
from __future__ import annotations

import math
from typing import Callable, List, Sequence, Tuple

import numpy as np

from .constants import Winding
from .errors import TriangulationError
from .logging_utils import get_logger
from .point import Point

logger = get_logger('planekit.triangulation')

__all__ = [
    'average_center',
    'triangle_winding',
    'ear_clip_indices',
    'triangles_signed_areas',
    'polygon_signed_area',
]

Triangle = Tuple[int, int, int]
ContainsFn = Callable[[Sequence[Point], Point], bool]


def average_center(points: Sequence[Point]) -> Point:
    """Arithmetic mean of ``points``."""
    n = len(points)
    return Point(sum(p.x for p in points) / n, sum(p.y for p in points) / n)


def triangle_winding(p0: Point, p1: Point, p2: Point) -> Winding:
    """Classify the vertex order of a non-colinear triangle.

    Bearings from the average center to the first two vertices are shifted by
    2*pi (so both are positive) and their gap is compared with pi.
    """
    center = average_center((p0, p1, p2))
    first = center.angle_to_other_point(p0) + 2 * math.pi
    second = center.angle_to_other_point(p1) + 2 * math.pi
    if first > second:
        return Winding.COUNTERCLOCKWISE if first - second > math.pi else Winding.CLOCKWISE
    return Winding.CLOCKWISE if second - first > math.pi else Winding.COUNTERCLOCKWISE


def ear_clip_indices(points: Sequence[Point], contains: ContainsFn) -> List[Triangle]:
    """Decompose the loop ``points`` into len(points) - 2 index triangles.

    Each pass scans the remaining vertices for the first interior index ``i``
    whose triple (i-1, i, i+1) has its average center inside the remaining
    polygon according to ``contains``; the last three vertices are accepted
    unconditionally. When no interior triple qualifies, the two wraparound
    triples are tried before giving up.

    Raises
    ------
    TriangulationError
        If no acceptable ear exists (typically a self-intersecting loop).
    """
    remaining = list(range(len(points)))
    triangles: List[Triangle] = []

    while len(remaining) >= 3:
        n = len(remaining)
        if n == 3:
            triangles.append((remaining[0], remaining[1], remaining[2]))
            break

        remaining_points = [points[k] for k in remaining]
        ear = None
        for i in range(1, n - 1):
            candidate = (remaining[i - 1], remaining[i], remaining[i + 1])
            if contains(remaining_points, average_center([points[k] for k in candidate])):
                ear = (i, candidate)
                break

        if ear is None:
            for i in (0, n - 1):
                candidate = (remaining[i - 1], remaining[i], remaining[(i + 1) % n])
                if contains(remaining_points, average_center([points[k] for k in candidate])):
                    logger.warning("No interior ear among %d vertices; clipping wraparound vertex %d", n, remaining[i])
                    ear = (i, candidate)
                    break

        if ear is None:
            raise TriangulationError(
                f"Could not find an ear among {n} remaining vertices; is the polygon simple?")

        i, candidate = ear
        logger.debug("Clipped ear %s", candidate)
        triangles.append(candidate)
        del remaining[i]

    return triangles


def triangles_signed_areas(coords, tris) -> np.ndarray:
    """Vectorized signed area for a batch of triangles.

    coords: (N,2) float array
    tris:   (M,3) int array
    Returns: (M,) float64 array of signed areas (positive for counter-clockwise).
    """
    pts = np.asarray(coords, dtype=np.float64)
    T = np.asarray(tris, dtype=np.int32)
    if T.size == 0:
        return np.empty((0,), dtype=np.float64)
    p0 = pts[T[:, 0]]; p1 = pts[T[:, 1]]; p2 = pts[T[:, 2]]
    e1 = p1 - p0
    e2 = p2 - p0
    return 0.5 * (e1[:, 0] * e2[:, 1] - e1[:, 1] * e2[:, 0])


def polygon_signed_area(coords) -> float:
    """Shoelace area of a closed vertex loop; positive if counter-clockwise."""
    arr = np.asarray(coords, dtype=np.float64)
    if arr.shape[0] < 3:
        return 0.0
    x = arr[:, 0]; y = arr[:, 1]
    return float(0.5 * (np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))))
