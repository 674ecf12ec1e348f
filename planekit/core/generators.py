"""Procedural polygon builders: n-gons, quads, edge offsets and intersections."""
from __future__ import annotations

import math
from typing import List, Optional

from .config import get_tolerances
from .constants import Winding
from .errors import GeometryError
from .logging_utils import get_logger
from .point import Point
from .polygon import Polygon
from .segment import Segment

logger = get_logger('planekit.generators')

__all__ = [
    'create_ngon',
    'create_circle',
    'build_quad',
    'offset_polygon',
    'offset_polygon_with_radius',
    'create_polygon_intersection',
]


def create_ngon(center: Point, radius: float, steps: int) -> Polygon:
    """Regular polygon of ``steps`` vertices around ``center``.

    Vertex ``i`` sits at bearing ``i * 360 / steps`` degrees measured clockwise
    from north, so vertex 0 is straight above the center.
    """
    if steps < 3:
        raise ValueError(f"an n-gon needs at least 3 steps, got {steps}")
    increment = 360.0 / steps
    points = []
    for i in range(steps):
        angle = math.radians(i * increment)
        points.append(Point(center.x + math.sin(angle) * radius,
                            center.y + math.cos(angle) * radius))
    return Polygon(points)


create_circle = create_ngon


def build_quad(width: float, height: float) -> Polygon:
    """Rectangle of the given size centred on the origin."""
    hw = width / 2
    hh = height / 2
    return Polygon([Point(hw, hh), Point(-hw, hh), Point(-hw, -hh), Point(hw, -hh)])


def _outward_modifier(winding: Winding) -> float:
    return math.pi / 2 if winding == Winding.COUNTERCLOCKWISE else -math.pi / 2


def offset_polygon(polygon: Polygon, distance: float, start_index: int = 0,
                   end_index: Optional[int] = None) -> Polygon:
    """Shift the edges ``start_index..end_index`` (wrapping) by ``distance``.

    Positive distances move the edges away from the interior, negative ones
    towards it. Vertices are rebuilt from the intercepts of adjacent edges, so
    only convex polygons give meaningful results. ``polygon`` is not modified.

    Raises
    ------
    ParallelSegmentsError
        If two adjacent edges involved in an intercept are colinear; run
        ``Polygon.clean`` first.
    """
    n = len(polygon)
    if end_index is None:
        end_index = n - 1
    if not (0 <= start_index < n and 0 <= end_index < n):
        raise ValueError(f"edge range [{start_index}, {end_index}] invalid for {n} edges")

    modifier = _outward_modifier(polygon.determine_directionality())

    copies = [Segment.from_segment(seg) for seg in polygon.segments]
    copies = copies[start_index:] + copies[:start_index]
    last_offset = (end_index - start_index + n) % n

    shifted: List[Segment] = []
    kept: List[Segment] = []
    for i, seg in enumerate(copies):
        if i <= last_offset:
            direction = seg.start.angle_to_other_point(seg.end) - modifier
            shifted.append(Segment.offset_from(seg, distance, direction))
        else:
            kept.append(seg)

    vertices: List[Point] = []
    if kept:
        vertices.append(shifted[0].intercept_point(kept[-1]))
        for first, second in zip(shifted, shifted[1:]):
            vertices.append(first.intercept_point(second))
        vertices.append(shifted[-1].intercept_point(kept[0]))

        carried: List[Point] = []
        for seg in kept:
            for p in seg.points:
                if not any(p == q for q in carried):
                    carried.append(p)
        # first and last coincide with the end intercepts above
        vertices.extend(carried[1:-1])
    else:
        for first, second in zip(shifted, shifted[1:]):
            vertices.append(first.intercept_point(second))
        vertices.append(shifted[0].intercept_point(shifted[-1]))

    return Polygon(vertices)


def offset_polygon_with_radius(polygon: Polygon, distance: float, resolution: int) -> Polygon:
    """Offset every edge by ``distance`` and round the corners.

    Consecutive offset edges are joined by a circular arc of radius
    ``distance`` around the original vertex, sampled every
    ``2*pi / resolution`` radians in the polygon's own winding direction.
    """
    if resolution < 1:
        raise ValueError(f"resolution must be positive, got {resolution}")
    winding = polygon.determine_directionality()
    modifier = _outward_modifier(winding)
    full_turn = 2 * math.pi
    increment = full_turn / resolution
    eps = get_tolerances().fine_eps

    shifted = [Segment.offset_from(seg, distance, seg.start.angle_to_other_point(seg.end) - modifier)
               for seg in polygon.segments]

    points: List[Point] = []
    for i, seg in enumerate(polygon.segments):
        pivot = seg.end
        current = shifted[i]
        following = shifted[(i + 1) % len(shifted)]
        points.append(current.end)

        start_angle = pivot.angle_to_other_point(current.end)
        end_angle = pivot.angle_to_other_point(following.start)
        if winding == Winding.COUNTERCLOCKWISE:
            sweep = (end_angle - start_angle) % full_turn
            step = increment
        else:
            sweep = (start_angle - end_angle) % full_turn
            step = -increment
        if sweep >= full_turn - eps:
            sweep = 0.0

        for k in range(1, max(0, math.ceil(sweep / increment) - 1) + 1):
            points.append(Point.from_polar(pivot, distance, start_angle + k * step))
        points.append(following.start)

    logger.debug("Rounded offset of %d edges produced %d vertices", len(shifted), len(points))
    return Polygon(points)


def _index_of(points, target: Point) -> int:
    for k, p in enumerate(points):
        if p == target:
            return k
    raise GeometryError(f"{target!r} is not a vertex of the prepared boundary")


def create_polygon_intersection(first: Polygon, second: Polygon) -> Optional[Polygon]:
    """Region shared by two simple polygons, or None when they are disjoint.

    Both boundaries are prepared with their mutual crossings and walked
    clockwise: vertices of ``first`` are collected while they lie inside
    ``second``, then the walk hops to ``second`` at the shared crossing and
    collects its vertices while they lie inside ``first``, and so on until
    it is back where it started.

    Raises
    ------
    GeometryError
        If the walk does not close (typically a non-simple input).
    """
    if first.check_polygon_contains_polygon(second):
        return second.copy()
    if second.check_polygon_contains_polygon(first):
        return first.copy()
    if not first.check_polygon_intersects_polygon(second):
        return None

    this = first.prep_for_boolean_operations(second)
    other = second.prep_for_boolean_operations(first)
    this_pts, other_pts = this.points, other.points
    n, m = len(this_pts), len(other_pts)
    budget = n + m + 1

    start = next((i for i in range(n)
                  if other.check_point_inside(this_pts[i])
                  and not other.check_point_inside(this_pts[i - 1])), 0)

    collected: List[Point] = []

    def walk(points, inside_of, k: int) -> int:
        size = len(points)
        while inside_of.check_point_inside(points[k % size]):
            collected.append(points[k % size])
            k += 1
            if len(collected) > budget:
                raise GeometryError(f"Boundary walk did not close after {budget} vertices; are both polygons simple?")
        return k

    i = start
    for _ in range(budget):
        i = walk(this_pts, other, i)
        j = walk(other_pts, this, _index_of(other_pts, this_pts[(i - 1) % n]) + 1)
        i = _index_of(this_pts, other_pts[(j - 1) % m]) + 1
        if i - 1 == start:
            break
    else:
        raise GeometryError(f"Boundary walk did not return to its start after {budget} hops")

    # the walk ends on the starting vertex again
    collected.pop()
    logger.debug("Intersection walk over %d + %d vertices produced %d", n, m, len(collected))
    return Polygon(collected)
