"""Simple polygon over an owned vertex arena.

The polygon owns ``_points`` (its arena of Point instances). The boundary is
stored as ``edges``, an (N, 2) index array into the arena, and ``segments`` is
rebuilt from those index pairs so every Segment holds the arena's own Points.
Both are rebuilt from scratch after every structural or positional change.
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, Union

import numpy as np

from .config import get_tolerances
from .constants import Winding
from .logging_utils import get_logger
from .point import Point
from .segment import Segment
from .triangulation import (
    average_center,
    ear_clip_indices,
    polygon_signed_area,
    triangle_winding,
    triangles_signed_areas,
)

logger = get_logger('planekit.polygon')

__all__ = ['Polygon']


def _contains(points: Sequence[Point], point: Point) -> bool:
    return Polygon(points).check_point_inside(point)


class Polygon:
    """Closed loop of at least three Points."""

    def __init__(self, points: Iterable[Point]):
        pts = list(points)
        if len(pts) < 3:
            raise ValueError(f"A polygon needs at least 3 points, got {len(pts)}")
        for p in pts:
            if not isinstance(p, Point):
                raise TypeError(f"Polygon vertices must be Point instances, got {type(p).__name__}")
        self._points: List[Point] = pts
        self._rebuild()

    @classmethod
    def from_coordinates(cls, coords) -> 'Polygon':
        """Build a polygon of fresh Points from an (N, 2) array-like."""
        arr = np.asarray(coords, dtype=np.float64)
        if arr.ndim != 2 or arr.shape[1] != 2:
            raise ValueError(f"expected an (N, 2) coordinate array, got shape {arr.shape}")
        return cls(Point(x, y) for x, y in arr)

    def copy(self) -> 'Polygon':
        """Independent deep copy (fresh Points)."""
        return Polygon(Point.from_point(p) for p in self._points)

    def clean(self) -> 'Polygon':
        """Copy with zero-length edges and adjacent colinear edges merged.

        A vertex is dropped when the edge ending at it is shorter than the fine
        tolerance, or when the edges on either side of it differ in slope by
        less than the coarse tolerance (degrees).
        """
        result = self.copy()
        tol = get_tolerances()
        zero_length = tol.fine_eps * tol.fine_eps

        while True:
            segments = result._segments
            n = len(segments)
            drop = None
            for i in range(n):
                if segments[i].length_squared() <= zero_length:
                    drop = (i + 1) % n
                    break
                if abs(segments[i].slope_in_degrees() - segments[(i + 1) % n].slope_in_degrees()) < tol.coarse_eps:
                    drop = (i + 1) % n
                    break
            if drop is None:
                return result
            if not result.delete_point(drop):
                logger.warning("Stopped cleaning %r: only 3 vertices left", result)
                return result

    # ------------------------------------------------------------------
    # storage
    # ------------------------------------------------------------------
    def _rebuild(self) -> None:
        n = len(self._points)
        idx = np.arange(n, dtype=np.int64)
        edges = np.column_stack((idx, (idx + 1) % n))
        edges.setflags(write=False)
        self._edges = edges
        self._segments = tuple(Segment(self._points[a], self._points[b]) for a, b in edges)

    def _distinct_points(self) -> List[Point]:
        seen = set()
        out = []
        for p in self._points:
            if id(p) not in seen:
                seen.add(id(p))
                out.append(p)
        return out

    @property
    def points(self) -> tuple:
        """Snapshot of the arena's Point handles."""
        return tuple(self._points)

    @property
    def segments(self) -> tuple:
        return self._segments

    @property
    def edges(self) -> np.ndarray:
        """(N, 2) read-only index pairs into ``points``."""
        return self._edges

    def coordinates(self) -> np.ndarray:
        """(N, 2) float64 array of vertex positions."""
        return np.array([p.as_tuple() for p in self._points], dtype=np.float64)

    # ------------------------------------------------------------------
    # bounding metrics
    # ------------------------------------------------------------------
    def min_x(self) -> float:
        return float(self.coordinates()[:, 0].min())

    def max_x(self) -> float:
        return float(self.coordinates()[:, 0].max())

    def min_y(self) -> float:
        return float(self.coordinates()[:, 1].min())

    def max_y(self) -> float:
        return float(self.coordinates()[:, 1].max())

    def width(self) -> float:
        xs = self.coordinates()[:, 0]
        return float(xs.max() - xs.min())

    def height(self) -> float:
        ys = self.coordinates()[:, 1]
        return float(ys.max() - ys.min())

    def center(self) -> Point:
        """Midpoint of the bounding box; pivot for ``rotate`` and ``scale``."""
        coords = self.coordinates()
        lo = coords.min(axis=0)
        hi = coords.max(axis=0)
        return Point((lo[0] + hi[0]) / 2, (lo[1] + hi[1]) / 2)

    def center_average(self) -> Point:
        """Arithmetic mean of the vertices."""
        return average_center(self._points)

    # ------------------------------------------------------------------
    # transforms
    # ------------------------------------------------------------------
    def translate(self, dx: float, dy: float) -> None:
        for p in self._distinct_points():
            p.translate(dx, dy)
        self._rebuild()

    def scale(self, factor: float) -> None:
        self.scale_from_point(self.center(), factor)

    def scale_from_point(self, center: Point, factor: float) -> None:
        for p in self._distinct_points():
            p.scale_from_point(center, factor)
        self._rebuild()

    def rotate(self, angle: float) -> None:
        self.rotate_around_point(self.center(), angle)

    def rotate_around_point(self, center: Point, angle: float) -> None:
        for p in self._distinct_points():
            p.rotate_around_point(center, angle)
        self._rebuild()

    # ------------------------------------------------------------------
    # structural edits (bool result, never raise on bad indices)
    # ------------------------------------------------------------------
    def insert_point(self, point: Point, index: int) -> bool:
        """Insert ``point`` before position ``index``; ``index == len`` appends."""
        if not 0 <= index <= len(self._points):
            logger.debug("insert_point rejected: index %s outside [0, %d]", index, len(self._points))
            return False
        self._points.insert(index, point)
        self._rebuild()
        return True

    def delete_point(self, target: Union[int, Point]) -> bool:
        """Delete by index or by (tolerant) Point value; refused below 4 vertices."""
        n = len(self._points)
        if n < 4:
            logger.debug("delete_point rejected: polygon only has %d vertices", n)
            return False
        if isinstance(target, Point):
            index = next((i for i, p in enumerate(self._points) if p == target), None)
            if index is None:
                logger.debug("delete_point rejected: %r is not a vertex", target)
                return False
        else:
            index = int(target)
            if not 0 <= index < n:
                logger.debug("delete_point rejected: index %s outside [0, %d)", index, n)
                return False
        del self._points[index]
        self._rebuild()
        return True

    def move_point(self, index: int, dx: float, dy: float) -> bool:
        if not 0 <= index < len(self._points):
            logger.debug("move_point rejected: index %s outside [0, %d)", index, len(self._points))
            return False
        self._points[index].translate(dx, dy)
        self._rebuild()
        return True

    def move_contiguous_points(self, start_index: int, end_index: int, dx: float, dy: float) -> bool:
        """Translate vertices ``start_index..end_index`` (inclusive)."""
        if not 0 <= start_index <= end_index < len(self._points):
            logger.debug("move_contiguous_points rejected: range [%s, %s] invalid for %d vertices",
                         start_index, end_index, len(self._points))
            return False
        for p in self._points[start_index:end_index + 1]:
            p.translate(dx, dy)
        self._rebuild()
        return True

    # ------------------------------------------------------------------
    # winding
    # ------------------------------------------------------------------
    def determine_directionality(self) -> Winding:
        """Winding of the vertex loop.

        Polygons with more than three vertices are classified by the first
        non-degenerate triangle of their decomposition. Colinear runs are
        clipped as zero-area ears and must not decide the winding.
        """
        if len(self._points) == 3:
            return triangle_winding(*self._points)
        tris = ear_clip_indices(self._points, _contains)
        areas = triangles_signed_areas(self.coordinates(), tris)
        eps = get_tolerances().fine_eps
        for (a, b, c), tri_area in zip(tris, areas):
            if abs(tri_area) > eps:
                return triangle_winding(self._points[a], self._points[b], self._points[c])
        logger.warning("All %d triangles are degenerate; using the shoelace sign for winding", len(tris))
        return Winding.COUNTERCLOCKWISE if self.signed_area() > 0 else Winding.CLOCKWISE

    def enforce_directionality(self, target: Union[Winding, int]) -> None:
        target = Winding(target)
        if self.determine_directionality() != target:
            self._points.reverse()
            self._rebuild()

    # ------------------------------------------------------------------
    # predicates
    # ------------------------------------------------------------------
    def check_point_on_perimeter(self, point: Point) -> bool:
        return any(seg.point_on_segment(point) for seg in self._segments)

    def segment_intersect_polygon_list(self, probe: Segment) -> List[Segment]:
        """Boundary segments that intersect ``probe``."""
        return [seg for seg in self._segments if seg.intersects(probe)]

    def segment_intersect_polygon_points(self, probe: Segment) -> List[Point]:
        """Distinct crossings of ``probe`` with the boundary.

        Parallel boundary segments contribute nothing; colinear overlaps are
        covered by the neighbouring segments' endpoints.
        """
        found: List[Point] = []
        for seg in self.segment_intersect_polygon_list(probe):
            result = seg.intercept(probe)
            if result.is_degenerate:
                continue
            if not any(result.point == q for q in found):
                found.append(result.point)
        return found

    def polygon_intersect_polygon_points(self, other: 'Polygon') -> List[Point]:
        """Crossings of every boundary segment of ``other`` with this polygon."""
        out: List[Point] = []
        for seg in other.segments:
            out.extend(self.segment_intersect_polygon_points(seg))
        return out

    def check_segment_intersect_polygon(self, segment: Segment) -> bool:
        return len(self.segment_intersect_polygon_points(segment)) != 0

    def check_point_inside(self, point: Point) -> bool:
        """Even-odd test with an eastward probe; perimeter points count as inside.

        A ray that only grazes a vertex (touching the boundary without
        crossing it) still counts as one crossing, so such points can be
        misreported. For the diamond (0,1),(1,0),(0,-1),(-1,0) the point
        (-2, 1) is reported inside.
        """
        probe = Segment.from_angle(point, 0, self.width() + get_tolerances().probe_margin)
        crossings = self.segment_intersect_polygon_points(probe)
        return len(crossings) % 2 == 1 or self.check_point_on_perimeter(point)

    def check_polygon_intersects_polygon(self, other: 'Polygon') -> bool:
        """Boundary crossing, or either polygon wholly inside the other."""
        if any(self.check_segment_intersect_polygon(seg) for seg in other.segments):
            return True
        return self.check_polygon_contains_polygon(other) or other.check_polygon_contains_polygon(self)

    def check_polygon_touches_polygon(self, other: 'Polygon') -> bool:
        """Heuristic: as many vertices on the other's perimeter as inside it, and some."""
        on_perimeter = 0
        inside = 0
        for first, second in ((self, other), (other, self)):
            for p in second.points:
                if first.check_point_on_perimeter(p):
                    on_perimeter += 1
                if first.check_point_inside(p):
                    inside += 1
        return on_perimeter == inside and on_perimeter != 0

    def check_polygon_contains_polygon(self, other: 'Polygon') -> bool:
        return all(self.check_point_inside(p) for p in other.points)

    def prep_for_boolean_operations(self, other: 'Polygon') -> 'Polygon':
        """Clockwise copy with the boundary crossings against ``other`` spliced in.

        Each crossing is inserted right after the first edge it lies on;
        crossings that already coincide with a vertex are not duplicated.
        """
        result = self.copy()
        for point in self.polygon_intersect_polygon_points(other):
            if any(point == p for p in result._points):
                continue
            for i, seg in enumerate(result._segments):
                if seg.point_on_segment(point):
                    result.insert_point(point, i + 1)
                    break
            else:
                logger.warning("Crossing %r lies on no edge of the copy; not inserted", point)
        result.enforce_directionality(Winding.CLOCKWISE)
        return result

    # ------------------------------------------------------------------
    # distances (squared)
    # ------------------------------------------------------------------
    def distance_squared_to_polygon(self, other: 'Polygon') -> float:
        if self.check_polygon_intersects_polygon(other):
            return 0.0
        return min(mine.distance_squared_to_segment(theirs)
                   for mine in self._segments for theirs in other.segments)

    def distance_squared_to_segment(self, segment: Segment) -> float:
        if self.check_point_inside(segment.start) or self.check_point_inside(segment.end):
            return 0.0
        if self.segment_intersect_polygon_points(segment):
            return 0.0
        return min(seg.distance_squared_to_segment(segment) for seg in self._segments)

    def distance_squared_to_point(self, point: Point) -> float:
        if self.check_point_inside(point):
            return 0.0
        return min(seg.distance_squared_to_point(point) for seg in self._segments)

    # ------------------------------------------------------------------
    # triangulation
    # ------------------------------------------------------------------
    def decompose_into_triangles(self, directionality: Optional[Winding] = None) -> List['Polygon']:
        """Ear-clip into len(self) - 2 triangles sharing this polygon's Points.

        If ``directionality`` is given every triangle is re-oriented to it.
        """
        triangles = []
        for a, b, c in ear_clip_indices(self._points, _contains):
            tri = Polygon((self._points[a], self._points[b], self._points[c]))
            if directionality is not None:
                tri.enforce_directionality(directionality)
            triangles.append(tri)
        return triangles

    def triangle_indices(self, directionality: Optional[Winding] = None) -> np.ndarray:
        """The decomposition as an (N-2, 3) int32 index buffer into ``points``."""
        tris = np.array(ear_clip_indices(self._points, _contains), dtype=np.int32).reshape(-1, 3)
        if directionality is not None:
            target = Winding(directionality)
            for row in tris:
                if triangle_winding(*(self._points[k] for k in row)) != target:
                    row[:] = row[::-1].copy()
        return tris

    def area(self) -> float:
        """Sum of the unsigned triangle areas of the decomposition."""
        areas = triangles_signed_areas(self.coordinates(), self.triangle_indices())
        return float(np.abs(areas).sum())

    def signed_area(self) -> float:
        """Shoelace area of the vertex loop; positive for counter-clockwise."""
        return polygon_signed_area(self.coordinates())

    # ------------------------------------------------------------------
    def _aligned(self, other_points: Sequence[Point], candidate: Sequence[Point]) -> bool:
        n = len(candidate)
        return any(all(other_points[k] == candidate[(k + shift) % n] for k in range(n))
                   for shift in range(n))

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, Polygon):
            return NotImplemented
        if len(other) != len(self):
            return False
        theirs = other.points
        return self._aligned(theirs, self._points) or self._aligned(theirs, self._points[::-1])

    __hash__ = None

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(tuple(self._points))

    def __repr__(self) -> str:
        return f"Polygon({len(self._points)} vertices: {', '.join(repr(p) for p in self._points)})"
