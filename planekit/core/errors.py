"""Exception taxonomy for the geometry kernel."""
from __future__ import annotations


class GeometryError(Exception):
    pass


class DegenerateGeometryError(GeometryError):
    """The requested operation has no unique answer for this input."""


class ParallelSegmentsError(DegenerateGeometryError):
    """Two segments with equal slope have no unique intercept."""


class TriangulationError(DegenerateGeometryError):
    """Ear clipping could not find an acceptable ear (non-simple polygon)."""


class CoordinateOverflowError(GeometryError, OverflowError):
    """A coordinate became non-finite or hit the float bounds after a transform."""


__all__ = [
    'GeometryError',
    'DegenerateGeometryError',
    'ParallelSegmentsError',
    'TriangulationError',
    'CoordinateOverflowError',
]
