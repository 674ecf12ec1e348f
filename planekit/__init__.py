"""Public package API for the planekit 2D geometry kernel.

This facade provides a stable, flatter import surface on top of the
internal implementation package ``planekit.core``. The matplotlib-backed
``visualization`` module is loaded lazily so ``import planekit`` stays light.

Example
-------
    from planekit import Point, Polygon, build_quad

    quad = build_quad(2, 2)
    quad.check_point_inside(Point(0, 0))   # True
    quad.triangle_indices()                # (2, 3) int32 index buffer

The deeper modules (``planekit.core.*``) are considered internal and may
change; rely on this layer for public symbols.
"""
from importlib import import_module as _imp
from importlib.metadata import version as _pkg_version, PackageNotFoundError as _PkgNotFound
import logging as _logging

try:
    __version__ = _pkg_version("planekit")  # populated when installed
except _PkgNotFound:  # pragma: no cover - running from a source checkout
    __version__ = "0.0.0+dev"

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

from .core.constants import (
    FINE_EPS,
    COARSE_EPS,
    VERTICAL_TOLERANCE_DEG,
    RIGHT_ANGLE_TOLERANCE_RAD,
    PROBE_MARGIN,
    Winding,
    CLOCKWISE_POLYGON,
    COUNTERCLOCKWISE_POLYGON,
)
from .core.config import Tolerances, get_tolerances, set_tolerances, tolerance_override
from .core.errors import (
    GeometryError,
    DegenerateGeometryError,
    ParallelSegmentsError,
    TriangulationError,
    CoordinateOverflowError,
)
from .core.logging_utils import get_logger, configure_logging
from .core.point import Point
from .core.segment import Segment, Intercept
from .core.polygon import Polygon
from .core.utils import distance, check_parallel_segments
from .core.generators import (
    create_ngon,
    create_circle,
    build_quad,
    offset_polygon,
    offset_polygon_with_radius,
    create_polygon_intersection,
)


def _lazy_module(mod_name):
    class _ModuleProxy:
        __slots__ = ('_m',)
        def _load(self):  # type: ignore
            try:
                return self._m  # type: ignore
            except AttributeError:
                self._m = _imp(mod_name)  # type: ignore
                return self._m  # type: ignore
        def __getattr__(self, item):  # type: ignore
            return getattr(self._load(), item)
        def __dir__(self):  # type: ignore
            return dir(self._load())
    return _ModuleProxy()


visualization = _lazy_module('planekit.core.visualization')

__all__ = [
    '__version__',
    # primitives
    'Point', 'Segment', 'Intercept', 'Polygon',
    # constants
    'FINE_EPS', 'COARSE_EPS', 'VERTICAL_TOLERANCE_DEG', 'RIGHT_ANGLE_TOLERANCE_RAD', 'PROBE_MARGIN',
    'Winding', 'CLOCKWISE_POLYGON', 'COUNTERCLOCKWISE_POLYGON',
    # configuration
    'Tolerances', 'get_tolerances', 'set_tolerances', 'tolerance_override',
    # errors
    'GeometryError', 'DegenerateGeometryError', 'ParallelSegmentsError',
    'TriangulationError', 'CoordinateOverflowError',
    # utilities
    'distance', 'check_parallel_segments',
    # generators
    'create_ngon', 'create_circle', 'build_quad', 'offset_polygon', 'offset_polygon_with_radius',
    'create_polygon_intersection',
    # logging
    'get_logger', 'configure_logging',
    # lazy namespace
    'visualization',
]
