"""Central numerical tolerances and winding constants.

This module centralizes the small numeric thresholds used by the predicates
so they can be tuned consistently and referenced without scattering literals.
The magnitudes are load-bearing: point-on-segment, intercept and
point-in-polygon results all depend on them.
"""
from __future__ import annotations

from enum import IntEnum

# Geometry tolerances
FINE_EPS: float = 1e-4                  # point equality, bounding-box slack
COARSE_EPS: float = 5e-4                # colinearity (slope delta in degrees)

# Near-vertical handling
VERTICAL_TOLERANCE_DEG: float = 0.1     # intercept solved with fixed x below this gap to 90 deg
RIGHT_ANGLE_TOLERANCE_RAD: float = 1e-3 # point-on-segment slope gap to +/- pi/2

# Point-in-polygon probe length beyond the polygon width
PROBE_MARGIN: float = 10.0


class Winding(IntEnum):
    """Rotational order of a polygon's vertices."""
    CLOCKWISE = 0
    COUNTERCLOCKWISE = 1


CLOCKWISE_POLYGON = Winding.CLOCKWISE
COUNTERCLOCKWISE_POLYGON = Winding.COUNTERCLOCKWISE

__all__ = [
    'FINE_EPS',
    'COARSE_EPS',
    'VERTICAL_TOLERANCE_DEG',
    'RIGHT_ANGLE_TOLERANCE_RAD',
    'PROBE_MARGIN',
    'Winding',
    'CLOCKWISE_POLYGON',
    'COUNTERCLOCKWISE_POLYGON',
]
