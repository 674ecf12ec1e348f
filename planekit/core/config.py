"""Configuration objects for the geometry predicates.

The active tolerances are read by every predicate at call time, so callers
can tune them globally or for a block of code via ``tolerance_override``.
"""
from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, fields, replace
from typing import Iterator

from .constants import (
    COARSE_EPS,
    FINE_EPS,
    PROBE_MARGIN,
    RIGHT_ANGLE_TOLERANCE_RAD,
    VERTICAL_TOLERANCE_DEG,
)


@dataclass(frozen=True)
class Tolerances:
    """Numeric thresholds used by the predicates.

    Attributes
    ----------
    fine_eps : float
        Point equality and bounding-box slack.
    coarse_eps : float
        Maximum slope difference (degrees) for two sub-segments to count as colinear.
    vertical_tolerance_deg : float
        Gap to 90 degrees under which an intercept is solved with a fixed x.
    right_angle_tolerance_rad : float
        Gap to pi/2 under which point-on-segment compares slopes as vertical.
    probe_margin : float
        Extra length added to the point-in-polygon probe beyond the polygon width.
    """
    fine_eps: float = FINE_EPS
    coarse_eps: float = COARSE_EPS
    vertical_tolerance_deg: float = VERTICAL_TOLERANCE_DEG
    right_angle_tolerance_rad: float = RIGHT_ANGLE_TOLERANCE_RAD
    probe_margin: float = PROBE_MARGIN

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if not value > 0:
                raise ValueError(f"{f.name} must be positive, got {value!r}")


_active = Tolerances()


def get_tolerances() -> Tolerances:
    return _active


def set_tolerances(tolerances: Tolerances) -> Tolerances:
    """Install ``tolerances`` as the active set and return the previous one."""
    global _active
    if not isinstance(tolerances, Tolerances):
        raise TypeError("tolerances must be a Tolerances instance")
    previous = _active
    _active = tolerances
    return previous


@contextmanager
def tolerance_override(**overrides) -> Iterator[Tolerances]:
    """Temporarily replace selected tolerance fields.

    Example
    -------
        with tolerance_override(coarse_eps=2e-3):
            polygon.check_point_on_perimeter(p)
    """
    previous = set_tolerances(replace(_active, **overrides))
    try:
        yield _active
    finally:
        set_tolerances(previous)


__all__ = ['Tolerances', 'get_tolerances', 'set_tolerances', 'tolerance_override']
