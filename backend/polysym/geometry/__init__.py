"""Leaf geometry: points, lines and tolerance comparisons. No engine imports."""

from polysym.geometry.line import Line
from polysym.geometry.point import (
    NO_INTERSECTION,
    MaybePoint,
    NoIntersection,
    Point,
    invalid_point,
    is_valid,
    midpoint,
    points_equal,
)
from polysym.geometry.tolerance import DEFAULT_TOLERANCE, Tolerance

__all__ = [
    "DEFAULT_TOLERANCE",
    "Line",
    "MaybePoint",
    "NO_INTERSECTION",
    "NoIntersection",
    "Point",
    "Tolerance",
    "invalid_point",
    "is_valid",
    "midpoint",
    "points_equal",
]
