"""Immutable 2D points and the NO_INTERSECTION sentinel."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

from polysym.errors import InvalidCoordinateError
from polysym.geometry.tolerance import DEFAULT_TOLERANCE, Tolerance


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __post_init__(self) -> None:
        if isinstance(self.x, (str, bytes)) or isinstance(self.y, (str, bytes)):
            raise InvalidCoordinateError(f"Point coordinates must be numeric, got ({self.x!r}, {self.y!r})")
        try:
            x, y = float(self.x), float(self.y)
        except (TypeError, ValueError) as e:
            raise InvalidCoordinateError(f"Point coordinates must be numeric: {e}") from e
        if not (math.isfinite(x) and math.isfinite(y)):
            raise InvalidCoordinateError(f"Point coordinates must be finite, got ({x}, {y})")
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    @classmethod
    def from_xy(cls, pair: Sequence[float]) -> Point:
        if len(pair) != 2:
            raise InvalidCoordinateError(f"Expected an (x, y) pair, got {pair!r}")
        return cls(pair[0], pair[1])

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


class NoIntersection:
    """Sentinel for "no defined point" (e.g. parallel lines).

    Unequal to everything, itself included.
    """

    __slots__ = ()
    _instance: NoIntersection | None = None

    def __new__(cls) -> NoIntersection:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other: object) -> bool:
        return False

    def __ne__(self, other: object) -> bool:
        return True

    __hash__ = object.__hash__

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_INTERSECTION"


NO_INTERSECTION = NoIntersection()

MaybePoint = Union[Point, NoIntersection]


def invalid_point() -> NoIntersection:
    return NO_INTERSECTION


def is_valid(p: MaybePoint) -> bool:
    return isinstance(p, Point)


def midpoint(a: MaybePoint, b: MaybePoint) -> MaybePoint:
    """Arithmetic mean of two points; NO_INTERSECTION propagates."""
    if not (isinstance(a, Point) and isinstance(b, Point)):
        return NO_INTERSECTION
    # Halve first so finite inputs never overflow
    return Point(a.x / 2 + b.x / 2, a.y / 2 + b.y / 2)


def points_equal(
    a: MaybePoint,
    b: MaybePoint,
    tolerance: Tolerance = DEFAULT_TOLERANCE,
    scale: float = 1.0,
) -> bool:
    """Coordinate-wise tolerance equality. Always False if either side is invalid.

    ``rel_tol`` scales with coordinate magnitude, so callers comparing points of
    a shape should express them relative to a nearby origin (the detector uses
    the polygon's bbox center).
    """
    if not (isinstance(a, Point) and isinstance(b, Point)):
        return False
    return tolerance.close(a.x, b.x, scale) and tolerance.close(a.y, b.y, scale)
