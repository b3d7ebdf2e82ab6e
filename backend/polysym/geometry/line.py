"""Infinite lines through two distinct points."""

from __future__ import annotations

import math
from dataclasses import dataclass

from polysym.errors import DegenerateLineError
from polysym.geometry.point import NO_INTERSECTION, MaybePoint, Point, midpoint
from polysym.geometry.tolerance import DEFAULT_TOLERANCE, Tolerance


@dataclass(frozen=True)
class Line:
    a: Point
    b: Point

    def __post_init__(self) -> None:
        if not (isinstance(self.a, Point) and isinstance(self.b, Point)):
            raise DegenerateLineError(f"Line endpoints must be valid points, got {self.a!r}, {self.b!r}")
        if self.a == self.b:
            raise DegenerateLineError(f"Line endpoints must differ, got {self.a.as_tuple()} twice")

    @property
    def length(self) -> float:
        return math.hypot(self.b.x - self.a.x, self.b.y - self.a.y)

    def midpoint(self) -> Point:
        return midpoint(self.a, self.b)  # type: ignore[return-value]

    def intersection(self, other: Line) -> MaybePoint:
        """Intersection of the two infinite lines.

        Solves for the parameter along this line (Bourke's two-line form) and
        returns NO_INTERSECTION when the determinant is exactly zero, which
        covers parallel, coincident and identical lines alike. A crossing too
        far away to represent is reported the same way.
        """
        dx, dy = self.b.x - self.a.x, self.b.y - self.a.y
        odx, ody = other.b.x - other.a.x, other.b.y - other.a.y

        denom = ody * dx - odx * dy
        if denom == 0.0:
            return NO_INTERSECTION

        ua = (odx * (self.a.y - other.a.y) - ody * (self.a.x - other.a.x)) / denom
        x, y = self.a.x + ua * dx, self.a.y + ua * dy
        # Nearly parallel: the crossing lies beyond float range
        if not (math.isfinite(x) and math.isfinite(y)):
            return NO_INTERSECTION
        return Point(x, y)

    def is_perpendicular_to(self, other: Line, tolerance: Tolerance = DEFAULT_TOLERANCE) -> bool:
        """Cross-multiplied slope test: slope(self) == -1 / slope(other), no division.

        ``abs_tol`` is scaled by both lengths, so it bounds |cos(angle)|.
        """
        lhs = (self.a.y - self.b.y) * (other.a.y - other.b.y)
        rhs = (self.a.x - self.b.x) * (other.b.x - other.a.x)
        return tolerance.close(lhs, rhs, scale=self.length * other.length)
