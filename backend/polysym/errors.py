"""Precondition errors raised for rejected polygon input.

Every error subclasses ``ValueError`` and carries a stable ``code`` so API
and CLI callers can branch on the kind of failure.
"""

from __future__ import annotations


class PolygonError(ValueError):
    code = "invalid_polygon"


class TooFewVerticesError(PolygonError):
    code = "too_few_vertices"

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(f"Polygon must have at least 3 vertices, got {count}")


class InvalidCoordinateError(PolygonError):
    code = "invalid_coordinate"


class ParityError(PolygonError):
    """An opposite-vertex lookup was asked for on the wrong kind of polygon."""

    code = "wrong_parity"

    def __init__(self, count: int, required: str) -> None:
        self.count = count
        self.required = required
        super().__init__(f"Cannot operate on {count}-vertex polygon: requires {required} N")


class DegenerateLineError(PolygonError):
    code = "degenerate_line"


class NonSimplePolygonError(PolygonError):
    code = "non_simple_polygon"
