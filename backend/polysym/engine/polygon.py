"""Polygon — validated vertex ring with circular index arithmetic."""

from __future__ import annotations

from collections.abc import Sequence
from functools import cached_property

import numpy as np
from numpy.typing import ArrayLike, NDArray

from polysym.errors import InvalidCoordinateError, ParityError, TooFewVerticesError
from polysym.geometry.point import Point, midpoint
from polysym.utils.geometry import bbox, bbox_diagonal, is_simple, winding_direction

# Products of coordinate differences must stay finite
MAX_COORDINATE = 1e150


class Polygon:
    """Ordered vertices of a simple polygon. Indices wrap modulo ``count``."""

    def __init__(self, vertices: ArrayLike | Sequence[Point]) -> None:
        self.points = _as_array(vertices)
        self.points.flags.writeable = False
        self.vertices: tuple[Point, ...] = tuple(Point(x, y) for x, y in self.points)

    @property
    def count(self) -> int:
        return len(self.vertices)

    @property
    def is_odd(self) -> bool:
        return self.count % 2 == 1

    def __len__(self) -> int:
        return self.count

    def __getitem__(self, i: int) -> Point:
        return self.vertices[self.wrap(i)]

    def wrap(self, i: int) -> int:
        return i % self.count

    def next_vertex(self, i: int) -> int:
        return self.wrap(i + 1)

    def prev_vertex(self, i: int) -> int:
        return self.wrap(i - 1)

    def opposite_vertex(self, i: int) -> int:
        """Diametrically opposite vertex; vertex 0 of a quad is opposite vertex 2."""
        if self.is_odd:
            raise ParityError(self.count, "even")
        return self.wrap(i + self.count // 2)

    def opposite_vertices(self, i: int) -> tuple[int, int]:
        """Endpoints of the edge facing vertex ``i`` on an odd polygon."""
        if not self.is_odd:
            raise ParityError(self.count, "odd")
        half = self.count // 2
        return self.wrap(i + half), self.wrap(i + 1 + half)

    def edge_midpoint(self, i: int) -> Point:
        return midpoint(self[i], self[i + 1])  # type: ignore[return-value]

    @cached_property
    def scale(self) -> float:
        """Bounding-box diagonal, the unit for absolute coordinate tolerance."""
        return bbox_diagonal(self.points)

    @cached_property
    def winding(self) -> int:
        return winding_direction(self.points)

    def is_simple(self) -> bool:
        return is_simple(self.points)

    def centered(self) -> Polygon:
        """Same polygon translated so its bbox center sits at the origin."""
        xmin, ymin, xmax, ymax = bbox(self.points)
        center = np.array([xmin / 2 + xmax / 2, ymin / 2 + ymax / 2])
        return Polygon(self.points - center)

    def __repr__(self) -> str:
        return f"Polygon({[p.as_tuple() for p in self.vertices]})"


def _as_array(vertices: ArrayLike | Sequence[Point]) -> NDArray[np.float64]:
    if isinstance(vertices, Polygon):
        return vertices.points.copy()
    if isinstance(vertices, Sequence) and vertices and isinstance(vertices[0], Point):
        vertices = [p.as_tuple() for p in vertices]  # type: ignore[union-attr]

    try:
        raw = np.asarray(vertices)
    except (TypeError, ValueError) as e:
        raise InvalidCoordinateError(f"Vertices must be (x, y) number pairs: {e}") from e
    # Strings, objects and booleans are not coordinates, even if float() accepts them
    if raw.size and raw.dtype.kind not in "iuf":
        raise InvalidCoordinateError(f"Vertices must be numeric, got dtype {raw.dtype}")
    arr = raw.astype(np.float64)

    if arr.ndim == 1 and arr.size == 0:
        arr = arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise InvalidCoordinateError(f"Vertices must be an Nx2 array, got shape {arr.shape}")
    if len(arr) < 3:
        raise TooFewVerticesError(len(arr))
    if not np.all(np.isfinite(arr)):
        raise InvalidCoordinateError("Vertex coordinates must be finite")
    if np.max(np.abs(arr)) > MAX_COORDINATE:
        raise InvalidCoordinateError(f"Vertex coordinates must lie within +/-{MAX_COORDINATE:g}")
    return arr
