"""SymmetryDetector — decides whether a polygon has a mirror axis.

For each candidate axis L (see ``polysym.engine.axes``), every vertex pair
(p, q) it names must satisfy:

    1. the midpoint of PQ lies on L  (midpoint == PQ ∩ L)
    2. PQ is perpendicular to L

The first axis whose pairs all pass makes the polygon symmetric. A failing
pair abandons its axis immediately.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from typing import Union

from numpy.typing import ArrayLike

from polysym.engine.axes import CandidateAxis, build_axis, candidate_axes
from polysym.engine.config import SymmetryConfig
from polysym.engine.polygon import Polygon
from polysym.errors import NonSimplePolygonError
from polysym.geometry.line import Line
from polysym.geometry.point import Point, points_equal
from polysym.geometry.tolerance import Tolerance

logger = logging.getLogger(__name__)

Vertices = Union[ArrayLike, Sequence[Point], Polygon]


class SymmetryDetector:
    """Stateless between calls; safe to share across threads."""

    def __init__(self, config: SymmetryConfig | None = None) -> None:
        self.config = config or SymmetryConfig()
        self.tolerance = self.config.tolerance

    def has_mirror_symmetry(self, vertices: Vertices) -> bool:
        return self.find_axis(vertices) is not None

    def find_axis(self, vertices: Vertices) -> CandidateAxis | None:
        """Return the first candidate axis that verifies, or None."""
        axis, _ = self.search(vertices)
        return axis

    def search(self, vertices: Vertices) -> tuple[CandidateAxis | None, int]:
        """Like find_axis(), also returning how many candidates were tried."""
        start = time.perf_counter()
        polygon = vertices if isinstance(vertices, Polygon) else Polygon(vertices)

        if self.config.require_simple and not polygon.is_simple():
            raise NonSimplePolygonError(f"{polygon.count}-vertex polygon is self-intersecting")

        # Verify in a bbox-centered frame so tolerances track polygon size,
        # not distance from the origin
        local = polygon.centered()

        checked = 0
        found: CandidateAxis | None = None
        for axis in candidate_axes(local):
            checked += 1
            if self.verify(local, axis):
                found = build_axis(polygon, axis.kind, axis.anchor)
                break

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Symmetry search: N=%d, %d candidates, %s in %.2fms",
            polygon.count,
            checked,
            f"{found.kind.value} axis at {found.anchor}" if found else "no axis",
            elapsed,
        )
        return found, checked

    def verify(self, polygon: Polygon, axis: CandidateAxis) -> bool:
        for p, q in axis.pairs:
            if not is_mirror_pair(polygon[p], polygon[q], axis.line, self.tolerance, polygon.scale):
                logger.debug(
                    "  %s axis at %d rejected by pair (%d, %d)",
                    axis.kind.value,
                    axis.anchor,
                    p,
                    q,
                )
                return False
        return True


def is_mirror_pair(
    p: Point,
    q: Point,
    axis: Line,
    tolerance: Tolerance,
    scale: float = 1.0,
) -> bool:
    """True if ``p`` and ``q`` are reflections of each other across ``axis``."""
    pq = Line(p, q)
    return points_equal(pq.midpoint(), pq.intersection(axis), tolerance, scale) and (
        pq.is_perpendicular_to(axis, tolerance)
    )


def has_mirror_symmetry(vertices: Vertices, tolerance: Tolerance | None = None) -> bool:
    return find_mirror_axis(vertices, tolerance) is not None


def find_mirror_axis(vertices: Vertices, tolerance: Tolerance | None = None) -> CandidateAxis | None:
    tolerance = tolerance or Tolerance()
    config = SymmetryConfig(abs_tol=tolerance.abs_tol, rel_tol=tolerance.rel_tol)
    return SymmetryDetector(config).find_axis(vertices)
