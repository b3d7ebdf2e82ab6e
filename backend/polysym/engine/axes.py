"""Candidate axes of mirror symmetry.

A reflection maps the vertex cycle onto itself in reverse, fixing exactly two
"sites" on the cycle (each a vertex or an edge midpoint). That leaves N
candidates for an N-vertex polygon:

    odd N   vertex i  <->  midpoint of the opposite edge          (N axes)
    even N  vertex i  <->  vertex i + N/2                         (N/2 axes)
            midpoint of edge (i, i+1) <-> midpoint of edge
            (i + N/2, i + N/2 + 1)                                (N/2 axes)

Each axis carries the vertex pairs that must mirror each other across it.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass

from polysym.engine.polygon import Polygon
from polysym.geometry.line import Line
from polysym.geometry.point import midpoint


class AxisKind(str, enum.Enum):
    VERTEX_TO_MIDPOINT = "vertex_to_midpoint"
    VERTEX_TO_VERTEX = "vertex_to_vertex"
    MIDPOINT_TO_MIDPOINT = "midpoint_to_midpoint"


@dataclass(frozen=True)
class CandidateAxis:
    kind: AxisKind
    # Vertex index (or first index of the edge) the axis starts from
    anchor: int
    line: Line
    # Vertex index pairs that must be mirror images, in walk order
    pairs: tuple[tuple[int, int], ...]


def candidate_axes(polygon: Polygon) -> Iterator[CandidateAxis]:
    """Yield every candidate axis lazily, in index order."""
    if polygon.is_odd:
        for i in range(polygon.count):
            yield vertex_to_midpoint_axis(polygon, i)
    else:
        for i in range(polygon.count // 2):
            yield vertex_to_vertex_axis(polygon, i)
            yield midpoint_to_midpoint_axis(polygon, i)


def vertex_to_midpoint_axis(polygon: Polygon, i: int) -> CandidateAxis:
    first, second = polygon.opposite_vertices(i)
    line = Line(polygon[i], midpoint(polygon[first], polygon[second]))  # type: ignore[arg-type]

    # Walk outward from the opposite edge back toward vertex i
    pairs = []
    while first != i:
        pairs.append((first, second))
        first = polygon.prev_vertex(first)
        second = polygon.next_vertex(second)
    return CandidateAxis(AxisKind.VERTEX_TO_MIDPOINT, i, line, tuple(pairs))


def vertex_to_vertex_axis(polygon: Polygon, i: int) -> CandidateAxis:
    opposite = polygon.opposite_vertex(i)
    line = Line(polygon[i], polygon[opposite])

    pairs = []
    first, second = polygon.next_vertex(i), polygon.prev_vertex(i)
    while first != opposite:
        pairs.append((first, second))
        first = polygon.next_vertex(first)
        second = polygon.prev_vertex(second)
    return CandidateAxis(AxisKind.VERTEX_TO_VERTEX, i, line, tuple(pairs))


def midpoint_to_midpoint_axis(polygon: Polygon, i: int) -> CandidateAxis:
    opposite = polygon.opposite_vertex(i)
    line = Line(polygon.edge_midpoint(i), polygon.edge_midpoint(opposite))

    pairs = []
    first, second = i, polygon.next_vertex(i)
    while first != opposite:
        pairs.append((first, second))
        first = polygon.prev_vertex(first)
        second = polygon.next_vertex(second)
    return CandidateAxis(AxisKind.MIDPOINT_TO_MIDPOINT, i, line, tuple(pairs))


_BUILDERS = {
    AxisKind.VERTEX_TO_MIDPOINT: vertex_to_midpoint_axis,
    AxisKind.VERTEX_TO_VERTEX: vertex_to_vertex_axis,
    AxisKind.MIDPOINT_TO_MIDPOINT: midpoint_to_midpoint_axis,
}


def build_axis(polygon: Polygon, kind: AxisKind, anchor: int) -> CandidateAxis:
    return _BUILDERS[kind](polygon, anchor)
