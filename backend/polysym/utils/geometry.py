"""Leaf-node polygon helpers on Nx2 vertex arrays. No engine imports."""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import LinearRing


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula over the closed ring. Positive = CCW, Negative = CW."""
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def winding_direction(points: NDArray[np.float64]) -> int:
    """Return 1 for CCW, -1 for CW, 0 if degenerate."""
    sa = signed_area(points)
    if sa > 0:
        return 1
    elif sa < 0:
        return -1
    return 0


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def bbox_diagonal(points: NDArray[np.float64]) -> float:
    xmin, ymin, xmax, ymax = bbox(points)
    return math.hypot(xmax - xmin, ymax - ymin)


def is_simple(points: NDArray[np.float64]) -> bool:
    """True if the closed ring through ``points`` does not self-intersect."""
    return bool(LinearRing(points).is_simple)


def regular_polygon(
    n: int,
    radius: float = 1.0,
    center: tuple[float, float] = (0.0, 0.0),
    phase: float = 0.0,
) -> NDArray[np.float64]:
    """Vertices of a regular n-gon, counter-clockwise from angle ``phase`` (radians)."""
    angles = phase + 2 * np.pi * np.arange(n) / n
    return np.column_stack([
        center[0] + radius * np.cos(angles),
        center[1] + radius * np.sin(angles),
    ])


def rotate(
    points: NDArray[np.float64],
    angle: float,
    origin: tuple[float, float] = (0.0, 0.0),
) -> NDArray[np.float64]:
    """Rotate points counter-clockwise by ``angle`` radians about ``origin``."""
    c, s = np.cos(angle), np.sin(angle)
    rot = np.array([[c, -s], [s, c]])
    shifted = np.asarray(points, dtype=np.float64) - origin
    return shifted @ rot.T + origin
