"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Polygons with a known answer

SQUARE = [(-1.0, -1.0), (-1.0, 1.0), (1.0, 1.0), (1.0, -1.0)]

RECTANGLE = [(5.0, 2.0), (5.0, -2.0), (-7.0, -2.0), (-7.0, 2.0)]

# Axis: midpoint of (1, 2) to midpoint of (3, 0), the line x = 0
TRAPEZOID = [(-2.0, -1.0), (-1.0, 1.0), (1.0, 1.0), (2.0, -1.0)]

# Axis through vertices 0 and 2 only
KITE = [(0.0, 2.0), (1.0, 0.0), (0.0, -1.0), (-1.0, 0.0)]

PENTAGONISH = [(-1.0, 1.0), (0.0, 2.0), (1.0, 1.0), (0.5, 0.0), (-0.5, 0.0)]

ASYMMETRIC_7 = [
    (-0.3, -4.5),
    (-3.7, 0.5),
    (-1.7, 1.5),
    (1.5, 1.5),
    (2.7, -3.4),
    (-3.3, -2.0),
    (-0.3, -2.0),
]

ASYMMETRIC_6 = ASYMMETRIC_7[:6]

# Self-intersecting "bowtie"
BOWTIE = [(0.0, 0.0), (1.0, 1.0), (1.0, 0.0), (0.0, 1.0)]


@pytest.fixture
def square() -> list[tuple[float, float]]:
    return SQUARE


@pytest.fixture
def trapezoid() -> list[tuple[float, float]]:
    return TRAPEZOID


@pytest.fixture
def asymmetric() -> list[tuple[float, float]]:
    return ASYMMETRIC_7
