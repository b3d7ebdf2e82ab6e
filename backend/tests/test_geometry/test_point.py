"""Tests for points and the NO_INTERSECTION sentinel."""

import math

import pytest

from polysym.errors import InvalidCoordinateError
from polysym.geometry.point import (
    NO_INTERSECTION,
    NoIntersection,
    Point,
    invalid_point,
    is_valid,
    midpoint,
    points_equal,
)
from polysym.geometry.tolerance import Tolerance


def test_midpoint():
    assert midpoint(Point(0, 0), Point(2, 4)) == Point(1, 2)


def test_midpoint_of_huge_coordinates_stays_finite():
    assert midpoint(Point(1e308, 0), Point(1e308, 0)) == Point(1e308, 0)
    assert midpoint(Point(-1.5e308, 1e308), Point(1.5e308, 1e308)) == Point(0, 1e308)


def test_midpoint_propagates_invalid():
    assert midpoint(Point(0, 0), NO_INTERSECTION) is NO_INTERSECTION
    assert midpoint(NO_INTERSECTION, Point(0, 0)) is NO_INTERSECTION


def test_invalid_point_is_singleton():
    assert invalid_point() is NO_INTERSECTION
    assert NoIntersection() is NO_INTERSECTION
    assert not is_valid(NO_INTERSECTION)
    assert is_valid(Point(1, 1))


def test_invalid_point_unequal_to_everything():
    assert NO_INTERSECTION != NO_INTERSECTION
    assert not (NO_INTERSECTION == NO_INTERSECTION)
    assert NO_INTERSECTION != Point(0, 0)
    assert not NO_INTERSECTION


def test_points_equal_rejects_invalid():
    assert not points_equal(NO_INTERSECTION, NO_INTERSECTION)
    assert not points_equal(Point(0, 0), NO_INTERSECTION)


def test_points_equal_tolerance():
    a = Point(0.1 + 0.2, 0.0)
    b = Point(0.3, 0.0)
    assert points_equal(a, b)
    assert not points_equal(a, b, Tolerance.exact())
    assert points_equal(Point(1, 1), Point(1, 1), Tolerance.exact())


def test_points_equal_scale():
    tol = Tolerance(abs_tol=1e-6, rel_tol=0.0)
    assert not points_equal(Point(0, 0), Point(1e-4, 0), tol)
    assert points_equal(Point(0, 0), Point(1e-4, 0), tol, scale=1000.0)


def test_point_coerces_to_float():
    p = Point(1, 2)
    assert isinstance(p.x, float)
    assert p.as_tuple() == (1.0, 2.0)
    assert Point.from_xy([3, 4]) == Point(3.0, 4.0)


@pytest.mark.parametrize("x", [math.nan, math.inf, "abc", "1.5", b"2", None])
def test_point_rejects_bad_coordinates(x):
    with pytest.raises(InvalidCoordinateError):
        Point(x, 0.0)


def test_from_xy_rejects_wrong_arity():
    with pytest.raises(InvalidCoordinateError):
        Point.from_xy((1.0, 2.0, 3.0))
