import sys

import pytest

from searchrace.point import Point

EPS = sys.float_info.epsilon


def test_distance():
    a = Point(0, 0)
    b = Point(3, 4)
    c = Point(-3, -4)

    assert abs(a.distance(b) - 5.0) < EPS
    assert abs(c.distance(b) - 10.0) < EPS
    assert abs(b.distance(c) - 10.0) < EPS


def test_distance_sq():
    a = Point(0, 0)
    b = Point(-3, -4)
    assert abs(a.distance_sq(b) - 25.0) < EPS


@pytest.mark.parametrize(
    "a, b, c, expected",
    [
        ((0, 0), (10, 0), (3, 1), (3, 0)),
        ((0, 0), (10, 0), (-3, 1), (-3, 0)),
        ((0, 0), (10, 0), (30, 1), (30, 0)),
        ((0, 0), (10, 0), (3, 0), (3, 0)),
        ((0, 0), (5, 5), (3, 3), (3, 3)),
        ((0, 0), (0, 0), (0, 0), (0, 0)),
    ],
)
def test_closest(a, b, c, expected):
    assert Point(*c).closest(Point(*a), Point(*b)) == Point(*expected)


def test_closest_degenerate_line_returns_self():
    c = Point(7, -2)
    assert c.closest(Point(1, 1), Point(1, 1)) == c


def test_add():
    assert Point(5, 5) + Point(5, -5) == Point(10, 0)
    p1 = Point(5, 5)
    assert p1 + Point(0, 0) == p1


def test_sub():
    assert Point(5, 5) - Point(5, -5) == Point(0, 10)
    p1 = Point(5, 5)
    p2 = Point(0, 0)
    assert p1 - p2 == p1
    assert p1 - p1 == p2


def test_multiply():
    p1 = Point(5, -2)
    assert p1 * 0.0 == Point(0, 0)
    result = p1 * 1.5
    assert result.x == 7.5
    assert result.y == -3.0


def test_multiply_by_non_number_raises():
    with pytest.raises(TypeError):
        Point(1, 2) * "x"


def test_equal():
    assert not (Point(5, -2) == Point(0, 0))
    assert Point(5, -2) == Point(5, -2)


def test_norm():
    assert abs(Point(3, 4).norm_sq() - 25.0) < EPS
    assert abs(Point(3, 4).norm() - 5.0) < EPS
    assert abs((Point(15, 20) - Point(12, 16)).norm_sq() - 25.0) < EPS


def test_coordinates_are_floats():
    p = Point(3, 4)
    assert isinstance(p.x, float) and p.x == 3.0
    assert isinstance(p.y, float) and p.y == 4.0