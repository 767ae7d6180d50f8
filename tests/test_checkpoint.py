from searchrace.checkpoint import CheckPoint
from searchrace.point import Point


def test_checkpoint_creation():
    cp = CheckPoint(100, 200)
    assert cp.x == 100.0
    assert cp.y == 200.0
    assert cp.r == 600.0
    assert cp.r2 == 360000.0


def test_checkpoint_distance():
    cp = CheckPoint(0, 0)
    assert cp.distance(Point(3, 4)) == 5.0


def test_checkpoint_distance_sq():
    cp = CheckPoint(0, 0)
    assert cp.distance_sq(Point(3, 4)) == 25.0


def test_checkpoint_closest():
    cp = CheckPoint(3, 2)
    closest = cp.closest(Point(0, 0), Point(6, 0))
    assert closest.x == 3.0
    assert closest.y == 0.0


def test_checkpoint_norm():
    cp = CheckPoint(3, 4)
    assert cp.norm_sq() == 25.0
    assert cp.norm() == 5.0


def test_checkpoint_equals_point_with_same_centre():
    assert CheckPoint(3, 4) == Point(3, 4)
    assert not (CheckPoint(3, 4) == Point(4, 3))


def test_checkpoint_equality():
    assert CheckPoint(2757, 4659) == CheckPoint(2757, 4659)
    assert not (CheckPoint(2757, 4659) == CheckPoint(3358, 2838))


def test_position_matches_centre():
    assert CheckPoint(10353, 1986).position == Point(10353, 1986)