"""Tests for clock_points."""

import pytest
from libray.core.errors import InvalidGeometryError
from libray.core.vector import Vector3
from libray.geometry.clock import clock_points

CENTER = Vector3(50, 50, 0)


def test_twelve_points():
    points = clock_points(CENTER, 35, 12)
    assert len(points) == 12
    assert points[0] == Vector3(85, 50, 0)


def test_point_six_is_opposite_point_zero():
    points = clock_points(CENTER, 35, 12)
    assert (points[6] - CENTER).isclose(-(points[0] - CENTER))
    assert (points[3] - CENTER).isclose(Vector3(0, 35, 0))


def test_points_on_circle():
    for point in clock_points(CENTER, 2.5, 60):
        assert (point - CENTER).magnitude() == pytest.approx(2.5)
        assert point.z == CENTER.z


def test_deterministic():
    assert clock_points(CENTER, 35, 60) == clock_points(CENTER, 35, 60)


def test_zero_radius_collapses_to_center():
    assert set(clock_points(CENTER, 0, 4)) == {CENTER}


@pytest.mark.parametrize("count", [0, -3])
def test_invalid_count(count):
    with pytest.raises(ValueError):
        clock_points(CENTER, 1, count)


def test_negative_radius():
    with pytest.raises(InvalidGeometryError):
        clock_points(CENTER, -1, 12)
