"""Unit tests for the Ray class."""

import pytest

from core.ray import Ray
from core.vector import Point3, Vector3


class TestRayAt:
    """Tests for point-at-parameter evaluation."""

    def test_at_zero_is_origin(self):
        """Test that at(0) returns exactly the origin."""
        origin = Point3(1.5, -2.25, 3.0)
        ray = Ray(origin, Vector3(0.3, 0.4, -7.0))
        assert ray.at(0.0) == origin

    def test_at_positive_t(self):
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, -1))
        assert ray.at(5.0) == Point3(0, 0, -5)

    def test_at_negative_t_goes_behind_origin(self):
        ray = Ray(Point3(1, 1, 1), Vector3(1, 0, 0))
        assert ray.at(-2.0) == Point3(-1, 1, 1)

    @pytest.mark.parametrize("t1,t2", [(0.0, 1.0), (2.5, -1.5), (10.0, 3.0)])
    def test_difference_of_points(self, t1, t2):
        """Test at(t1) - at(t2) == (t1 - t2) * unit(d) * |d|."""
        d = Vector3(1.0, -2.0, 2.0)
        ray = Ray(Point3(0.5, 0.5, 0.5), d)
        diff = ray.at(t1) - ray.at(t2)
        expected = d.normalize() * ((t1 - t2) * d.length())
        assert (diff.x, diff.y, diff.z) == pytest.approx((expected.x, expected.y, expected.z))

    def test_direction_not_normalized(self):
        """Test that the direction is stored as given."""
        d = Vector3(0, 0, -3)
        ray = Ray(Point3(0, 0, 0), d)
        assert ray.direction is d
        assert ray.at(1.0) == Point3(0, 0, -3)
