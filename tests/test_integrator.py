"""Unit tests for recursive ray coloring.

Tests cover:
- Sky gradient values
- Depth exhaustion and absorption
- Attenuation applied to the scattered ray's color
- Normal shading
- A deterministic single-sphere render
"""

import pytest

from conftest import ConstantRandom
from camera.camera import Camera
from core.ray import Ray
from core.vector import Color, Point3, Vector3
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.lambertian import Lambertian
from materials.material import DefaultMaterial
from renderer.integrator import (
    HORIZON_COLOR,
    SKY_COLOR,
    lerp,
    normal_color,
    ray_color,
    sky_background,
)


def _rgb(c):
    return (c.r, c.g, c.b)


def _single_sphere_world(material=None) -> HittableList:
    return HittableList([Sphere(Point3(0, 0, -1), 0.5, material)])


class TestSkyBackground:
    """Tests for the white-to-blue gradient."""

    def test_straight_up_is_sky_color(self):
        ray = Ray(Point3(0, 0, 0), Vector3(0, 3, 0))
        assert _rgb(sky_background(ray)) == pytest.approx(_rgb(SKY_COLOR))

    def test_straight_down_is_horizon_color(self):
        ray = Ray(Point3(0, 0, 0), Vector3(0, -1, 0))
        assert _rgb(sky_background(ray)) == pytest.approx(_rgb(HORIZON_COLOR))

    def test_horizontal_is_halfway(self):
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, -1))
        assert _rgb(sky_background(ray)) == pytest.approx((0.75, 0.85, 1.0))

    def test_lerp_endpoints(self):
        a = Color(0.1, 0.2, 0.3)
        b = Color(0.9, 0.8, 0.7)
        assert _rgb(lerp(0.0, a, b)) == pytest.approx(_rgb(a))
        assert _rgb(lerp(1.0, a, b)) == pytest.approx(_rgb(b))


class TestRayColor:
    """Tests for the recursive estimator."""

    def test_zero_depth_is_black(self, rng):
        ray = Ray(Point3(0, 0, 0), Vector3(0, 1, 0))
        assert ray_color(ray, HittableList(), 0, rng) == Color(0, 0, 0)

    def test_negative_depth_is_black(self, rng):
        ray = Ray(Point3(0, 0, 0), Vector3(0, 1, 0))
        assert ray_color(ray, HittableList(), -3, rng) == Color(0, 0, 0)

    def test_escaped_ray_gets_background(self, rng):
        ray = Ray(Point3(0, 0, 0), Vector3(0.2, 0.5, -1))
        assert ray_color(ray, HittableList(), 5, rng) == sky_background(ray)

    def test_custom_background(self, rng):
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, -1))
        glow = Color(0.25, 0.5, 0.75)
        assert ray_color(ray, HittableList(), 5, rng, background=lambda r: glow) is glow

    def test_absorbing_material_is_black(self, rng):
        world = _single_sphere_world(DefaultMaterial())
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, -1))
        assert ray_color(ray, world, 50, rng) == Color(0, 0, 0)

    def test_attenuation_multiplies_scattered_color(self):
        """Test one bounce: albedo times the background seen by the bounce."""
        material = Lambertian(Color(0.5, 0.5, 0.5))
        world = _single_sphere_world(material)
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, -1))

        rec = world.hit(ray, 0.001, float("inf"))
        scattered, attenuation = material.scatter(ray, rec, ConstantRandom(0.0))
        expected = attenuation * sky_background(scattered)

        color = ray_color(ray, world, 2, ConstantRandom(0.0))
        assert _rgb(color) == pytest.approx(_rgb(expected))

    def test_seeded_estimates_are_reproducible(self):
        import random

        world = _single_sphere_world(Lambertian(Color(0.5, 0.5, 0.5)))
        ray = Ray(Point3(0, 0, 0), Vector3(0.1, -0.1, -1))
        a = ray_color(ray, world, 50, random.Random(7))
        b = ray_color(ray, world, 50, random.Random(7))
        assert a == b


class TestNormalColor:
    """Tests for the normal-shading debug integrator."""

    def test_front_normal_maps_to_blueish(self, rng):
        world = _single_sphere_world()
        ray = Ray(Point3(0, 0, 0), Vector3(0, 0, -1))
        assert _rgb(normal_color(ray, world, 1, rng)) == pytest.approx((0.5, 0.5, 1.0))

    def test_miss_uses_background(self, rng):
        ray = Ray(Point3(0, 0, 0), Vector3(0, 1, 0))
        assert normal_color(ray, HittableList(), 1, rng) == sky_background(ray)


class TestSingleSphereRender:
    """Deterministic end-to-end case with a constant random source.

    One diffuse sphere, the fixed camera and a bounce limit of 1: the
    direct hit scatters into depth 0 and comes back black, while a ray that
    misses sees exactly the sky.
    """

    def test_center_pixel_is_black(self):
        world = _single_sphere_world(Lambertian(Color(0.5, 0.5, 0.5)))
        camera = Camera.fixed()
        ray = camera.get_ray(0.5, 0.5)
        assert ray_color(ray, world, 1, ConstantRandom(0.0)) == Color(0, 0, 0)

    @pytest.mark.parametrize("s,t", [(0.0, 1.0), (1.0, 1.0), (0.5, 1.0)])
    def test_miss_pixels_are_sky(self, s, t):
        world = _single_sphere_world(Lambertian(Color(0.5, 0.5, 0.5)))
        camera = Camera.fixed()
        ray = camera.get_ray(s, t)
        assert ray_color(ray, world, 1, ConstantRandom(0.0)) == sky_background(ray)
