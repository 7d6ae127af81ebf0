# renderer/integrator.py
"""
Recursive ray coloring.

A camera ray is followed through the scene: every hit asks the surface's
material to scatter, the returned attenuation multiplies whatever the
scattered ray brings back, and a ray that escapes picks up the background.
The background is the only light source in the demo scenes.

Termination:
    depth exhausted  -> black
    absorbed         -> black
    escaped          -> background(ray)
"""
import math
from typing import Callable
from core.ray import Ray
from core.vector import Color
from geometry.hittable import Hittable

# Start of the accepted hit interval, keeps scattered rays from re-hitting
# the surface they leave (shadow acne).
T_MIN = 0.001
T_MAX = math.inf

HORIZON_COLOR = Color(1.0, 1.0, 1.0)
SKY_COLOR = Color(0.5, 0.7, 1.0)

Background = Callable[[Ray], Color]


def lerp(t: float, start: Color, end: Color) -> Color:
    return start * (1.0 - t) + end * t


def sky_background(ray: Ray) -> Color:
    """
    Vertical white-to-blue gradient keyed on the y component of the
    normalized ray direction.
    """
    unit_direction = ray.direction.normalize()
    t = 0.5 * (unit_direction.y + 1.0)
    return lerp(t, HORIZON_COLOR, SKY_COLOR)


def ray_color(ray: Ray, world: Hittable, depth: int, rng,
              background: Background = sky_background) -> Color:
    """
    Estimate the radiance carried back along ray.

    Args:
        ray: The ray to follow.
        world: Anything Hittable, usually a HittableList.
        depth: Remaining bounces. At zero the path contributes nothing.
        rng: Random source handed to the materials.
        background: Color for rays that leave the scene.

    Returns:
        Linear RGB color, not clamped.
    """
    if depth <= 0:
        return Color(0, 0, 0)

    rec = world.hit(ray, T_MIN, T_MAX)
    if rec is not None:
        result = rec.material.scatter(ray, rec, rng)
        if result is None:
            return Color(0, 0, 0)
        scattered, attenuation = result
        return attenuation * ray_color(scattered, world, depth - 1, rng, background)

    return background(ray)


def normal_color(ray: Ray, world: Hittable, depth: int, rng,
                 background: Background = sky_background) -> Color:
    """
    Debug shading: maps the hit normal from [-1, 1] to [0, 1] per channel.
    depth and rng are accepted so it can stand in for ray_color.
    """
    rec = world.hit(ray, 0.0, T_MAX)
    if rec is not None:
        n = rec.normal
        return Color(n.x + 1, n.y + 1, n.z + 1) * 0.5
    return background(ray)
