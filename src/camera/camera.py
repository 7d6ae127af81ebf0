# camera/camera.py
import math
from core.vector import Point3, Vector3
from core.ray import Ray
from core.utils import degrees_to_radians, random_in_unit_disk


class Camera:
    """
    Positionable thin-lens camera.

    The viewport geometry is derived once from the user-facing parameters:

        lookfrom, lookat, vup: position and orientation in world space.
        vfov: vertical field of view in degrees.
        aspect_ratio: image width divided by height.
        aperture: lens diameter. 0 gives a pinhole camera with no defocus blur.
        focus_dist: distance from lookfrom to the plane in perfect focus.

    Raises ValueError for configurations that cannot produce a viewport.
    """
    def __init__(self, lookfrom: Point3, lookat: Point3, vup: Vector3,
                 vfov: float, aspect_ratio: float,
                 aperture: float = 0.0, focus_dist: float = 1.0):
        if aspect_ratio <= 0:
            raise ValueError(f"aspect_ratio must be positive, got {aspect_ratio}")
        if not 0 < vfov < 180:
            raise ValueError(f"vfov must be in (0, 180) degrees, got {vfov}")
        if aperture < 0:
            raise ValueError(f"aperture must be non-negative, got {aperture}")
        if focus_dist <= 0:
            raise ValueError(f"focus_dist must be positive, got {focus_dist}")

        view = lookfrom - lookat
        if view.near_zero():
            raise ValueError("lookfrom and lookat must be different points")
        if vup.cross(view).near_zero():
            raise ValueError("vup must not be parallel to the view direction")

        self.vfov = vfov
        self.aspect_ratio = aspect_ratio
        self.aperture = aperture
        self.focus_dist = focus_dist
        self.lens_radius = aperture / 2.0

        theta = degrees_to_radians(vfov)
        h = math.tan(theta / 2)
        viewport_height = 2.0 * h
        viewport_width = aspect_ratio * viewport_height

        # Orthonormal basis: w points backwards, u right, v up
        self.w = view.normalize()
        self.u = vup.cross(self.w).normalize()
        self.v = self.w.cross(self.u)

        self.origin = lookfrom
        self.horizontal = self.u * (focus_dist * viewport_width)
        self.vertical = self.v * (focus_dist * viewport_height)
        self.lower_left_corner = (self.origin -
                                  self.horizontal / 2 -
                                  self.vertical / 2 -
                                  self.w * focus_dist)

    @classmethod
    def fixed(cls, aspect_ratio: float = 16.0 / 9.0) -> "Camera":
        """
        Camera at the origin looking down -z with a viewport two units tall
        at focal length 1.
        """
        return cls.with_fov(90.0, aspect_ratio)

    @classmethod
    def with_fov(cls, vfov: float, aspect_ratio: float) -> "Camera":
        """Camera at the origin looking down -z with an adjustable field of view."""
        return cls(Point3(0, 0, 0), Point3(0, 0, -1), Vector3(0, 1, 0),
                   vfov, aspect_ratio)

    def get_ray(self, s: float, t: float, rng=None) -> Ray:
        """
        Returns the ray through normalized viewport coordinates (s, t).
        (0, 0) is the lower-left corner, (1, 1) the upper-right. Values
        outside [0, 1] are allowed. rng is required when the lens has an
        aperture.
        """
        target = self.lower_left_corner + self.horizontal * s + self.vertical * t
        if self.lens_radius <= 0:
            return Ray(self.origin, target - self.origin)

        # Generate random point on lens
        rd = random_in_unit_disk(rng) * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y

        ray_origin = self.origin + offset
        return Ray(ray_origin, target - ray_origin)

    def __repr__(self) -> str:
        return (f"Camera(origin={self.origin!r}, vfov={self.vfov}, "
                f"aspect_ratio={self.aspect_ratio}, aperture={self.aperture}, "
                f"focus_dist={self.focus_dist})")
