# scenes/demos.py
"""
Demo scenes, from the plain sky gradient up to the final random sphere field.

Each builder takes the render's random generator and returns a SceneSetup
holding the world, the camera and the default render parameters. Builders
are registered in SCENES in presentation order, so a scene can be picked by
name or by index.
"""
import math
from dataclasses import dataclass, field
from typing import Callable, Dict, Union
from core.vector import Color, Point3, Vector3
from core.utils import random_double
from camera.camera import Camera
from geometry.sphere import Sphere
from geometry.world import HittableList
from materials.dielectric import Dielectric
from materials.lambertian import Lambertian
from materials.metal import Metal
from materials.presets import DielectricPresets, MattePresets, MetalPresets
from renderer.integrator import normal_color, ray_color

WIDESCREEN = 16.0 / 9.0


@dataclass
class SceneSetup:
    """Everything needed to render one demo.

    Attributes:
        name: Registry name of the scene.
        world: The hittable scene aggregate.
        camera: Camera built for aspect_ratio.
        aspect_ratio: Image width divided by height.
        image_width: Default output width in pixels.
        samples_per_pixel: Default samples per pixel.
        max_depth: Default bounce limit.
        integrator: ray_color, or normal_color for the shading demos.
    """

    name: str
    world: HittableList
    camera: Camera
    aspect_ratio: float = WIDESCREEN
    image_width: int = 400
    samples_per_pixel: int = 100
    max_depth: int = 50
    integrator: Callable = field(default=ray_color)

    @property
    def image_height(self) -> int:
        return image_height_for(self.image_width, self.aspect_ratio)


def image_height_for(image_width: int, aspect_ratio: float) -> int:
    return max(int(image_width / aspect_ratio), 1)


def _ground_and_center(ground_material=None, center_material=None) -> HittableList:
    world = HittableList()
    world.add(Sphere(Point3(0, -100.5, -1), 100, ground_material))
    world.add(Sphere(Point3(0, 0, -1), 0.5, center_material))
    return world


def _material_row() -> HittableList:
    # The left glass ball is hollow: the negative-radius shell flips the
    # normals of the inner surface. Both spheres share one material.
    glass = DielectricPresets.glass()
    world = HittableList()
    world.add(Sphere(Point3(0, -100.5, -1), 100, MattePresets.ground()))
    world.add(Sphere(Point3(0, 0, -1), 0.5, MattePresets.blue()))
    world.add(Sphere(Point3(-1, 0, -1), 0.5, glass))
    world.add(Sphere(Point3(-1, 0, -1), -0.45, glass))
    world.add(Sphere(Point3(1, 0, -1), 0.5, MetalPresets.gold()))
    return world


def sky_scene(rng) -> SceneSetup:
    return SceneSetup("sky", HittableList(), Camera.fixed(WIDESCREEN),
                      samples_per_pixel=1, max_depth=1)


def normals_scene(rng) -> SceneSetup:
    return SceneSetup("normals", _ground_and_center(), Camera.fixed(WIDESCREEN),
                      samples_per_pixel=1, max_depth=1, integrator=normal_color)


def antialias_scene(rng) -> SceneSetup:
    return SceneSetup("antialias", _ground_and_center(), Camera.fixed(WIDESCREEN),
                      samples_per_pixel=100, max_depth=1, integrator=normal_color)


def diffuse_scene(rng) -> SceneSetup:
    gray = MattePresets.gray()
    return SceneSetup("diffuse", _ground_and_center(gray, gray), Camera.fixed(WIDESCREEN))


def materials_scene(rng) -> SceneSetup:
    return SceneSetup("materials", _material_row(), Camera.fixed(WIDESCREEN))


def fov_scene(rng) -> SceneSetup:
    r = math.cos(math.pi / 4)
    world = HittableList()
    world.add(Sphere(Point3(-r, 0, -1), r, Lambertian(Color(0, 0, 1))))
    world.add(Sphere(Point3(r, 0, -1), r, Lambertian(Color(1, 0, 0))))
    return SceneSetup("fov", world, Camera.with_fov(90.0, WIDESCREEN))


def positionable_scene(rng) -> SceneSetup:
    camera = Camera(Point3(-2, 2, 1), Point3(0, 0, -1), Vector3(0, 1, 0),
                    90.0, WIDESCREEN)
    return SceneSetup("positionable", _material_row(), camera)


def defocus_scene(rng) -> SceneSetup:
    lookfrom = Point3(3, 3, 2)
    lookat = Point3(0, 0, -1)
    camera = Camera(lookfrom, lookat, Vector3(0, 1, 0), 20.0, WIDESCREEN,
                    aperture=2.0, focus_dist=(lookfrom - lookat).length())
    return SceneSetup("defocus", _material_row(), camera)


def random_world(rng, grid: int = 11) -> HittableList:
    """
    A large ground sphere, three feature spheres, and a grid of small
    spheres with randomly chosen materials.
    """
    world = HittableList()
    world.add(Sphere(Point3(0, -1000, 0), 1000, MattePresets.gray()))

    clearing = Point3(4, 0.2, 0)
    for a in range(-grid, grid):
        for b in range(-grid, grid):
            choose_mat = rng.random()
            center = Point3(a + 0.9 * rng.random(), 0.2, b + 0.9 * rng.random())
            if (center - clearing).length() <= 0.9:
                continue

            if choose_mat < 0.8:
                # diffuse
                albedo = Color.random(rng) * Color.random(rng)
                material = Lambertian(albedo)
            elif choose_mat < 0.95:
                # metal
                albedo = Color.random(rng, 0.5, 1.0)
                fuzz = random_double(rng, 0.0, 0.5)
                material = Metal(albedo, fuzz)
            else:
                # glass
                material = Dielectric(1.5)
            world.add(Sphere(center, 0.2, material))

    world.add(Sphere(Point3(0, 1, 0), 1.0, DielectricPresets.glass()))
    world.add(Sphere(Point3(-4, 1, 0), 1.0, MattePresets.brown()))
    world.add(Sphere(Point3(4, 1, 0), 1.0, MetalPresets.bronze()))
    return world


def final_scene(rng) -> SceneSetup:
    aspect_ratio = 3.0 / 2.0
    camera = Camera(Point3(13, 2, 3), Point3(0, 0, 0), Vector3(0, 1, 0),
                    20.0, aspect_ratio, aperture=0.1, focus_dist=10.0)
    return SceneSetup("final", random_world(rng), camera,
                      aspect_ratio=aspect_ratio, image_width=1200,
                      samples_per_pixel=500, max_depth=50)


SCENES: Dict[str, Callable] = {
    "sky": sky_scene,
    "normals": normals_scene,
    "antialias": antialias_scene,
    "diffuse": diffuse_scene,
    "materials": materials_scene,
    "fov": fov_scene,
    "positionable": positionable_scene,
    "defocus": defocus_scene,
    "final": final_scene,
}


def scene_names():
    return list(SCENES)


def get_scene(key: Union[str, int], rng) -> SceneSetup:
    """
    Builds a scene by registry name or by its index in SCENES.
    Raises KeyError for unknown names and out-of-range indices.
    """
    if isinstance(key, int) or (isinstance(key, str) and key.isdigit()):
        index = int(key)
        names = scene_names()
        if not 0 <= index < len(names):
            raise KeyError(f"Scene index {index} out of range (0-{len(names) - 1})")
        key = names[index]
    if key not in SCENES:
        raise KeyError(f"Unknown scene {key!r}")
    return SCENES[key](rng)
