# renderer/raytracer.py
import sys
import numpy as np
from core.vector import Color
from camera.camera import Camera
from geometry.hittable import Hittable
from renderer.integrator import ray_color
from renderer.tone_mapping import to_uint8

MAX_BOUNCES = 50


class Renderer:
    """
    Single-threaded supersampling renderer.

    Every pixel averages samples_per_pixel integrator estimates through
    jittered camera rays. The summed linear colors are kept in
    accumulation_buffer, shape (height, width, 3), row 0 being the top
    scanline, so the buffer is already in image-writer order.
    """
    def __init__(self, width: int, height: int, samples_per_pixel: int = 100,
                 max_depth: int = MAX_BOUNCES, integrator=ray_color,
                 jitter: bool = True, verbose: bool = True):
        if width < 1 or height < 1:
            raise ValueError(f"Image size must be at least 1x1, got {width}x{height}")
        if samples_per_pixel < 1:
            raise ValueError(f"samples_per_pixel must be >= 1, got {samples_per_pixel}")
        if max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {max_depth}")
        self.width = width
        self.height = height
        self.samples_per_pixel = samples_per_pixel
        self.max_depth = max_depth
        self.integrator = integrator
        self.jitter = jitter
        self.verbose = verbose
        self.accumulation_buffer = np.zeros((height, width, 3), dtype=np.float64)

    def reset_accumulation(self):
        self.accumulation_buffer.fill(0.0)

    def _log(self, message: str, end: str = "\n"):
        if self.verbose:
            print(message, end=end, file=sys.stderr, flush=True)

    def render_pixel(self, world: Hittable, camera: Camera, col: int, row: int, rng) -> Color:
        """
        Returns the summed (not averaged) color of one pixel. row counts
        scanlines from the bottom of the image, like the viewport t axis.
        """
        width_span = max(self.width - 1, 1)
        height_span = max(self.height - 1, 1)
        pixel_color = Color(0, 0, 0)
        for _ in range(self.samples_per_pixel):
            du = rng.random() if self.jitter else 0.0
            dv = rng.random() if self.jitter else 0.0
            s = (col + du) / width_span
            t = (row + dv) / height_span
            ray = camera.get_ray(s, t, rng)
            pixel_color += self.integrator(ray, world, self.max_depth, rng)
        return pixel_color

    def render(self, world: Hittable, camera: Camera, rng) -> np.ndarray:
        """
        Renders the full frame and returns it as an (height, width, 3)
        uint8 array, top scanline first.
        """
        self.reset_accumulation()
        for row in range(self.height - 1, -1, -1):
            self._log(f"\rScanlines remaining: {row} ", end="")
            image_row = self.height - 1 - row
            for col in range(self.width):
                pixel_color = self.render_pixel(world, camera, col, row, rng)
                self.accumulation_buffer[image_row, col] = (pixel_color.x, pixel_color.y, pixel_color.z)
        self._log("\nDone.")
        return self.get_image()

    def get_image(self) -> np.ndarray:
        return to_uint8(self.accumulation_buffer, self.samples_per_pixel)
