# renderer/raytracer.py
import logging
import time
from typing import Callable, Optional
import numpy as np
from core.ray import Ray
from core.utils import clamp
from core.vector import BLACK, WHITE, Vector3
from camera.camera import Camera
from camera.sampling import multi_jitter
from geometry.hittable import Hittable
from renderer.config import RENDER_SETTINGS, SKY_HORIZON, SKY_ZENITH, T_MAX, T_MIN
from renderer.tone_mapping import gamma_correct, to_rgb8

logger = logging.getLogger(__name__)

MAX_BOUNCES = RENDER_SETTINGS['max_depth']

_HORIZON = Vector3(*SKY_HORIZON)
_ZENITH = Vector3(*SKY_ZENITH)

def sky_color(ray: Ray) -> Vector3:
    """
    Background seen by rays that leave the scene: a vertical gradient
    driven by the raw direction's y component.
    """
    t = clamp(ray.direction.y, 0.0, 1.0)
    return _HORIZON * (1.0 - t) + _ZENITH * t

def shoot_ray(ray: Ray, world: Hittable, depth: int, rng: np.random.Generator,
              background: Callable[[Ray], Vector3] = sky_color) -> Vector3:
    """
    Returns the color carried back along the ray.

    Each bounce adds the surface's emission weighted by the attenuation
    gathered so far, then continues with the scattered ray. The walk stops
    on a miss (background), an absorbed ray, or after ``depth`` bounces.
    """
    color = BLACK
    throughput = WHITE

    for _ in range(depth):
        rec = world.hit(ray, T_MIN, T_MAX)
        if rec is None:
            return color + throughput * background(ray)

        color = color + throughput * rec.material.emitted(rec.p)

        scatter_result = rec.material.scatter(ray, rec, rng)
        if scatter_result is None:
            return color

        throughput = throughput * scatter_result.attenuation
        ray = scatter_result.scattered

    # Exceeded recursion depth.
    return color

class Renderer:
    """
    Single-threaded CPU renderer producing a linear float image.
    """
    def __init__(self, width: int = RENDER_SETTINGS['width'], height: int = RENDER_SETTINGS['height'],
                 samples_per_axis: int = RENDER_SETTINGS['samples_per_axis'],
                 max_depth: int = MAX_BOUNCES, seed: Optional[int] = RENDER_SETTINGS['seed'],
                 background: Callable[[Ray], Vector3] = sky_color):
        if width <= 0 or height <= 0:
            raise ValueError(f"Image size must be positive, got {width}x{height}")
        if samples_per_axis <= 0:
            raise ValueError(f"samples_per_axis must be positive, got {samples_per_axis}")
        if max_depth < 0:
            raise ValueError(f"max_depth must not be negative, got {max_depth}")
        self.width = width
        self.height = height
        self.samples_per_axis = samples_per_axis
        self.max_depth = max_depth
        self.background = background
        self.rng = np.random.default_rng(seed)

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    def render_pixel(self, world: Hittable, camera: Camera, row: int, col: int) -> Vector3:
        n = self.samples_per_axis
        offsets = multi_jitter(n, self.rng)
        color_sum = Vector3(0.0, 0.0, 0.0)
        for r_s in range(n):
            for c_s in range(n):
                row_ratio = (row + offsets[r_s, c_s, 0]) / self.height
                col_ratio = (col + offsets[r_s, c_s, 1]) / self.width
                ray = camera.get_ray(float(row_ratio), float(col_ratio))
                color_sum = color_sum + shoot_ray(ray, world, self.max_depth, self.rng, self.background)
        return color_sum / (n * n)

    def render(self, world: Hittable, camera: Camera) -> np.ndarray:
        """
        Render the scene into a (height, width, 3) array of linear colors,
        row 0 at the top.
        """
        logger.info("Rendering %dx%d, %d samples/pixel, depth %d",
                    self.width, self.height, self.samples_per_axis ** 2, self.max_depth)
        start = time.perf_counter()
        image = np.zeros((self.height, self.width, 3), dtype=np.float64)
        report_every = max(1, self.height // 10)

        for row in range(self.height):
            for col in range(self.width):
                image[row, col] = self.render_pixel(world, camera, row, col).to_tuple()
            if (row + 1) % report_every == 0:
                logger.debug("Rendered %d/%d rows", row + 1, self.height)

        logger.info("Rendered frame in %.3fs", time.perf_counter() - start)
        return image

    @staticmethod
    def to_display(image: np.ndarray, gamma: float = 2.0) -> np.ndarray:
        """Gamma-encode and quantize a rendered image to 8-bit RGB."""
        return to_rgb8(gamma_correct(image, gamma))
