# materials/checkers.py
import math
import numpy as np
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.lambertian import diffuse_direction
from materials.material import Material, ScatterResult

# Shift applied before flooring so cells stay the same size across the origin.
CELL_OFFSET = 10000

class Checkers(Material):
    """
    Diffuse material whose albedo alternates in a checker pattern over the
    x/z plane. scale sets how many cells fit in one world unit.
    """
    def __init__(self, albedo1: Vector3, albedo2: Vector3, scale: float = 2.0):
        self.albedo1 = albedo1
        self.albedo2 = albedo2
        self.scale = scale

    def albedo_at(self, p: Vector3) -> Vector3:
        x = math.floor(CELL_OFFSET + p.x * self.scale)
        z = math.floor(CELL_OFFSET + p.z * self.scale)
        if x % 2 == z % 2:
            return self.albedo2
        return self.albedo1

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: np.random.Generator) -> ScatterResult:
        scattered = Ray(rec.p, diffuse_direction(rec.normal, rng))
        return ScatterResult(self.albedo_at(rec.p), scattered)

    def __repr__(self) -> str:
        return f"Checkers({self.albedo1!r}, {self.albedo2!r}, scale={self.scale})"
