# materials/lambertian.py

import numpy as np
from core.ray import Ray
from core.vector import Vector3
from core.utils import random_unit_vector
from geometry.hittable import HitRecord
from materials.material import Material, ScatterResult

def diffuse_direction(normal: Vector3, rng: np.random.Generator) -> Vector3:
    """
    Normal plus a random unit vector, which follows a cosine-weighted lobe.
    Falls back to the normal when the two nearly cancel.
    """
    scatter_direction = normal + random_unit_vector(rng)
    if scatter_direction.near_zero():
        return normal
    return scatter_direction.normalize()

class Lambertian(Material):
    """
    Lambertian diffuse material.
    """

    def __init__(self, albedo: Vector3):
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: np.random.Generator) -> ScatterResult:
        """
        Scatter a ray according to a Lambertian reflection model.
        Always succeeds.
        """
        scattered = Ray(rec.p, diffuse_direction(rec.normal, rng))
        return ScatterResult(self.albedo, scattered)

    def __repr__(self) -> str:
        return f"Lambertian({self.albedo!r})"
