# materials/light.py
import numpy as np
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import HitRecord
from materials.material import Material

class Light(Material):
    """
    Emissive material that provides constant radiance.
    """
    def __init__(self, emit: Vector3):
        self.emit = emit

    def scatter(self, ray_in: Ray, rec: HitRecord, rng: np.random.Generator) -> None:
        """
        Emissive materials do not scatter rays.
        """
        return None

    def emitted(self, p: Vector3) -> Vector3:
        return self.emit

    def __repr__(self) -> str:
        return f"Light({self.emit!r})"
