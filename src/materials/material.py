# materials/material.py
from typing import NamedTuple, Optional
import numpy as np
from core.ray import Ray
from core.vector import BLACK, Vector3
from geometry.hittable import HitRecord

class ScatterResult(NamedTuple):
    """Outgoing ray and the per-channel fraction of light it carries back."""
    attenuation: Vector3
    scattered: Ray

class Material:
    """
    Abstract material class. Subclasses must implement scatter().

    Materials are shared between primitives and never change after
    construction.
    """
    def scatter(self, ray_in: Ray, rec: HitRecord, rng: np.random.Generator) -> Optional[ScatterResult]:
        """
        Computes the scattered ray and attenuation for a ray that hit the
        surface. Returns None if the ray is absorbed.
        """
        raise NotImplementedError("scatter() must be implemented by subclasses.")

    def emitted(self, p: Vector3) -> Vector3:
        """
        Light emitted at point p. Non-emissive by default.
        """
        return BLACK
