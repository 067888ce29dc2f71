# core/utils.py
import math
import numpy as np
from core.vector import Vector3

def random_in_unit_sphere(rng: np.random.Generator) -> Vector3:
    """
    Returns a random point inside a unit sphere.
    """
    while True:
        x, y, z = rng.uniform(-1.0, 1.0, 3)
        p = Vector3(float(x), float(y), float(z))
        if p.dot(p) < 1.0:
            return p

def random_unit_vector(rng: np.random.Generator) -> Vector3:
    """
    Returns a random unit vector (uniformly distributed over the sphere).
    """
    while True:
        p = random_in_unit_sphere(rng)
        # Rejects points too close to the center to normalize reliably.
        if p.length_squared() > 1e-12:
            return p.normalize()

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with normal n (Snell's law).
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * (-math.sqrt(abs(1.0 - r_out_perp.length_squared())))
    return r_out_perp + r_out_parallel

def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(x, hi))

def schlick(cos_theta: float, ref_ratio: float) -> float:
    """Schlick's approximation of Fresnel reflectance."""
    r0 = (1.0 - ref_ratio) / (1.0 + ref_ratio)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow((1.0 - cos_theta), 5)
