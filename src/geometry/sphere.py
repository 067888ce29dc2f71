# geometry/sphere.py
import math
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord
from core.aabb import AABB

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    A negative radius keeps the same surface but flips the outward normal,
    which turns the sphere into the inner wall of a hollow shell.
    """
    def __init__(self, center: Vector3, radius: float, material):
        if radius == 0:
            raise ValueError("Sphere radius must be non-zero")
        self.center = center
        self.radius = radius
        self.material = material

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        d = ray.direction
        f = ray.origin - self.center
        a = d.length_squared()
        b = 2 * f.dot(d)
        c = f.length_squared() - self.radius * self.radius

        # b^2 - 4ac rewritten around the closest approach to the center
        # so it does not lose precision for distant origins.
        d_unit = d / math.sqrt(a)
        perp = f - d_unit * f.dot(d_unit)
        discriminant = 4 * a * (self.radius * self.radius - perp.length_squared())

        if discriminant < 0:
            return None

        q = -0.5 * (b + math.copysign(math.sqrt(discriminant), b))
        if q == 0:
            # Origin sits on the surface and moves tangentially.
            return None
        t0 = c / q
        t1 = q / a

        t0_valid = t_min <= t0 <= t_max
        t1_valid = t_min <= t1 <= t_max
        if t0_valid and t1_valid:
            root = min(t0, t1)
        elif t0_valid:
            root = t0
        elif t1_valid:
            root = t1
        else:
            return None

        p = ray.at(root)
        outward_normal = (p - self.center) / self.radius
        return HitRecord.from_outward_normal(ray, root, p, outward_normal.normalize(), self.material)

    def bounding_box(self) -> AABB:
        # The bounding box of a sphere is center ± radius
        r = abs(self.radius)
        offset = Vector3(r, r, r)
        return AABB(self.center - offset, self.center + offset)

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"
