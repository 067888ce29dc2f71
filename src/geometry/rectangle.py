# geometry/rectangle.py
from typing import Optional, Tuple
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord

# Half thickness given to the box along the fixed axis.
PADDING = 0.001

class Rectangle(Hittable):
    """
    Axis-aligned rectangle lying in the plane ``axis = k``.

    ``range0`` and ``range1`` bound the two remaining axes in increasing axis
    order, e.g. for ``axis=2`` they are the x and y ranges.
    """
    def __init__(self, axis: int, range0: Tuple[float, float], range1: Tuple[float, float],
                 k: float, material):
        if axis not in (0, 1, 2):
            raise ValueError(f"axis must be 0, 1 or 2, got {axis}")
        self.axis = axis
        self.other_axes = tuple(a for a in range(3) if a != axis)
        self.range0 = (min(range0), max(range0))
        self.range1 = (min(range1), max(range1))
        self.k = k
        self.material = material

        n = [0.0, 0.0, 0.0]
        n[axis] = 1.0
        self.outward_normal = Vector3(*n)

    @classmethod
    def xy(cls, x0: float, x1: float, y0: float, y1: float, z: float, material) -> "Rectangle":
        return cls(2, (x0, x1), (y0, y1), z, material)

    @classmethod
    def xz(cls, x0: float, x1: float, z0: float, z1: float, y: float, material) -> "Rectangle":
        return cls(1, (x0, x1), (z0, z1), y, material)

    @classmethod
    def yz(cls, y0: float, y1: float, z0: float, z1: float, x: float, material) -> "Rectangle":
        return cls(0, (y0, y1), (z0, z1), x, material)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        d = ray.direction[self.axis]
        if d == 0.0:
            return None
        t = (self.k - ray.origin[self.axis]) / d
        if t < t_min or t > t_max:
            return None

        a0, a1 = self.other_axes
        c0 = ray.origin[a0] + t * ray.direction[a0]
        c1 = ray.origin[a1] + t * ray.direction[a1]
        if (c0 < self.range0[0] or c0 > self.range0[1]
                or c1 < self.range1[0] or c1 > self.range1[1]):
            return None

        return HitRecord.from_outward_normal(ray, t, ray.at(t), self.outward_normal, self.material)

    def bounding_box(self) -> AABB:
        lo = [0.0, 0.0, 0.0]
        hi = [0.0, 0.0, 0.0]
        a0, a1 = self.other_axes
        lo[a0], hi[a0] = self.range0
        lo[a1], hi[a1] = self.range1
        lo[self.axis] = self.k - PADDING
        hi[self.axis] = self.k + PADDING
        return AABB(Vector3(*lo), Vector3(*hi))

    def __repr__(self) -> str:
        return f"Rectangle(axis={self.axis}, {self.range0}, {self.range1}, k={self.k})"
