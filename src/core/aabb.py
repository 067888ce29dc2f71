# src/core/aabb.py
import math
from core.ray import Ray
from core.vector import Vector3

class AABB:
    """
    Axis-aligned bounding box. Callers guarantee minimum <= maximum per axis;
    zero thickness along an axis is allowed.
    """
    __slots__ = ("minimum", "maximum", "center")

    def __init__(self, minimum: Vector3, maximum: Vector3):
        self.minimum = minimum
        self.maximum = maximum
        self.center = (minimum + maximum) / 2

    def hit(self, ray: Ray, t_min: float, t_max: float) -> bool:
        # Slab method: for each axis, find intersection intervals.
        for a in range(3):
            d = ray.direction[a]
            # IEEE division by a signed zero, which Python raises on instead.
            invD = 1.0 / d if d != 0.0 else math.copysign(math.inf, d)
            t0 = (self.minimum[a] - ray.origin[a]) * invD
            t1 = (self.maximum[a] - ray.origin[a]) * invD
            if invD < 0:
                t0, t1 = t1, t0
            t_min = t0 if t0 > t_min else t_min
            t_max = t1 if t1 < t_max else t_max
            if t_max <= t_min:
                return False
        return True

    def merge(self, other: "AABB") -> "AABB":
        """Smallest box containing both this box and other."""
        return AABB(self.minimum.min_e(other.minimum), self.maximum.max_e(other.maximum))

    def contains(self, p: Vector3) -> bool:
        return all(self.minimum[a] <= p[a] <= self.maximum[a] for a in range(3))

    @staticmethod
    def surrounding_box(box0: "AABB", box1: "AABB") -> "AABB":
        return box0.merge(box1)

    def __repr__(self) -> str:
        return f"AABB({self.minimum!r}, {self.maximum!r})"
