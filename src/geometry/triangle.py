# geometry/triangle.py
from typing import Optional
from core.vector import Vector3
from core.ray import Ray
from core.aabb import AABB
from geometry.hittable import Hittable, HitRecord

# Minimum hit distance and relative parallel-ray threshold for Möller–Trumbore.
EPSILON = 1e-7

# Minimum half thickness of the bounding box along any axis.
BOX_PADDING = 1e-4

class Triangle(Hittable):
    """
    A single triangle with per-vertex normals.

    The shading normal is the barycentric blend of the vertex normals rather
    than the flat face normal, so triangle soup exported from a smooth mesh
    shades smoothly.
    """
    def __init__(self,
                 v0: Vector3, v1: Vector3, v2: Vector3,
                 material=None,
                 n0: Optional[Vector3] = None, n1: Optional[Vector3] = None, n2: Optional[Vector3] = None):
        # Vertices
        self.v0 = v0
        self.v1 = v1
        self.v2 = v2
        self.material = material

        self.face_normal = (v1 - v0).cross(v2 - v0).normalize()
        self.edge_scale = (v1 - v0).length() * (v2 - v0).length()

        # Normals
        if n0 is None or n1 is None or n2 is None:
            self.n0 = self.n1 = self.n2 = self.face_normal
        else:
            self.n0 = n0
            self.n1 = n1
            self.n2 = n2

    def get_normal(self, u: float, v: float) -> Vector3:
        """Interpolate normal at the given barycentric coordinates."""
        w = 1.0 - u - v
        return (self.n0 * w + self.n1 * u + self.n2 * v).normalize()

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        # Möller–Trumbore intersection algorithm
        edge1 = self.v1 - self.v0
        edge2 = self.v2 - self.v0
        h = ray.direction.cross(edge2)
        a = edge1.dot(h)

        # Ray parallel to the triangle, relative to the edge and direction lengths.
        if abs(a) <= EPSILON * self.edge_scale * ray.direction.length():
            return None

        f = 1.0 / a
        s = ray.origin - self.v0
        u = f * s.dot(h)
        if u < 0.0 or u > 1.0:
            return None

        q = s.cross(edge1)
        v = f * ray.direction.dot(q)
        if v < 0.0 or u + v > 1.0:
            return None

        t = f * edge2.dot(q)

        # Line intersection but not a ray intersection, or out of range.
        if t <= EPSILON or t < t_min or t > t_max:
            return None

        p = ray.at(t)
        return HitRecord.from_outward_normal(ray, t, p, self.get_normal(u, v), self.material)

    def bounding_box(self) -> AABB:
        """
        Compute the bounding box for the triangle. Axes along which the
        triangle is flat get a little thickness so the slab test can hit it.
        """
        lo = self.v0.min_e(self.v1).min_e(self.v2)
        hi = self.v0.max_e(self.v1).max_e(self.v2)
        pad = Vector3(*(BOX_PADDING if hi[a] - lo[a] < 2 * BOX_PADDING else 0.0 for a in range(3)))
        return AABB(lo - pad, hi + pad)

    def __repr__(self) -> str:
        return f"Triangle({self.v0!r}, {self.v1!r}, {self.v2!r})"
