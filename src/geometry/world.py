# src/geometry/world.py
from typing import Iterable, List, Optional
from core.aabb import AABB
from core.ray import Ray
from geometry.bvh import BVHNode, build_bvh
from geometry.hittable import Hittable, HitRecord

class HittableList(Hittable):
    """
    A list of Hittable objects. Once build_bvh() has been called, queries go
    through the tree; before that every object is tested in turn.
    """
    def __init__(self, objects: Optional[Iterable[Hittable]] = None):
        self.objects: List[Hittable] = list(objects) if objects is not None else []
        self.bvh_root: Optional[BVHNode] = None

    def add(self, obj: Hittable):
        self.objects.append(obj)
        self.bvh_root = None

    def extend(self, objects: Iterable[Hittable]):
        self.objects.extend(objects)
        self.bvh_root = None

    def clear(self):
        self.objects.clear()
        self.bvh_root = None

    def __len__(self) -> int:
        return len(self.objects)

    def build_bvh(self) -> BVHNode:
        self.bvh_root = build_bvh(self.objects)
        return self.bvh_root

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if self.bvh_root is not None:
            return self.bvh_root.hit(ray, t_min, t_max)
        return self.hit_all(ray, t_min, t_max)

    def hit_all(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Closest hit found by testing every object."""
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record

    def bounding_box(self) -> AABB:
        if not self.objects:
            raise ValueError("An empty HittableList has no bounding box")
        box = self.objects[0].bounding_box()
        for obj in self.objects[1:]:
            box = box.merge(obj.bounding_box())
        return box
