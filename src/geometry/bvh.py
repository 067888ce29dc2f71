# src/geometry/bvh.py
import logging
from typing import List, Optional, Sequence
from core.aabb import AABB
from core.ray import Ray
from geometry.hittable import Hittable, HitRecord

logger = logging.getLogger(__name__)

# Leaves hold at most this many primitives.
MAX_LEAF_SIZE = 2

class BVHNode(Hittable):
    """
    Bounding volume hierarchy built by median-split object partitioning.

    Each internal node sorts its primitives by bounding-box center along the
    axis where those centers are most spread out and hands half to each
    child, so the tree depth stays logarithmic however the scene is
    clustered. The node keeps references to the caller's primitives and
    never modifies them.
    """
    __slots__ = ("left", "right", "contents", "box")

    def __init__(self, objects: Sequence[Hittable]):
        if len(objects) == 0:
            raise ValueError("BVHNode requires at least one object")

        self.left: Optional["BVHNode"] = None
        self.right: Optional["BVHNode"] = None
        self.contents: List[Hittable] = []

        if len(objects) <= MAX_LEAF_SIZE:
            # Leaf node has merged box as its box
            self.contents = list(objects)
            box = self.contents[0].bounding_box()
            for obj in self.contents[1:]:
                box = box.merge(obj.bounding_box())
            self.box = box
            return

        axis = split_axis(objects)
        ordered = sorted(objects, key=lambda obj: obj.bounding_box().center[axis])
        mid = len(ordered) // 2

        self.left = BVHNode(ordered[:mid])
        self.right = BVHNode(ordered[mid:])
        self.box = self.left.box.merge(self.right.box)

    @property
    def is_leaf(self) -> bool:
        return self.left is None

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        if not self.box.hit(ray, t_min, t_max):
            return None

        if self.is_leaf:
            closest = None
            for obj in self.contents:
                rec = obj.hit(ray, t_min, t_max)
                if rec is not None and (closest is None or rec.t < closest.t):
                    closest = rec
            return closest

        hit_left = self.left.hit(ray, t_min, t_max)

        # Anything beyond the left hit cannot be the closest one.
        if hit_left is not None:
            t_max = hit_left.t

        hit_right = self.right.hit(ray, t_min, t_max)

        # Return the closer hit
        if hit_left is not None and hit_right is not None:
            return hit_left if hit_left.t <= hit_right.t else hit_right
        return hit_left if hit_left is not None else hit_right

    def bounding_box(self) -> AABB:
        return self.box

    def depth(self) -> int:
        if self.is_leaf:
            return 1
        return 1 + max(self.left.depth(), self.right.depth())

    def leaves(self) -> List["BVHNode"]:
        if self.is_leaf:
            return [self]
        return self.left.leaves() + self.right.leaves()

def split_axis(objects: Sequence[Hittable]) -> int:
    """
    Axis (0, 1 or 2) along which the bounding-box centers spread the most.
    Ties go to the lowest axis index.
    """
    lo = hi = objects[0].bounding_box().center
    for obj in objects[1:]:
        c = obj.bounding_box().center
        lo = lo.min_e(c)
        hi = hi.max_e(c)

    spread = hi - lo
    axis = 0
    max_spread = -1.0
    for a in range(3):
        if spread[a] > max_spread:
            max_spread = spread[a]
            axis = a
    return axis

def build_bvh(objects: Sequence[Hittable]) -> BVHNode:
    """Build a tree over objects and log its shape."""
    root = BVHNode(objects)
    logger.debug("Built BVH over %d objects: %d leaves, depth %d",
                 len(objects), len(root.leaves()), root.depth())
    return root
