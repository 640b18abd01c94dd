# geometry/world.py
from typing import List, Optional
from libray.core.ray import Ray
from libray.geometry.hittable import Hittable, HitRecord
from libray.geometry.sphere import INFINITY, T_MIN

class HittableList(Hittable):
    """
    A list of Hittable objects. hit() returns the closest hit.
    """
    def __init__(self, objects=None):
        self.objects: List[Hittable] = list(objects) if objects else []

    def add(self, obj: Hittable):
        self.objects.append(obj)

    def clear(self):
        self.objects.clear()

    def __len__(self) -> int:
        return len(self.objects)

    def __iter__(self):
        return iter(self.objects)

    def hit(self, ray: Ray, t_min: float = T_MIN, t_max: float = INFINITY) -> Optional[HitRecord]:
        hit_record = None
        closest_so_far = t_max
        for obj in self.objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest_so_far = rec.t
                hit_record = rec
        return hit_record
