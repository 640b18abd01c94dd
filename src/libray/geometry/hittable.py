# geometry/hittable.py
from typing import Optional
from libray.core.vector import Vector3
from libray.core.ray import Ray

class HitRecord:
    """
    Records details of a ray-object intersection.
    """
    __slots__ = ("t", "point", "normal", "front_face", "material")

    def __init__(self, t: float, point: Vector3, normal: Vector3,
                 front_face: bool = True, material=None):
        self.t = t                    # Ray parameter at intersection
        self.point = point            # Intersection point
        self.normal = normal          # Outward unit normal
        self.front_face = front_face  # Whether the ray came from outside
        self.material = material

    def __repr__(self) -> str:
        return f"HitRecord(t={self.t}, point={self.point!r}, normal={self.normal!r})"

class Hittable:
    """
    Abstract class for objects that can be hit by a ray.
    """
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        raise NotImplementedError("hit() must be implemented by subclasses.")
