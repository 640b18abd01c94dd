# geometry/sphere.py
import math
from typing import Optional, Tuple
from libray.core.errors import InvalidGeometryError
from libray.core.matrix import as_transform, inverse, transform_point, transform_vector
from libray.core.vector import Vector3
from libray.core.ray import Ray
from libray.geometry.hittable import Hittable, HitRecord

# Roots at or below this are treated as the surface the ray started on.
T_MIN = 1e-4
INFINITY = float("inf")

class Sphere(Hittable):
    """
    Represents a sphere defined by its center, radius, and material.

    An optional 4x4 `transform` maps the sphere from object space into the
    world. Rays are intersected in object space through its inverse, and
    normals come back through the inverse transpose.
    """
    def __init__(self, center: Vector3, radius: float, material=None, transform=None):
        if not math.isfinite(radius) or radius <= 0:
            raise InvalidGeometryError(f"Sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = float(radius)
        self.material = material
        self.transform = None
        self.inverse = None
        if transform is not None:
            self.set_transform(transform)

    def set_transform(self, transform) -> None:
        """Replaces the object-to-world transform. Singular matrices are rejected."""
        m = as_transform(transform)
        self.inverse = inverse(m)
        self.transform = m

    def to_object(self, ray: Ray) -> Ray:
        if self.transform is None:
            return ray
        return ray.transform(self.inverse)

    def intersect(self, ray: Ray) -> Tuple[float, ...]:
        """
        Solves |O + tD - C|^2 = r^2 for t.

        Returns both real roots in ascending order, or an empty tuple
        when the ray misses. A tangent ray yields the double root twice.
        The roots are parameters of `ray` itself, whatever the transform.
        """
        ray = self.to_object(ray)
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        b = 2.0 * ray.direction.dot(oc)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = b * b - 4.0 * a * c

        if discriminant < 0:
            return ()

        sqrt_disc = math.sqrt(discriminant)
        return ((-b - sqrt_disc) / (2.0 * a), (-b + sqrt_disc) / (2.0 * a))

    def hit(self, ray: Ray, t_min: float = T_MIN, t_max: float = INFINITY) -> Optional[HitRecord]:
        # Roots are ascending, so the first one in range is the nearest surface
        for root in self.intersect(ray):
            if t_min < root <= t_max:
                point = ray.point_at(root)
                normal = self.normal_at(point)
                return HitRecord(
                    t=root,
                    point=point,
                    normal=normal,
                    front_face=ray.direction.dot(normal) < 0,
                    material=self.material,
                )
        return None

    def normal_at(self, point: Vector3) -> Vector3:
        """Outward unit normal at a world-space point on the surface."""
        if self.transform is None:
            return (point - self.center).normalize()
        object_normal = transform_point(self.inverse, point) - self.center
        return transform_vector(self.inverse.T, object_normal).normalize()

    def __repr__(self) -> str:
        return f"Sphere({self.center!r}, {self.radius})"
