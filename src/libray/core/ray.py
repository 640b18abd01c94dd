# core/ray.py
import math
from libray.core.errors import DegenerateRayError
from libray.core.matrix import transform_point, transform_vector
from libray.core.vector import EPSILON, Vector3

class Ray:
    """
    Represents a ray in 3D space with an origin and direction.
    The direction need not be unit length, but it must not be zero.
    """
    __slots__ = ("origin", "direction")

    def __init__(self, origin: Vector3, direction: Vector3):
        length = direction.magnitude()
        if not math.isfinite(length) or length <= EPSILON:
            raise DegenerateRayError(f"Ray direction {direction!r} has zero or non-finite length")
        self.origin = origin
        self.direction = direction

    def point_at(self, t: float) -> Vector3:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    at = point_at

    def transform(self, matrix) -> "Ray":
        """
        Returns a new ray with the 4x4 `matrix` applied to the origin as a
        point and to the direction as a vector. The direction is not
        renormalized, so t values carry over between the two spaces.
        """
        return Ray(transform_point(matrix, self.origin), transform_vector(matrix, self.direction))

    def __repr__(self) -> str:
        return f"Ray({self.origin!r}, {self.direction!r})"
