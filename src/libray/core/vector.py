# core/vector.py
import math
import numpy as np
from libray.core.errors import DegenerateVectorError

# Single degeneracy threshold shared by vectors and rays.
EPSILON = 1e-8


class Vector3:
    """
    An immutable 3D vector supporting arithmetic, dot and cross products,
    and normalization. Also used as an (r, g, b) color.
    """
    __slots__ = ("x", "y", "z")

    def __init__(self, x: float, y: float, z: float):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    @classmethod
    def from_array(cls, values) -> "Vector3":
        return cls(values[0], values[1], values[2])

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Vector3(self.x * other, self.y * other, self.z * other)
        if isinstance(other, Vector3):
            # Component-wise, used to tint colors.
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        return NotImplemented

    def __rmul__(self, other: float) -> "Vector3":
        return self.__mul__(other)

    def __truediv__(self, t: float) -> "Vector3":
        if not math.isfinite(t) or abs(t) <= EPSILON:
            raise DegenerateVectorError(f"Cannot divide {self!r} by {t}")
        return Vector3(self.x / t, self.y / t, self.z / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.z))

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def isclose(self, other: "Vector3", tol: float = 1e-9) -> bool:
        return (abs(self.x - other.x) <= tol and
                abs(self.y - other.y) <= tol and
                abs(self.z - other.z) <= tol)

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y, self.z)

    length = magnitude

    def normalize(self) -> "Vector3":
        """
        Returns the unit vector pointing the same way.

        Raises DegenerateVectorError if the magnitude is within EPSILON of
        zero or is not finite.
        """
        l = self.magnitude()
        if not math.isfinite(l) or l <= EPSILON:
            raise DegenerateVectorError(f"Cannot normalize {self!r}")
        return Vector3(self.x / l, self.y / l, self.z / l)

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"
