# materials/material.py
from typing import Optional
from libray.core.errors import InvalidGeometryError
from libray.core.vector import Vector3
from libray.geometry.hittable import HitRecord

def check_coefficient(name: str, value: float) -> float:
    if not 0.0 <= value <= 1.0:
        raise InvalidGeometryError(f"{name} must be in [0, 1], got {value}")
    return float(value)

class Material:
    """
    Abstract material class. Subclasses must implement shade().
    """
    def __init__(self, color: Vector3):
        self.color = color

    def shade(self, rec: HitRecord, light, eye: Optional[Vector3] = None) -> Vector3:
        """
        Computes the color seen at the hit point lit by `light`.
        `eye` is the unit vector from the surface toward the viewer.
        """
        raise NotImplementedError("shade() must be implemented by subclasses.")
