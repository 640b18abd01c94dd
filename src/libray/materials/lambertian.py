# materials/lambertian.py
from typing import Optional
from libray.core.utils import clamp, clamp_color
from libray.core.vector import Vector3
from libray.geometry.hittable import HitRecord
from libray.materials.material import Material, check_coefficient

class Lambertian(Material):
    """
    Ambient plus Lambertian diffuse shading.

    intensity = clamp(ambient + diffuse * max(0, n . l), 0, 1)

    With ambient=1 and diffuse=0 every hit gets the flat base color.
    """

    def __init__(self, color: Vector3, ambient: float = 0.1, diffuse: float = 0.9):
        super().__init__(color)
        self.ambient = check_coefficient("ambient", ambient)
        self.diffuse = check_coefficient("diffuse", diffuse)

    @staticmethod
    def diffuse_term(normal: Vector3, light_direction: Vector3) -> float:
        # Surfaces facing away from the light get nothing, not negative light
        return max(0.0, normal.dot(light_direction))

    def intensity(self, normal: Vector3, light_direction: Vector3,
                  eye: Optional[Vector3] = None) -> float:
        return clamp(self.ambient + self.diffuse * self.diffuse_term(normal, light_direction))

    def shade(self, rec: HitRecord, light, eye: Optional[Vector3] = None) -> Vector3:
        light_direction = light.direction_from(rec.point)
        intensity = self.intensity(rec.normal, light_direction, eye)
        return clamp_color(self.color * light.intensity * intensity)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.color!r}, ambient={self.ambient}, diffuse={self.diffuse})"
