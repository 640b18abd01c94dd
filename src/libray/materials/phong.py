# materials/phong.py
from typing import Optional
from libray.core.utils import clamp, reflect
from libray.core.vector import Vector3
from libray.materials.lambertian import Lambertian
from libray.materials.material import check_coefficient

class Phong(Lambertian):
    """
    Lambertian shading with a specular highlight of the light source.

    The highlight is ks * max(0, reflect(-l, n) . eye) ** shininess, so it
    needs the eye vector; without one (or with the light behind the surface)
    this is plain Lambertian shading.
    """

    def __init__(self, color: Vector3, ambient: float = 0.1, diffuse: float = 0.9,
                 specular: float = 0.9, shininess: float = 200.0):
        super().__init__(color, ambient, diffuse)
        self.specular = check_coefficient("specular", specular)
        if shininess <= 0:
            raise ValueError(f"shininess must be positive, got {shininess}")
        self.shininess = float(shininess)

    def specular_term(self, normal: Vector3, light_direction: Vector3,
                      eye: Optional[Vector3]) -> float:
        if eye is None or normal.dot(light_direction) < 0:
            return 0.0
        reflected = reflect(-light_direction, normal)
        reflect_dot_eye = reflected.dot(eye)
        if reflect_dot_eye <= 0:
            return 0.0
        return self.specular * reflect_dot_eye ** self.shininess

    def intensity(self, normal: Vector3, light_direction: Vector3,
                  eye: Optional[Vector3] = None) -> float:
        base = self.ambient + self.diffuse * self.diffuse_term(normal, light_direction)
        return clamp(base + self.specular_term(normal, light_direction, eye))
