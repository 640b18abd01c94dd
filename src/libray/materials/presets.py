# materials/presets.py
from libray.core.vector import Vector3
from libray.materials.lambertian import Lambertian
from libray.materials.phong import Phong

RED = Vector3(1.0, 0.0, 0.0)
WHITE = Vector3(1.0, 1.0, 1.0)
MAGENTA = Vector3(1.0, 0.2, 0.7)

class MaterialPresets:
    """Predefined materials for the example scenes."""

    @staticmethod
    def flat(color: Vector3 = WHITE) -> Lambertian:
        # Ambient only: the silhouette in a single color
        return Lambertian(color, ambient=1.0, diffuse=0.0)

    @staticmethod
    def matte(color: Vector3 = WHITE) -> Lambertian:
        return Lambertian(color, ambient=0.1, diffuse=0.9)

    @staticmethod
    def glossy(color: Vector3 = WHITE) -> Phong:
        return Phong(color, ambient=0.1, diffuse=0.9, specular=0.9, shininess=200.0)

    @staticmethod
    def satin(color: Vector3 = WHITE) -> Phong:
        return Phong(color, ambient=0.1, diffuse=0.7, specular=0.3, shininess=50.0)
