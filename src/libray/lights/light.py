# lights/light.py
from libray.core.vector import Vector3

WHITE = Vector3(1.0, 1.0, 1.0)

class Light:
    """
    Abstract light source. Subclasses must implement direction_from().
    """
    def __init__(self, intensity: Vector3 = WHITE):
        self.intensity = intensity

    def direction_from(self, point: Vector3) -> Vector3:
        """
        Returns the unit vector from `point` toward the light.
        """
        raise NotImplementedError("direction_from() must be implemented by subclasses.")

class DirectionalLight(Light):
    """
    Light arriving from the same direction everywhere (e.g. the sun).
    `direction` points from the surface toward the light.
    """
    def __init__(self, direction: Vector3, intensity: Vector3 = WHITE):
        super().__init__(intensity)
        self.direction = direction.normalize()

    def direction_from(self, point: Vector3) -> Vector3:
        return self.direction

    def __repr__(self) -> str:
        return f"DirectionalLight({self.direction!r}, {self.intensity!r})"

class PointLight(Light):
    """
    A light source with no size, located at `position`.
    """
    def __init__(self, position: Vector3, intensity: Vector3 = WHITE):
        super().__init__(intensity)
        self.position = position

    def direction_from(self, point: Vector3) -> Vector3:
        return (self.position - point).normalize()

    def __repr__(self) -> str:
        return f"PointLight({self.position!r}, {self.intensity!r})"
