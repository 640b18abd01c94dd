# camera/camera.py
import numpy as np
from libray.core.vector import Vector3
from libray.core.ray import Ray

class Camera:
    """
    A pinhole eye looking through a rectangular projection wall.

    The wall sits at z = wall_z and is centred on the z-axis. Its longer
    side spans wall_size world units and the shorter side keeps the
    width:height aspect, so every pixel is a square cell.
    Pixel (0, 0) is the top-left corner of the wall.
    """
    def __init__(self, origin: Vector3, wall_z: float, wall_size: float,
                 width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Camera resolution must be positive, got {width}x{height}")
        if wall_size <= 0:
            raise ValueError(f"wall_size must be positive, got {wall_size}")
        if wall_z == origin.z:
            raise ValueError("The projection wall must not pass through the eye")
        self.origin = origin
        self.wall_z = wall_z
        self.wall_size = wall_size
        self.width = width
        self.height = height
        longest = max(width, height)
        self.pixel_size = wall_size / longest
        self.half_width = wall_size * width / (2.0 * longest)
        self.half_height = wall_size * height / (2.0 * longest)

    def wall_point(self, x: float, y: float) -> Vector3:
        """Returns the point on the wall that pixel (x, y) looks at."""
        world_x = -self.half_width + self.pixel_size * x
        world_y = self.half_height - self.pixel_size * y
        return Vector3(world_x, world_y, self.wall_z)

    def ray_for_pixel(self, x: int, y: int) -> Ray:
        return Ray(self.origin, (self.wall_point(x, y) - self.origin).normalize())

    def ray_directions(self) -> np.ndarray:
        """
        Unit ray directions for every pixel, shape (height, width, 3).
        """
        xs = -self.half_width + self.pixel_size * np.arange(self.width, dtype=np.float64)
        ys = self.half_height - self.pixel_size * np.arange(self.height, dtype=np.float64)
        directions = np.empty((self.height, self.width, 3), dtype=np.float64)
        directions[:, :, 0] = xs[np.newaxis, :] - self.origin.x
        directions[:, :, 1] = ys[:, np.newaxis] - self.origin.y
        directions[:, :, 2] = self.wall_z - self.origin.z
        norms = np.linalg.norm(directions, axis=2, keepdims=True)
        return directions / norms
