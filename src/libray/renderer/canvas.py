# renderer/canvas.py
import logging
import numpy as np
from libray.core.vector import Vector3

logger = logging.getLogger(__name__)

BLACK = Vector3(0.0, 0.0, 0.0)

class Canvas:
    """
    A width x height grid of linear RGB colors.

    Stored as a (height, width, 3) float array so rows can be filled
    independently; channels are clamped to [0, 1] only on export.
    """
    def __init__(self, width: int, height: int, background: Vector3 = BLACK):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.empty((height, width, 3), dtype=np.float64)
        self.pixels[:, :] = background.to_array()

    @classmethod
    def from_array(cls, pixels: np.ndarray) -> "Canvas":
        height, width, channels = pixels.shape
        if channels != 3:
            raise ValueError(f"Expected 3 color channels, got {channels}")
        canvas = cls(width, height)
        canvas.pixels[:] = pixels
        return canvas

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def write_pixel(self, x: int, y: int, color: Vector3) -> bool:
        """
        Writes `color` at column x, row y.
        Returns False (and writes nothing) when (x, y) is off the canvas.
        """
        if not self.contains(x, y):
            logger.debug("Skipping pixel (%d, %d) outside %dx%d canvas", x, y, self.width, self.height)
            return False
        self.pixels[y, x] = (color.x, color.y, color.z)
        return True

    def pixel_at(self, x: int, y: int) -> Vector3:
        if not self.contains(x, y):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas")
        return Vector3.from_array(self.pixels[y, x])

    def to_uint8(self) -> np.ndarray:
        """
        Clamps every channel to [0, 1] and quantizes to 0..255.
        """
        return np.rint(self.pixels.clip(0.0, 1.0) * 255).astype(np.uint8)
