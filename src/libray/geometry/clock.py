# geometry/clock.py
import math
from typing import Tuple
from libray.core.errors import InvalidGeometryError
from libray.core.vector import Vector3

def clock_points(center: Vector3, radius: float, count: int = 12) -> Tuple[Vector3, ...]:
    """
    Returns `count` points evenly spaced on a circle in the z = center.z plane.

    Point i sits at angle 2*pi*i/count measured from the +x axis, so point 0
    is center + (radius, 0, 0).
    """
    if count <= 0:
        raise ValueError(f"count must be positive, got {count}")
    if radius < 0:
        raise InvalidGeometryError(f"radius must not be negative, got {radius}")

    step = 2.0 * math.pi / count
    return tuple(
        center + Vector3(math.cos(step * i), math.sin(step * i), 0.0) * radius
        for i in range(count)
    )
