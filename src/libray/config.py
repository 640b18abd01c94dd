# config.py
"""
Default parameters for the example scenes and the renderer.
"""
from libray.core.vector import EPSILON, Vector3
from libray.geometry.sphere import T_MIN

# Sphere scenes: eye on the -z axis looking through a wall behind the unit sphere
SPHERE_CANVAS_SIZE = 100
EYE_POSITION = Vector3(0.0, 0.0, -5.0)
WALL_Z = 10.0
WALL_SIZE = 7.0
LIGHT_POSITION = Vector3(-10.0, 10.0, -10.0)

# Ballistics scene
BALLISTICS_CANVAS = (900, 550)
BALLISTICS_START = Vector3(0.0, 1.0, 0.0)
BALLISTICS_VELOCITY = Vector3(1.0, 1.8, 0.0).normalize() * 11.25
BALLISTICS_GRAVITY = Vector3(0.0, -0.1, 0.0)
BALLISTICS_WIND = Vector3(-0.01, 0.0, 0.0)
BALLISTICS_DT = 1.0

# Clock scene
CLOCK_CANVAS_SIZE = 100
CLOCK_RADIUS = 35.0
CLOCK_HOURS = 12

BACKGROUND = Vector3(0.0, 0.0, 0.0)

class RenderSettings:
    """
    Options for Renderer.

    use_kernel: trace with the numba row-parallel kernel instead of the
        per-pixel object path.
    background: color for rays that hit nothing.
    t_min: roots at or below this are ignored.
    """
    def __init__(self, use_kernel: bool = True, background: Vector3 = BACKGROUND,
                 t_min: float = T_MIN):
        if t_min < 0:
            raise ValueError(f"t_min must not be negative, got {t_min}")
        self.use_kernel = use_kernel
        self.background = background
        self.t_min = t_min

    def __repr__(self) -> str:
        return (f"RenderSettings(use_kernel={self.use_kernel}, "
                f"background={self.background!r}, t_min={self.t_min})")
