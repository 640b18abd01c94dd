# core/utils.py
from libray.core.vector import Vector3

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(value, high))

def clamp_color(color: Vector3) -> Vector3:
    return Vector3(clamp(color.x), clamp(color.y), clamp(color.z))
