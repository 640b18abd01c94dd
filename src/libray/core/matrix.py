# core/matrix.py
"""
4x4 affine transforms as numpy arrays.

Points are transformed with w = 1 and directions with w = 0, so
translations move points but leave directions alone. Matrices compose
with `@`, right to left: `translation(...) @ scaling(...)` scales first.
"""
import math
import numpy as np
from libray.core.errors import InvalidGeometryError
from libray.core.vector import Vector3

def identity() -> np.ndarray:
    return np.identity(4, dtype=np.float64)

def translation(x: float, y: float, z: float) -> np.ndarray:
    m = identity()
    m[:3, 3] = (x, y, z)
    return m

def scaling(x: float, y: float, z: float) -> np.ndarray:
    return np.diag([float(x), float(y), float(z), 1.0])

def rotation_x(radians: float) -> np.ndarray:
    c, s = math.cos(radians), math.sin(radians)
    m = identity()
    m[1, 1], m[1, 2] = c, -s
    m[2, 1], m[2, 2] = s, c
    return m

def rotation_y(radians: float) -> np.ndarray:
    c, s = math.cos(radians), math.sin(radians)
    m = identity()
    m[0, 0], m[0, 2] = c, s
    m[2, 0], m[2, 2] = -s, c
    return m

def rotation_z(radians: float) -> np.ndarray:
    c, s = math.cos(radians), math.sin(radians)
    m = identity()
    m[0, 0], m[0, 1] = c, -s
    m[1, 0], m[1, 1] = s, c
    return m

def as_transform(matrix) -> np.ndarray:
    """
    Returns `matrix` as a float 4x4 array.

    Raises InvalidGeometryError for any other shape or for non-finite entries.
    """
    m = np.array(matrix, dtype=np.float64)
    if m.shape != (4, 4):
        raise InvalidGeometryError(f"Transform must be 4x4, got shape {m.shape}")
    if not np.all(np.isfinite(m)):
        raise InvalidGeometryError("Transform entries must be finite")
    return m

def inverse(matrix) -> np.ndarray:
    """
    Inverts a 4x4 transform.

    Raises InvalidGeometryError when the matrix is singular, e.g. a scaling
    with a zero factor.
    """
    m = as_transform(matrix)
    try:
        inv = np.linalg.inv(m)
    except np.linalg.LinAlgError as exc:
        raise InvalidGeometryError(f"Transform is not invertible: {exc}") from exc
    if not np.all(np.isfinite(inv)):
        raise InvalidGeometryError("Transform is not invertible")
    return inv

def transform_point(matrix: np.ndarray, point: Vector3) -> Vector3:
    x, y, z, _ = matrix @ np.array([point.x, point.y, point.z, 1.0])
    return Vector3(x, y, z)

def transform_vector(matrix: np.ndarray, vector: Vector3) -> Vector3:
    x, y, z, _ = matrix @ np.array([vector.x, vector.y, vector.z, 0.0])
    return Vector3(x, y, z)
