# core/errors.py

class GeometryError(ValueError):
    """
    Base class for invalid geometric input.
    """


class DegenerateVectorError(GeometryError):
    """
    Raised when a zero-length vector is normalized or divided by ~zero.
    """


class DegenerateRayError(GeometryError):
    """
    Raised when a ray is built with a zero-length direction.
    """


class InvalidGeometryError(GeometryError):
    """
    Raised for shapes or coefficients outside their valid range
    (e.g. a sphere with a non-positive radius).
    """
