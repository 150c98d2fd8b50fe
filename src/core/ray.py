# core/ray.py
from core.vector import Point, Vector


class Ray:
    """
    Represents a ray in 3D space with an origin and direction.
    The direction is not required to be normalized.
    """
    def __init__(self, origin: Point, direction: Vector):
        self.origin = origin
        self.direction = direction

    def position(self, t: float) -> Point:
        """
        Returns the point along the ray at parameter t.
        """
        return self.origin + self.direction * t

    def transform(self, m) -> "Ray":
        """
        Returns a new ray with origin and direction mapped through matrix m.
        """
        return Ray(m * self.origin, m * self.direction)

    def __repr__(self) -> str:
        return f"Ray({self.origin}, {self.direction})"
