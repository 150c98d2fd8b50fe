# geometry/plane.py
from typing import List, Optional
from core.consts import EPSILON
from core.ray import Ray
from core.vector import Point, Vector
from geometry.shape import Shape


class Plane(Shape):
    """
    The infinite xz plane (y = 0) in object space.
    """
    def local_intersect(self, ray: Ray) -> Optional[List[float]]:
        # Parallel and coplanar rays both count as a miss.
        if abs(ray.direction.y) < EPSILON:
            return None
        return [-ray.origin.y / ray.direction.y]

    def local_normal_at(self, point: Point) -> Vector:
        return Vector(0, 1, 0)
