# geometry/sphere.py
import math
from typing import List, Optional
from core.ray import Ray
from core.vector import Point, Vector
from geometry.shape import Shape

ORIGIN = Point(0, 0, 0)


class Sphere(Shape):
    """
    A unit sphere centered at the object-space origin. Position and size
    come from the transform.
    """
    def local_intersect(self, ray: Ray) -> Optional[List[float]]:
        sphere_to_ray = ray.origin - ORIGIN
        a = ray.direction.dot(ray.direction)
        b = 2.0 * ray.direction.dot(sphere_to_ray)
        c = sphere_to_ray.dot(sphere_to_ray) - 1.0
        discriminant = b * b - 4 * a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        t1 = (-b - sqrt_disc) / (2 * a)
        t2 = (-b + sqrt_disc) / (2 * a)
        return [t1, t2]

    def local_normal_at(self, point: Point) -> Vector:
        return point - ORIGIN
