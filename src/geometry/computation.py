# geometry/computation.py
from core.consts import EPSILON
from core.ray import Ray
from core.vector import Point, Vector
from geometry.intersection import Intersection


class Computation:
    """
    Precomputed state of a single hit, consumed by shading.

    over_point is the hit point nudged along the normal. It is only used as
    the origin of the shadow ray so the surface does not shadow itself.
    """
    def __init__(self, t: float, shape_id: str, point: Point, over_point: Point,
                 eyev: Vector, normalv: Vector, inside: bool):
        self.t = t
        self.shape_id = shape_id
        self.point = point
        self.over_point = over_point
        self.eyev = eyev
        self.normalv = normalv
        self.inside = inside

    def __repr__(self) -> str:
        return (f"Computation(t={self.t}, shape_id={self.shape_id!r}, point={self.point}, "
                f"normalv={self.normalv}, inside={self.inside})")


def prepare_computations(intersection: Intersection, ray: Ray, shape) -> Computation:
    """
    Builds the Computation for `intersection` of `ray` with `shape`.

    Raises:
        ValueError: if the shape's transform is not invertible, since such a
            shape can never have produced the intersection.
    """
    point = ray.position(intersection.t)
    eyev = -ray.direction
    normalv = shape.normal_at(point)
    if normalv is None:
        raise ValueError(f"Shape {shape.id} has a non-invertible transform")

    inside = False
    if normalv.dot(eyev) < 0:
        inside = True
        normalv = -normalv

    over_point = point + normalv * EPSILON
    return Computation(intersection.t, intersection.shape_id, point, over_point,
                       eyev, normalv, inside)
