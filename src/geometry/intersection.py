# geometry/intersection.py
from typing import Iterable, List, Optional
from core.ray import Ray


class Intersection:
    """
    A ray parameter t tagged with the id of the shape that was hit.
    The shape itself is looked up by id when it is needed for shading.
    Intersections order by t alone, so two hits at the same t on different
    shapes compare as neither less nor greater, while == also checks the id.
    """
    __slots__ = ("shape_id", "t")

    def __init__(self, shape_id: str, t: float):
        self.shape_id = shape_id
        self.t = t

    def __eq__(self, other) -> bool:
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.shape_id == other.shape_id and self.t == other.t

    def __lt__(self, other: "Intersection") -> bool:
        return self.t < other.t

    def __le__(self, other: "Intersection") -> bool:
        return self.t <= other.t

    def __gt__(self, other: "Intersection") -> bool:
        return self.t > other.t

    def __ge__(self, other: "Intersection") -> bool:
        return self.t >= other.t

    def __hash__(self):
        return hash((self.shape_id, self.t))

    def __repr__(self) -> str:
        return f"Intersection({self.shape_id!r}, {self.t})"


def intersects(shape, ray: Ray) -> Optional[List[Intersection]]:
    """
    Intersects a shape with a world-space ray. Returns None when the shape
    reports no roots.
    """
    ts = shape.intersect(ray)
    if ts is None:
        return None
    return [Intersection(shape.id, t) for t in ts]


def sort_intersections(xs: List[Intersection]) -> List[Intersection]:
    """Sorts in place by ascending t and returns the list."""
    xs.sort(key=lambda i: i.t)
    return xs


def hit(xs: Optional[Iterable[Intersection]]) -> Optional[Intersection]:
    """
    Returns the intersection with the smallest positive t, or None.
    Intersections behind the ray origin are never a hit.
    """
    if xs is None:
        return None
    best = None
    for i in xs:
        if i.t > 0 and (best is None or i.t < best.t):
            best = i
    return best
