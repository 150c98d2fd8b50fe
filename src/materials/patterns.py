# materials/patterns.py
import math
from typing import Optional
from core.color import Color, BLACK, WHITE
from core.matrix import Matrix
from core.vector import Point


class Pattern:
    """
    Base class for procedural color patterns.

    A pattern has its own transform, applied on top of the transform of the
    shape it is painted on. Subclasses implement at(), which receives a
    point already in pattern space.
    """
    def __init__(self, a: Color = WHITE, b: Color = BLACK, transform: Optional[Matrix] = None):
        self.a = a
        self.b = b
        self.transform = transform if transform is not None else Matrix.identity(4)

    def get_transform(self) -> Matrix:
        return self.transform

    def set_transform(self, transform: Matrix):
        self.transform = transform

    def at(self, point: Point) -> Color:
        raise NotImplementedError("at() must be implemented by pattern subclasses.")

    def at_shape(self, shape, world_point: Point) -> Optional[Color]:
        """
        Evaluates the pattern at a world-space point on `shape`.

        Returns None if either the shape or the pattern transform is not
        invertible. Callers then fall back to the flat material color.
        """
        shape_inv = shape.transform.inverse()
        if shape_inv is None:
            return None
        pattern_inv = self.transform.inverse()
        if pattern_inv is None:
            return None
        object_point = shape_inv * world_point
        return self.at(pattern_inv * object_point)

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.a == other.a and self.b == other.b and self.transform == other.transform

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.a}, {self.b})"


class StripePattern(Pattern):
    """Alternates a and b along x in unit-wide stripes."""
    def at(self, point: Point) -> Color:
        return self.a if math.floor(point.x) % 2 == 0 else self.b


class RingPattern(Pattern):
    """Concentric rings around the y axis."""
    def at(self, point: Point) -> Color:
        distance = math.sqrt(point.x * point.x + point.z * point.z)
        return self.a if math.floor(distance) % 2 == 0 else self.b


class CheckerPattern(Pattern):
    def at(self, point: Point) -> Color:
        total = abs(point.x) + abs(point.y) + abs(point.z)
        return self.a if math.floor(total) % 2 == 0 else self.b


class GradientPattern(Pattern):
    """
    Linear blend from `a` to `b` across each unit interval of x, repeating.
    """
    def __init__(self, from_: Color = WHITE, to: Color = BLACK, transform: Optional[Matrix] = None):
        super().__init__(from_, to, transform)

    @property
    def from_color(self) -> Color:
        return self.a

    @property
    def to_color(self) -> Color:
        return self.b

    def at(self, point: Point) -> Color:
        distance = self.b - self.a
        fraction = point.x - math.floor(point.x)
        return self.a + distance * fraction
