# core/vector.py
import math
from core.consts import EPSILON


class Tuple:
    """
    Homogeneous (x, y, z, w) value. w=1 marks a point, w=0 a vector.

    Arithmetic keeps the w component algebraically, so the class of the result
    follows from it: point - point is a vector, point + vector is a point.
    Tuples are immutable, so shared constants are safe to hand out.
    """
    __slots__ = ("x", "y", "z", "w")

    def __init__(self, x: float, y: float, z: float, w: float):
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))
        object.__setattr__(self, "w", float(w))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self) -> "Tuple":
        return self

    def __deepcopy__(self, memo) -> "Tuple":
        return self

    @staticmethod
    def from_w(x: float, y: float, z: float, w: float) -> "Tuple":
        if w == 1.0:
            return Point(x, y, z)
        if w == 0.0:
            return Vector(x, y, z)
        return Tuple(x, y, z, w)

    def is_point(self) -> bool:
        return self.w == 1.0

    def is_vector(self) -> bool:
        return self.w == 0.0

    def __add__(self, other: "Tuple") -> "Tuple":
        if self.w + other.w > 1.0:
            raise TypeError("cannot add two points")
        return Tuple.from_w(self.x + other.x, self.y + other.y,
                            self.z + other.z, self.w + other.w)

    def __sub__(self, other: "Tuple") -> "Tuple":
        if self.w - other.w < 0.0:
            raise TypeError("cannot subtract a point from a vector")
        return Tuple.from_w(self.x - other.x, self.y - other.y,
                            self.z - other.z, self.w - other.w)

    def __neg__(self) -> "Tuple":
        return Tuple.from_w(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, t: float) -> "Tuple":
        return Tuple.from_w(self.x * t, self.y * t, self.z * t, self.w * t)

    def __rmul__(self, t: float) -> "Tuple":
        return self.__mul__(t)

    def __truediv__(self, t: float) -> "Tuple":
        return Tuple.from_w(self.x / t, self.y / t, self.z / t, self.w / t)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Tuple):
            return NotImplemented
        return (self.x == other.x and self.y == other.y
                and self.z == other.z and self.w == other.w)

    def __hash__(self):
        return hash((self.x, self.y, self.z, self.w))

    def __iter__(self):
        return iter((self.x, self.y, self.z, self.w))

    def approx_eq(self, other: "Tuple", eps: float = EPSILON) -> bool:
        return (abs(self.x - other.x) < eps and abs(self.y - other.y) < eps
                and abs(self.z - other.z) < eps and abs(self.w - other.w) < eps)

    def dot(self, other: "Tuple") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def magnitude(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> "Tuple":
        l = self.magnitude()
        if l == 0:
            raise ValueError("cannot normalize a zero-length tuple")
        return self / l

    def __repr__(self) -> str:
        return f"Tuple({self.x}, {self.y}, {self.z}, {self.w})"


class Point(Tuple):
    """
    A position in space (w=1).
    """
    __slots__ = ()

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        super().__init__(x, y, z, 1.0)

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y}, {self.z})"


class Vector(Tuple):
    """
    A direction with no position (w=0). Supports cross products and
    reflection about a normal.
    """
    __slots__ = ()

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        super().__init__(x, y, z, 0.0)

    def cross(self, other: "Vector") -> "Vector":
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def reflect(self, normal: "Vector") -> "Vector":
        return self - normal * 2 * self.dot(normal)

    def __repr__(self) -> str:
        return f"Vector({self.x}, {self.y}, {self.z})"
