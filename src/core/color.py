# core/color.py
from typing import Tuple as Triple, Union
from core.consts import EPSILON


class Color:
    """
    An RGB color. Channels are unbounded while shading and only clamped
    to [0, 1] when the image is written out. Colors are immutable.
    """
    __slots__ = ("red", "green", "blue")

    def __init__(self, red: float, green: float, blue: float):
        object.__setattr__(self, "red", float(red))
        object.__setattr__(self, "green", float(green))
        object.__setattr__(self, "blue", float(blue))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self) -> "Color":
        return self

    def __deepcopy__(self, memo) -> "Color":
        return self

    def __add__(self, other: "Color") -> "Color":
        return Color(self.red + other.red, self.green + other.green, self.blue + other.blue)

    def __sub__(self, other: "Color") -> "Color":
        return Color(self.red - other.red, self.green - other.green, self.blue - other.blue)

    def __mul__(self, other: Union["Color", float]) -> "Color":
        if isinstance(other, (int, float)):
            return Color(self.red * other, self.green * other, self.blue * other)
        # Hadamard product
        return Color(self.red * other.red, self.green * other.green, self.blue * other.blue)

    def __rmul__(self, other: float) -> "Color":
        return self.__mul__(other)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.red == other.red and self.green == other.green and self.blue == other.blue

    def __hash__(self):
        return hash((self.red, self.green, self.blue))

    def __iter__(self):
        return iter((self.red, self.green, self.blue))

    def approx_eq(self, other: "Color", eps: float = EPSILON) -> bool:
        return (abs(self.red - other.red) < eps and abs(self.green - other.green) < eps
                and abs(self.blue - other.blue) < eps)

    def clamp(self) -> "Color":
        return Color(*(min(1.0, max(0.0, c)) for c in self))

    def to_rgb255(self) -> Triple[int, int, int]:
        c = self.clamp()
        return (int(c.red * 255 + 0.5), int(c.green * 255 + 0.5), int(c.blue * 255 + 0.5))

    def __repr__(self) -> str:
        return f"Color({self.red}, {self.green}, {self.blue})"


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
