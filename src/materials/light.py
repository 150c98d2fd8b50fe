# materials/light.py
from core.color import Color, WHITE
from core.vector import Point


class Light:
    """
    A point light with no size and no attenuation.
    """
    def __init__(self, position: Point, intensity: Color = WHITE):
        self.position = position
        self.intensity = intensity

    def __eq__(self, other) -> bool:
        if not isinstance(other, Light):
            return NotImplemented
        return self.position == other.position and self.intensity == other.intensity

    def __repr__(self) -> str:
        return f"Light({self.position}, {self.intensity})"
