# materials/presets.py
from core.color import Color, WHITE
from materials.material import Material
from materials.patterns import CheckerPattern, StripePattern


class MaterialPresets:
    """Predefined Phong materials used by the demo scenes."""

    @staticmethod
    def matte(color: Color) -> Material:
        return Material(color=color, diffuse=0.9, specular=0.0)

    @staticmethod
    def plastic(color: Color) -> Material:
        return Material(color=color, diffuse=0.7, specular=0.3)

    @staticmethod
    def glossy(color: Color) -> Material:
        return Material(color=color, diffuse=0.6, specular=0.9, shininess=300.0)

    @staticmethod
    def wall() -> Material:
        return Material(color=Color(1.0, 0.9, 0.9), specular=0.0)

    @staticmethod
    def checkered_floor() -> Material:
        return Material(specular=0.0,
                        pattern=CheckerPattern(WHITE, Color(0.3, 0.3, 0.35)))

    @staticmethod
    def striped(a: Color, b: Color) -> Material:
        return Material(diffuse=0.7, specular=0.3, pattern=StripePattern(a, b))
