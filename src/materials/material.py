# materials/material.py
import copy
from typing import Optional
from core.color import Color, BLACK, WHITE
from core.utils import reflect
from core.vector import Point, Vector
from materials.light import Light
from materials.patterns import Pattern


class Material:
    """
    Phong surface description: a base color (or pattern) and the ambient,
    diffuse and specular reflectance coefficients plus the shininess exponent.
    Materials are copied when attached to a shape.
    """
    def __init__(self, color: Color = WHITE, ambient: float = 0.1, diffuse: float = 0.9,
                 specular: float = 0.9, shininess: float = 200.0,
                 pattern: Optional[Pattern] = None):
        self.color = color
        self.ambient = ambient
        self.diffuse = diffuse
        self.specular = specular
        self.shininess = shininess
        self.pattern = pattern

    def copy(self) -> "Material":
        return copy.deepcopy(self)

    def color_at(self, shape, point: Point) -> Color:
        """
        Returns the pattern color at point if a pattern is set and can be
        resolved, otherwise the flat color.
        """
        if self.pattern is not None:
            color = self.pattern.at_shape(shape, point)
            if color is not None:
                return color
        return self.color

    def lighting(self, light: Light, shape, point: Point, eyev: Vector,
                 normalv: Vector, in_shadow: bool = False) -> Color:
        """
        Computes the Phong illumination at a surface point.

        Args:
            light: The single point light of the scene.
            shape: Shape being shaded, used to resolve the pattern.
            point: World-space surface point.
            eyev: Unit vector from the point toward the eye.
            normalv: Unit surface normal, already flipped toward the eye.
            in_shadow: When True only the ambient term is returned.

        Returns:
            Color: ambient + diffuse + specular, not clamped.
        """
        effective_color = self.color_at(shape, point) * light.intensity
        ambient = effective_color * self.ambient
        if in_shadow:
            return ambient

        lightv = (light.position - point).normalize()
        light_dot_normal = lightv.dot(normalv)
        if light_dot_normal < 0:
            # Light is on the other side of the surface.
            diffuse = BLACK
            specular = BLACK
        else:
            diffuse = effective_color * self.diffuse * light_dot_normal
            reflectv = reflect(-lightv, normalv)
            reflect_dot_eye = reflectv.dot(eyev)
            if reflect_dot_eye <= 0:
                specular = BLACK
            else:
                factor = reflect_dot_eye ** self.shininess
                specular = light.intensity * self.specular * factor

        return ambient + diffuse + specular

    def __eq__(self, other) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return (self.color == other.color and self.ambient == other.ambient
                and self.diffuse == other.diffuse and self.specular == other.specular
                and self.shininess == other.shininess and self.pattern == other.pattern)

    def __repr__(self) -> str:
        return (f"Material(color={self.color}, ambient={self.ambient}, diffuse={self.diffuse}, "
                f"specular={self.specular}, shininess={self.shininess}, pattern={self.pattern})")
