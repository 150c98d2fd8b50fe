# src/geometry/world.py
from typing import Dict, List, Optional
from core.color import Color, BLACK
from core.ray import Ray
from core.transformations import scaling
from core.vector import Point
from geometry.computation import Computation, prepare_computations
from geometry.intersection import Intersection, hit, intersects, sort_intersections
from geometry.shape import Shape
from geometry.sphere import Sphere
from materials.light import Light
from materials.material import Material

class World:
    """
    A scene: one point light and the shapes keyed by id.

    Shapes are only added while the scene is assembled. Tracing reads the
    world and never mutates it. Insertion order is preserved.
    """
    def __init__(self, light: Optional[Light] = None):
        self.light = light
        self._shapes: Dict[str, Shape] = {}

    @property
    def shapes(self) -> List[Shape]:
        return list(self._shapes.values())

    def add_shape(self, shape: Shape) -> str:
        self._shapes[shape.id] = shape
        return shape.id

    def get_shape(self, shape_id: str) -> Shape:
        return self._shapes[shape_id]

    def set_light(self, light: Light):
        self.light = light

    def __len__(self) -> int:
        return len(self._shapes)

    def __contains__(self, shape_id: str) -> bool:
        return shape_id in self._shapes

    def intersect(self, ray: Ray) -> Optional[List[Intersection]]:
        """
        Returns every intersection of ray with the scene sorted by t, or
        None if nothing was hit. Shapes with a non-invertible transform
        contribute nothing.
        """
        result = []
        for shape in self._shapes.values():
            xs = intersects(shape, ray)
            if xs is not None:
                result.extend(xs)
        if not result:
            return None
        return sort_intersections(result)

    def is_shadowed(self, point: Point) -> bool:
        if self.light is None:
            return False
        v = self.light.position - point
        distance = v.magnitude()
        direction = v.normalize()
        h = hit(self.intersect(Ray(point, direction)))
        return h is not None and h.t < distance

    def shade_hit(self, comps: Computation) -> Color:
        if self.light is None:
            return BLACK
        shape = self.get_shape(comps.shape_id)
        shadowed = self.is_shadowed(comps.over_point)
        return shape.material.lighting(self.light, shape, comps.point,
                                       comps.eyev, comps.normalv, shadowed)

    def color_at(self, ray: Ray) -> Color:
        """
        Returns the color seen along ray, black when nothing is hit.
        """
        h = hit(self.intersect(ray))
        if h is None:
            return BLACK
        comps = prepare_computations(h, ray, self.get_shape(h.shape_id))
        return self.shade_hit(comps)

def default_world() -> World:
    """
    Two concentric spheres lit from (-10, 10, -10). The outer one is a
    unit sphere with a green-ish material, the inner one is scaled by 0.5.
    """
    world = World(Light(Point(-10, 10, -10), Color(1, 1, 1)))
    outer = Sphere(material=Material(color=Color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2))
    inner = Sphere(transform=scaling(0.5, 0.5, 0.5))
    world.add_shape(outer)
    world.add_shape(inner)
    return world
