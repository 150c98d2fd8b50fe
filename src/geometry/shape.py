# geometry/shape.py
import uuid
from typing import List, Optional
from core.matrix import Matrix
from core.ray import Ray
from core.vector import Point, Vector
from materials.material import Material


class Shape:
    """
    Abstract base for anything a ray can be intersected with.

    A shape owns a transform (world-from-object) and a material. intersect()
    and normal_at() take world-space arguments, move them into object space
    with the inverse transform and hand off to local_intersect() and
    local_normal_at(), which subclasses implement for a shape sitting at the
    object-space origin.
    """
    def __init__(self, transform: Optional[Matrix] = None, material: Optional[Material] = None):
        self.id = str(uuid.uuid4())
        self.transform = transform if transform is not None else Matrix.identity(4)
        self.material = material.copy() if material is not None else Material()

    def get_transform(self) -> Matrix:
        return self.transform

    def set_transform(self, transform: Matrix):
        self.transform = transform

    def get_material(self) -> Material:
        return self.material

    def set_material(self, material: Material):
        # Value semantics: later edits to the caller's material do not leak in.
        self.material = material.copy()

    def intersect(self, ray: Ray) -> Optional[List[float]]:
        """
        Returns the ray parameters t where the world-space ray meets the
        shape, or None on a miss or a non-invertible transform.
        """
        inv = self.transform.inverse()
        if inv is None:
            return None
        return self.local_intersect(ray.transform(inv))

    def normal_at(self, world_point: Point) -> Optional[Vector]:
        """
        Returns the unit world-space normal at world_point, or None if the
        transform is not invertible.
        """
        inv = self.transform.inverse()
        if inv is None:
            return None
        local_point = inv * world_point
        local_normal = self.local_normal_at(local_point)
        world_normal = inv.transpose() * local_normal
        return Vector(world_normal.x, world_normal.y, world_normal.z).normalize()

    def local_intersect(self, ray: Ray) -> Optional[List[float]]:
        raise NotImplementedError("local_intersect() must be implemented by subclasses.")

    def local_normal_at(self, point: Point) -> Vector:
        raise NotImplementedError("local_normal_at() must be implemented by subclasses.")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"
