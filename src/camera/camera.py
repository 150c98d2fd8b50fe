# camera/camera.py
import math
from typing import Optional
from core.matrix import Matrix
from core.ray import Ray
from core.vector import Point
from renderer.raytracer import Renderer


class Camera:
    """
    Pinhole camera looking down -z in camera space, with the canvas one unit
    in front of the eye.

    `transform` maps world space into camera space (see view_transform).
    pixel_size, half_width and half_height are derived once from the canvas
    size and field of view; the field of view spans the longer side.
    """
    def __init__(self, hsize: float, vsize: float, field_of_view: float,
                 transform: Optional[Matrix] = None):
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera size must be positive, got {hsize}x{vsize}")
        self.hsize = hsize
        self.vsize = vsize
        self.field_of_view = field_of_view
        self.transform = transform if transform is not None else Matrix.identity(4)

        half_view = math.tan(field_of_view / 2)
        aspect = hsize / vsize
        if aspect >= 1:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2) / hsize

    def set_transform(self, transform: Matrix):
        self.transform = transform

    def ray_for_pixel(self, px: float, py: float) -> Ray:
        """
        Returns the world-space ray through the center of pixel (px, py).

        Raises:
            ValueError: if the camera transform is not invertible.
        """
        inv = self.transform.inverse()
        if inv is None:
            raise ValueError("Camera transform is not invertible")

        xoffset = (px + 0.5) * self.pixel_size
        yoffset = (py + 0.5) * self.pixel_size
        # The camera looks toward -z, so +x is to the left.
        world_x = self.half_width - xoffset
        world_y = self.half_height - yoffset

        pixel = inv * Point(world_x, world_y, -1)
        origin = inv * Point(0, 0, 0)
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)

    def render(self, world):
        """Renders world into a new Canvas, one ray per pixel."""
        return Renderer(self, world).render()

    def __repr__(self) -> str:
        return f"Camera({self.hsize}, {self.vsize}, {self.field_of_view})"
