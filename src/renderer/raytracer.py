# renderer/raytracer.py
import time
from typing import Iterator, Tuple
from core.color import Color
from renderer.canvas import Canvas


class Renderer:
    """
    Drives per-pixel color production: one ray per pixel from the camera,
    shaded by the world, written into a Canvas.

    Rendering is single-threaded. The world and camera are only read, so
    pixels are independent of iteration order.
    """
    def __init__(self, camera, world, verbose: bool = False, progress_every: int = 16):
        self.camera = camera
        self.world = world
        self.verbose = verbose
        self.progress_every = max(1, progress_every)
        self.width = int(camera.hsize)
        self.height = int(camera.vsize)

    def pixel_color(self, x: int, y: int) -> Color:
        ray = self.camera.ray_for_pixel(x, y)
        return self.world.color_at(ray)

    def pixels(self) -> Iterator[Tuple[int, int, Color]]:
        """Yields (x, y, color) for every pixel, row by row."""
        for y in range(self.height):
            for x in range(self.width):
                yield x, y, self.pixel_color(x, y)

    def render_row(self, canvas: Canvas, y: int):
        for x in range(self.width):
            canvas.write_pixel(x, y, self.pixel_color(x, y))

    def render(self) -> Canvas:
        canvas = Canvas(self.width, self.height)
        if self.verbose:
            print("\n=== Rendering ===")
            print(f"Resolution: {self.width}x{self.height}")
            print(f"World contains {len(self.world)} shapes")
        start = time.perf_counter()

        for y in range(self.height):
            self.render_row(canvas, y)
            if self.verbose and ((y + 1) % self.progress_every == 0 or y + 1 == self.height):
                print(f"  Rows {y + 1}/{self.height} ({100.0 * (y + 1) / self.height:.0f}%)")

        if self.verbose:
            print(f"Render finished in {time.perf_counter() - start:.2f}s")
        return canvas
