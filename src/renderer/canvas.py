# renderer/canvas.py
import os
from typing import List
import numpy as np
from numba import njit
from PIL import Image
from core.color import Color

PPM_MAX_LINE = 70


@njit
def quantize_kernel(linear_image, output_image):
    """
    Clamps each channel to [0, 1] and scales it to a rounded 8-bit value.
    This is the only place color values are bounded.
    """
    height, width, channels = linear_image.shape
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                v = linear_image[y, x, c]
                if v < 0.0:
                    v = 0.0
                elif v > 1.0:
                    v = 1.0
                output_image[y, x, c] = int(v * 255.0 + 0.5)


class Canvas:
    """
    A width x height grid of linear RGB values, stored as a (height, width, 3)
    float64 array and initialised to black.
    """
    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.float64)

    def _check_bounds(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height} canvas")

    def write_pixel(self, x: int, y: int, color: Color):
        self._check_bounds(x, y)
        self.pixels[y, x, 0] = color.red
        self.pixels[y, x, 1] = color.green
        self.pixels[y, x, 2] = color.blue

    def pixel_at(self, x: int, y: int) -> Color:
        self._check_bounds(x, y)
        r, g, b = self.pixels[y, x]
        return Color(float(r), float(g), float(b))

    def to_rgb8(self) -> np.ndarray:
        output = np.empty((self.height, self.width, 3), dtype=np.uint8)
        quantize_kernel(self.pixels, output)
        return output

    def to_ppm(self) -> str:
        """
        Serializes the canvas as plain (P3) PPM text. Each pixel row is
        wrapped so that no line exceeds 70 characters.
        """
        lines: List[str] = ["P3", f"{self.width} {self.height}", "255"]
        rgb = self.to_rgb8()
        for y in range(self.height):
            current = ""
            for value in rgb[y].reshape(-1):
                token = str(int(value))
                if not current:
                    current = token
                elif len(current) + 1 + len(token) > PPM_MAX_LINE:
                    lines.append(current)
                    current = token
                else:
                    current += " " + token
            lines.append(current)
        return "\n".join(lines) + "\n"

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.to_rgb8())

    def save(self, path: str):
        """
        Writes the canvas to path. `.ppm` is written as P3 text, any other
        extension is handed to Pillow.
        """
        ext = os.path.splitext(path)[1].lower()
        if ext == ".ppm":
            with open(path, "w", encoding="ascii") as f:
                f.write(self.to_ppm())
        else:
            self.to_image().save(path)
