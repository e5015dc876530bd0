# materials/textures.py
import math
import numpy as np
from raytracer.core.color import Color
from raytracer.core.uv import UV

class Texture:
    """Base class for all textures."""
    def sample(self, uv: UV) -> Color:
        """Sample the texture at given UV coordinates."""
        raise NotImplementedError("sample() must be implemented by texture subclasses.")

class SolidTexture(Texture):
    """A solid color texture."""
    def __init__(self, color: Color):
        self.color = color

    def sample(self, uv: UV) -> Color:
        return self.color

    def __repr__(self) -> str:
        return f"SolidTexture({self.color!r})"

class CheckerTexture(Texture):
    """
    A checker pattern of square cells, `cell_size` wide in UV units,
    alternating between two colors.
    """
    def __init__(self, color1: Color, color2: Color, cell_size: float = 0.1):
        if cell_size <= 0:
            raise ValueError(f"Checker cell size must be positive, got {cell_size}")
        self.color1 = color1
        self.color2 = color2
        self.cell_size = cell_size

    def sample(self, uv: UV) -> Color:
        x = math.floor(uv.u / self.cell_size)
        y = math.floor(uv.v / self.cell_size)
        is_even = (x + y) % 2 == 0
        return self.color1 if is_even else self.color2

class ImageTexture(Texture):
    """
    A texture backed by decoded pixel data: a (height, width, 3) array of
    floats in [0, 1], row 0 being the top of the image.

    Sampling is nearest-pixel with u and v clamped into [0, 1]; v runs from
    the bottom row (v=0) to the top row (v=1).
    """
    def __init__(self, data):
        data = np.asarray(data, dtype=np.float64)
        if data.ndim != 3 or data.shape[2] != 3 or data.shape[0] == 0 or data.shape[1] == 0:
            raise ValueError(f"Image data must have shape (height, width, 3), got {data.shape}")
        self.data = data
        self.height = data.shape[0]
        self.width = data.shape[1]

    def sample(self, uv: UV) -> Color:
        u = min(max(uv.u, 0.0), 1.0)
        v = min(max(uv.v, 0.0), 1.0)

        # Convert to pixel coordinates, flipping v so that row 0 is the top
        x = int(round(u * (self.width - 1)))
        y = int(round((1.0 - v) * (self.height - 1)))

        color = self.data[y, x]
        return Color(float(color[0]), float(color[1]), float(color[2]))

    def __repr__(self) -> str:
        return f"ImageTexture({self.width}x{self.height})"
