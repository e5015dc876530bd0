# renderer/surface.py
import numpy as np
from numba import njit
from PIL import Image

@njit
def unpack_pixels(pixels, out):
    """Splits packed 0xRRGGBB pixels (h, w) into 8-bit channels (h, w, 3)."""
    height, width = pixels.shape
    for y in range(height):
        for x in range(width):
            c = pixels[y, x]
            out[y, x, 0] = (c >> 16) & 0xFF
            out[y, x, 1] = (c >> 8) & 0xFF
            out[y, x, 2] = c & 0xFF

class Surface:
    """
    Destination pixel buffer of packed 0xRRGGBB integers, row 0 at the top.
    """
    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Surface size must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width), dtype=np.int32)

    def plot(self, x: int, y: int, color: int):
        """Writes one pixel; coordinates outside the surface are ignored."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y, x] = color

    def get(self, x: int, y: int) -> int:
        return int(self.pixels[y, x])

    def clear(self, color: int = 0):
        self.pixels.fill(color)

    def to_rgb(self) -> np.ndarray:
        """Returns the image as a (height, width, 3) uint8 array."""
        out = np.empty((self.height, self.width, 3), dtype=np.uint8)
        unpack_pixels(self.pixels, out)
        return out

    def save(self, path: str):
        Image.fromarray(self.to_rgb()).save(path)

    def __repr__(self) -> str:
        return f"Surface({self.width}x{self.height})"
