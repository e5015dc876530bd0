# core/color.py
from typing import Iterable

class Color:
    """
    An RGB color with normalized float channels.

    Channels are conceptually in [0, 1]. Component-wise multiplication and
    interpolation may leave that range; scaling by a scalar and addition clamp
    every channel to at most 1.
    """
    def __init__(self, r: float, g: float, b: float):
        self.r = r
        self.g = g
        self.b = b

    @classmethod
    def from_rgb255(cls, r: int, g: int, b: int) -> "Color":
        return cls(r / 255.0, g / 255.0, b / 255.0)

    @classmethod
    def from_int(cls, value: int) -> "Color":
        """
        Inverse of to_int(): unpacks a 0xRRGGBB integer.
        """
        return cls.from_rgb255((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    def to_int(self) -> int:
        """
        Packs the color into the lower three bytes of an integer, red being
        the most significant and blue the least significant byte.
        """
        r = _to_byte(self.r)
        g = _to_byte(self.g)
        b = _to_byte(self.b)
        return (r << 16) | (g << 8) | b

    def __mul__(self, other):
        if isinstance(other, (int, float)):
            return Color(min(self.r * other, 1.0),
                         min(self.g * other, 1.0),
                         min(self.b * other, 1.0))
        return Color(self.r * other.r, self.g * other.g, self.b * other.b)

    def __rmul__(self, other: float) -> "Color":
        return self.__mul__(other)

    def __add__(self, other: "Color") -> "Color":
        return Color(min(self.r + other.r, 1.0),
                     min(self.g + other.g, 1.0),
                     min(self.b + other.b, 1.0))

    @staticmethod
    def lerp(a: "Color", b: "Color", t: float) -> "Color":
        return Color(a.r + (b.r - a.r) * t,
                     a.g + (b.g - a.g) * t,
                     a.b + (b.b - a.b) * t)

    @staticmethod
    def average(colors: Iterable["Color"]) -> "Color":
        # Summed without clamping so bright samples are not cut off before dividing.
        r = g = b = 0.0
        n = 0
        for c in colors:
            r += c.r
            g += c.g
            b += c.b
            n += 1
        if n == 0:
            return Color(0.0, 0.0, 0.0)
        return Color(r / n, g / n, b / n)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.r == other.r and self.g == other.g and self.b == other.b

    def __hash__(self) -> int:
        return hash((self.r, self.g, self.b))

    def __iter__(self):
        return iter((self.r, self.g, self.b))

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b})"


def _to_byte(channel: float) -> int:
    return max(0, min(255, int(round(channel * 255))))


Color.BLACK = Color(0.0, 0.0, 0.0)
Color.WHITE = Color(1.0, 1.0, 1.0)
Color.RED = Color(1.0, 0.0, 0.0)
Color.GREEN = Color(0.0, 1.0, 0.0)
Color.BLUE = Color(0.0, 0.0, 1.0)
Color.SKY_BLUE = Color.from_rgb255(135, 206, 235)
