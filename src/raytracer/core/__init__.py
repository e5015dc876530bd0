from .vector import Vector3
from .uv import UV
from .ray import Ray
from .color import Color

__all__ = ["Vector3", "UV", "Ray", "Color"]
