# scene/light.py
from raytracer.core.color import Color
from raytracer.core.vector import Vector3

# Applied to every surface regardless of how many lights the scene holds
AMBIENT_LIGHT = Color(0.2, 0.2, 0.2)

class Light:
    """
    Base class for light sources. The color doubles as the intensity.
    """
    def __init__(self, color: Color):
        self.color = color

class PointLight(Light):
    """
    Represents a point light source at the given position with the given color.
    This is the only light type the tracer shades with.
    """
    def __init__(self, position: Vector3, color: Color):
        super().__init__(color)
        self.position = position

    def __repr__(self) -> str:
        return f"PointLight({self.position!r}, {self.color!r})"

class DirectionalLight(Light):
    def __init__(self, direction: Vector3, color: Color):
        super().__init__(color)
        self.direction = direction.normalize()

class SpotLight(Light):
    def __init__(self, position: Vector3, direction: Vector3, angle: float, color: Color):
        super().__init__(color)
        self.position = position
        self.direction = direction.normalize()
        self.angle = angle
