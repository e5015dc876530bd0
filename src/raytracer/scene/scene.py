# scene/scene.py
from typing import Iterable, List, Optional
from raytracer.geometry.primitive import Primitive
from raytracer.scene.light import Light, PointLight

class Scene:
    """
    An ordered list of primitives and a list of lights.

    Scenes are built up front and only read while a frame is rendering,
    so any number of render threads may share one.
    """
    def __init__(self, primitives: Optional[Iterable[Primitive]] = None,
                 lights: Optional[Iterable[Light]] = None):
        self.primitives: List[Primitive] = list(primitives or [])
        self.lights: List[Light] = list(lights or [])

    def add(self, obj: Primitive) -> "Scene":
        self.primitives.append(obj)
        return self

    def add_light(self, light: Light) -> "Scene":
        self.lights.append(light)
        return self

    @property
    def point_lights(self) -> List[PointLight]:
        return [light for light in self.lights if isinstance(light, PointLight)]

    def clear(self):
        self.primitives.clear()
        self.lights.clear()

    def __len__(self) -> int:
        return len(self.primitives)

    def __repr__(self) -> str:
        return f"Scene({len(self.primitives)} primitives, {len(self.lights)} lights)"
