from .light import AMBIENT_LIGHT, Light, PointLight, DirectionalLight, SpotLight
from .scene import Scene

__all__ = ["AMBIENT_LIGHT", "Light", "PointLight", "DirectionalLight", "SpotLight", "Scene"]
