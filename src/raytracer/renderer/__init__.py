from .tracer import Tracer
from .raytracer import Renderer
from .surface import Surface
from .debug import DebugRay, DebugRayCollector
from .sampling import RandomStreams

__all__ = ["Tracer", "Renderer", "Surface", "DebugRay", "DebugRayCollector", "RandomStreams"]
