from .primitive import Primitive, Intersection
from .sphere import Sphere
from .plane import Plane

__all__ = ["Primitive", "Intersection", "Sphere", "Plane"]
