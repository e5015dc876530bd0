# geometry/primitive.py
from typing import Optional
from raytracer.core.vector import Vector3
from raytracer.core.ray import Ray
from raytracer.core.uv import UV

class Intersection:
    """
    Records details of a ray-primitive intersection.
    """
    def __init__(self, point: Vector3, normal: Vector3, distance: float,
                 primitive: "Primitive", uv: UV):
        self.point = point          # Intersection point
        self.normal = normal        # Unit surface normal, facing the incoming ray
        self.distance = distance    # Ray parameter at intersection (>= 0)
        self.primitive = primitive  # Primitive that was hit
        self.uv = uv                # Texture coordinates at the hit point

    @staticmethod
    def face_normal(ray: Ray, outward_normal: Vector3) -> Vector3:
        """
        Ensures that the normal always points against the ray.
        """
        if ray.direction.dot(outward_normal) < 0:
            return outward_normal
        return -outward_normal

    def __repr__(self) -> str:
        return (f"Intersection(point={self.point!r}, normal={self.normal!r}, "
                f"distance={self.distance}, primitive={self.primitive!r})")

class Primitive:
    """
    Abstract class for shapes that can be hit by a ray. Every primitive owns
    the material it is shaded with.
    """
    def __init__(self, material):
        self.material = material

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        """
        Returns the nearest intersection of `ray` with this primitive at a
        non-negative distance, or None on a miss.
        """
        raise NotImplementedError("intersect() must be implemented by subclasses.")
