# geometry/sphere.py
import math
from typing import Optional
from raytracer.core.vector import Vector3
from raytracer.core.ray import Ray
from raytracer.core.uv import UV
from raytracer.geometry.primitive import Primitive, Intersection

class Sphere(Primitive):
    """
    Represents a sphere defined by its center, radius, and material.
    """
    def __init__(self, center: Vector3, radius: float, material):
        if radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {radius}")
        super().__init__(material)
        self.center = center
        self.radius = radius

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        oc = ray.origin - self.center
        a = ray.direction.dot(ray.direction)
        half_b = oc.dot(ray.direction)
        c = oc.dot(oc) - self.radius * self.radius
        discriminant = half_b * half_b - a * c

        if discriminant < 0:
            return None

        sqrt_disc = math.sqrt(discriminant)
        # Prefer the entry point; fall back to the exit point when the origin is inside
        root = (-half_b - sqrt_disc) / a
        if root < 0:
            root = (-half_b + sqrt_disc) / a
            if root < 0:
                return None

        point = ray.at(root)
        outward_normal = (point - self.center).normalize()
        return Intersection(point,
                            Intersection.face_normal(ray, outward_normal),
                            root,
                            self,
                            self.uv_at(outward_normal))

    @staticmethod
    def uv_at(outward_normal: Vector3) -> UV:
        """
        Spherical mapping of a point on the unit sphere to texture space.
        """
        theta = math.acos(max(-1.0, min(1.0, -outward_normal.y)))
        phi = math.atan2(-outward_normal.z, outward_normal.x) + math.pi
        return UV(phi / (2 * math.pi), theta / math.pi)

    def __repr__(self) -> str:
        return f"Sphere(center={self.center!r}, radius={self.radius})"
