# geometry/plane.py
from typing import Optional
from raytracer.core.vector import Vector3
from raytracer.core.ray import Ray
from raytracer.core.uv import UV
from raytracer.geometry.primitive import Primitive, Intersection

PARALLEL_EPSILON = 1e-6

class Plane(Primitive):
    """
    A finite rectangular patch centered on `position` and spanned by the
    `x_axis` and `y_axis` directions, `width` units along X and `height`
    units along Y.

    The axes are normalized on construction and must not be (nearly)
    parallel. If the material carries a normal map, shading normals are
    read from it instead of using the flat geometric normal.
    """
    def __init__(self, position: Vector3, x_axis: Vector3, y_axis: Vector3,
                 width: float, height: float, material):
        super().__init__(material)
        if x_axis.length() == 0 or y_axis.length() == 0:
            raise ValueError("Plane axes must be non-zero vectors")
        if width <= 0 or height <= 0:
            raise ValueError(f"Plane size must be positive, got {width}x{height}")
        self.position = position
        self.x_axis = x_axis.normalize()
        self.y_axis = y_axis.normalize()
        if abs(self.x_axis.dot(self.y_axis)) > 0.99:
            raise ValueError("Plane axes must be linearly independent")
        self.width = width
        self.height = height
        self.normal = self.y_axis.cross(self.x_axis).normalize()

    @classmethod
    def from_normal(cls, position: Vector3, normal: Vector3,
                    width: float, height: float, material) -> "Plane":
        """
        Builds a plane facing `normal`, picking an arbitrary in-plane basis.
        """
        n = normal.normalize()
        if n.length() == 0:
            raise ValueError("Plane normal must be a non-zero vector")
        helper = Vector3(0, 1, 0) if abs(n.y) < 0.9 else Vector3(1, 0, 0)
        x_axis = helper.cross(n).normalize()
        # Chosen so that cross(y_axis, x_axis) == n
        y_axis = x_axis.cross(n)
        return cls(position, x_axis, y_axis, width, height, material)

    def intersect(self, ray: Ray) -> Optional[Intersection]:
        denom = self.normal.dot(ray.direction)
        if abs(denom) < PARALLEL_EPSILON:
            return None

        t = (self.position - ray.origin).dot(self.normal) / denom
        if t < 0:
            return None

        point = ray.at(t)
        local = point - self.position
        px = local.dot(self.x_axis)
        py = local.dot(self.y_axis)
        if abs(px) > self.width / 2 or abs(py) > self.height / 2:
            return None

        uv = UV(px / self.width + 0.5, py / self.height + 0.5)
        return Intersection(point, self._shading_normal(ray, uv), t, self, uv)

    def _shading_normal(self, ray: Ray, uv: UV) -> Vector3:
        normal_map = self.material.normal_map
        normal = self.normal
        if normal_map is not None:
            c = normal_map.sample(uv)
            mapped = Vector3(c.r * 2 - 1, c.g * 2 - 1, c.b * 2 - 1).normalize()
            # A (0.5, 0.5, 0.5) texel has no direction; keep the flat normal there
            if mapped.length() > 0:
                normal = mapped
        return Intersection.face_normal(ray, normal)

    def __repr__(self) -> str:
        return (f"Plane(position={self.position!r}, x_axis={self.x_axis!r}, "
                f"y_axis={self.y_axis!r}, width={self.width}, height={self.height})")
