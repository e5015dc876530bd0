# camera/camera.py
import math
from typing import Tuple
from raytracer.core.vector import Vector3
from raytracer.core.ray import Ray

class Camera:
    """
    Pinhole camera looking along `target` (a direction, not a look-at point).

    The right vector is derived from `up` and `target` whenever it is needed.
    move() and rotate() return new cameras, so a frame in flight keeps a
    consistent view.
    """
    def __init__(self, position: Vector3, target: Vector3, up: Vector3,
                 resolution: Tuple[int, int], focal_length: float = 1.0):
        width, height = resolution
        if width < 1 or height < 1:
            raise ValueError(f"Camera resolution must be at least 1x1, got {width}x{height}")
        self.position = position
        self.target = target
        self.up = up
        self.resolution = (int(width), int(height))
        self.focal_length = focal_length

    @classmethod
    def from_fov(cls, resolution: Tuple[int, int], fov: float = 90.0,
                 position: Vector3 = None, target: Vector3 = None,
                 up: Vector3 = None) -> "Camera":
        """Camera at the origin looking down +Z with +Y up unless told otherwise."""
        return cls(position if position is not None else Vector3(0, 0, 0),
                   target if target is not None else Vector3(0, 0, 1),
                   up if up is not None else Vector3(0, 1, 0),
                   resolution,
                   cls.focal_length_for_fov(fov))

    @staticmethod
    def focal_length_for_fov(fov: float) -> float:
        """Focal length giving a horizontal-unit field of view of `fov` degrees."""
        if not 0 < fov < 180:
            raise ValueError(f"Field of view must be in (0, 180) degrees, got {fov}")
        return 1.0 / math.tan(fov * math.pi / 360)

    def set_fov(self, fov: float):
        self.focal_length = self.focal_length_for_fov(fov)

    @property
    def width(self) -> int:
        return self.resolution[0]

    @property
    def height(self) -> int:
        return self.resolution[1]

    @property
    def right(self) -> Vector3:
        return self.up.cross(self.target).normalize()

    def get_ray(self, x: int, y: int) -> Ray:
        """Generates the primary ray through pixel column x, row y."""
        width, height = self.resolution
        if not (0 <= x < width and 0 <= y < height):
            raise ValueError(f"Pixel ({x}, {y}) outside of {width}x{height} resolution")

        dx = _ndc(x, width) * (width / height)
        # Row 0 is the top of the image, so the vertical axis is flipped
        dy = -_ndc(y, height)
        direction = self.target * self.focal_length + self.right * dx + self.up * dy
        return Ray(self.position, direction)

    def move(self, delta: Vector3) -> "Camera":
        """Returns a copy of this camera translated by `delta`."""
        return Camera(self.position + delta, self.target, self.up,
                      self.resolution, self.focal_length)

    def rotate(self, axis: Vector3, degrees: float) -> "Camera":
        """
        Returns a copy with target and up rotated about `axis` by a signed
        angle in degrees. Both vectors get the same rotation; keeping them
        orthogonal is up to the choice of axis.
        """
        return Camera(self.position, self.target.rotate(axis, degrees),
                      self.up.rotate(axis, degrees), self.resolution, self.focal_length)

    def __repr__(self) -> str:
        return (f"Camera(position={self.position!r}, target={self.target!r}, up={self.up!r}, "
                f"resolution={self.resolution}, focal_length={self.focal_length})")

def _ndc(i: int, size: int) -> float:
    """Maps a pixel index to [-0.5, 0.5]; a single-pixel axis maps to 0."""
    if size == 1:
        return 0.0
    return i / (size - 1) - 0.5
