"""
Shared scene fixtures for the tracer and renderer tests.
"""
import pytest

from raytracer.config import RenderSettings
from raytracer.core.color import Color
from raytracer.core.vector import Vector3
from raytracer.geometry.plane import Plane
from raytracer.geometry.sphere import Sphere
from raytracer.materials.material import Material
from raytracer.scene.light import PointLight
from raytracer.scene.scene import Scene


@pytest.fixture
def matte():
    """Grey Phong material without reflections."""
    grey = Color(0.5, 0.5, 0.5)
    return Material(grey, grey, Color(0.1, 0.1, 0.1), 2.0)


@pytest.fixture
def perfect_mirror():
    """Reflects everything and contributes nothing else."""
    return Material(Color.BLACK, Color.BLACK, Color.BLACK, 1.0, reflectivity=1.0)


@pytest.fixture
def floor(matte):
    """20x20 floor at y=0 facing +Y."""
    return Plane(Vector3(0, 0, 0), Vector3(1, 0, 0), Vector3(0, 0, 1), 20, 20, matte)


@pytest.fixture
def occluder(matte):
    return Sphere(Vector3(0, 5, 0), 1, matte)


@pytest.fixture
def overhead_light():
    return PointLight(Vector3(0, 10, 0), Color.WHITE)


@pytest.fixture
def lit_floor_scene(floor, overhead_light):
    return Scene([floor], [overhead_light])


@pytest.fixture
def shadowed_floor_scene(floor, occluder, overhead_light):
    return Scene([floor, occluder], [overhead_light])


@pytest.fixture
def settings():
    return RenderSettings(workers=1, seed=1234)
