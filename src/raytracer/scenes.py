# scenes.py
"""
Demo scenes used by the viewer.
"""
from raytracer.core.color import Color
from raytracer.core.vector import Vector3
from raytracer.geometry.plane import Plane
from raytracer.geometry.sphere import Sphere
from raytracer.materials.material import Material
from raytracer.materials.presets import ColorPresets, MaterialPresets
from raytracer.scene.light import PointLight
from raytracer.scene.scene import Scene

def mirror_spheres() -> Scene:
    """Mirror, matte and glossy spheres on a checkered floor, lit by two point lights."""
    scene = Scene()
    scene.add(Sphere(Vector3(0, 0, 5), 1, MaterialPresets.mirror()))
    scene.add(Sphere(Vector3(2.5, 0, 5), 1, MaterialPresets.default()))
    scene.add(Sphere(Vector3(-2.5, 0, 5), 1, MaterialPresets.brushed_metal()))
    scene.add(Sphere(Vector3(1.2, -0.6, 3), 0.4, MaterialPresets.plastic(ColorPresets.RED)))
    scene.add(Plane.from_normal(Vector3(0, -1, 5), Vector3(0, 1, 0), 10, 10,
                                MaterialPresets.checkerboard(cell_size=0.1)))
    scene.add(Plane(Vector3(0, 2, 10), Vector3(1, 0, 0), Vector3(0, 1, 0), 10, 6,
                    Material(ColorPresets.BLUE, ColorPresets.BLUE, Color(0.1, 0.1, 0.1), 2.0)))

    scene.add_light(PointLight(Vector3(2, 5, 1), Color.from_rgb255(170, 170, 170)))
    scene.add_light(PointLight(Vector3(-2, 5, 1), Color.from_rgb255(120, 120, 140)))
    return scene

def empty() -> Scene:
    return Scene()

SCENES = {
    "mirror_spheres": mirror_spheres,
    "empty": empty,
}
