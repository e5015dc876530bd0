"""
Recursive ray tracer: spheres and bounded planes, Phong shading with hard
shadows, mirror and glossy reflections, and textured materials, rendered
row-parallel into a packed-RGB surface.
"""
from raytracer.core import Vector3, UV, Ray, Color
from raytracer.geometry import Primitive, Intersection, Sphere, Plane
from raytracer.materials import Texture, SolidTexture, CheckerTexture, ImageTexture, Material, load_texture
from raytracer.scene import AMBIENT_LIGHT, Light, PointLight, DirectionalLight, SpotLight, Scene
from raytracer.camera import Camera
from raytracer.config import RenderSettings
from raytracer.renderer import Tracer, Renderer, Surface, DebugRay, DebugRayCollector, RandomStreams

__version__ = "0.1.0"
