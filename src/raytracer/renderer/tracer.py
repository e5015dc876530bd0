# renderer/tracer.py
"""
Recursive Whitted-style shading.

For every hit the tracer sums Phong diffuse and specular terms from each
unoccluded point light (with inverse-square falloff and hard shadows), adds
mirror or glossy reflections traced recursively, then the ambient term, and
finally scales by the material's gamma.
"""
from typing import Callable, Optional, Tuple
import numpy as np
from raytracer.config import RenderSettings
from raytracer.core.color import Color
from raytracer.core.ray import Ray
from raytracer.core.utils import reflect, perturb_reflection
from raytracer.geometry.primitive import Intersection, Primitive
from raytracer.renderer.debug import DebugRay
from raytracer.renderer.sampling import RandomStreams

# Length of the segment reported for debug rays that hit nothing
DEBUG_MISS_LENGTH = 100.0

class Tracer:
    """
    Computes the color seen along a ray in a Scene.

    Instances only read the scene, so one tracer can serve every render
    thread; glossy sampling draws from the calling thread's own generator.
    """
    def __init__(self, scene, settings: Optional[RenderSettings] = None,
                 random_streams: Optional[RandomStreams] = None,
                 debug_sink: Optional[Callable[[DebugRay], None]] = None):
        self.scene = scene
        self.settings = settings if settings is not None else RenderSettings()
        self.random_streams = random_streams if random_streams is not None else RandomStreams(self.settings.seed)
        self.debug_sink = debug_sink

    def trace(self, ray: Ray) -> Optional[Intersection]:
        """Nearest intersection over all primitives (linear scan), or None."""
        closest = None
        for primitive in self.scene.primitives:
            hit = primitive.intersect(ray)
            if hit is not None and (closest is None or hit.distance < closest.distance):
                closest = hit
        return closest

    def trace_color(self, ray: Ray, depth: int, ignore: Tuple[Primitive, ...] = (),
                    debug: bool = False, rng: Optional[np.random.Generator] = None) -> Color:
        """
        Color seen along `ray`, following at most `depth` bounces.

        `ignore` lists primitives a ray must not shade off; reflection rays
        extend it with the surface they leave. With `debug` set, every traced
        segment is reported to the debug sink. Glossy samples draw from `rng`,
        or from the calling thread's own generator when it is omitted.
        """
        return self._shade(ray, depth, ignore, debug and self.debug_sink is not None, "camera", rng)

    def _shade(self, ray: Ray, depth: int, ignore: Tuple[Primitive, ...],
               debug: bool, kind: str, rng: Optional[np.random.Generator]) -> Color:
        if depth <= 0:
            return Color.BLACK

        hit = self.trace(ray)
        if debug:
            end = hit.point if hit is not None else ray.at(DEBUG_MISS_LENGTH)
            self.debug_sink(DebugRay(ray.origin, end, kind))
        if hit is None:
            return self.settings.sky_color
        if any(hit.primitive is p for p in ignore):
            return Color.BLACK

        material = hit.primitive.material
        diffuse, specular = self._direct_lighting(ray, hit, debug)

        if material.reflectivity > 0:
            reflect_color = self._reflection(ray, hit, depth, ignore + (hit.primitive,), debug, rng)
            specular = specular + reflect_color * material.reflectivity

        ambient = material.ambient.sample(hit.uv) * self.settings.ambient_light
        return (ambient + diffuse + specular) * material.gamma

    def _direct_lighting(self, ray: Ray, hit: Intersection, debug: bool) -> Tuple[Color, Color]:
        material = hit.primitive.material
        diffuse = Color.BLACK
        specular = Color.BLACK
        point = hit.point
        normal = hit.normal
        view_dir = (ray.origin - point).normalize()

        for light in self.scene.point_lights:
            to_light = light.position - point
            distance_sq = to_light.length_squared()
            # A light sitting on the surface has no direction to it
            if distance_sq == 0:
                continue
            distance = distance_sq ** 0.5
            light_dir = to_light.normalize()
            attenuation = 1.0 / (distance_sq * self.settings.attenuation_constant)

            # Hard shadow: anything between the point and the light blocks it entirely
            shadow_ray = Ray(point + light_dir * self.settings.epsilon, light_dir)
            blocker = self.trace(shadow_ray)
            if debug:
                end = blocker.point if blocker is not None and blocker.distance < distance else light.position
                self.debug_sink(DebugRay(shadow_ray.origin, end, "shadow"))
            if blocker is not None and blocker.distance < distance:
                continue

            angle_factor = max(light_dir.dot(normal), 0.0)
            diffuse = diffuse + material.diffuse.sample(hit.uv) * light.color * angle_factor * attenuation

            reflect_dir = reflect(-light_dir, normal)
            spec_angle = max(reflect_dir.dot(view_dir), 0.0)
            specular = specular + (material.specular.sample(hit.uv) * light.color
                                   * (spec_angle ** material.shininess) * attenuation)

        return diffuse, specular

    def _reflection(self, ray: Ray, hit: Intersection, depth: int,
                    ignore: Tuple[Primitive, ...], debug: bool,
                    rng: Optional[np.random.Generator]) -> Color:
        material = hit.primitive.material
        mirror_dir = reflect(ray.direction, hit.normal).normalize()
        eps = self.settings.epsilon

        if material.gloss <= 0:
            bounce = Ray(hit.point + mirror_dir * eps, mirror_dir)
            return self._shade(bounce, depth - 1, ignore, debug, "reflection", rng)

        if rng is None:
            rng = self.random_streams.get()
        samples = []
        for _ in range(self.settings.gloss_samples):
            direction = perturb_reflection(mirror_dir, material.gloss, rng, self.settings.gloss_cutoff)
            bounce = Ray(hit.point + direction * eps, direction)
            samples.append(self._shade(bounce, depth - 1, ignore, debug, "reflection", rng))
        return Color.average(samples)
