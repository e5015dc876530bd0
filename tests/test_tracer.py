import threading

import numpy as np
import pytest

from raytracer.camera.camera import Camera
from raytracer.config import RenderSettings
from raytracer.core.color import Color
from raytracer.core.ray import Ray
from raytracer.core.vector import Vector3
from raytracer.geometry.sphere import Sphere
from raytracer.materials.material import Material
from raytracer.renderer.debug import DebugRayCollector
from raytracer.renderer.sampling import RandomStreams
from raytracer.renderer.tracer import Tracer
from raytracer.scene.light import DirectionalLight, PointLight
from raytracer.scene.scene import Scene


def rgb(color):
    return (color.r, color.g, color.b)


def floor_ray():
    """Grazing ray that lands on the floor at the origin, well below the occluder."""
    return Ray(Vector3(0, 0.5, -5), Vector3(0, -0.5, 5))


def test_depth_zero_is_black(shadowed_floor_scene, settings):
    tracer = Tracer(shadowed_floor_scene, settings)
    assert tracer.trace_color(floor_ray(), 0) == Color.BLACK
    assert Tracer(Scene(), settings).trace_color(floor_ray(), 0) == Color.BLACK


def test_miss_returns_sky(settings):
    tracer = Tracer(Scene(), settings)
    ray = Ray(Vector3(0, 0, 0), Vector3(0.3, 0.2, 1))
    assert tracer.trace(ray) is None
    assert tracer.trace_color(ray, 5) == Color.SKY_BLUE


def test_trace_returns_nearest_of_overlapping_spheres(matte, settings):
    near = Sphere(Vector3(0, 0, 5), 2, matte)
    far = Sphere(Vector3(0, 0, 8), 2, matte)
    ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, 1))
    for primitives in ([near, far], [far, near]):
        hit = Tracer(Scene(primitives), settings).trace(ray)
        assert hit.primitive is near
        assert hit.distance == pytest.approx(3.0)


def test_center_pixel_hits_unit_sphere(matte, settings):
    camera = Camera.from_fov((101, 101), fov=90)
    sphere = Sphere(Vector3(0, 0, 5), 1, matte)
    hit = Tracer(Scene([sphere]), settings).trace(camera.get_ray(50, 50))
    assert hit.primitive is sphere
    assert hit.distance == pytest.approx(4.0)
    assert (hit.normal.x, hit.normal.y, hit.normal.z) == pytest.approx((0, 0, -1))


def test_occluded_light_contributes_nothing(shadowed_floor_scene, settings):
    color = Tracer(shadowed_floor_scene, settings).trace_color(floor_ray(), 5)
    # Only the ambient term remains: 0.5 * 0.2
    assert rgb(color) == pytest.approx((0.1, 0.1, 0.1))


def test_unoccluded_light_adds_diffuse(lit_floor_scene, settings):
    color = Tracer(lit_floor_scene, settings).trace_color(floor_ray(), 5)
    # ambient 0.1 + diffuse 0.5 * 1 / (10^2 * 0.03)
    assert color.r == pytest.approx(0.1 + 0.5 / 3, abs=1e-3)
    assert color.r > 0.25


def test_non_point_lights_are_not_shaded(floor, settings):
    scene = Scene([floor], [DirectionalLight(Vector3(0, -1, 0), Color.WHITE)])
    color = Tracer(scene, settings).trace_color(floor_ray(), 5)
    assert rgb(color) == pytest.approx((0.1, 0.1, 0.1))


def test_gamma_scales_final_color(floor, settings):
    floor.material = Material(Color(0.5, 0.5, 0.5), Color.BLACK, Color.BLACK, 2.0, gamma=0.5)
    color = Tracer(Scene([floor]), settings).trace_color(floor_ray(), 5)
    assert rgb(color) == pytest.approx((0.05, 0.05, 0.05))


def test_non_glossy_tracing_is_deterministic(shadowed_floor_scene, perfect_mirror, matte, settings):
    shadowed_floor_scene.add(Sphere(Vector3(1, 1, 2), 1, perfect_mirror))
    shadowed_floor_scene.add_light(PointLight(Vector3(-3, 4, -2), Color(0.6, 0.5, 0.4)))
    tracer = Tracer(shadowed_floor_scene, settings)
    camera = Camera(Vector3(0, 2, -6), Vector3(0, -0.2, 1).normalize(), Vector3(0, 1, 0), (9, 7))
    for y in range(7):
        for x in range(9):
            ray = camera.get_ray(x, y)
            assert tracer.trace_color(ray, 5) == tracer.trace_color(ray, 5)


def test_ignored_primitive_shades_black(matte, settings):
    sphere = Sphere(Vector3(0, 0, 5), 1, matte)
    tracer = Tracer(Scene([sphere]), settings)
    ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, 1))
    assert tracer.trace_color(ray, 3, ignore=(sphere,)) == Color.BLACK
    assert tracer.trace_color(ray, 3) != Color.BLACK


def test_mirror_reflects_sky_until_depth_runs_out(perfect_mirror, settings):
    tracer = Tracer(Scene([Sphere(Vector3(0, 0, 5), 1, perfect_mirror)]), settings)
    ray = Ray(Vector3(0, 0, 0), Vector3(0, 0, 1))
    assert rgb(tracer.trace_color(ray, 2)) == pytest.approx(rgb(Color.SKY_BLUE))
    # The reflected ray would need a second level of recursion
    assert tracer.trace_color(ray, 1) == Color.BLACK


def test_mirror_sees_lit_object(perfect_mirror, matte, settings):
    mirror = Sphere(Vector3(0, 0, 5), 1, perfect_mirror)
    # Directly behind the camera, visible only in the mirror
    red = Material(Color.RED, Color.RED, Color.BLACK, 2.0)
    behind = Sphere(Vector3(0, 0, -5), 1, red)
    tracer = Tracer(Scene([mirror, behind]), settings)
    color = tracer.trace_color(Ray(Vector3(0, 0, 0), Vector3(0, 0, 1)), 5)
    assert rgb(color) == pytest.approx((0.2, 0.0, 0.0))


def test_glossy_reflection_averages_samples(settings):
    glossy = Material(Color.BLACK, Color.BLACK, Color.BLACK, 1.0, reflectivity=1.0, gloss=0.3)
    tracer = Tracer(Scene([Sphere(Vector3(0, 0, 5), 1, glossy)]), settings)
    color = tracer.trace_color(Ray(Vector3(0, 0, 0), Vector3(0, 0, 1)), 3)
    # Every perturbed sample escapes a lone convex sphere and sees the sky
    assert rgb(color) == pytest.approx(rgb(Color.SKY_BLUE))


def test_glossy_reflection_reproducible_with_seed(matte):
    glossy = Material(Color.BLACK, Color.BLACK, Color.BLACK, 1.0, reflectivity=1.0, gloss=0.8)
    ball = Sphere(Vector3(0, 0, 5), 1, glossy)
    neighbours = [Sphere(Vector3(x, 0, 5), 0.9, matte) for x in (-2.2, 2.2)]
    scene = Scene([ball] + neighbours, [PointLight(Vector3(0, 5, 0), Color.WHITE)])
    ray = Ray(Vector3(0, 0, 0), Vector3(0.15, 0, 1))

    first = Tracer(scene, RenderSettings(workers=1, seed=42)).trace_color(ray, 3)
    second = Tracer(scene, RenderSettings(workers=1, seed=42)).trace_color(ray, 3)
    assert first == second


def test_random_streams_are_per_thread():
    streams = RandomStreams(seed=3)
    mine = streams.get()
    assert streams.get() is mine

    others = []
    thread = threading.Thread(target=lambda: others.append(streams.get()))
    thread.start()
    thread.join()
    assert others[0] is not mine

    assert RandomStreams(seed=3).get().uniform() == RandomStreams(seed=3).get().uniform()


def test_debug_rays_reported_only_on_request(lit_floor_scene, settings):
    sink = DebugRayCollector()
    tracer = Tracer(lit_floor_scene, settings, debug_sink=sink)
    tracer.trace_color(floor_ray(), 5)
    assert len(sink) == 0

    tracer.trace_color(floor_ray(), 5, debug=True)
    kinds = [ray.kind for ray in sink.snapshot()]
    assert kinds == ["camera", "shadow"]
    shadow = sink.snapshot()[1]
    assert (shadow.end.x, shadow.end.y, shadow.end.z) == (0, 10, 0)

    sink.clear()
    assert len(sink) == 0


def test_debug_records_reflections(perfect_mirror, settings):
    sink = DebugRayCollector()
    tracer = Tracer(Scene([Sphere(Vector3(0, 0, 5), 1, perfect_mirror)]), settings, debug_sink=sink)
    tracer.trace_color(Ray(Vector3(0, 0, 0), Vector3(0, 0, 1)), 5, debug=True)
    assert [ray.kind for ray in sink.snapshot()] == ["camera", "reflection"]


def test_light_on_hit_point_is_skipped(floor, settings):
    scene = Scene([floor], [PointLight(Vector3(0, 0, 0), Color.WHITE)])
    color = Tracer(scene, settings).trace_color(floor_ray(), 5)
    assert rgb(color) == pytest.approx((0.1, 0.1, 0.1))


def test_explicit_generator_makes_glossy_ray_reproducible(matte, settings):
    glossy = Material(Color.BLACK, Color.BLACK, Color.BLACK, 1.0, reflectivity=1.0, gloss=0.8)
    neighbours = [Sphere(Vector3(x, 0, 5), 0.9, matte) for x in (-2.2, 2.2)]
    scene = Scene([Sphere(Vector3(0, 0, 5), 1, glossy)] + neighbours,
                  [PointLight(Vector3(0, 5, 0), Color.WHITE)])
    tracer = Tracer(scene, settings)
    ray = Ray(Vector3(0, 0, 0), Vector3(0.15, 0, 1))

    streams = RandomStreams(seed=11)
    first = tracer.trace_color(ray, 3, rng=streams.band(4))
    # Unrelated draws from the thread's own generator do not disturb the band stream
    tracer.trace_color(ray, 3)
    second = tracer.trace_color(ray, 3, rng=RandomStreams(seed=11).band(4))
    assert first == second


def test_band_streams_are_fixed_by_index():
    streams = RandomStreams(seed=5)
    later = streams.band(2).uniform(size=4)
    streams.band(0)
    assert np.array_equal(RandomStreams(seed=5).band(2).uniform(size=4), later)
    assert not np.array_equal(streams.band(1).uniform(size=4), later)
