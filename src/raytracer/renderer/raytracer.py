# renderer/raytracer.py
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Tuple
import numpy as np
from raytracer.camera.camera import Camera
from raytracer.config import RenderSettings
from raytracer.renderer.debug import DebugRay
from raytracer.renderer.sampling import RandomStreams
from raytracer.renderer.surface import Surface
from raytracer.renderer.tracer import Tracer
from raytracer.utils.logger import logger

# More bands than workers so that a slow band does not stall the frame
BANDS_PER_WORKER = 4

def split_rows(height: int, bands: int) -> List[Tuple[int, int]]:
    """
    Splits rows [0, height) into at most `bands` contiguous (start, stop)
    ranges whose sizes differ by at most one row.
    """
    bands = max(1, min(bands, height))
    base, extra = divmod(height, bands)
    ranges = []
    start = 0
    for i in range(bands):
        stop = start + base + (1 if i < extra else 0)
        ranges.append((start, stop))
        start = stop
    return ranges

class Renderer:
    """
    Renders a Scene through a Camera into a Surface.

    Rows are split into bands that are traced on a thread pool. Bands never
    overlap, so workers write the surface without locking. A failure in any
    band fails the whole frame.
    """
    def __init__(self, scene, settings: Optional[RenderSettings] = None,
                 debug_sink: Optional[Callable[[DebugRay], None]] = None):
        self.scene = scene
        self.settings = settings if settings is not None else RenderSettings()
        self.debug_sink = debug_sink
        self.frame_number = 0

    def render(self, camera: Camera, surface: Optional[Surface] = None) -> Surface:
        width, height = camera.resolution
        if surface is None:
            surface = Surface(width, height)

        # Fresh streams each frame; band k always draws from stream k
        streams = RandomStreams(self.settings.seed)
        tracer = Tracer(self.scene, self.settings, streams, self.debug_sink)
        bands = split_rows(height, self.settings.workers * BANDS_PER_WORKER)
        logger.debug("Frame %d: %dx%d, %d primitives, %d bands on %d workers",
                     self.frame_number, width, height, len(self.scene.primitives),
                     len(bands), self.settings.workers)

        start_time = time.perf_counter()
        with ThreadPoolExecutor(max_workers=self.settings.workers,
                                thread_name_prefix="raytracer") as executor:
            futures = [executor.submit(self._render_rows, tracer, camera, surface,
                                       start, stop, streams.band(index))
                       for index, (start, stop) in enumerate(bands)]
            try:
                for future in futures:
                    future.result()
            except Exception:
                for future in futures:
                    future.cancel()
                logger.error("Frame %d failed", self.frame_number)
                raise

        elapsed = time.perf_counter() - start_time
        logger.info("Frame %d rendered in %.3fs", self.frame_number, elapsed)
        self.frame_number += 1
        return surface

    def _render_rows(self, tracer: Tracer, camera: Camera, surface: Surface,
                     start: int, stop: int, rng: np.random.Generator):
        width, height = camera.resolution
        max_depth = self.settings.max_depth
        debug_row = height // 2 if self.debug_sink is not None else -1
        stride = self.settings.debug_stride
        for y in range(start, stop):
            for x in range(width):
                ray = camera.get_ray(x, y)
                debug = y == debug_row and x % stride == 0
                color = tracer.trace_color(ray, max_depth, debug=debug, rng=rng)
                surface.plot(x, y, color.to_int())
