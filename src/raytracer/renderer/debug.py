# renderer/debug.py
import threading
from typing import List
from raytracer.core.vector import Vector3

class DebugRay:
    """
    One traced segment, for visualizing how a pixel was shaded.
    `kind` is "camera", "shadow" or "reflection".
    """
    def __init__(self, origin: Vector3, end: Vector3, kind: str):
        self.origin = origin
        self.end = end
        self.kind = kind

    def __repr__(self) -> str:
        return f"DebugRay({self.kind}, {self.origin!r} -> {self.end!r})"

class DebugRayCollector:
    """
    Thread-safe sink for DebugRay records. Pass an instance as the tracer's
    `debug_sink`; several render threads may report at once.
    """
    def __init__(self):
        self._rays: List[DebugRay] = []
        self._lock = threading.Lock()

    def __call__(self, ray: DebugRay):
        with self._lock:
            self._rays.append(ray)

    def snapshot(self) -> List[DebugRay]:
        with self._lock:
            return list(self._rays)

    def clear(self):
        with self._lock:
            self._rays.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._rays)
