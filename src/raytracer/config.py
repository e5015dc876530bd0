# config.py
"""
Render settings and tuning constants.
"""
import os
from typing import Optional
from raytracer.core.color import Color
from raytracer.scene.light import AMBIENT_LIGHT

MAX_DEPTH = 5
# Offset applied to shadow and reflection ray origins along their direction.
# Sized for scenes measured in units of about one meter.
EPSILON = 0.001
# Scales inverse-square falloff: attenuation = 1 / (distance^2 * k)
ATTENUATION_CONSTANT = 0.03
GLOSS_SAMPLES = 8
# Glossy samples with dot(sample, mirror_direction) at or below this are redrawn
GLOSS_CUTOFF = 0.1
# Debug rays are collected for every n-th column of the middle row
DEBUG_STRIDE = 10

QUALITY_LEVELS = {
    "interactive": {"max_depth": 2, "gloss_samples": 2},
    "balanced": {"max_depth": MAX_DEPTH, "gloss_samples": GLOSS_SAMPLES},
    "high_quality": {"max_depth": 8, "gloss_samples": 32},
}

class RenderSettings:
    """
    Tunables shared by the tracer and the render loop.

    `workers` defaults to the CPU count. `seed` makes glossy sampling
    reproducible: every row band draws from its own stream, so the same seed
    and worker count give the same image whatever order the bands run in.
    """
    def __init__(self, max_depth: int = MAX_DEPTH, epsilon: float = EPSILON,
                 attenuation_constant: float = ATTENUATION_CONSTANT,
                 gloss_samples: int = GLOSS_SAMPLES, gloss_cutoff: float = GLOSS_CUTOFF,
                 sky_color: Color = Color.SKY_BLUE, ambient_light: Color = AMBIENT_LIGHT,
                 workers: Optional[int] = None, seed: Optional[int] = None,
                 debug_stride: int = DEBUG_STRIDE):
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        if gloss_samples < 1:
            raise ValueError(f"gloss_samples must be at least 1, got {gloss_samples}")
        if attenuation_constant <= 0:
            raise ValueError(f"attenuation_constant must be positive, got {attenuation_constant}")
        self.max_depth = max_depth
        self.epsilon = epsilon
        self.attenuation_constant = attenuation_constant
        self.gloss_samples = gloss_samples
        self.gloss_cutoff = gloss_cutoff
        self.sky_color = sky_color
        self.ambient_light = ambient_light
        self.workers = workers if workers is not None else (os.cpu_count() or 1)
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")
        self.seed = seed
        self.debug_stride = max(1, debug_stride)

    @classmethod
    def from_quality(cls, name: str, **overrides) -> "RenderSettings":
        if name not in QUALITY_LEVELS:
            raise ValueError(f"Unknown quality level {name!r}, expected one of {sorted(QUALITY_LEVELS)}")
        params = dict(QUALITY_LEVELS[name])
        params.update(overrides)
        return cls(**params)

    def __repr__(self) -> str:
        return (f"RenderSettings(max_depth={self.max_depth}, epsilon={self.epsilon}, "
                f"gloss_samples={self.gloss_samples}, workers={self.workers}, seed={self.seed})")
