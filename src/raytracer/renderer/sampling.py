# renderer/sampling.py
import threading
from typing import Optional
import numpy as np

class RandomStreams:
    """
    Independent numpy Generators derived from one SeedSequence.

    band(k) always returns a fresh generator seeded from child k of the
    sequence, so a render band draws the same samples no matter which thread
    runs it. get() lazily hands each calling thread its own generator for
    tracing outside the render loop.
    """
    def __init__(self, seed: Optional[int] = None):
        self._seed_sequence = np.random.SeedSequence(seed)
        self._spawn_lock = threading.Lock()
        self._local = threading.local()

    def band(self, index: int) -> np.random.Generator:
        # Same child as the index-th SeedSequence.spawn(), without the shared counter
        child = np.random.SeedSequence(self._seed_sequence.entropy,
                                       spawn_key=self._seed_sequence.spawn_key + (index,))
        return np.random.default_rng(child)

    def get(self) -> np.random.Generator:
        rng = getattr(self._local, "rng", None)
        if rng is None:
            # SeedSequence.spawn() bumps an internal counter
            with self._spawn_lock:
                child = self._seed_sequence.spawn(1)[0]
            rng = np.random.default_rng(child)
            self._local.rng = rng
        return rng
