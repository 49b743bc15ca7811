"""
Random sources for terrain generation.

Generation and rendering only need an object with a ``random()`` method
returning floats in [0, 1). ``random.Random`` instances satisfy this as-is;
``NumpyRandomSource`` wraps numpy's generator and ``ScriptedRandomSource``
replays fixed values for deterministic runs.
"""

from typing import Iterable, Optional, Protocol, Sequence

import numpy as np


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1)."""

    def random(self) -> float:
        ...


class NumpyRandomSource:
    """
    Random source backed by ``numpy.random.Generator``.

    Using the same seed reproduces the same terrain.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)
        self.call_count = 0

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        return float(self._rng.random())


class ScriptedRandomSource:
    """
    Replays a fixed sequence of values, wrapping around at the end.

    Values must lie in [0, 1) like any other random source.
    """

    def __init__(self, values: Iterable[float]):
        self.values: Sequence[float] = [float(v) for v in values]
        if not self.values:
            raise ValueError("ScriptedRandomSource needs at least one value")
        for value in self.values:
            if not 0.0 <= value < 1.0:
                raise ValueError(f"Scripted value out of range [0, 1): {value}")
        self.call_count = 0

    def random(self) -> float:
        value = self.values[self.call_count % len(self.values)]
        self.call_count += 1
        return value
