"""Noise sources for the survival score.

The score carries a small random perturbation so repeated runs feel less
mechanical. Sources are passed in explicitly, so tests can pin the
perturbation to zero or replay a known sequence.
"""

from typing import Iterable, Optional, Protocol

import numpy as np

from ..core.config import NOISE_AMPLITUDE


class NoiseSource(Protocol):
    def draw(self) -> float:
        """Next perturbation, in [-amplitude, +amplitude)."""
        ...


class UniformNoise:
    """Independent uniform draws from [-amplitude, +amplitude)."""

    def __init__(self, amplitude: float = NOISE_AMPLITUDE, seed: Optional[int] = None):
        self.amplitude = amplitude
        self._rng = np.random.default_rng(seed)

    def draw(self) -> float:
        return float(self._rng.uniform(-self.amplitude, self.amplitude))


class ZeroNoise:
    """No perturbation at all."""

    def draw(self) -> float:
        return 0.0


class SequenceNoise:
    """Replays a fixed sequence of perturbations, one per draw."""

    def __init__(self, values: Iterable[float]):
        self._values = list(values)
        self._position = 0

    @property
    def remaining(self) -> int:
        return len(self._values) - self._position

    def draw(self) -> float:
        if self._position >= len(self._values):
            raise IndexError(f"Noise sequence exhausted after {len(self._values)} draws")
        value = self._values[self._position]
        self._position += 1
        return float(value)
