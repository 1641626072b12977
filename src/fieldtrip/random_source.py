"""Seeded pseudo-random draws shared by everything that spawns bodies."""

from __future__ import annotations

import random


class RandomSource:
    """Thin wrapper around :class:`random.Random` with a reseedable stream.

    Reseeding with the same value replays exactly the same sequence of
    draws, which is what makes a soft reset reproduce the previous start.
    """

    def __init__(self, seed: int) -> None:
        self._seed = int(seed)
        self._rng = random.Random(self._seed)

    @property
    def seed(self) -> int:
        return self._seed

    def reseed(self, seed: int) -> None:
        self._seed = int(seed)
        self._rng.seed(self._seed)

    def next_float(self, low: float, high: float) -> float:
        """Uniform float in ``[low, high)``."""
        return low + (high - low) * self._rng.random()

    def next_int(self, high: int) -> int:
        """Uniform integer in ``[0, high)``."""
        if high <= 0:
            raise ValueError(f"high must be positive, got {high}")
        return int(self._rng.random() * high)


__all__ = ["RandomSource"]
