"""Random number source for AI decisions."""

from __future__ import annotations

import random


class RandomSource:
    """Uniform random numbers; seed it for reproducible behaviour."""

    def __init__(self, seed: int | float | str | bytes | None = None) -> None:
        self._rng = random.Random(seed)

    def random01(self) -> float:
        """Return a float in [0, 1]."""
        return self._rng.random()

    def random_int(self, upper: int) -> int:
        """Return an integer in [0, upper)."""
        if upper <= 0:
            raise ValueError(f"upper bound must be positive, got {upper}")
        return self._rng.randrange(upper)

    def random_float(self, upper: float) -> float:
        """Return a float between 0 and ``upper``."""
        return self.random01() * upper