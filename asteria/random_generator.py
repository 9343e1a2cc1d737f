"""Random number generation with the distributions used across the library."""

from __future__ import annotations

import math
import random
from collections.abc import Sequence


class RandomGenerator:
    """Source of uniform, normal, exponential and categorical samples."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def random_float(self, lower: float, upper: float) -> float:
        """Return a float drawn uniformly from ``[lower, upper)``."""
        if not lower < upper:
            raise ValueError(f"empty range [{lower}, {upper})")
        value = lower + (upper - lower) * self._rng.random()
        # Guard against rounding pushing the sample onto the open bound.
        return value if value < upper else lower

    def random(self) -> float:
        """Return a float drawn uniformly from ``[0, 1)``."""
        return self._rng.random()

    def random_int(self, lower: int, upper: int) -> int:
        """Return an integer drawn uniformly from ``[lower, upper]``."""
        if lower > upper:
            raise ValueError(f"empty range [{lower}, {upper}]")
        return self._rng.randint(lower, upper)

    def random_range(self, lower: int, upper: int) -> int:
        """Same as :meth:`random_int`."""
        return self.random_int(lower, upper)

    def normal_random(self, mean: float, sigma: float) -> float:
        """Sample from the normal distribution N(mean, sigma)."""
        if not math.isfinite(sigma) or sigma < 0:
            raise ValueError(f"invalid standard deviation {sigma}")
        return self._rng.gauss(mean, sigma)

    def exp_random(self, lambd: float) -> float:
        """Sample from the exponential distribution with rate ``lambd``."""
        if math.isnan(lambd) or lambd < 0:
            raise ValueError(f"invalid rate {lambd}")
        if lambd == 0:
            return math.inf
        return self._rng.expovariate(lambd)

    def choice(self, probabilities: Sequence[float]) -> int:
        """Pick an index with the given probabilities; falls back to the last index."""
        if not probabilities:
            raise ValueError("choice from an empty sequence of probabilities")
        r = self._rng.random()
        cumulative = 0.0
        for index, p in enumerate(probabilities):
            if cumulative <= r < cumulative + p:
                return index
            cumulative += p
        return len(probabilities) - 1


_DEFAULT = RandomGenerator()


def default_generator() -> RandomGenerator:
    """Return the shared generator used when no other is supplied."""
    return _DEFAULT