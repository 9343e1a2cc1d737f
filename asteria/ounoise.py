"""Ornstein-Uhlenbeck process for temporally correlated exploration noise."""

from __future__ import annotations

import math

from asteria.random_generator import RandomGenerator, default_generator
from asteria.tensor import Tensor


class OUNoise:
    """Mean-reverting noise ``dX = theta (mu - X) dt + sigma dW``.

    ``sigma`` is a plain attribute and may be changed between calls.
    """

    def __init__(
        self,
        dim: int,
        mu: float,
        sigma: float,
        theta: float,
        dt: float,
        rng: RandomGenerator | None = None,
    ) -> None:
        if dim < 0:
            raise ValueError(f"dimension must be non-negative, got {dim}")
        if dt < 0:
            raise ValueError(f"timestep must be non-negative, got {dt}")
        self.dim = dim
        self.mu = mu
        self.sigma = sigma
        self.theta = theta
        self.dt = dt
        self.rng = rng if rng is not None else default_generator()
        self._state = Tensor.full([dim], mu)

    @property
    def state(self) -> Tensor:
        """Copy of the current process state."""
        return self._state.copy()

    def reset(self) -> None:
        """Return the process to its mean."""
        self._state = Tensor.full([self.dim], self.mu)

    def noise(self, action: Tensor) -> None:
        """Advance the process one step and add it in place to ``action``."""
        if action.size < self.dim:
            raise IndexError(
                f"action has {action.size} elements, noise needs {self.dim}"
            )
        sqrt_dt = math.sqrt(self.dt)
        for i in range(self.dim):
            x = self._state[i]
            x += self.theta * (self.mu - x) * self.dt
            x += self.sigma * self.rng.normal_random(0.0, 1.0) * sqrt_dt
            self._state[i] = x
            action[i] += x