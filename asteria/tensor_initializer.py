"""Weight-initialisation strategies applied to tensors in place."""

from __future__ import annotations

import enum
import math

from asteria.random_generator import RandomGenerator, default_generator
from asteria.tensor import Tensor


class InitializerType(enum.Enum):
    """Available initialisation strategies."""

    DEBUG = "debug"
    UNIFORM = "uniform"
    NORMAL = "normal"
    LECUN_UNIFORM = "lecun_uniform"
    LECUN_NORMAL = "lecun_normal"
    GLOROT_UNIFORM = "glorot_uniform"
    GLOROT_NORMAL = "glorot_normal"
    XAVIER_UNIFORM = "xavier_uniform"
    XAVIER_NORMAL = "xavier_normal"


_PARAMETER_COUNT = {
    InitializerType.DEBUG: 1,
    InitializerType.UNIFORM: 2,
    InitializerType.NORMAL: 2,
}


class TensorInitializer:
    """Fills a tensor according to an :class:`InitializerType`.

    ``DEBUG`` takes the constant as ``first``; ``UNIFORM`` takes ``first`` and
    ``second`` as the bounds; ``NORMAL`` takes them as mean and standard deviation.
    """

    def __init__(
        self,
        kind: InitializerType,
        first: float | None = None,
        second: float | None = None,
        rng: RandomGenerator | None = None,
    ) -> None:
        kind = InitializerType(kind)
        needed = _PARAMETER_COUNT.get(kind, 0)
        given = [p for p in (first, second)[:needed] if p is not None]
        if len(given) != needed:
            raise ValueError(f"{kind.name} initializer needs {needed} parameter(s)")
        self.kind = kind
        self.first = first
        self.second = second
        self.rng = rng if rng is not None else default_generator()

    def __repr__(self) -> str:
        return f"TensorInitializer({self.kind.name}, {self.first!r}, {self.second!r})"

    def apply(self, tensor: Tensor) -> None:
        """Overwrite every element of ``tensor`` in place."""
        kind = self.kind
        if kind is InitializerType.DEBUG:
            tensor.fill(self.first)
        elif kind is InitializerType.UNIFORM:
            self._uniform(tensor, self.first, self.second)
        elif kind is InitializerType.NORMAL:
            self._normal(tensor, self.first, self.second)
        elif kind is InitializerType.LECUN_UNIFORM:
            limit = math.sqrt(3.0 / self._fan_in(tensor))
            self._uniform(tensor, -limit, limit)
        elif kind is InitializerType.LECUN_NORMAL:
            self._normal(tensor, 0.0, math.sqrt(1.0 / self._fan_in(tensor)))
        elif kind in (InitializerType.GLOROT_UNIFORM, InitializerType.XAVIER_UNIFORM):
            limit = math.sqrt(6.0 / self._fan_sum(tensor))
            self._uniform(tensor, -limit, limit)
        elif kind is InitializerType.GLOROT_NORMAL:
            self._normal(tensor, 0.0, math.sqrt(2.0 / self._fan_sum(tensor)))
        else:
            self._normal(tensor, 0.0, math.sqrt(3.0 / self._fan_sum(tensor)))

    @staticmethod
    def _fan_in(tensor: Tensor) -> int:
        if tensor.rank < 1 or tensor.shape[0] == 0:
            raise ValueError("initializer needs a tensor with a non-empty first dimension")
        return tensor.shape[0]

    @staticmethod
    def _fan_sum(tensor: Tensor) -> int:
        if tensor.rank < 2 or tensor.shape[0] + tensor.shape[1] == 0:
            raise ValueError("initializer needs a rank-2 tensor")
        return tensor.shape[0] + tensor.shape[1]

    def _uniform(self, tensor: Tensor, low: float, high: float) -> None:
        tensor.data[:] = [self.rng.random_float(low, high) for _ in range(tensor.size)]

    def _normal(self, tensor: Tensor, mean: float, sigma: float) -> None:
        tensor.data[:] = [self.rng.normal_random(mean, sigma) for _ in range(tensor.size)]