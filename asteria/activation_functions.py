"""Element-wise activations applied in place during forward and backward passes."""

from __future__ import annotations

import enum
import math
from abc import ABC, abstractmethod

from asteria.tensor import Tensor


class ActivationFunction(ABC):
    """An activation that rewrites tensors in place."""

    @abstractmethod
    def forward(self, tensor: Tensor) -> None:
        """Apply the activation to ``tensor`` in place."""

    @abstractmethod
    def backward(self, output: Tensor, delta: Tensor) -> None:
        """Multiply ``delta`` in place by the local gradient at ``output``.

        ``output`` holds the post-activation values from the forward pass.
        """


class Linear(ActivationFunction):
    """Identity activation."""

    def forward(self, tensor: Tensor) -> None:
        pass

    def backward(self, output: Tensor, delta: Tensor) -> None:
        pass


def _sigmoid(x: float) -> float:
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    e = math.exp(x)
    return e / (1.0 + e)


class Sigmoid(ActivationFunction):
    """Logistic sigmoid, output in (0, 1)."""

    def forward(self, tensor: Tensor) -> None:
        tensor.data[:] = [_sigmoid(x) for x in tensor.data]

    def backward(self, output: Tensor, delta: Tensor) -> None:
        delta.data[:] = [d * s * (1.0 - s) for d, s in zip(delta.data, output.data)]


class Tanh(ActivationFunction):
    """Hyperbolic tangent, output in (-1, 1)."""

    def forward(self, tensor: Tensor) -> None:
        tensor.data[:] = [math.tanh(x) for x in tensor.data]

    def backward(self, output: Tensor, delta: Tensor) -> None:
        delta.data[:] = [d * (1.0 - t * t) for d, t in zip(delta.data, output.data)]


class Relu(ActivationFunction):
    """Rectified linear unit, max(0, x)."""

    def forward(self, tensor: Tensor) -> None:
        tensor.data[:] = [x if x > 0.0 else 0.0 for x in tensor.data]

    def backward(self, output: Tensor, delta: Tensor) -> None:
        delta.data[:] = [
            0.0 if o <= 0.0 else d for d, o in zip(delta.data, output.data)
        ]


def _matrix_dims(tensor: Tensor) -> tuple[int, int]:
    if tensor.rank != 2:
        raise ValueError(f"softmax needs a rank-2 tensor, got rank {tensor.rank}")
    rows, cols = tensor.shape
    return rows, cols


class Softmax(ActivationFunction):
    """Row-wise softmax, stabilised by subtracting each row's maximum."""

    def forward(self, tensor: Tensor) -> None:
        rows, cols = _matrix_dims(tensor)
        data = tensor.data
        for start in range(0, rows * cols, cols):
            row = data[start:start + cols]
            peak = max(row)
            exps = [math.exp(v - peak) for v in row]
            total = sum(exps)
            data[start:start + cols] = [e / total for e in exps]

    def backward(self, output: Tensor, delta: Tensor) -> None:
        rows, cols = _matrix_dims(delta)
        for start in range(0, rows * cols, cols):
            d_row = delta.data[start:start + cols]
            s_row = output.data[start:start + cols]
            dot = sum(d * s for d, s in zip(d_row, s_row))
            delta.data[start:start + cols] = [
                s * (d - dot) for d, s in zip(d_row, s_row)
            ]


class ActivationType(enum.Enum):
    """Names of the available activations."""

    LINEAR = "linear"
    SIGMOID = "sigmoid"
    TANH = "tanh"
    RELU = "relu"
    SOFTMAX = "softmax"


_ACTIVATIONS: dict[ActivationType, type[ActivationFunction]] = {
    ActivationType.LINEAR: Linear,
    ActivationType.SIGMOID: Sigmoid,
    ActivationType.TANH: Tanh,
    ActivationType.RELU: Relu,
    ActivationType.SOFTMAX: Softmax,
}


def create_activation(kind: ActivationType) -> ActivationFunction:
    """Instantiate the activation named by ``kind``."""
    return _ACTIVATIONS[ActivationType(kind)]()