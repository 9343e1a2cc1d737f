"""Differentiable losses over batched predictions and targets."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterator

from asteria.tensor import Tensor

_LOG_FLOOR = 1e-10


def _check_pair(prediction: Tensor, target: Tensor) -> tuple[int, int]:
    if prediction.rank != 2:
        raise ValueError(f"losses need rank-2 predictions, got rank {prediction.rank}")
    if prediction.shape != target.shape:
        raise ValueError(
            f"prediction shape {list(prediction.shape)} does not match "
            f"target shape {list(target.shape)}"
        )
    rows, cols = prediction.shape
    return rows, cols


def _softmax_rows(prediction: Tensor, rows: int, cols: int) -> Iterator[list[float]]:
    for start in range(0, rows * cols, cols):
        row = prediction.data[start:start + cols]
        peak = max(row)
        exps = [math.exp(v - peak) for v in row]
        total = sum(exps)
        yield [e / total for e in exps]


class LossFunction(ABC):
    """A scalar loss and its gradient with respect to the prediction."""

    @abstractmethod
    def forward(self, prediction: Tensor, target: Tensor) -> float:
        """Return the loss value."""

    @abstractmethod
    def backward(self, prediction: Tensor, target: Tensor) -> Tensor:
        """Return the gradient of the loss with respect to ``prediction``."""


class SoftmaxCrossEntropy(LossFunction):
    """Softmax over logits fused with cross-entropy; pair with a linear output layer."""

    def forward(self, prediction: Tensor, target: Tensor) -> float:
        rows, cols = _check_pair(prediction, target)
        total = 0.0
        for i, probs in enumerate(_softmax_rows(prediction, rows, cols)):
            targets = target.data[i * cols:(i + 1) * cols]
            total -= sum(t * math.log(max(p, _LOG_FLOOR)) for p, t in zip(probs, targets))
        return total / rows

    def backward(self, prediction: Tensor, target: Tensor) -> Tensor:
        rows, cols = _check_pair(prediction, target)
        gradient: list[float] = []
        for i, probs in enumerate(_softmax_rows(prediction, rows, cols)):
            targets = target.data[i * cols:(i + 1) * cols]
            gradient.extend((p - t) / rows for p, t in zip(probs, targets))
        return Tensor(prediction.shape, gradient)


class MeanSquaredError(LossFunction):
    """``sum((pred - target)^2) / (2 * batch)`` with gradient ``(pred - target) / batch``."""

    def forward(self, prediction: Tensor, target: Tensor) -> float:
        rows, _ = _check_pair(prediction, target)
        squared = sum((p - t) ** 2 for p, t in zip(prediction.data, target.data))
        return squared / (2.0 * rows)

    def backward(self, prediction: Tensor, target: Tensor) -> Tensor:
        rows, _ = _check_pair(prediction, target)
        return Tensor(
            prediction.shape,
            ((p - t) / rows for p, t in zip(prediction.data, target.data)),
        )