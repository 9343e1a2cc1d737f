"""Arithmetic on tensors: element-wise, broadcasting, scalar and matrix operations."""

from __future__ import annotations

import operator
from collections.abc import Callable

from asteria.tensor import Tensor


def _broadcast(x: Tensor, y: Tensor, op: Callable[[float, float], float]) -> Tensor:
    if x.size == y.size:
        return Tensor(x.shape, map(op, x.data, y.data))
    small, large = (x, y) if x.size < y.size else (y, x)
    if small.size == 0 or large.size % small.size:
        raise ValueError(
            f"cannot broadcast shape {list(small.shape)} over {list(large.shape)}"
        )
    tiled = small.data * (large.size // small.size)
    if small is x:
        return Tensor(large.shape, map(op, tiled, y.data))
    return Tensor(large.shape, map(op, x.data, tiled))


def add(x: Tensor, y: Tensor) -> Tensor:
    """Element-wise ``x + y``; the smaller operand is repeated over the larger."""
    return _broadcast(x, y, operator.add)


def const_add(x: Tensor, value: float) -> Tensor:
    """Add ``value`` to every element of ``x``."""
    return Tensor(x.shape, (v + value for v in x.data))


def sub(x: Tensor, y: Tensor) -> Tensor:
    """Element-wise ``x - y``; the smaller operand is repeated over the larger."""
    return _broadcast(x, y, operator.sub)


def const_sub(x: Tensor, value: float) -> Tensor:
    """Subtract ``value`` from every element of ``x``."""
    return Tensor(x.shape, (v - value for v in x.data))


def const_sub_lhs(value: float, y: Tensor) -> Tensor:
    """Subtract every element of ``y`` from ``value``."""
    return Tensor(y.shape, (value - v for v in y.data))


def _logical_dims(t: Tensor) -> tuple[int, int]:
    if t.rank != 2:
        raise ValueError(f"matrix product needs rank-2 tensors, got rank {t.rank}")
    rows, cols = t.shape
    return (cols, rows) if t.transposed else (rows, cols)


def mul(x: Tensor, y: Tensor) -> Tensor:
    """Matrix product honouring each operand's transpose flag."""
    rows, common = _logical_dims(x)
    y_common, cols = _logical_dims(y)
    if common != y_common:
        raise ValueError(
            f"inner dimensions differ: {rows}x{common} times {y_common}x{cols}"
        )
    if x.transposed:
        x_rows = [x.data[i::rows] for i in range(rows)]
    else:
        x_rows = [x.data[i * common:(i + 1) * common] for i in range(rows)]
    if y.transposed:
        y_cols = [y.data[j * common:(j + 1) * common] for j in range(cols)]
    else:
        y_cols = [y.data[j::cols] for j in range(cols)]
    return Tensor(
        (rows, cols),
        (sum(map(operator.mul, row, col)) for row in x_rows for col in y_cols),
    )


def const_mul(x: Tensor, value: float) -> Tensor:
    """Multiply every element of ``x`` by ``value``."""
    return Tensor(x.shape, (v * value for v in x.data))


def const_div(value: float, y: Tensor) -> Tensor:
    """Divide ``value`` by every element of ``y``."""
    return Tensor(y.shape, (value / v for v in y.data))


def reduce_sum(x: Tensor) -> Tensor:
    """Sum over the leading (batch) axis; a single-row tensor is copied unchanged."""
    if x.rank == 0:
        raise ValueError("reduce_sum of a zero-rank tensor")
    batch = x.shape[0]
    if batch > 1:
        width = x.size // batch
        return Tensor((1, width), (sum(x.data[j::width]) for j in range(width)))
    return Tensor(x.shape, x.data)