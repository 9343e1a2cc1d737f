"""Dense n-dimensional tensor stored as a flat row-major list of floats."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable, Iterator, Sequence


class Init(enum.Enum):
    """How a tensor's elements are set on creation or resize."""

    NONE = "none"
    ZERO = "zero"
    VALUE = "value"
    IDENTITY = "identity"


def _product(shape: Sequence[int]) -> int:
    return math.prod(shape)


def _strides(shape: Sequence[int]) -> tuple[int, ...]:
    strides = []
    step = 1
    for dim in reversed(shape):
        strides.append(step)
        step *= dim
    return tuple(reversed(strides))


def _format_value(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


class Tensor:
    """Row-major tensor; ``tensor[i]`` addresses the flat buffer."""

    __slots__ = ("data", "_shape", "transposed")

    def __init__(self, shape: Sequence[int], data: Iterable[float] | None = None) -> None:
        shape = tuple(int(d) for d in shape)
        size = _product(shape)
        if data is None:
            values = [0.0] * size
        else:
            values = [float(v) for v in data]
            if len(values) != size:
                raise ValueError(
                    f"data size {len(values)} does not match shape {list(shape)}"
                )
        self.data: list[float] = values
        self._shape = shape
        self.transposed = False

    # construction -----------------------------------------------------

    @staticmethod
    def _init_values(shape: tuple[int, ...], init: Init, value: float) -> list[float]:
        size = _product(shape)
        if init is Init.VALUE:
            return [float(value)] * size
        if init is Init.IDENTITY:
            if len(shape) != 2 or shape[0] != shape[1]:
                raise ValueError("identity initialization used for non-square matrix")
            data = [0.0] * size
            for i in range(shape[0]):
                data[i * shape[0] + i] = 1.0
            return data
        return [0.0] * size

    @classmethod
    def with_shape(
        cls, shape: Sequence[int], init: Init = Init.ZERO, value: float = 0.0
    ) -> Tensor:
        """Allocate a tensor of ``shape`` initialised by ``init``."""
        shape = tuple(shape)
        return cls(shape, cls._init_values(shape, init, value))

    @classmethod
    def zeros(cls, shape: Sequence[int]) -> Tensor:
        """Tensor of ``shape`` filled with zeros."""
        return cls.with_shape(shape, Init.ZERO)

    @classmethod
    def full(cls, shape: Sequence[int], value: float) -> Tensor:
        """Tensor of ``shape`` with every element equal to ``value``."""
        return cls.with_shape(shape, Init.VALUE, value)

    @classmethod
    def empty(cls) -> Tensor:
        """Zero-rank tensor holding no elements."""
        tensor = cls.__new__(cls)
        tensor.data = []
        tensor._shape = ()
        tensor.transposed = False
        return tensor

    @classmethod
    def zeros_like(cls, other: Tensor) -> Tensor:
        """Zero tensor with the shape of ``other``."""
        return cls.zeros(other.shape)

    @classmethod
    def concat(cls, tensors: Sequence[Tensor], dim: int = 0) -> Tensor:
        """Join rank-1 or rank-2 tensors along ``dim``."""
        if not tensors:
            return cls.empty()
        first = tensors[0]
        if first.rank not in (1, 2) or any(t.rank != first.rank for t in tensors):
            raise ValueError("concat needs tensors that are all rank 1 or all rank 2")
        if first.rank == 1:
            if dim != 0:
                raise ValueError("rank-1 tensors can only be joined along dim 0")
            return cls((sum(t.size for t in tensors),), (v for t in tensors for v in t.data))
        if dim == 0:
            cols = first.shape[1]
            if any(t.shape[1] != cols for t in tensors):
                raise ValueError("column counts differ")
            rows = sum(t.shape[0] for t in tensors)
            return cls((rows, cols), (v for t in tensors for v in t.data))
        if dim == 1:
            rows = first.shape[0]
            if any(t.shape[0] != rows for t in tensors):
                raise ValueError("row counts differ")
            cols = sum(t.shape[1] for t in tensors)
            data: list[float] = []
            for i in range(rows):
                for t in tensors:
                    width = t.shape[1]
                    data.extend(t.data[i * width:(i + 1) * width])
            return cls((rows, cols), data)
        raise ValueError(f"invalid dimension {dim} for rank-2 tensors")

    # properties -------------------------------------------------------

    @property
    def shape(self) -> tuple[int, ...]:
        return self._shape

    @property
    def stride(self) -> tuple[int, ...]:
        return _strides(self._shape)

    @property
    def rank(self) -> int:
        return len(self._shape)

    @property
    def size(self) -> int:
        return len(self.data)

    # shape changes ----------------------------------------------------

    def reshape(self, shape: Sequence[int]) -> None:
        """Change the logical shape; the element count must stay the same."""
        shape = tuple(shape)
        if _product(shape) != self.size:
            raise ValueError(f"cannot reshape size {self.size} into {list(shape)}")
        self._shape = shape

    def resize(self, shape: Sequence[int], init: Init = Init.ZERO, value: float = 0.0) -> None:
        """Reallocate for ``shape`` if it differs, then apply ``init``."""
        shape = tuple(shape)
        if shape != self._shape:
            self.data = self._init_values(shape, init, value)
            self._shape = shape
        elif init is not Init.NONE:
            self.data = self._init_values(shape, init, value)
        self.transposed = False

    def t(self) -> None:
        """Toggle the logical transpose flag without moving data."""
        self.transposed = not self.transposed

    def fill(self, value: float) -> None:
        """Set every element to ``value``."""
        self.data = [float(value)] * self.size

    # queries ----------------------------------------------------------

    def max_index(self, dim: int = 0) -> list[int]:
        """Index of the largest element per slice.

        Rank 1: a single index. Rank 2 with ``dim == 0``: the column index of
        each row's maximum; otherwise the row index of each column's maximum.
        The first maximum wins on ties.
        """
        if self.rank == 1:
            if not self.data:
                raise ValueError("max_index of an empty tensor")
            return [max(range(self.size), key=self.data.__getitem__)]
        if self.rank == 2:
            rows, cols = self._shape
            if dim == 0:
                return [
                    max(range(cols), key=lambda j, i=i: self.data[i * cols + j])
                    for i in range(rows)
                ]
            return [
                max(range(rows), key=lambda i, j=j: self.data[i * cols + j])
                for j in range(cols)
            ]
        return []

    def gather(self, indices: Iterable[int]) -> Tensor:
        """Collect elements at flat ``indices`` into a rank-1 tensor."""
        values = [self.data[i] for i in indices]
        return Tensor((len(values),), values)

    def max(self) -> float:
        return max(self.data, default=-math.inf)

    def min(self) -> float:
        return min(self.data, default=math.inf)

    def mean(self, dim: int = 0) -> Tensor:
        """Mean over a rank-1 tensor, or per row (dim 0) / per column of a matrix."""
        if self.rank == 1:
            return Tensor((1,), [sum(self.data) / self.size])
        if self.rank == 2:
            rows, cols = self._shape
            if dim == 0:
                return Tensor(
                    (rows, 1),
                    [sum(self.data[i * cols:(i + 1) * cols]) / cols for i in range(rows)],
                )
            return Tensor(
                (1, cols),
                [sum(self.data[j::cols]) / rows for j in range(cols)],
            )
        raise ValueError("mean is not defined for rank > 2")

    def _offset(self, index: Sequence[int]) -> int:
        offset = sum(i * s for i, s in zip(index, self.stride))
        if not 0 <= offset < self.size:
            raise IndexError(f"index {list(index)} out of range for shape {list(self._shape)}")
        return offset

    def get(self, index: Sequence[int]) -> float:
        """Element at a multi-dimensional ``index``."""
        return self.data[self._offset(index)]

    def set(self, index: Sequence[int], value: float) -> None:
        """Write ``value`` at a multi-dimensional ``index``."""
        self.data[self._offset(index)] = float(value)

    def copy_params(self, other: Tensor) -> None:
        """Overwrite this tensor's elements with ``other``'s; sizes must match."""
        if other.size != self.size:
            raise ValueError(f"size mismatch: {self.size} vs {other.size}")
        self.data[:] = other.data

    def copy(self) -> Tensor:
        """Independent copy including the transpose flag."""
        tensor = Tensor.empty()
        tensor.data = list(self.data)
        tensor._shape = self._shape
        tensor.transposed = self.transposed
        return tensor

    # container protocol -----------------------------------------------

    def __getitem__(self, index: int | tuple[int, ...]) -> float:
        if isinstance(index, tuple):
            return self.get(index)
        return self.data[index]

    def __setitem__(self, index: int | tuple[int, ...], value: float) -> None:
        if isinstance(index, tuple):
            self.set(index, value)
        else:
            self.data[index] = float(value)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[float]:
        return iter(self.data)

    def __repr__(self) -> str:
        return f"Tensor(shape={list(self._shape)}, data={self.data!r})"

    def __str__(self) -> str:
        if self.rank == 1:
            return ",".join(_format_value(v) for v in self.data)
        if self.rank == 2:
            cols = self._shape[1]
            return "".join(
                ",".join(_format_value(v) for v in self.data[i * cols:(i + 1) * cols]) + "\n"
                for i in range(self._shape[0])
            )
        return f"Tensor(rank={self.rank}, shape={list(self._shape)})"