# asteria

A small, dependency-free set of building blocks for neural networks and
reinforcement-learning exploration on the CPU, written in plain Python.

## Modules

- `asteria.tensor` — `Tensor`, a dense row-major n-dimensional array stored as
  a flat list of floats. Build one with `Tensor(shape, data)` or the class
  methods `with_shape`, `zeros`, `full`, `empty`, `zeros_like` and `concat`
  (rank 1 or rank 2, along `dim` 0 or 1). It offers `shape`, `stride`, `rank`
  and `size`, `reshape`, `resize`, `fill`, `max_index`, `gather`, `max`,
  `min`, `mean`, `get`/`set` with a multi-dimensional index, `copy_params` and
  `copy`. `tensor[i]` addresses the flat buffer and `tensor[i, j]` a
  multi-dimensional position. `t()` toggles the `transposed` flag without
  moving data. `Init` selects how elements are set on allocation (`NONE`,
  `ZERO`, `VALUE`, `IDENTITY`). `str(tensor)` prints comma-separated values,
  one row per line for matrices.
- `asteria.tensor_operator` — functions that return new tensors: `add` and
  `sub` (the smaller operand is repeated over the larger), `const_add`,
  `const_sub`, `const_sub_lhs`, `const_mul`, `const_div`, `mul` (matrix
  product that honours each operand's `transposed` flag) and `reduce_sum`
  (sum over the leading batch axis).
- `asteria.activation_functions` — `Linear`, `Sigmoid`, `Tanh`, `Relu` and
  row-wise `Softmax`. `forward` rewrites a tensor in place; `backward`
  multiplies a delta in place by the local gradient, given the forward
  output. `create_activation(ActivationType.RELU)` and friends build one by
  name.
- `asteria.loss_functions` — `MeanSquaredError`
  (`sum((pred - target)^2) / (2 * batch)`) and `SoftmaxCrossEntropy`, which
  applies softmax to logits internally and is meant for a linear output. Each
  has `forward` (the loss value) and `backward` (the gradient tensor).
- `asteria.tensor_initializer` — `TensorInitializer(kind, first, second, rng)`
  with `apply(tensor)`. `InitializerType` covers `DEBUG` (constant `first`),
  `UNIFORM` (bounds `first`, `second`), `NORMAL` (mean `first`, deviation
  `second`), `LECUN_UNIFORM`, `LECUN_NORMAL`, `GLOROT_UNIFORM`,
  `GLOROT_NORMAL`, `XAVIER_UNIFORM` and `XAVIER_NORMAL`.
- `asteria.interpolation` — `LinearInterpolation` and
  `ExponentialInterpolation(point1, point2, interval)`, whose
  `interpolate(t)` moves from `point1` to `point2` over `interval` steps and
  stays at `point2` afterwards. A non-positive interval raises `ValueError`.
- `asteria.ounoise` — `OUNoise(dim, mu, sigma, theta, dt, rng)`, an
  Ornstein-Uhlenbeck process. `noise(action)` advances it one step and adds
  it in place to the first `dim` elements of `action`; `reset()` returns it to
  `mu`; `state` is a copy of the current state; `sigma` may be changed
  between calls.
- `asteria.random_generator` — `RandomGenerator(seed)` with `random`,
  `random_float`, `random_int`, `random_range`, `normal_random`, `exp_random`
  and `choice` (weighted index). `default_generator()` returns the shared
  instance used when no generator is passed.

## Installation

```
pip install .
```

Python 3.10 or later is required.

## Example

```python
from asteria.tensor import Tensor
from asteria.tensor_operator import mul
from asteria.activation_functions import ActivationType, create_activation
from asteria.loss_functions import MeanSquaredError

x = Tensor([2, 2], [1.0, 2.0, 3.0, 4.0])
w = Tensor([2, 1], [0.5, -0.5])
out = mul(x, w)

create_activation(ActivationType.SIGMOID).forward(out)

target = Tensor([2, 1], [1.0, 0.0])
loss = MeanSquaredError()
print(loss.forward(out, target))
print(loss.backward(out, target))
```

Exploration noise for a one-dimensional continuous action:

```python
from asteria.ounoise import OUNoise
from asteria.random_generator import RandomGenerator
from asteria.tensor import Tensor

noise = OUNoise(1, 0.0, 0.2, 0.15, 0.01, RandomGenerator(42))
action = Tensor([1, 1], [0.0])
noise.noise(action)
```

## What it does not include

The package provides the pieces listed above and nothing assembled from them:
there are no layer or network classes, no optimizers or learning-rate
schedules, no reinforcement-learning agents or environments, no training
loops, no way to save or load weights, and no command-line program.

## Running the tests

```
pip install ".[test]"
pytest
```