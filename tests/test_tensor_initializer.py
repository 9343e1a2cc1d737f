import math

import pytest

from asteria.random_generator import RandomGenerator
from asteria.tensor import Tensor
from asteria.tensor_initializer import InitializerType, TensorInitializer


def test_debug_fills_constant():
    t = Tensor.zeros([2, 3])
    TensorInitializer(InitializerType.DEBUG, 0.25).apply(t)
    assert t.data == [0.25] * 6
    assert t.shape == (2, 3)


def test_uniform_stays_in_bounds():
    t = Tensor.zeros([10, 10])
    TensorInitializer(InitializerType.UNIFORM, -3e-3, 3e-3, RandomGenerator(1)).apply(t)
    assert all(-3e-3 <= v < 3e-3 for v in t)


def test_normal_with_zero_sigma_is_mean():
    t = Tensor.zeros([3, 3])
    TensorInitializer(InitializerType.NORMAL, 0.7, 0.0, RandomGenerator(2)).apply(t)
    assert t.data == [0.7] * 9


@pytest.mark.parametrize(
    "kind, shape",
    [
        (InitializerType.LECUN_UNIFORM, [3, 5]),
        (InitializerType.GLOROT_UNIFORM, [4, 2]),
        (InitializerType.XAVIER_UNIFORM, [4, 2]),
    ],
)
def test_scaled_uniform_within_unit_limit(kind, shape):
    # shapes chosen so that the documented limit is exactly 1
    t = Tensor.zeros(shape)
    TensorInitializer(kind, rng=RandomGenerator(3)).apply(t)
    assert all(-1.0 <= v < 1.0 for v in t)
    assert len(set(t.data)) > 1


@pytest.mark.parametrize(
    "kind",
    [
        InitializerType.LECUN_NORMAL,
        InitializerType.GLOROT_NORMAL,
        InitializerType.XAVIER_NORMAL,
    ],
)
def test_scaled_normal_fills_finite_varied_values(kind):
    t = Tensor.zeros([8, 8])
    TensorInitializer(kind, rng=RandomGenerator(4)).apply(t)
    assert all(math.isfinite(v) for v in t)
    assert len(set(t.data)) == t.size


def test_same_seed_gives_same_weights():
    a = Tensor.zeros([4, 4])
    b = Tensor.zeros([4, 4])
    TensorInitializer(InitializerType.XAVIER_UNIFORM, rng=RandomGenerator(9)).apply(a)
    TensorInitializer(InitializerType.XAVIER_UNIFORM, rng=RandomGenerator(9)).apply(b)
    assert a.data == b.data


def test_missing_parameters_raise():
    with pytest.raises(ValueError):
        TensorInitializer(InitializerType.UNIFORM, -1.0)
    with pytest.raises(ValueError):
        TensorInitializer(InitializerType.DEBUG)


def test_glorot_needs_rank_two():
    t = Tensor.zeros([4])
    with pytest.raises(ValueError):
        TensorInitializer(InitializerType.GLOROT_UNIFORM).apply(t)


def test_uniform_with_empty_range_raises():
    t = Tensor.zeros([2, 2])
    with pytest.raises(ValueError):
        TensorInitializer(InitializerType.UNIFORM, 1.0, 1.0).apply(t)