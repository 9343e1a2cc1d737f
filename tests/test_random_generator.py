import math

import pytest

from asteria.random_generator import RandomGenerator, default_generator


def test_same_seed_gives_same_sequence():
    a = RandomGenerator(7)
    b = RandomGenerator(7)
    seq_a = [a.random() for _ in range(10)]
    seq_b = [b.random() for _ in range(10)]
    assert seq_a == seq_b


def test_random_in_unit_interval():
    rg = RandomGenerator(1)
    assert all(0.0 <= rg.random() < 1.0 for _ in range(1000))


def test_random_float_within_bounds():
    rg = RandomGenerator(2)
    values = [rg.random_float(-3.0, 5.0) for _ in range(1000)]
    assert all(-3.0 <= v < 5.0 for v in values)


def test_random_float_empty_range_raises():
    rg = RandomGenerator(3)
    with pytest.raises(ValueError):
        rg.random_float(1.0, 1.0)


def test_random_int_inclusive_bounds():
    rg = RandomGenerator(4)
    values = {rg.random_int(-2, 2) for _ in range(2000)}
    assert values == {-2, -1, 0, 1, 2}


def test_random_int_single_value():
    rg = RandomGenerator(5)
    assert rg.random_int(3, 3) == 3


def test_random_range_matches_random_int():
    a = RandomGenerator(11)
    b = RandomGenerator(11)
    assert [a.random_range(0, 9) for _ in range(20)] == [b.random_int(0, 9) for _ in range(20)]


def test_random_int_empty_range_raises():
    with pytest.raises(ValueError):
        RandomGenerator(6).random_int(5, 4)


def test_normal_random_zero_sigma_is_mean():
    rg = RandomGenerator(8)
    assert rg.normal_random(2.5, 0.0) == 2.5


def test_normal_random_mean_is_close():
    rg = RandomGenerator(9)
    samples = [rg.normal_random(1.0, 0.5) for _ in range(5000)]
    assert abs(sum(samples) / len(samples) - 1.0) < 0.05


def test_normal_random_negative_sigma_raises():
    with pytest.raises(ValueError):
        RandomGenerator(10).normal_random(0.0, -1.0)


def test_exp_random_non_negative():
    rg = RandomGenerator(12)
    assert all(rg.exp_random(2.0) >= 0.0 for _ in range(1000))


def test_exp_random_zero_rate_is_infinite():
    value = RandomGenerator(13).exp_random(0.0)
    assert value == math.inf


def test_exp_random_negative_rate_raises():
    with pytest.raises(ValueError):
        RandomGenerator(14).exp_random(-1.0)


def test_choice_certain_index():
    rg = RandomGenerator(15)
    assert {rg.choice([0.0, 1.0, 0.0]) for _ in range(200)} == {1}


def test_choice_falls_back_to_last_index():
    rg = RandomGenerator(16)
    assert {rg.choice([0.0, 0.0]) for _ in range(50)} == {1}


def test_choice_index_in_range():
    rg = RandomGenerator(17)
    probs = [0.2, 0.3, 0.5]
    assert all(0 <= rg.choice(probs) < len(probs) for _ in range(500))


def test_choice_empty_raises():
    with pytest.raises(ValueError):
        RandomGenerator(18).choice([])


def test_default_generator_is_shared():
    first = default_generator()
    second = default_generator()
    assert first is second
    value = first.random_int(4, 4)
    assert value == 4
    sample = second.random_float(0.0, 1.0)
    assert 0.0 <= sample < 1.0