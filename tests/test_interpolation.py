import pytest

from asteria.interpolation import ExponentialInterpolation, LinearInterpolation


def test_linear_endpoints():
    interp = LinearInterpolation(0.5, 0.05, 500)
    assert interp.interpolate(0) == pytest.approx(0.5)
    assert interp.interpolate(500) == pytest.approx(0.05)


def test_linear_is_constant_after_interval():
    interp = LinearInterpolation(0.5, 0.0, 500)
    assert interp.interpolate(501) == interp.interpolate(10_000) == pytest.approx(0.0)


def test_linear_midpoint():
    interp = LinearInterpolation(0.5, 0.0, 500)
    assert interp.interpolate(250) == pytest.approx(0.25)


def test_linear_is_monotonic_between_points():
    interp = LinearInterpolation(1.0, -1.0, 20)
    values = [interp.interpolate(t) for t in range(21)]
    assert values == sorted(values, reverse=True)


def test_exponential_endpoints():
    interp = ExponentialInterpolation(1.0, 0.01, 100)
    assert interp.interpolate(0) == pytest.approx(1.0)
    assert interp.interpolate(100) == pytest.approx(0.01)
    assert interp.interpolate(200) == pytest.approx(0.01)


def test_exponential_geometric_midpoint():
    interp = ExponentialInterpolation(1.0, 100.0, 2)
    assert interp.interpolate(1) == pytest.approx(10.0)


def test_exponential_zero_point_replaced_by_epsilon():
    interp = ExponentialInterpolation(0.0, 1.0, 10)
    assert interp.point1 == pytest.approx(1e-8)
    assert interp.interpolate(0) == pytest.approx(1e-8)


def test_exponential_is_monotonic():
    interp = ExponentialInterpolation(0.5, 0.001, 50)
    values = [interp.interpolate(t) for t in range(51)]
    assert values == sorted(values, reverse=True)


def test_non_positive_interval_rejected():
    with pytest.raises(ValueError):
        LinearInterpolation(1.0, 0.0, 0)
    with pytest.raises(ValueError):
        ExponentialInterpolation(1.0, 0.5, -3)


def test_exponential_rejects_mixed_signs():
    with pytest.raises(ValueError):
        ExponentialInterpolation(-1.0, 1.0, 10)