"""Scalar interpolation over time, used to anneal parameters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

_EPSILON = 1e-8


class Interpolation(ABC):
    """A value that changes with the timestep."""

    @abstractmethod
    def interpolate(self, t: int) -> float:
        """Return the value at timestep ``t``."""


def _fraction(t: int, interval: int) -> float:
    return t / interval if t <= interval else 1.0


def _check_interval(interval: int) -> None:
    if interval <= 0:
        raise ValueError(f"interval must be positive, got {interval}")


@dataclass
class LinearInterpolation(Interpolation):
    """Straight line from ``point1`` at 0 to ``point2`` at ``interval``, constant after."""

    point1: float
    point2: float
    interval: int

    def __post_init__(self) -> None:
        _check_interval(self.interval)

    def interpolate(self, t: int) -> float:
        f = _fraction(t, self.interval)
        return (1.0 - f) * self.point1 + f * self.point2


@dataclass
class ExponentialInterpolation(Interpolation):
    """Geometric curve ``point1 * (point2 / point1) ** (t / interval)``, constant after.

    A zero end point is replaced by a tiny epsilon so the ratio is defined.
    """

    point1: float
    point2: float
    interval: int

    def __post_init__(self) -> None:
        _check_interval(self.interval)
        if self.point1 == 0.0:
            self.point1 += _EPSILON
        if self.point2 == 0.0:
            self.point2 += _EPSILON
        if (self.point1 > 0) != (self.point2 > 0):
            raise ValueError("exponential interpolation needs end points of the same sign")

    def interpolate(self, t: int) -> float:
        f = _fraction(t, self.interval)
        return self.point1 * (self.point2 / self.point1) ** f