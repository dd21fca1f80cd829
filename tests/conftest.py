"""Pytest configuration file with shared calculus fixtures."""

import pytest

from calckit.calculus_kit import CalculusKit
from calckit.config import AccuracyConfig

__all__ = ["CallRecorder"]


class CallRecorder:
    """Wraps a function and records every point it is evaluated at."""

    def __init__(self, function):
        """Initialises recorder."""
        self.function = function
        self.points = []

    def __call__(self, x):
        """Records ``x`` and forwards to the wrapped function."""
        self.points.append(x)
        return self.function(x)

    @property
    def calls(self):
        """Number of evaluations so far."""
        return len(self.points)


@pytest.fixture
def calc():
    """Kit with the default accuracy configuration."""
    return CalculusKit()


@pytest.fixture
def raw_calc():
    """Kit with rounding disabled for every family."""
    return CalculusKit(AccuracyConfig().with_rounding(-1))


@pytest.fixture
def recorder():
    """Return a factory wrapping a function in a CallRecorder."""
    return CallRecorder
