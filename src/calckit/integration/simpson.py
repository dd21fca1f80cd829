"""Composite Simpson's rule over a fixed number of sample points."""

from __future__ import annotations

import numpy as np

from calckit.logger import calckit_logger
from calckit.utils.batch_eval import eval_points
from calckit.utils.types import FloatArray, Function
from calckit.utils.validate import validate_sample_count

__all__ = ["simpson_weights", "simpson_integral"]


def simpson_weights(sample_count: int) -> FloatArray:
    """Returns the composite Simpson weights, relative to the step size.

    Endpoints carry ``1/3``, odd-indexed interior points ``4/3`` and
    even-indexed interior points ``2/3``.

    Args:
        sample_count: Number of sample points (at least 2).

    Returns:
        Array of shape ``(sample_count,)``.
    """
    n = validate_sample_count(sample_count)
    weights = np.empty(n, dtype=np.float64)
    weights[1:-1:2] = 4.0 / 3.0
    weights[2:-1:2] = 2.0 / 3.0
    weights[0] = weights[-1] = 1.0 / 3.0
    return weights


def simpson_integral(function: Function, a: float, b: float, sample_count: int) -> float:
    """Approximates the integral of ``function`` from ``a`` to ``b``.

    The step is ``h = (b - a) / (sample_count - 1)`` and the function is
    evaluated exactly ``sample_count`` times at ``a + i * h``, with the last
    point pinned to ``b``. There is no convergence check: the accuracy is set
    by ``sample_count`` alone.

    Args:
        function: Integrand ``f(x)``.
        a: Lower limit of integration.
        b: Upper limit of integration. ``b < a`` yields the negated integral.
        sample_count: Number of sample points.

    Returns:
        The unrounded estimate. ``0.0`` when ``a == b``.
    """
    weights = simpson_weights(sample_count)
    if a == b:
        return 0.0

    n = weights.size
    if n % 2 == 0:
        calckit_logger.warning(
            "Simpson's rule with sample_count=%d covers an odd number of "
            "subintervals; use an odd sample_count for full accuracy.",
            n,
        )

    h = (b - a) / (n - 1)
    xs = a + h * np.arange(n, dtype=np.float64)
    xs[-1] = b
    values = eval_points(function, xs)
    return float(h * np.dot(weights, values))
