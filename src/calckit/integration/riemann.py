"""Riemann sums and the trapezoidal rule.

Each scheme discretises ``[a, b]`` into ``n`` equal subintervals of width
``dx = (b - a) / n`` on its own; none of them reuses Simpson's rule. Sample
abscissae are generated by index (``a + i * dx``), so the number of function
evaluations is exact: ``n`` for the rectangle sums and ``n + 1`` for the
trapezoidal rule.
"""

from __future__ import annotations

import numpy as np

from calckit.utils.batch_eval import eval_points
from calckit.utils.types import Function
from calckit.utils.validate import validate_subinterval_count

__all__ = [
    "left_riemann_sum",
    "right_riemann_sum",
    "midpoint_rule",
    "trapezoidal_sum",
]


def _width(a: float, b: float, n: int) -> float:
    """Validates ``n`` and returns the subinterval width."""
    n = validate_subinterval_count(n)
    return (b - a) / n


def left_riemann_sum(function: Function, a: float, b: float, n: int) -> float:
    """Samples the left edge of every subinterval.

    Raises:
        ValueError: If ``n < 1``.
    """
    dx = _width(a, b, n)
    xs = a + dx * np.arange(n, dtype=np.float64)
    return float(dx * np.sum(eval_points(function, xs)))


def right_riemann_sum(function: Function, a: float, b: float, n: int) -> float:
    """Samples the right edge of every subinterval, ending exactly at ``b``.

    Raises:
        ValueError: If ``n < 1``.
    """
    dx = _width(a, b, n)
    xs = a + dx * np.arange(1, n + 1, dtype=np.float64)
    xs[-1] = b
    return float(dx * np.sum(eval_points(function, xs)))


def midpoint_rule(function: Function, a: float, b: float, n: int) -> float:
    """Samples the midpoint of every subinterval.

    Raises:
        ValueError: If ``n < 1``.
    """
    dx = _width(a, b, n)
    left_edges = a + dx * np.arange(n, dtype=np.float64)
    xs = (left_edges + (left_edges + dx)) / 2.0
    return float(dx * np.sum(eval_points(function, xs)))


def trapezoidal_sum(function: Function, a: float, b: float, n: int) -> float:
    """Trapezoidal rule: endpoints weighted 1, interior points weighted 2.

    Raises:
        ValueError: If ``n < 1``.
    """
    dx = _width(a, b, n)
    xs = a + dx * np.arange(n + 1, dtype=np.float64)
    xs[-1] = b
    weights = np.full(n + 1, 2.0)
    weights[0] = weights[-1] = 1.0
    return float(dx / 2.0 * np.dot(weights, eval_points(function, xs)))
