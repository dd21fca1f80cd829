"""Forward finite-difference derivatives and the one-sided existence check."""

from __future__ import annotations

import numpy as np

from calckit.utils.batch_eval import eval_point
from calckit.utils.types import Function

__all__ = [
    "forward_difference",
    "left_derivative",
    "right_derivative",
    "derivative_exists",
]


def forward_difference(function: Function, x: float, step: float) -> float:
    """Returns ``(f(x + H) - f(x)) / H`` with ``H = step``.

    The denominator is the representable distance ``(x + H) - x`` rather
    than ``H`` itself, which removes the error made when ``x + H`` rounds.

    The quotient is taken in IEEE arithmetic. When ``x + H`` rounds back to
    ``x`` the estimate is NaN (or ``±inf``) instead of an exception, and
    non-finite function values propagate into the result unchanged.
    """
    x = float(x)
    x_step = x + step
    rise = np.float64(eval_point(function, x_step) - eval_point(function, x))
    return float(rise / np.float64(x_step - x))


def left_derivative(function: Function, x: float, step: float, offset: float) -> float:
    """Forward-difference estimate probed at ``x - offset``."""
    return forward_difference(function, float(x) - offset, step)


def right_derivative(function: Function, x: float, step: float, offset: float) -> float:
    """Forward-difference estimate probed at ``x + offset``."""
    return forward_difference(function, float(x) + offset, step)


def derivative_exists(left: float, right: float, tolerance: float) -> bool:
    """Returns False if the one-sided derivatives differ by more than ``tolerance``.

    A NaN on either side is not treated as a disagreement; the NaN reaches
    the caller through the derivative estimate instead.
    """
    return not abs(left - right) > tolerance
