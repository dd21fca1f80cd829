"""One-sided limit probes.

A limit is estimated by evaluating the function a small offset to either
side of the point. This is a numerical heuristic: an oscillating function
such as ``sin(1/x)`` near zero is only flagged when the two probes happen to
land on different values.
"""

from __future__ import annotations

import numpy as np

from calckit.utils.batch_eval import eval_point
from calckit.utils.numerics import is_unbounded
from calckit.utils.types import Function

__all__ = [
    "probe_points",
    "left_limit",
    "right_limit",
    "limit_exists",
]


def probe_points(x: float, offset: float, infinity_probe: float) -> tuple[float, float]:
    """Returns the ``(left, right)`` abscissae probed for a limit at ``x``.

    For ``x = ±inf`` (or ``±`` the largest finite float) both probes sit at
    ``±infinity_probe`` so that the end behaviour is sampled at a large but
    finite magnitude.

    Args:
        x: Point at which the limit is taken.
        offset: Distance of each probe from ``x``.
        infinity_probe: Finite magnitude used in place of an unbounded ``x``.

    Returns:
        A pair of floats.
    """
    x = float(x)
    if is_unbounded(x):
        probe = float(np.copysign(infinity_probe, x))
        return probe, probe
    return x - offset, x + offset


def left_limit(function: Function, x: float, offset: float, infinity_probe: float) -> float:
    """Evaluates ``function`` just left of ``x``."""
    left, _ = probe_points(x, offset, infinity_probe)
    return eval_point(function, left)


def right_limit(function: Function, x: float, offset: float, infinity_probe: float) -> float:
    """Evaluates ``function`` just right of ``x``."""
    _, right = probe_points(x, offset, infinity_probe)
    return eval_point(function, right)


def limit_exists(left: float, right: float, tolerance: float) -> bool:
    """Returns False if the one-sided limits differ by more than ``tolerance``."""
    return not abs(left - right) > tolerance
