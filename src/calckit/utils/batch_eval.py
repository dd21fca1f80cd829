"""Evaluation helpers for caller-supplied functions.

Sample points are handed to the function as ``numpy.float64`` scalars. Plain
formulas such as ``lambda x: 1 / x**2`` then follow IEEE 754 semantics and
produce ``inf`` or ``nan`` where Python floats would raise
``ZeroDivisionError`` or ``OverflowError``. Exceptions raised by the
function itself are not intercepted.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from calckit.utils.types import FloatArray, Function

__all__ = ["eval_point", "eval_points"]


def eval_point(function: Function, x: float) -> float:
    """Evaluates ``function`` at a single point and returns a Python float."""
    return float(function(np.float64(x)))


def eval_points(function: Function, xs: Sequence[float] | FloatArray) -> FloatArray:
    """Evaluates ``function`` at each point of ``xs``, in order.

    The function is called exactly once per point; it is not assumed to be
    vectorised.

    Args:
        function: Callable taking a single float.
        xs: 1D sequence of sample points.

    Returns:
        A float64 array of function values, one per point.
    """
    points = np.asarray(xs, dtype=np.float64)
    if points.size == 0:
        return np.asarray([], dtype=np.float64)
    return np.fromiter(
        (float(function(x)) for x in points),
        dtype=np.float64,
        count=points.size,
    )
