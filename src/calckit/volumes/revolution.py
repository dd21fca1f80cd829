"""Volumes of revolution by the washer method."""

from __future__ import annotations

import numpy as np

from calckit.integration.simpson import simpson_integral
from calckit.utils.types import Function

__all__ = ["squared_offset", "revolution_volume"]


def squared_offset(function: Function, axis: float) -> Function:
    """Returns the function ``x -> (axis - function(x))**2``."""

    def squared(x: float) -> float:
        return (axis - function(x)) ** 2

    return squared


def revolution_volume(
    function_top: Function,
    function_bottom: Function,
    a: float,
    b: float,
    axis: float,
    sample_count: int,
) -> float:
    """Volume swept by the region between two curves rotated about ``y = axis``.

    Computes ``pi * (∫(axis - top)^2 - ∫(axis - bottom)^2)`` over ``[a, b]``
    with both integrals unrounded. A vertical axis is handled by describing
    the region with ``x`` and ``y`` swapped.

    Args:
        function_top: Curve farther from the axis (outer radius).
        function_bottom: Curve nearer to the axis (inner radius). Pass a
            function returning ``axis`` for the disk method.
        a: Lower limit of integration.
        b: Upper limit of integration.
        axis: The ``y`` value of the axis of rotation; ``0`` is the x-axis.
        sample_count: Simpson's rule sample points per integral.

    Returns:
        The unrounded volume.
    """
    outer = simpson_integral(squared_offset(function_top, axis), a, b, sample_count)
    inner = simpson_integral(squared_offset(function_bottom, axis), a, b, sample_count)
    return float(np.pi * (outer - inner))
