"""Areas enclosed by polar curves."""

from __future__ import annotations

from calckit.integration.simpson import simpson_integral
from calckit.utils.types import Function

__all__ = ["polar_area"]


def polar_area(r: Function, a: float, b: float, sample_count: int) -> float:
    """Area swept by ``r(theta)`` between the angles ``a`` and ``b`` (radians).

    Computes ``0.5 * ∫ r(theta)^2 dtheta``, unrounded.
    """

    def squared(theta: float) -> float:
        return r(theta) ** 2

    return 0.5 * simpson_integral(squared, a, b, sample_count)
