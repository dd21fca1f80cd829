"""Integration algorithms.

Provides composite Simpson's rule and the Riemann/trapezoidal family. All
functions here return unrounded values; rounding is applied by
:class:`calckit.calculus_kit.CalculusKit`.
"""

from .riemann import (
    left_riemann_sum,
    midpoint_rule,
    right_riemann_sum,
    trapezoidal_sum,
)
from .simpson import simpson_integral, simpson_weights

__all__ = [
    "simpson_integral",
    "simpson_weights",
    "left_riemann_sum",
    "right_riemann_sum",
    "midpoint_rule",
    "trapezoidal_sum",
]
