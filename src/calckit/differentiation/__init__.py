"""Differentiation algorithms.

Forward finite differences, one-sided derivatives and tangent lines.
"""

from .core import (
    derivative_exists,
    forward_difference,
    left_derivative,
    right_derivative,
)
from .tangent import TangentLine, tangent_line

__all__ = [
    "forward_difference",
    "left_derivative",
    "right_derivative",
    "derivative_exists",
    "TangentLine",
    "tangent_line",
]
