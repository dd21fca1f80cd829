"""Utility functions for CalcKit package."""

from .batch_eval import eval_point, eval_points
from .numerics import round_half_even, snap_to_zero

__all__ = [
    "eval_point",
    "eval_points",
    "round_half_even",
    "snap_to_zero",
]
