"""Tangent lines built from a slope estimate."""

from __future__ import annotations

from dataclasses import dataclass

from calckit.utils.batch_eval import eval_point
from calckit.utils.types import Function

__all__ = ["TangentLine", "tangent_line"]


@dataclass(frozen=True)
class TangentLine:
    """The line ``y = slope * x + intercept``.

    Instances are callables and can be passed anywhere a function is
    expected, including back into the engine.
    """

    slope: float
    intercept: float

    def __call__(self, x: float) -> float:
        return self.slope * x + self.intercept


def tangent_line(function: Function, x: float, slope: float) -> TangentLine:
    """Returns the line through ``(x, f(x))`` with the given ``slope``.

    The intercept is ``b = f(x) - slope * x``. The returned line keeps no
    reference to ``function``.
    """
    intercept = eval_point(function, x) - slope * x
    return TangentLine(slope=float(slope), intercept=float(intercept))
