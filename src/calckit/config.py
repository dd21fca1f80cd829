"""Accuracy configuration for the calculus engine.

An :class:`AccuracyConfig` bundles every numeric knob the algorithms read:
the Simpson sample count, finite-difference step and probe offsets, the
existence tolerances for derivatives and limits, the infinity clamps used by
rounding, and one rounding precision per algorithm family.

The configuration is immutable. Derive a modified copy with
:meth:`AccuracyConfig.replace` instead of mutating shared state:

>>> from calckit.config import AccuracyConfig
>>> config = AccuracyConfig()
>>> precise = config.replace(integration_places=-1, sample_count=200001)
>>> precise.integration_places
-1
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from calckit.utils.numerics import MAX_FLOAT
from calckit.utils.validate import (
    validate_decimal_places,
    validate_non_negative,
    validate_not_nan,
    validate_positive,
    validate_sample_count,
)

__all__ = ["AccuracyConfig", "ROUNDING_FIELDS"]

ROUNDING_FIELDS: tuple[str, ...] = (
    "integration_places",
    "derivative_places",
    "left_riemann_sum_places",
    "right_riemann_sum_places",
    "midpoint_rule_places",
    "trapezoidal_sum_places",
    "revolution_places",
    "cross_section_places",
    "limit_places",
    "left_limit_places",
    "right_limit_places",
    "polar_area_places",
)


@dataclass(frozen=True)
class AccuracyConfig:
    """Numeric knobs shared by every algorithm of :class:`CalculusKit`.

    Attributes:
        sample_count: Number of Simpson's rule sample points. Larger is more
            accurate and slower. An odd count gives an even number of
            subintervals, which the composite rule requires for full accuracy.
        derivative_step: Forward-difference step ``H``.
        derivative_offset: Distance left and right of ``x`` at which the
            one-sided derivatives are probed.
        derivative_tolerance: Largest allowed gap between the left and right
            derivative before the derivative is reported as NaN.
        limit_offset: Distance left and right of ``x`` at which the one-sided
            limits are probed.
        limit_tolerance: Largest allowed gap between the (rounded) left and
            right limit before the limit is reported as NaN.
        limit_infinity_probe: Finite magnitude probed in place of ``x`` when a
            limit is taken at ``±inf`` or at the largest finite float.
        positive_infinity: Rounded results above this collapse to ``+inf``.
        negative_infinity: Rounded results below this collapse to ``-inf``.
        zero_tolerance: Magnitude below which :meth:`CalculusKit.snap_to_zero`
            reports exactly zero.
        integration_places ... polar_area_places: Decimal places each family
            rounds its result to; ``-1`` disables rounding for that family.
    """

    sample_count: int = 64001
    derivative_step: float = 1e-9
    derivative_offset: float = 1e-9
    derivative_tolerance: float = 1e-3
    limit_offset: float = 1e-9
    limit_tolerance: float = 1e-6
    limit_infinity_probe: float = 1e15
    positive_infinity: float = MAX_FLOAT
    negative_infinity: float = -MAX_FLOAT
    zero_tolerance: float = 1e-12

    integration_places: int = 3
    derivative_places: int = 3
    left_riemann_sum_places: int = 3
    right_riemann_sum_places: int = 3
    midpoint_rule_places: int = 3
    trapezoidal_sum_places: int = 3
    revolution_places: int = 3
    cross_section_places: int = 3
    limit_places: int = 3
    left_limit_places: int = 3
    right_limit_places: int = 3
    polar_area_places: int = 3

    def __post_init__(self) -> None:
        """Validates every field; raises ``ValueError`` or ``TypeError``."""
        validate_sample_count(self.sample_count)
        validate_positive(self.derivative_step, "derivative_step")
        validate_non_negative(self.derivative_offset, "derivative_offset")
        validate_non_negative(self.derivative_tolerance, "derivative_tolerance")
        validate_non_negative(self.limit_offset, "limit_offset")
        validate_non_negative(self.limit_tolerance, "limit_tolerance")
        validate_positive(self.limit_infinity_probe, "limit_infinity_probe")
        validate_not_nan(self.positive_infinity, "positive_infinity")
        validate_not_nan(self.negative_infinity, "negative_infinity")
        validate_non_negative(self.zero_tolerance, "zero_tolerance")
        for name in ROUNDING_FIELDS:
            validate_decimal_places(getattr(self, name), name)

    def replace(self, **changes) -> AccuracyConfig:
        """Returns a validated copy with ``changes`` applied.

        Raises:
            TypeError: If a keyword does not name a configuration field.
        """
        return dataclasses.replace(self, **changes)

    def with_rounding(self, places: int) -> AccuracyConfig:
        """Returns a copy where every family rounds to ``places`` (``-1`` disables)."""
        return self.replace(**{name: places for name in ROUNDING_FIELDS})
