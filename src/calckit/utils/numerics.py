"""Numerical utilities."""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Context, Decimal

import numpy as np

from calckit.utils.validate import validate_decimal_places

__all__ = [
    "MAX_FLOAT",
    "round_half_even",
    "snap_to_zero",
    "is_unbounded",
]

MAX_FLOAT = float(np.finfo(np.float64).max)


def round_half_even(
    x: float,
    decimal_places: int,
    *,
    positive_infinity: float = MAX_FLOAT,
    negative_infinity: float = -MAX_FLOAT,
) -> float:
    """Rounds ``x`` to ``decimal_places`` using round-half-to-even.

    The rounding acts on the shortest decimal representation of ``x`` (its
    ``repr``), not on the binary value, so ``2.675`` rounds to ``2.68``
    rather than to ``2.67``.

    Args:
        x: The value to be rounded.
        decimal_places: The number of decimal places to round to. Any
            negative value disables rounding and returns ``x`` unchanged.
        positive_infinity: Values strictly greater than this collapse to
            ``+inf``.
        negative_infinity: Values strictly less than this collapse to
            ``-inf``.

    Returns:
        The rounded value as a float. NaN passes through unchanged.

    Raises:
        TypeError: If ``decimal_places`` is not an integer.
        ValueError: If ``decimal_places`` is below ``-1``.
    """
    decimal_places = validate_decimal_places(decimal_places, "decimal_places")
    x = float(x)
    if decimal_places < 0:
        return x
    if np.isnan(x):
        return x
    if x > positive_infinity:
        return float("inf")
    if x < negative_infinity:
        return float("-inf")
    if not np.isfinite(x):
        return x

    value = Decimal(repr(x))
    # The context must hold every integer digit plus the requested decimals,
    # otherwise quantize() signals InvalidOperation for large magnitudes.
    precision = max(28, value.adjusted() + decimal_places + 2)
    quantum = Decimal(1).scaleb(-decimal_places)
    rounded = value.quantize(
        quantum,
        rounding=ROUND_HALF_EVEN,
        context=Context(prec=precision),
    )
    return float(rounded)


def snap_to_zero(x: float, tolerance: float) -> float:
    """Returns exactly ``0.0`` when ``|x|`` is below ``tolerance``.

    This is the "round toward zero floor" policy: results that only differ
    from zero by accumulated floating-point noise are reported as zero.
    Negative zero is normalised to ``0.0``. NaN and infinities pass through.

    Args:
        x: Value to inspect.
        tolerance: Non-negative magnitude under which ``x`` counts as zero.

    Returns:
        ``0.0`` or ``x`` unchanged.
    """
    x = float(x)
    if abs(x) < tolerance or x == 0.0:
        return 0.0
    return x


def is_unbounded(x: float) -> bool:
    """Returns True if ``x`` is infinite or sits at the largest finite float."""
    return bool(np.isinf(x)) or abs(x) >= MAX_FLOAT
