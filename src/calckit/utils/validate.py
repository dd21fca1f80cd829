"""Validation utilities for CalcKit."""

from __future__ import annotations

import numbers

import numpy as np

__all__ = [
    "validate_integer",
    "validate_sample_count",
    "validate_subinterval_count",
    "validate_decimal_places",
    "validate_non_negative",
    "validate_positive",
    "validate_not_nan",
]


def validate_integer(value, name: str) -> int:
    """Checks that ``value`` is an integer (``bool`` excluded) and returns it as ``int``.

    Raises:
        TypeError: If ``value`` is not an integral number.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise TypeError(f"{name} must be an integer; got {value!r}.")
    return int(value)


def validate_sample_count(sample_count) -> int:
    """Validates the number of Simpson's rule sample points.

    Raises:
        TypeError: If ``sample_count`` is not an integer.
        ValueError: If ``sample_count`` is smaller than 2.
    """
    n = validate_integer(sample_count, "sample_count")
    if n < 2:
        raise ValueError(f"sample_count must be at least 2; got {n}.")
    return n


def validate_subinterval_count(n) -> int:
    """Validates the number of subintervals of a Riemann-type sum.

    Raises:
        TypeError: If ``n`` is not an integer.
        ValueError: If ``n`` is smaller than 1.
    """
    n = validate_integer(n, "n")
    if n < 1:
        raise ValueError(f"There must be at least one subinterval; got n={n}.")
    return n


def validate_decimal_places(places, name: str) -> int:
    """Validates a rounding precision: ``-1`` (disabled) or a non-negative integer."""
    p = validate_integer(places, name)
    if p < -1:
        raise ValueError(
            f"{name} must be -1 (no rounding) or a non-negative integer; got {p}."
        )
    return p


def validate_non_negative(value, name: str) -> float:
    """Validates that ``value`` is a finite, non-negative real number."""
    v = float(value)
    if not np.isfinite(v) or v < 0:
        raise ValueError(f"{name} must be finite and non-negative; got {value!r}.")
    return v


def validate_positive(value, name: str) -> float:
    """Validates that ``value`` is a finite, strictly positive real number."""
    v = float(value)
    if not np.isfinite(v) or v <= 0:
        raise ValueError(f"{name} must be finite and positive; got {value!r}.")
    return v


def validate_not_nan(value, name: str) -> float:
    v = float(value)
    if np.isnan(v):
        raise ValueError(f"{name} must not be NaN.")
    return v
