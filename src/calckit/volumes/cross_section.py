"""Volumes of solids with known cross-sections.

The base of the solid is the region between two curves on ``[a, b]``. Each
slice perpendicular to the x-axis is a shape whose area is a fixed multiple
of the squared width ``(top(x) - bottom(x))**2``.
"""

from __future__ import annotations

import re
from enum import IntEnum

import numpy as np

from calckit.integration.simpson import simpson_integral
from calckit.utils.types import Function

__all__ = [
    "CrossSection",
    "InvalidCrossSectionTypeError",
    "cross_section_integrand",
    "cross_section_volume",
]


class InvalidCrossSectionTypeError(ValueError):
    """Raised when a cross-section type is not one of :class:`CrossSection`."""

    def __init__(self, invalid_type):
        """Builds the message from the rejected value."""
        self.invalid_type = invalid_type
        super().__init__(
            f"<{invalid_type}> is not a valid cross-section type. "
            f"Please enter a valid cross-section type (0 - {len(CrossSection) - 1})."
        )


class CrossSection(IntEnum):
    """Common known cross-section shapes."""

    SQUARE = 0
    EQUILATERAL_TRIANGLE = 1
    ISOSCELES_TRIANGLE = 2
    RIGHT_TRIANGLE = 3
    SEMICIRCLE = 4

    @property
    def scale(self) -> float:
        """Area of the shape divided by the squared width of its base."""
        return _SCALES[self]

    @classmethod
    def coerce(cls, value) -> CrossSection:
        """Resolves a member, an integer ``0 - 4`` or a shape name.

        Names are matched case, spacing and punctuation insensitively, so
        ``"equilateral-triangle"`` and ``"Equilateral Triangle"`` both work.

        Raises:
            InvalidCrossSectionTypeError: If ``value`` names no shape.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            member = _BY_NAME.get(_norm(value))
            if member is None:
                raise InvalidCrossSectionTypeError(value)
            return member
        if isinstance(value, bool):
            raise InvalidCrossSectionTypeError(value)
        try:
            return cls(value)
        except (ValueError, TypeError):
            raise InvalidCrossSectionTypeError(value) from None


_SCALES: dict[CrossSection, float] = {
    CrossSection.SQUARE: 1.0,
    CrossSection.EQUILATERAL_TRIANGLE: float(np.sqrt(3.0) / 4.0),
    CrossSection.ISOSCELES_TRIANGLE: 0.75,
    CrossSection.RIGHT_TRIANGLE: 0.5,
    CrossSection.SEMICIRCLE: float(np.pi / 8.0),
}


def _norm(s: str) -> str:
    """Normalize a shape name for robust matching (case/spacing/punct insensitive)."""
    return re.sub(r"[^a-z0-9]+", "", s.lower())


_BY_NAME: dict[str, CrossSection] = {_norm(member.name): member for member in CrossSection}


def cross_section_integrand(
    function_top: Function,
    function_bottom: Function,
    kind,
) -> Function:
    """Returns ``x -> scale(kind) * (top(x) - bottom(x))**2``.

    Raises:
        InvalidCrossSectionTypeError: If ``kind`` is not a known shape.
    """
    scale = CrossSection.coerce(kind).scale

    def integrand(x: float) -> float:
        return scale * (function_top(x) - function_bottom(x)) ** 2

    return integrand


def cross_section_volume(integrand: Function, a: float, b: float, sample_count: int) -> float:
    """Integrates a slice-area function over ``[a, b]`` (unrounded)."""
    return simpson_integral(integrand, a, b, sample_count)
