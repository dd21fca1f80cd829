"""Provides the CalculusKit class.

A light front end over the calculus algorithms. A kit binds one
:class:`~calckit.config.AccuracyConfig` and applies its rounding policy to
every result it returns; the algorithm modules themselves stay unrounded.

Typical usage examples:

>>> import numpy as np
>>> from calckit.calculus_kit import CalculusKit
>>>
>>> calc = CalculusKit()
>>> calc.integrate(0, 2, lambda x: 2 * x)
4.0
>>> calc.derivate(2, lambda x: x**2)
4.0
>>> bool(np.isnan(calc.derivate(0, abs)))
True
>>> calc.left_riemann_sum(0, 16, lambda x: x**2, 4)
896.0

Use a different accuracy configuration through :meth:`CalculusKit.with_config`:

>>> raw = calc.with_config(integration_places=-1)
>>> raw.config.integration_places
-1
"""

from __future__ import annotations

from calckit.config import AccuracyConfig
from calckit.differentiation import core as differentiation
from calckit.differentiation.tangent import TangentLine
from calckit.differentiation.tangent import tangent_line as build_tangent_line
from calckit.integration import riemann
from calckit.integration.simpson import simpson_integral
from calckit.limits import core as limits
from calckit.logger import calckit_logger
from calckit.utils.numerics import round_half_even
from calckit.utils.numerics import snap_to_zero as snap
from calckit.utils.types import Function
from calckit.volumes.cross_section import cross_section_integrand, cross_section_volume
from calckit.volumes.polar import polar_area as polar_area_raw
from calckit.volumes.revolution import revolution_volume

__all__ = ["CalculusKit"]

NAN = float("nan")


class CalculusKit:
    """Numerical integrals, derivatives, limits, sums and volumes.

    Every public operation reads ``self.config`` at call time and rounds its
    result with the precision configured for its family. Invalid parameters
    (subinterval counts, cross-section types) raise; mathematical
    non-existence of a derivative or limit is reported as NaN.

    Attributes:
        config: The accuracy configuration in use.
    """

    def __init__(self, config: AccuracyConfig | None = None):
        """Initialises the kit.

        Args:
            config: Accuracy configuration. Defaults to ``AccuracyConfig()``.
        """
        self.config = config if config is not None else AccuracyConfig()

    def with_config(self, **changes) -> CalculusKit:
        """Returns a new kit whose configuration has ``changes`` applied."""
        return CalculusKit(self.config.replace(**changes))

    def round(self, x: float, decimal_places: int) -> float:
        """Rounds half to even, clamping beyond the configured infinity thresholds."""
        return round_half_even(
            x,
            decimal_places,
            positive_infinity=self.config.positive_infinity,
            negative_infinity=self.config.negative_infinity,
        )

    def snap_to_zero(self, x: float) -> float:
        """Returns ``0.0`` when ``|x|`` is below ``config.zero_tolerance``."""
        return snap(x, self.config.zero_tolerance)

    # Integration

    def integrate(self, a: float, b: float, function: Function) -> float:
        """Integrates ``function`` from ``a`` to ``b`` with Simpson's rule."""
        return self.round(self.integrate_raw(a, b, function), self.config.integration_places)

    def integrate_raw(self, a: float, b: float, function: Function) -> float:
        """Same as :meth:`integrate` without rounding, for use inside compositions."""
        return simpson_integral(function, a, b, self.config.sample_count)

    # Differentiation

    def derivate(self, x: float, function: Function) -> float:
        """Derivative of ``function`` at ``x``, or NaN if it does not exist.

        The derivative is declared non-existent when the left and right
        derivatives differ by more than ``config.derivative_tolerance``, as
        for ``abs`` at ``0``.
        """
        left = self.left_derivative(x, function)
        right = self.right_derivative(x, function)
        if not differentiation.derivative_exists(left, right, self.config.derivative_tolerance):
            calckit_logger.debug(
                "Derivative at x=%r does not exist: left=%r, right=%r, tolerance=%r.",
                x, left, right, self.config.derivative_tolerance,
            )
            return NAN
        slope = differentiation.forward_difference(function, x, self.config.derivative_step)
        return self.round(slope, self.config.derivative_places)

    def left_derivative(self, x: float, function: Function) -> float:
        """Unrounded derivative probed ``config.derivative_offset`` left of ``x``."""
        return differentiation.left_derivative(
            function, x, self.config.derivative_step, self.config.derivative_offset
        )

    def right_derivative(self, x: float, function: Function) -> float:
        """Unrounded derivative probed ``config.derivative_offset`` right of ``x``."""
        return differentiation.right_derivative(
            function, x, self.config.derivative_step, self.config.derivative_offset
        )

    def tangent_line(self, x: float, function: Function) -> TangentLine:
        """Tangent line of ``function`` at ``x``, using the rounded :meth:`derivate`."""
        return build_tangent_line(function, x, self.derivate(x, function))

    # Limits

    def limit(self, x: float, function: Function) -> float:
        """Limit of ``function`` at ``x``, or NaN if it does not exist.

        The rounded one-sided limits are compared against
        ``config.limit_tolerance``; when they agree the right-hand probe,
        rounded with ``config.limit_places``, is returned. ``x`` may be
        ``±inf``.
        """
        left = self.left_limit(x, function)
        right = self.right_limit(x, function)
        if not limits.limit_exists(left, right, self.config.limit_tolerance):
            calckit_logger.debug(
                "Limit at x=%r does not exist: left=%r, right=%r, tolerance=%r.",
                x, left, right, self.config.limit_tolerance,
            )
            return NAN
        value = limits.right_limit(
            function, x, self.config.limit_offset, self.config.limit_infinity_probe
        )
        return self.round(value, self.config.limit_places)

    def left_limit(self, x: float, function: Function) -> float:
        """Value of ``function`` just left of ``x``."""
        value = limits.left_limit(
            function, x, self.config.limit_offset, self.config.limit_infinity_probe
        )
        return self.round(value, self.config.left_limit_places)

    def right_limit(self, x: float, function: Function) -> float:
        """Value of ``function`` just right of ``x``."""
        value = limits.right_limit(
            function, x, self.config.limit_offset, self.config.limit_infinity_probe
        )
        return self.round(value, self.config.right_limit_places)

    # Riemann family

    def left_riemann_sum(self, a: float, b: float, function: Function, n: int) -> float:
        """Left Riemann sum with ``n`` rectangles.

        Raises:
            ValueError: If ``n < 1``.
        """
        value = riemann.left_riemann_sum(function, a, b, n)
        return self.round(value, self.config.left_riemann_sum_places)

    def right_riemann_sum(self, a: float, b: float, function: Function, n: int) -> float:
        """Right Riemann sum with ``n`` rectangles.

        Raises:
            ValueError: If ``n < 1``.
        """
        value = riemann.right_riemann_sum(function, a, b, n)
        return self.round(value, self.config.right_riemann_sum_places)

    def midpoint_rule(self, a: float, b: float, function: Function, n: int) -> float:
        """Midpoint rule with ``n`` rectangles.

        Raises:
            ValueError: If ``n < 1``.
        """
        value = riemann.midpoint_rule(function, a, b, n)
        return self.round(value, self.config.midpoint_rule_places)

    def trapezoidal_sum(self, a: float, b: float, function: Function, n: int) -> float:
        """Trapezoidal rule with ``n`` trapezoids.

        Raises:
            ValueError: If ``n < 1``.
        """
        value = riemann.trapezoidal_sum(function, a, b, n)
        return self.round(value, self.config.trapezoidal_sum_places)

    # Geometry

    def revolve(
        self,
        a: float,
        b: float,
        axis: float,
        function_top: Function,
        function_bottom: Function,
    ) -> float:
        """Volume of revolution of the region between two curves about ``y = axis``.

        Both integrals are unrounded; only the volume is rounded.
        """
        volume = revolution_volume(
            function_top, function_bottom, a, b, axis, self.config.sample_count
        )
        return self.round(volume, self.config.revolution_places)

    def cross_section(
        self,
        a: float,
        b: float,
        function_top: Function,
        function_bottom: Function,
        kind,
    ) -> float:
        """Volume of a solid with known cross-sections over ``[a, b]``.

        Args:
            a: Lower limit of integration.
            b: Upper limit of integration.
            function_top: Top curve bounding the base region.
            function_bottom: Bottom curve bounding the base region.
            kind: A :class:`~calckit.volumes.CrossSection`, its integer value
                (``0 - 4``) or its name.

        Raises:
            InvalidCrossSectionTypeError: If ``kind`` is not a known shape.
        """
        integrand = cross_section_integrand(function_top, function_bottom, kind)
        return self.custom_cross_section(a, b, integrand)

    def custom_cross_section(self, a: float, b: float, integrand: Function) -> float:
        """Volume of a solid whose slice area at ``x`` is ``integrand(x)``."""
        volume = cross_section_volume(integrand, a, b, self.config.sample_count)
        return self.round(volume, self.config.cross_section_places)

    def polar_area(self, a: float, b: float, r: Function) -> float:
        """Area bounded by the polar curve ``r(theta)`` between two angles."""
        area = polar_area_raw(r, a, b, self.config.sample_count)
        return self.round(area, self.config.polar_area_places)
