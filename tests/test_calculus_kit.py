"""Tests for CalculusKit class."""

import logging
import re

import numpy as np
import pytest
from numpy.testing import assert_allclose

import calckit.calculus_kit as ck
from calckit.calculus_kit import CalculusKit
from calckit.config import AccuracyConfig
from calckit.differentiation.tangent import TangentLine
from calckit.utils.numerics import MAX_FLOAT
from calckit.volumes import CrossSection, InvalidCrossSectionTypeError


def square(x):
    """f(x) = x^2."""
    return x**2


def test_default_config_is_used():
    """Tests that a kit without arguments uses AccuracyConfig()."""
    assert CalculusKit().config == AccuracyConfig()


def test_with_config_returns_new_kit(calc):
    """Tests that with_config never mutates the original kit."""
    other = calc.with_config(sample_count=11)
    assert other.config.sample_count == 11
    assert calc.config.sample_count == 64001


def test_round_uses_configured_thresholds():
    """Tests that the kit's round clamps with its own thresholds."""
    calc = CalculusKit(AccuracyConfig(positive_infinity=100.0, negative_infinity=-100.0))
    assert calc.round(101.0, 3) == np.inf
    assert calc.round(-101.0, 3) == -np.inf
    assert calc.round(99.99951, 3) == 100.0
    assert calc.round(101.0, -1) == 101.0


@pytest.mark.parametrize(
    "places, error",
    [(2.0, TypeError), ("3", TypeError), (True, TypeError), (-2, ValueError)],
)
def test_round_rejects_invalid_decimal_places(calc, places, error):
    """Tests that a bad precision is reported by name."""
    with pytest.raises(error, match="decimal_places"):
        calc.round(1.23456, places)


def test_snap_to_zero_uses_configured_tolerance():
    """Tests the explicit zero-floor operation."""
    calc = CalculusKit(AccuracyConfig(zero_tolerance=1e-6))
    assert calc.snap_to_zero(5e-7) == 0.0
    assert calc.snap_to_zero(5e-6) == 5e-6


# Integration

def test_integrate_two_x(calc):
    """Tests the integral of 2x from 0 to 2."""
    assert calc.integrate(0, 2, lambda x: 2 * x) == 4.0


def test_integrate_odd_function(calc):
    """Tests the integral of x^3 from -2 to 2."""
    assert calc.integrate(-2, 2, lambda x: x**3) == 0.0


def test_integrate_constant(calc):
    """Tests the integral of y = 4 from 0 to 2."""
    assert calc.integrate(0, 2, lambda x: 4) == 8.0


def test_integrate_rounds_with_integration_places(calc):
    """Tests that integrate rounds and integrate_raw does not."""
    third = lambda x: 1.0 / 3.0  # noqa: E731
    assert calc.integrate(0, 1, third) == 0.333
    assert calc.with_config(integration_places=5).integrate(0, 1, third) == 0.33333
    assert_allclose(calc.integrate_raw(0, 1, third), 1.0 / 3.0, rtol=1e-12)


def test_integrate_raw_passes_sample_count(monkeypatch):
    """Tests that the configured sample count reaches Simpson's rule."""
    seen = {}

    def fake_simpson(function, a, b, sample_count):
        seen["sample_count"] = sample_count
        return 1.23456

    monkeypatch.setattr(ck, "simpson_integral", fake_simpson)
    calc = CalculusKit(AccuracyConfig(sample_count=31))
    assert calc.integrate(0, 1, square) == 1.235
    assert seen["sample_count"] == 31


# Differentiation

def test_derivative_of_x_squared(calc):
    """Tests the derivative of x^2 at x = 2."""
    assert calc.derivate(2, square) == 4.0


def test_derivative_of_abs_does_not_exist(calc):
    """Tests that |x| has no derivative at 0."""
    assert np.isnan(calc.derivate(0, abs))


def test_one_sided_derivatives_of_abs(calc):
    """Tests the left and right derivatives of |x| at 0."""
    assert calc.left_derivative(0, abs) == -1.0
    assert calc.right_derivative(0, abs) == 1.0


def test_derivative_of_exp(calc):
    """Tests a transcendental derivative rounded to three places."""
    assert calc.derivate(1, np.exp) == 2.718


def test_derivative_unrounded(raw_calc):
    """Tests that disabling rounding returns the raw estimate."""
    value = raw_calc.derivate(1, np.exp)
    assert value != 2.718
    assert_allclose(value, np.e, rtol=1e-6)


def test_derivative_nan_propagates(calc):
    """Tests that an undefined function gives an undefined derivative."""
    assert np.isnan(calc.derivate(1, lambda x: np.nan))


def test_derivative_does_not_exist_is_logged(calc, caplog):
    """Tests the debug message when the one-sided derivatives disagree."""
    with caplog.at_level(logging.DEBUG, logger="calckit"):
        calc.derivate(0, abs)
    assert "Derivative at x=0 does not exist" in caplog.text


def test_derivative_at_large_x_is_nan(calc):
    """Tests that a step too small to move x gives NaN rather than an error."""
    assert np.isnan(calc.derivate(2e7, square))


# Tangent lines

def test_tangent_line_of_x_squared_x_intercept(calc):
    """Tests that the tangent of x^2 at 2 crosses the x-axis at 1."""
    line = calc.tangent_line(2, square)
    assert isinstance(line, TangentLine)
    assert line(1) == 0.0


def test_tangent_line_of_x_squared_slope(calc):
    """Tests that the tangent line's own derivative is its slope."""
    line = calc.tangent_line(2, square)
    assert calc.derivate(2, line) == 4.0


def test_tangent_line_at_corner_is_undefined(calc):
    """Tests that a missing derivative yields a NaN line."""
    assert np.isnan(calc.tangent_line(0, abs)(1.0))


def test_tangent_line_at_large_x_is_undefined(calc):
    """Tests that an unresolvable slope yields a NaN line instead of raising."""
    line = calc.tangent_line(1e8, lambda x: 3 * x)
    assert np.isnan(line.slope)
    assert np.isnan(line(1.0))


# Riemann family

def test_riemann_family_x_squared(calc):
    """Tests the four schemes on x^2 from 0 to 16 with n = 4."""
    assert calc.left_riemann_sum(0, 16, square, 4) == 896.0
    assert calc.right_riemann_sum(0, 16, square, 4) == 1920.0
    assert calc.midpoint_rule(0, 16, square, 4) == 1344.0
    assert calc.trapezoidal_sum(0, 16, square, 4) == 1408.0


@pytest.mark.parametrize(
    "method", ["left_riemann_sum", "right_riemann_sum", "midpoint_rule", "trapezoidal_sum"]
)
def test_riemann_family_rejects_zero_subintervals(calc, method):
    """Tests that n = 0 is rejected by every scheme."""
    with pytest.raises(ValueError, match="There must be at least one subinterval; got n=0."):
        getattr(calc, method)(0, 16, lambda x: x, 0)


@pytest.mark.parametrize(
    "method, field",
    [
        ("left_riemann_sum", "left_riemann_sum_places"),
        ("right_riemann_sum", "right_riemann_sum_places"),
        ("midpoint_rule", "midpoint_rule_places"),
        ("trapezoidal_sum", "trapezoidal_sum_places"),
    ],
)
def test_riemann_family_rounds_with_own_precision(calc, method, field):
    """Tests that each scheme reads its own rounding knob."""
    f = lambda x: 1.0 / 3.0  # noqa: E731
    assert getattr(calc, method)(0, 1, f, 3) == 0.333
    other = calc.with_config(**{field: 1})
    assert getattr(other, method)(0, 1, f, 3) == 0.3


# Limits

def test_limit_of_x_squared(calc):
    """Tests the limit of x^2 at x = 2."""
    assert calc.limit(2, square) == 4.0


def test_limit_at_removable_discontinuity(calc):
    """Tests the limit of (x^2 - 2x - 8) / (x - 4) at x = 4."""
    assert calc.limit(4, lambda x: (x**2 - 2 * x - 8) / (x - 4)) == 6.0


def test_limit_of_one_over_x_squared(calc):
    """Tests that a symmetric blow-up returns the large probe value."""
    assert calc.limit(0, lambda x: 1 / x**2) == pytest.approx(1e18, rel=1e-9)


def test_limit_at_violent_oscillation(calc):
    """Tests that sin(1/x) has no limit at 0."""
    assert np.isnan(calc.limit(0, lambda x: np.sin(1 / x)))


def test_limit_at_asymptote(calc):
    """Tests that (x + 2) / x has no limit at 0."""
    assert np.isnan(calc.limit(0, lambda x: (x + 2) / x))


def test_limit_at_jump(calc):
    """Tests that a step function has no limit at the step."""
    assert np.isnan(calc.limit(0, lambda x: 1.0 if x >= 0 else 0.0))


@pytest.mark.parametrize("x", [np.inf, MAX_FLOAT, -np.inf, -MAX_FLOAT])
def test_limits_at_infinity(calc, x):
    """Tests the end behaviour of 5 + 3 / x^2."""
    f = lambda t: 5 + 3 / t**2  # noqa: E731
    assert calc.left_limit(x, f) == 5.0
    assert calc.right_limit(x, f) == 5.0
    assert calc.limit(x, f) == 5.0


def test_limit_at_infinity_of_rational_function(calc):
    """Tests that x / (x + 1) tends to 1."""
    assert calc.limit(np.inf, lambda x: x / (x + 1)) == 1.0


def test_one_sided_limits_use_own_precision(calc):
    """Tests that left and right limits read separate rounding knobs."""
    other = calc.with_config(left_limit_places=1, right_limit_places=2)
    assert other.left_limit(0, lambda x: 1.23456) == 1.2
    assert other.right_limit(0, lambda x: 1.23456) == 1.23


def test_limit_unrounded_uses_tolerance(raw_calc):
    """Tests that unrounded one-sided limits are compared against the tolerance."""
    assert_allclose(raw_calc.limit(2, square), 4.0, rtol=1e-8)
    strict = raw_calc.with_config(limit_tolerance=0.0)
    assert np.isnan(strict.limit(2, square))


def test_limit_does_not_exist_is_logged(calc, caplog):
    """Tests the debug message when the one-sided limits disagree."""
    with caplog.at_level(logging.DEBUG, logger="calckit"):
        calc.limit(0, lambda x: (x + 2) / x)
    assert "Limit at x=0 does not exist" in caplog.text


# Geometry

def test_revolve_x_squared(calc):
    """Tests the volume of y = x^2 on [0, 2] revolved about the x-axis."""
    assert calc.revolve(0, 2, 0, square, lambda x: 0) == 20.106


def test_revolve_rounds_only_the_final_volume(raw_calc):
    """Tests that no intermediate integral is rounded."""
    volume = raw_calc.revolve(0, 2, 0, square, lambda x: 0)
    assert_allclose(volume, 32.0 * np.pi / 5.0, rtol=1e-9)
    calc = raw_calc.with_config(integration_places=0)
    assert_allclose(calc.revolve(0, 2, 0, square, lambda x: 0), volume, rtol=0)


@pytest.mark.parametrize(
    "kind, expected",
    [
        (CrossSection.SQUARE, 2.667),
        (CrossSection.EQUILATERAL_TRIANGLE, 1.155),
        (CrossSection.ISOSCELES_TRIANGLE, 2.0),
        (CrossSection.RIGHT_TRIANGLE, 1.333),
        (CrossSection.SEMICIRCLE, 1.047),
        (1, 1.155),
        ("semicircle", 1.047),
    ],
)
def test_cross_sections(calc, kind, expected):
    """Tests the five known cross-sections over a triangular base."""
    top = lambda x: 1 - (x / 2)  # noqa: E731
    bottom = lambda x: -1 + (x / 2)  # noqa: E731
    assert calc.cross_section(0, 2, top, bottom, kind) == expected


def test_invalid_cross_section_type(calc):
    """Tests that type 5 is rejected with the valid range in the message."""
    expected = "<5> is not a valid cross-section type. Please enter a valid cross-section type (0 - 4)."
    with pytest.raises(InvalidCrossSectionTypeError, match=re.escape(expected)):
        calc.cross_section(0, 2, lambda x: 1 - (x / 2), lambda x: -1 + (x / 2), 5)


def test_custom_cross_section(calc):
    """Tests the overload taking a ready-made slice-area function."""
    assert calc.custom_cross_section(0, 2, lambda x: (2 - x) ** 2) == 2.667


def test_cross_section_rounds_with_own_precision(calc):
    """Tests that cross-sections read cross_section_places."""
    other = calc.with_config(cross_section_places=5)
    assert other.custom_cross_section(0, 2, lambda x: (2 - x) ** 2) == 2.66667


@pytest.mark.parametrize(
    "r, b, expected",
    [
        (np.sin, np.pi, 0.785),
        (np.sin, 2 * np.pi, 1.571),
        (lambda x: 2 * np.cos(3 * x), np.pi, 3.142),
    ],
)
def test_polar_area(calc, r, b, expected):
    """Tests polar areas of rose curves."""
    assert calc.polar_area(0, b, r) == expected
