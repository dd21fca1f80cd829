"""Quick comparison of the quadrature methods in CalculusKit.

Run with:
    python compare_quadrature_methods.py
"""

from __future__ import annotations

from typing import Any

import numpy as np

from calckit.calculus_kit import CalculusKit
from calckit.config import AccuracyConfig


def rel_err(a: float, b: float) -> float:
    """Relative error with a safe denominator."""
    d = max(1.0, abs(a), abs(b))
    return abs(a - b) / d


def main() -> None:
    """Main comparison routine."""
    # Integrands with known antiderivatives over [a, b]
    cases: list[dict[str, Any]] = [
        {
            "name": "x^2 on [0, 16]",
            "f": lambda x: x**2,
            "a": 0.0,
            "b": 16.0,
            "exact": 16.0**3 / 3.0,
        },
        {
            "name": "sin on [0, pi]",
            "f": np.sin,
            "a": 0.0,
            "b": np.pi,
            "exact": 2.0,
        },
        {
            "name": "exp on [-1, 1]",
            "f": np.exp,
            "a": -1.0,
            "b": 1.0,
            "exact": np.exp(1.0) - np.exp(-1.0),
        },
        {
            "name": "Runge 1 / (1 + 25x^2) on [-1, 1]",
            "f": lambda x: 1.0 / (1.0 + 25.0 * x**2),
            "a": -1.0,
            "b": 1.0,
            "exact": 2.0 * np.arctan(5.0) / 5.0,
        },
    ]

    # unrounded results so the differences between schemes stay visible
    calc = CalculusKit(AccuracyConfig(sample_count=1001).with_rounding(-1))

    methods = {
        "left": calc.left_riemann_sum,
        "right": calc.right_riemann_sum,
        "midpoint": calc.midpoint_rule,
        "trapezoid": calc.trapezoidal_sum,
    }

    line = "-" * 72
    for case in cases:
        f, a, b, exact = case["f"], case["a"], case["b"], case["exact"]
        print(line)
        print(f"{case['name']}  (exact = {exact:.10g})")
        print(line)
        for n in (4, 16, 64):
            for name, method in methods.items():
                value = method(a, b, f, n)
                print(f"  n={n:<4d} {name:<10s} {value:>18.10g}   rel.err={rel_err(value, exact):.2e}")
        value = calc.integrate(a, b, f)
        print(f"  simpson ({calc.config.sample_count} pts) {value:>14.10g}   rel.err={rel_err(value, exact):.2e}")


if __name__ == "__main__":
    main()
