"""Re-expansion of a polynomial in powers of ``(x - a)``."""

from __future__ import annotations

import sys
from typing import Sequence

EPS = 1e-6


def evaluate_polynomial(x: float, coefficients: Sequence[float]) -> float:
    """Evaluate ``sum(c[i] * x**i)``; coefficients go from the constant term up."""
    result = 0.0
    power = 1.0
    for coefficient in coefficients:
        result += power * coefficient
        power *= x
    return result


def evaluate_decomposition(x: float, coefficients: Sequence[float], a: float) -> float:
    """Evaluate ``sum(g[i] * (x - a)**i)``."""
    return evaluate_polynomial(x - a, coefficients)


def shift_polynomial(a: float, *args: float) -> list[float]:
    """Return the coefficients of the polynomial with coefficients ``args`` in powers of ``(x - a)``.

    ``args`` go from the constant term up; none raise ``ValueError``.
    """
    if not args:
        raise ValueError("at least one coefficient is required")
    coefficients = [float(c) for c in args]
    result = []
    factorial = 1.0
    for i in range(len(args)):
        if i > 1:
            factorial *= i
        result.append(evaluate_polynomial(a, coefficients) / factorial)
        coefficients = [k * c for k, c in enumerate(coefficients) if k]
    return result


def compare_polynomials(f: Sequence[float], g: Sequence[float], x: float, a: float) -> bool:
    """Tell whether ``f`` at ``x`` equals the expansion ``g`` around ``a`` at ``x``, within ``EPS``."""
    return abs(evaluate_polynomial(x, f) - evaluate_decomposition(x, g, a)) < EPS


def main(argv: Sequence[str] | None = None) -> int:
    """Expand the demonstration polynomials and check one expansion at a point."""
    a = 3.0
    f = (-2.0, 1.0, -3.0, 0.0, 1.0)
    g = shift_polynomial(a, *f)
    print("".join(f"{value:f} " for value in g))
    x = 5.0
    print(f"f_x = {evaluate_polynomial(x, f):f}, g_x = {evaluate_decomposition(x, g, a):f}")
    compare_polynomials(f, g, x, a)
    zeros = shift_polynomial(1.0, 0.0, 0.0, 0.0, 0.0)
    print("".join(f"{value:f} " for value in zeros))
    return 0


if __name__ == "__main__":
    sys.exit(main())