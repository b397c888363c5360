"""Geometric mean and exponentiation by squaring with overflow detection."""

from __future__ import annotations

import operator
import sys
from typing import Sequence

_DBL_MAX = sys.float_info.max


def _check_overflow(value: float) -> None:
    if value >= _DBL_MAX:
        raise OverflowError("result exceeds the largest double")


def geometric_mean(*args: float) -> float:
    """Return the geometric mean of the arguments, which must not be negative.

    With no arguments the result is 1.0.
    """
    if not args:
        return 1.0
    product = 1.0
    for value in args:
        if value < 0:
            raise ValueError(f"negative value {value}")
        product *= value
        _check_overflow(product)
    return product ** (1.0 / len(args))


def _power(base: float, exponent: int) -> float:
    if exponent == 0:
        return 1.0
    if exponent % 2 == 0:
        half = _power(base, exponent // 2)
        _check_overflow(half)
        return half * half
    rest = _power(base, exponent - 1)
    _check_overflow(rest)
    return rest * base


def fast_power(base: float, exponent: int) -> float:
    """Raise ``base`` to the integer ``exponent`` by repeated squaring."""
    exponent = operator.index(exponent)
    base = float(base)
    if exponent < 0:
        base = 1.0 / base
        exponent = -exponent
    result = _power(base, exponent)
    _check_overflow(result)
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Print a geometric mean and a power; numbers given as arguments replace the demo values."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = [float(arg) for arg in args] if args else [0.0, 5.0, 4.0, 8.0, 10.0]
        mean = geometric_mean(*values)
        base, exponent = 2.0, 8
        power = fast_power(base, exponent)
    except OverflowError:
        print("Overflow error")
        return 1
    except ValueError:
        print("Invalid_input")
        return 1
    listed = ", ".join(f"{value:g}" for value in values)
    print(f"For numbers {listed} geom average: {mean:f}")
    print(f"for {base:f} and degree {exponent} result of exponentation: {power:f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())