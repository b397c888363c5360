"""Root finding by halving an interval."""

from __future__ import annotations

import math
import sys
from typing import Callable, Sequence

EPS = 1e-10


def bisect_root(func: Callable[[float], float], left: float, right: float, epsilon: float) -> float:
    """Return a point of ``[left, right]`` where ``abs(func(x)) < epsilon``.

    ``ValueError`` is raised when ``func`` has the same sign at both ends or
    when ``epsilon`` is not positive.  The search also stops once the interval
    cannot be halved any further.
    """
    if func(left) * func(right) > 0:
        raise ValueError("no roots in this segment")
    if epsilon <= 0:
        raise ValueError(f"epsilon must be positive, got {epsilon}")
    middle = (left + right) / 2
    while abs(func(middle)) >= epsilon:
        if func(middle) * func(left) < 0:
            right = middle
        else:
            left = middle
        next_middle = (left + right) / 2
        if next_middle in (left, right):
            return next_middle
        middle = next_middle
    return middle


def _cubic(x: float) -> float:
    return x * x * x - 5 * x + 1


def _removable(x: float) -> float:
    if x == 1:
        return math.nan
    return (x - 1) ** 2 / (x - 1)


def _exponential(x: float) -> float:
    return math.exp(x) - 3


def main(argv: Sequence[str] | None = None) -> int:
    """Print the roots of the demonstration functions."""
    try:
        first = bisect_root(_removable, 0, 2, EPS)
    except ValueError:
        print("No roots in this segment")
        return 2
    second = bisect_root(_cubic, -3, -2, EPS)
    third = bisect_root(_exponential, 0, 2, EPS)
    for root in (first, second, third):
        print(f"{root:f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())