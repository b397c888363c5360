"""Convexity of a polygon and evaluation of a polynomial."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Point:
    """A point of the plane."""

    x: float
    y: float


def _point(value: Point | Sequence[float]) -> Point:
    return value if isinstance(value, Point) else Point(*value)


def cross_product(p1, p2, p3) -> float:
    """Return the cross product of the edges ``p1 -> p2`` and ``p2 -> p3``."""
    p1, p2, p3 = _point(p1), _point(p2), _point(p3)
    dx1 = p2.x - p1.x
    dy1 = p2.y - p1.y
    dx2 = p3.x - p2.x
    dy2 = p3.y - p2.y
    return dx1 * dy2 - dy1 * dx2


def _turn(p1: Point, p2: Point, p3: Point) -> int:
    return 1 if cross_product(p1, p2, p3) >= 0 else -1


def is_convex(*args) -> bool:
    """Tell whether the polygon with the given vertices, in order, is convex.

    Three or fewer vertices always count as convex.  Points may be given as
    ``Point`` objects or as ``(x, y)`` pairs.
    """
    points = [_point(arg) for arg in args]
    if len(points) <= 3:
        return True
    initial = _turn(*points[:3])
    triples = zip(points, points[1:] + points[:1], points[2:] + points[:2])
    return all(_turn(a, b, c) == initial for a, b, c in triples)


def polynomial_value(x: float, *args: float) -> float:
    """Evaluate the polynomial whose coefficients are given from the highest power down.

    No coefficients raise ``ValueError``; an infinite or undefined
    intermediate result raises ``OverflowError``.
    """
    if not args:
        raise ValueError("at least one coefficient is required")
    degree = len(args) - 1
    result = 0.0
    for power, coefficient in zip(range(degree, -1, -1), args):
        try:
            result += math.pow(x, power) * coefficient
        except OverflowError:
            raise OverflowError("polynomial value out of range") from None
        if math.isinf(result) or math.isnan(result):
            raise OverflowError("polynomial value out of range")
    return result


def main(argv: Sequence[str] | None = None) -> int:
    """Print the convexity of the demonstration polygons and two polynomial values."""
    polygons = (
        ((0, 0), (1, 0), (1, 1), (0, 1)),
        ((0, 0), (1, 0), (0, 1), (1, 1)),
        ((0, 0), (10, 0), (0.001, 0.001)),
        ((0, 0),),
        (),
    )
    for polygon in polygons:
        print(int(is_convex(*polygon)))
    print(f"{polynomial_value(2.0, 3.5):f}")
    print(f"{polynomial_value(1.0, 2.0, -3.0, 0.0, 1.0):f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())