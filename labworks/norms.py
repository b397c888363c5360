"""Vector norms and selection of the longest vectors under several norms."""

from __future__ import annotations

import math
import sys
from typing import Callable, Iterable, Sequence

Norm = Callable[[Sequence[float], object], float]


def a_norm(vector: Sequence[float], matrix: Sequence[float]) -> float:
    """Return sqrt(x^T A x) for a square matrix given row by row as a flat sequence."""
    if matrix is None:
        raise ValueError("a matrix is required")
    size = len(vector)
    if len(matrix) < size * size:
        raise ValueError(f"matrix needs {size * size} entries, got {len(matrix)}")
    rows = [matrix[row * size:(row + 1) * size] for row in range(size)]
    total = sum(
        x * sum(entry * y for entry, y in zip(row, vector))
        for x, row in zip(vector, rows)
    )
    if total < 0:
        raise ValueError("the quadratic form is negative for this vector")
    return math.sqrt(total)


def inf_norm(vector: Sequence[float], arg: object = None) -> float:
    """Return the largest absolute component; ``arg`` is ignored."""
    return max((abs(x) for x in vector), default=0.0)


def p_norm(vector: Sequence[float], p: float) -> float:
    """Return the p-norm of ``vector``; ``p`` must be at least 1."""
    if p is None or p < 1:
        raise ValueError(f"p must be at least 1, got {p}")
    return sum(abs(x) ** p for x in vector) ** (1 / p)


def longest_vectors(
    vectors: Iterable[Sequence[float]],
    norms: Iterable[tuple[Norm, object]],
) -> list[list[tuple[float, ...]]]:
    """For each ``(norm, arg)`` pair return every vector whose norm is the largest."""
    vectors = [tuple(float(x) for x in vector) for vector in vectors]
    norms = list(norms)
    if not vectors or not norms:
        raise ValueError("at least one vector and one norm are required")
    result = []
    for norm, arg in norms:
        best = -math.inf
        chosen: list[tuple[float, ...]] = []
        for vector in vectors:
            value = norm(vector, arg)
            if value < 0:
                raise ValueError("a norm returned a negative value")
            if value > best:
                best = value
                chosen = [vector]
            elif value == best:
                chosen.append(vector)
        result.append(chosen)
    return result


def _format_vector(vector: Sequence[float]) -> str:
    return "( " + "".join(f"{x:f} " for x in vector) + ")"


def main(argv: Sequence[str] | None = None) -> int:
    """Print the longest of the demonstration vectors under an A-norm, the max norm and a p-norm."""
    v_1 = (-1.0, -100.0, -3.0, 10.0)
    v_2 = (0.0, 4.0, 6.0, 100.0)
    matrix = (120.0, 21.0, 44.0, 55.5, 13.0, 12.0, 3.0, 4.0,
              20.0, 9.0, 5.0, 3.0, 19.0, 25.0, 4.0, 25.0)
    p = 11.2
    try:
        groups = longest_vectors(
            [v_1, v_2, v_2],
            [(a_norm, matrix), (inf_norm, None), (p_norm, p)],
        )
    except ValueError:
        print("Invalid input")
        return 1
    blocks = ["".join(_format_vector(vector) + "\n" for vector in group) for group in groups]
    sys.stdout.write("\n".join(blocks))
    return 0


if __name__ == "__main__":
    sys.exit(main())