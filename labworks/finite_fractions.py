"""Whether a fraction has a finite representation in a given base."""

from __future__ import annotations

import sys
from typing import Sequence

MAX_ACCURACY = 100
EPSILON = 1e-9


def has_finite_representation(fraction: float, base: int) -> bool:
    """Expand ``fraction`` digit by digit in ``base``; a repeated remainder means it never ends."""
    remainders: list[float] = []
    while fraction > EPSILON and len(remainders) < MAX_ACCURACY:
        fraction *= base
        fraction -= int(fraction)
        if fraction < EPSILON:
            return True
        if any(abs(fraction - seen) < EPSILON for seen in remainders):
            return False
        remainders.append(fraction)
    return fraction < EPSILON


def check_numbers(base: int, *args: float) -> list[bool]:
    """Tell for each number whether its fractional part is finite in ``base``."""
    return [has_finite_representation(number - int(number), base) for number in args]


_DEMOS = (
    (10, (0.3, 0.1, 0.2, 0.545678765)),
    (2, (0.1, 0.5)),
    (3, (0.1, 0.33333, 0.5, 0.0)),
)


def _report(base: int, numbers: Sequence[float]) -> None:
    for number, finite in zip(numbers, check_numbers(base, *numbers)):
        verdict = "have" if finite else "haven't"
        print(f"Number {number:f} {verdict} finite representation")


def main(argv: Sequence[str] | None = None) -> int:
    """Check numbers: the arguments are a base and numbers; without them the demonstrations run."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        try:
            base = int(args[0])
            numbers = [float(arg) for arg in args[1:]]
        except ValueError:
            print("Incorrect input")
            return 1
        _report(base, numbers)
        return 0
    for base, numbers in _DEMOS:
        _report(base, numbers)
    return 0


if __name__ == "__main__":
    sys.exit(main())