"""Column addition of non-negative numbers written in a base from 2 to 36.

Digits are read as character codes counted from ``0``, so bases above 10 use
the characters following ``9`` (``:``, ``;``, ...).
"""

from __future__ import annotations

import sys
from itertools import zip_longest
from typing import Sequence


def _check_base(base: int) -> None:
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, got {base}")


def _digit(char: str, base: int) -> int:
    value = ord(char) - ord("0")
    if not 0 <= value < base:
        raise ValueError(f"{char!r} is not a digit in base {base}")
    return value


def column_add(first: str, second: str, base: int) -> str:
    """Add two numbers written in ``base`` and return the sum without leading zeros."""
    _check_base(base)
    digits = []
    carry = 0
    for a, b in zip_longest(reversed(first), reversed(second), fillvalue="0"):
        carry, digit = divmod(_digit(a, base) + _digit(b, base) + carry, base)
        digits.append(chr(ord("0") + digit))
    while carry:
        carry, digit = divmod(carry, base)
        digits.append(chr(ord("0") + digit))
    result = "".join(reversed(digits))
    stripped = result.lstrip("0")
    if not stripped and result:
        stripped = "0"
    return stripped


def sum_in_base(base: int, *args: str) -> str:
    """Return the sum of the numbers, all written in ``base``; a negative number raises ``ValueError``."""
    _check_base(base)
    total = "0"
    for text in args:
        if text.startswith("-"):
            raise ValueError(f"negative number {text!r}")
        total = column_add(text, total, base)
    return total


def main(argv: Sequence[str] | None = None) -> int:
    """Add numbers: ``column_sum <base> <number> ...``; without arguments the demonstrations run."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        try:
            demos = ((int(args[0]), tuple(args[1:])),)
        except ValueError:
            print("Invalid input of number")
            return 1
    else:
        demos = ((2, ("101", "111100")), (10, ("00123", "")))
    for base, numbers in demos:
        if any(number.startswith("-") for number in numbers):
            print("Requires not a negative number")
            return 5
        try:
            print(sum_in_base(base, *numbers))
        except ValueError:
            print("Invalid input of number")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())