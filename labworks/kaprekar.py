"""Kaprekar numbers in an arbitrary base."""

from __future__ import annotations

import sys
from typing import Sequence

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)
_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_WHITESPACE = " \t\n\v\f\r"


def _value(char: str) -> int:
    if len(char) == 1 and char.isascii() and char.isalnum():
        return int(char, 36)
    return len(_DIGITS)


def _parse_int(text: str, base: int) -> int:
    pos = len(text) - len(text.lstrip(_WHITESPACE))
    sign = 1
    if text[pos:pos + 1] in ("+", "-"):
        sign = -1 if text[pos] == "-" else 1
        pos += 1
    if base == 16 and text[pos:pos + 2].lower() == "0x" and _value(text[pos + 2:pos + 3]) < 16:
        pos += 2
    start = pos
    value = 0
    while pos < len(text) and _value(text[pos]) < base:
        value = value * base + _value(text[pos])
        pos += 1
    if pos == start:
        if text:
            raise ValueError(f"no digits in {text!r}")
        return 0
    if pos != len(text):
        raise ValueError(f"unexpected characters in {text!r}")
    value *= sign
    if value >= INT_MAX or value <= INT_MIN:
        raise OverflowError(f"{text!r} does not fit in an int")
    return value


def _check_base(base: int) -> None:
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, got {base}")


def to_base(number: int, base: int) -> str:
    """Write ``number`` in ``base`` with upper-case digits; zero gives an empty string."""
    _check_base(base)
    magnitude = abs(number)
    digits = []
    while magnitude:
        magnitude, digit = divmod(magnitude, base)
        digits.append(_DIGITS[digit])
    sign = "-" if number < 0 else ""
    return sign + "".join(reversed(digits))


def kaprekar_split(number: int, base: int) -> tuple[int, int] | None:
    """Split the square of ``number`` into a left and a non-zero right part summing to it.

    Returns ``(left, right)`` or None when ``number`` is not a Kaprekar number.
    A negative number, or one whose square does not fit in an int, raises
    ``OverflowError``.
    """
    _check_base(base)
    if number < 0 or (number and INT_MAX // number < number):
        raise OverflowError(f"the square of {number} does not fit in an int")
    remaining = number * number
    right = 0
    power = 1
    while remaining > 0:
        remaining, remainder = divmod(remaining, base)
        right += remainder * power
        power *= base
        if right and remaining + right == number:
            return remaining, right
    return None


def find_kaprekar_numbers(base: int, *args: str) -> list[str]:
    """Describe each of the numbers, written in ``base``, that is a Kaprekar number.

    A number with bad digits raises ``ValueError``; one too large raises
    ``OverflowError``.
    """
    _check_base(base)
    lines = []
    for text in args:
        number = _parse_int(text, base)
        split = kaprekar_split(number, base)
        if split is None:
            continue
        left, right = split
        lines.append(
            f"{text} ^ 2 = {to_base(number * number, base)} ==> "
            f"{to_base(left, base)} + {to_base(right, base)}"
        )
    return lines


_DEMOS = (
    (10, ("45", "9999", "5050")),
    (16, ("CD", "4ED")),
    (12, ("7249", "BB", "12AA")),
)


def main(argv: Sequence[str] | None = None) -> int:
    """Check numbers: ``kaprekar <base> <number> ...``; without arguments the demonstrations run."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        try:
            demos = ((int(args[0]), tuple(args[1:])),)
        except ValueError:
            print("Error")
            return 1
    else:
        demos = _DEMOS
    for base, numbers in demos:
        try:
            lines = find_kaprekar_numbers(base, *numbers)
        except OverflowError:
            print("Error")
            return 3
        except ValueError:
            print("Error")
            return 1
        for line in lines:
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())