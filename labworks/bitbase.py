"""Conversion to bases 2, 4, 8, 16 and 32 using only bitwise operations on 32-bit ints."""

from __future__ import annotations

import sys
from typing import Sequence

_MASK = 0xFFFFFFFF
_SIGN_BIT = 0x80000000
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUV"


def _to_signed(value: int) -> int:
    value &= _MASK
    return value - (1 << 32) if value & _SIGN_BIT else value


def bit_add(first: int, second: int) -> int:
    """Add two 32-bit integers with XOR and carry propagation, wrapping on overflow."""
    total = first & _MASK
    carry = second & _MASK
    while carry:
        total, carry = total ^ carry, ((total & carry) << 1) & _MASK
    return _to_signed(total)


def twos_complement(num: int) -> int:
    """Return the 32-bit two's complement negation of ``num``."""
    return bit_add(~num, 1)


def to_power_of_two_base(num: int, r: int) -> str:
    """Write ``num`` in base ``2**r`` for ``r`` in 1..5; zero gives an empty string."""
    if not 1 <= r <= 5:
        raise ValueError(f"r must be between 1 and 5, got {r}")
    if not INT_MIN <= num <= INT_MAX:
        raise OverflowError(f"{num} does not fit in a 32-bit int")
    negative = num < 0
    magnitude = (twos_complement(num) if negative else num) & _MASK
    low_bits = bit_add(1 << r, -1)
    digits = []
    while magnitude:
        digits.append(_ALPHABET[magnitude & low_bits])
        magnitude >>= r
    if negative:
        digits.append("-")
    return "".join(reversed(digits))


def main(argv: Sequence[str] | None = None) -> int:
    """Print a number in base 2**r; arguments are the number and r (default -9 and 3)."""
    args = sys.argv[1:] if argv is None else list(argv)
    num, r = -9, 3
    if args:
        if len(args) != 2:
            print("Usage: bitbase <number> <r>", file=sys.stderr)
            return 1
        try:
            num, r = int(args[0]), int(args[1])
            text = to_power_of_two_base(num, r)
        except (ValueError, OverflowError) as error:
            print(f"Invalid input: {error}", file=sys.stderr)
            return 1
    else:
        text = to_power_of_two_base(num, r)
    print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())