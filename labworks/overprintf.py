"""printf-style formatting with extra conversions.

Besides the usual C conversions the format language understands:

``%Ro``  an integer as a Roman numeral
``%Zr``  an unsigned integer as a Zeckendorf code (least significant first,
         terminated by an extra ``1``)
``%Cv``/``%CV``  an integer and a base; the integer in that base (lower/upper case)
``%to``/``%TO``  a string and a base; the string read in that base, shown in decimal
``%mi``/``%mu``/``%md``/``%mf``  the bytes of an int, unsigned, double or float
"""

from __future__ import annotations

import re
import struct
import sys
from typing import IO, Iterator, Sequence

INT_MAX = 2**31 - 1
UINT_MAX = 2**32 - 1

_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_CONVERSIONS = "diufFeEgGxXoscpaA"
_UNSIGNED_CONVERSIONS = "uoxX"

_ROMAN = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)

_SPEC = re.compile(
    r"%(?:"
    r"(?P<custom>Ro|Zr|Cv|CV|to|TO|mi|mu|md|mf)"
    r"|(?P<percent>%)"
    rf"|(?P<mods>[^{_CONVERSIONS}]*)(?P<conv>[{_CONVERSIONS}])"
    r"|(?P<dangling>)"
    r")",
    re.DOTALL,
)


def to_roman(number: int) -> str:
    """Return ``number`` as a Roman numeral; values above 4000 repeat ``M``."""
    sign = ""
    if number < 0:
        sign = "-"
        number = -number
    prefix = ""
    if number > 4000:
        prefix = "M" * (number // 1000)
        number %= 1000
    parts = []
    for value, symbol in _ROMAN:
        count, number = divmod(number, value)
        parts.append(symbol * count)
    return sign + prefix + "".join(parts)


def _fibonacci_until(limit: int) -> list[int]:
    if limit < 1:
        raise ValueError("Zeckendorf representation needs a positive number")
    fib = [1, 2]
    while True:
        following = fib[-1] + fib[-2]
        if following > UINT_MAX:
            raise OverflowError("Fibonacci numbers exceed the unsigned range")
        fib.append(following)
        if following >= limit:
            return fib


def to_zeckendorf(number: int) -> str:
    """Return the Zeckendorf code of ``number``, least significant digit first, plus a final ``1``."""
    fib = _fibonacci_until(number)
    digits: list[str] = []
    remaining = number
    for value in reversed(fib):
        if value <= remaining:
            digits.append("1")
            remaining -= value
        elif digits:
            digits.append("0")
    return "".join(reversed(digits)) + "1"


def to_base(number: int, base: int, uppercase: bool = True) -> str:
    """Return ``number`` written in ``base``; a base outside 2..36 means 10."""
    if not 2 <= base <= 36:
        base = 10
    if number == 0:
        return "0"
    magnitude = abs(number)
    digits = []
    while magnitude:
        magnitude, digit = divmod(magnitude, base)
        digits.append(_DIGITS[digit])
    text = "".join(reversed(digits))
    if not uppercase:
        text = text.lower()
    return ("-" if number < 0 else "") + text


def _is_valid_symbol(char: str, base: int) -> bool:
    return char in "+-" or char in _DIGITS[:base]


def from_base(text: str, base: int, uppercase: bool = True) -> int:
    """Read ``text`` as a signed number in ``base``; letters must be in the given case."""
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, got {base}")
    result = 0
    sign = 1
    for position, char in enumerate(text):
        cased = char.upper() if uppercase else char.lower()
        if char != cased:
            raise ValueError(f"wrong letter case in {text!r}")
        if not _is_valid_symbol(char.upper(), base):
            raise ValueError(f"{char!r} is not a digit of base {base}")
        if position == 0 and char in "+-":
            sign = -1 if char == "-" else 1
            continue
        if char in "+-":
            raise ValueError(f"misplaced sign in {text!r}")
        value = _DIGITS.index(char.upper())
        if result > INT_MAX // base:
            raise OverflowError(f"{text!r} does not fit in an int")
        result *= base
        if value > 0 and result > INT_MAX - value:
            raise OverflowError(f"{text!r} does not fit in an int")
        result += value
    return sign * result


def memory_dump(data: bytes) -> str:
    """Return every byte of ``data`` as eight bits, each byte followed by a space."""
    return "".join(f"{byte:08b} " for byte in data)


def _take(args: Iterator[object]):
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _custom(code: str, args: Iterator[object]) -> str:
    if code == "Ro":
        return to_roman(int(_take(args)))
    if code == "Zr":
        return to_zeckendorf(int(_take(args)) & UINT_MAX)
    if code in ("Cv", "CV"):
        number = int(_take(args))
        base = int(_take(args))
        return to_base(number, base, code == "CV")
    if code in ("to", "TO"):
        text = str(_take(args))
        base = int(_take(args))
        return str(from_base(text, base, code == "TO"))
    if code in ("mi", "mu"):
        return memory_dump(struct.pack("<I", int(_take(args)) & UINT_MAX))
    if code == "md":
        return memory_dump(struct.pack("<d", float(_take(args))))
    return memory_dump(struct.pack("<f", float(_take(args))))


def _standard(mods: str, conv: str, args: Iterator[object]) -> str:
    mods = re.sub("[hlLqjzt]", "", mods)
    values = [_take(args) for _ in range(mods.count("*") + 1)]
    *widths, value = values
    if conv == "p":
        return ("%" + mods + "s") % (*widths, f"0x{int(value):x}")
    if conv in "aA":
        text = float(value).hex()
        return ("%" + mods + "s") % (*widths, text.upper() if conv == "A" else text)
    if conv in _UNSIGNED_CONVERSIONS and isinstance(value, int) and value < 0:
        value += UINT_MAX + 1
    return ("%" + mods + conv) % (*widths, value)


def oversprintf(fmt: str, *args) -> str:
    """Format ``args`` according to ``fmt`` and return the text."""
    remaining = iter(args)

    def replace(match: re.Match) -> str:
        if match.group("custom"):
            return _custom(match.group("custom"), remaining)
        if match.group("percent"):
            return "%"
        if match.group("conv"):
            return _standard(match.group("mods"), match.group("conv"), remaining)
        raise ValueError("incomplete format specifier at end of format")

    return _SPEC.sub(replace, fmt)


def overfprintf(stream: IO[str], fmt: str, *args) -> int:
    """Format ``args`` according to ``fmt``, write to ``stream`` and return the length written."""
    text = oversprintf(fmt, *args)
    stream.write(text)
    return len(text)


_DEMOS = (
    ("155 in Roman: %Ro\n", (155,)),
    ("-1124 in Roman: %Ro\n", (-1124,)),
    ("5023 in Roman > 4000: %Ro\n", (5023,)),
    ("100 in zerkendorf repr: %Zr\n", (100,)),
    ("In 2 base 124: %CV\n", (124, 2)),
    ("In 10 base -52: %CV\n", (-52, 10)),
    ("In small 12 base 124: %Cv\n", (124, 12)),
    ("In BIG 12 base 124: %CV\n", (124, 12)),
    ("a228 in 16 base = %to in 10 base\n", ("a228", 16)),
    ("A228 in 16 base = %TO in 10 base\n", ("A228", 16)),
    ("Dump of int 1: %mi\n", (1,)),
    ("Dump of uint INT_MAX + 2: %mu\n", (INT_MAX + 2,)),
    ("Dump of double 1.1: %md\n", (1.1,)),
    ("Dump of float 1.1: %mf\n", (1.1,)),
    ("Regular flags %d %s %.15f\n", (15, "hello", 1.23)),
)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the demonstration lines; with a path argument, also write them to that file."""
    args = sys.argv[1:] if argv is None else list(argv)
    sys.stdout.write("Overfprintf:\n")
    for fmt, values in _DEMOS:
        overfprintf(sys.stdout, fmt, *values)
    if args:
        try:
            with open(args[0], "w", encoding="utf-8") as output:
                for fmt, values in _DEMOS:
                    overfprintf(output, fmt, *values)
        except OSError as error:
            print(f"Couldn't open file: {error}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())