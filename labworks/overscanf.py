"""scanf-style parsing with extra conversions.

Besides the usual C conversions the format language understands:

``%Ro``  a Roman numeral, read as an integer
``%Zr``  a Zeckendorf code (least significant digit first, terminated by an extra ``1``)
``%Cv``/``%CV``  a number in the base given by the next argument; letters in lower/upper case

Scanning functions return the converted values as a list.  The arguments
passed after the format are the bases used by ``%Cv`` and ``%CV``.
Characters of the format other than conversions must match the input
exactly, one character each.
"""

from __future__ import annotations

import io
import re
import string
import sys
from typing import IO, Iterator, NamedTuple, Sequence

from labworks.overprintf import from_base

UINT_MAX = 2**32 - 1

_ROMAN_PATTERN = re.compile(r"M{0,3}(CM|CD|D?C{0,3})(XC|XL|L?X{0,3})(IX|IV|V?I{0,3})")
_ROMAN_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_CONVERSIONS = "diufFeEgGxXoscpaA"
_CUSTOM = ("Ro", "Zr", "Cv", "CV")
_LENGTH_MODIFIERS = "hlLqjzt"
_INTEGER_BASES = {"d": 10, "i": 0, "u": 10, "o": 8, "x": 16, "X": 16, "p": 16}


class ScanError(ValueError):
    """The input does not match the format."""


def roman_to_int(text: str) -> int:
    """Return the value of a Roman numeral between 0 (empty) and 3999."""
    if not _ROMAN_PATTERN.fullmatch(text):
        raise ValueError(f"{text!r} is not a valid Roman numeral")
    total = 0
    previous = 0
    for char in text:
        current = _ROMAN_VALUES[char]
        total += current - 2 * previous if current > previous else current
        previous = current
    return total


def zeckendorf_to_int(text: str) -> int:
    """Return the value of a Zeckendorf code; its last character is the terminator."""
    result = 0
    previous, current = 1, 2
    for char in text[:-1]:
        if char == "1":
            result += previous
        previous, current = current, previous + current
    return result & UINT_MAX


def parse_in_base(text: str, base: int, uppercase: bool = True) -> int:
    """Read ``text`` in ``base`` (a base outside 2..36 means 10); letters must be in the given case."""
    if not 2 <= base <= 36:
        base = 10
    return from_base(text, base, uppercase)


class _Spec(NamedTuple):
    kind: str
    text: str = ""
    conversion: str = ""


def _parse_format(fmt: str) -> Iterator[_Spec]:
    pos = 0
    length = len(fmt)
    while pos < length:
        char = fmt[pos]
        if char != "%":
            yield _Spec("literal", char)
            pos += 1
            continue
        pos += 1
        code = fmt[pos:pos + 2]
        if code in _CUSTOM:
            yield _Spec("custom", code)
            pos += 2
            continue
        if fmt[pos:pos + 1] == "%":
            yield _Spec("percent")
            pos += 1
            continue
        end = pos
        while end < length and fmt[end] not in _CONVERSIONS:
            end += 1
        if end == length:
            raise ScanError("incomplete conversion specification at end of format")
        yield _Spec("standard", fmt[pos:end], fmt[end])
        pos = end + 1


class _Reader:
    """Character source with one character of lookahead, given back on release when possible."""

    def __init__(self, stream: IO[str]) -> None:
        self._stream = stream
        self._pending: tuple[str, object] | None = None
        try:
            self._seekable = bool(stream.seekable())
        except (AttributeError, OSError, ValueError):
            self._seekable = False

    def peek(self) -> str:
        if self._pending is None:
            cookie = self._stream.tell() if self._seekable else None
            self._pending = (self._stream.read(1), cookie)
        return self._pending[0]

    def take(self) -> str:
        char = self.peek()
        self._pending = None
        return char

    def skip_space(self) -> None:
        while (char := self.peek()) and char.isspace():
            self.take()

    def word(self, width: int | None = None) -> str:
        self.skip_space()
        chars = []
        while (width is None or len(chars) < width) and (char := self.peek()) and not char.isspace():
            chars.append(self.take())
        if not chars:
            raise ScanError("expected a word")
        return "".join(chars)

    def release(self) -> None:
        if self._pending is not None and self._pending[0] and self._seekable:
            self._stream.seek(self._pending[1])
        self._pending = None


class _Field:
    """Accepts characters from a reader while the field width allows."""

    def __init__(self, reader: _Reader, width: int | None) -> None:
        self._reader = reader
        self._room = width

    def accept(self, allowed: str) -> str:
        if self._room == 0:
            return ""
        char = self._reader.peek()
        if char and char in allowed:
            self._reader.take()
            if self._room is not None:
                self._room -= 1
            return char
        return ""


def _digits_of(base: int) -> str:
    letters = max(0, base - 10)
    return "0123456789"[:base] + string.ascii_lowercase[:letters] + string.ascii_uppercase[:letters]


def _scan_integer(reader: _Reader, base: int, width: int | None) -> int:
    reader.skip_space()
    field = _Field(reader, width)
    sign = field.accept("+-")
    digits = ""
    prefixed = False
    if base in (0, 16) and field.accept("0"):
        digits = "0"
        if field.accept("xX"):
            base = 16
            digits = ""
            prefixed = True
        elif base == 0:
            base = 8
    if base == 0:
        base = 10
    allowed = _digits_of(base)
    while char := field.accept(allowed):
        digits += char
    if not digits and not prefixed:
        raise ScanError("expected an integer")
    value = int(digits or "0", base)
    return -value if sign == "-" else value


def _scan_float(reader: _Reader, width: int | None) -> float:
    reader.skip_space()
    field = _Field(reader, width)
    sign = field.accept("+-")
    if reader.peek() and reader.peek() in "iInN":
        word = ""
        while char := field.accept(string.ascii_letters):
            word += char
        lowered = word.lower()
        if lowered not in ("inf", "infinity", "nan"):
            raise ScanError(f"{word!r} is not a number")
        value = float(lowered)
        return -value if sign == "-" else value
    mantissa = ""
    hexadecimal = False
    if field.accept("0"):
        mantissa = "0"
        if field.accept("xX"):
            hexadecimal = True
            mantissa = ""
    digit_set = string.hexdigits if hexadecimal else string.digits
    while char := field.accept(digit_set):
        mantissa += char
    fraction = ""
    if field.accept("."):
        while char := field.accept(digit_set):
            fraction += char
    if not mantissa and not fraction and not hexadecimal:
        raise ScanError("expected a floating-point number")
    exponent = ""
    if field.accept("pP" if hexadecimal else "eE"):
        exponent_sign = field.accept("+-")
        exponent_digits = ""
        while char := field.accept(string.digits):
            exponent_digits += char
        if not exponent_digits:
            raise ScanError("incomplete exponent")
        exponent = exponent_sign + exponent_digits
    if hexadecimal:
        text = "0x" + (mantissa or "0") + ("." + fraction if fraction else "") + "p" + (exponent or "0")
        value = float.fromhex(text)
    else:
        value = float(f"{mantissa or '0'}.{fraction or '0'}e{exponent or '0'}")
    return -value if sign == "-" else value


def _wrap(value: int, bits: int, signed: bool) -> int:
    value &= (1 << bits) - 1
    if signed and value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _integer_bits(length: str) -> int:
    if length == "hh":
        return 8
    if length == "h":
        return 16
    if not length:
        return 32
    return 64


def _standard(reader: _Reader, mods: str, conversion: str) -> tuple[bool, object]:
    suppressed = "*" in mods
    width_match = re.search(r"\d+", mods)
    width = int(width_match.group()) if width_match and int(width_match.group()) > 0 else None
    length = "".join(char for char in mods if char in _LENGTH_MODIFIERS)
    if conversion in _INTEGER_BASES:
        value = _scan_integer(reader, _INTEGER_BASES[conversion], width)
        if conversion != "p":
            value = _wrap(value, _integer_bits(length), conversion in "di")
    elif conversion in "fFeEgGaA":
        value = _scan_float(reader, width)
    elif conversion == "c":
        count = width or 1
        chars = []
        while len(chars) < count and (char := reader.take()):
            chars.append(char)
        if not chars:
            raise ScanError("unexpected end of input")
        value = "".join(chars)
    else:
        value = reader.word(width)
    return suppressed, value


def _take_base(args: Iterator[object]) -> int:
    try:
        return int(next(args))
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _custom(reader: _Reader, code: str, args: Iterator[object]) -> int:
    base = _take_base(args) if code in ("Cv", "CV") else 0
    word = reader.word()
    try:
        if code == "Ro":
            return roman_to_int(word)
        if code == "Zr":
            return zeckendorf_to_int(word)
        return parse_in_base(word, base, code == "CV")
    except ValueError as error:
        raise ScanError(str(error)) from error


def _scan(reader: _Reader, fmt: str, args: Sequence[object]) -> list:
    remaining = iter(args)
    values: list = []
    for spec in _parse_format(fmt):
        if spec.kind == "literal":
            char = reader.take()
            if not char:
                raise ScanError("unexpected end of input")
            if char != spec.text:
                raise ScanError(f"expected {spec.text!r}, found {char!r}")
        elif spec.kind == "percent":
            reader.skip_space()
            if reader.take() != "%":
                raise ScanError("expected '%'")
        elif spec.kind == "custom":
            values.append(_custom(reader, spec.text, remaining))
        else:
            suppressed, value = _standard(reader, spec.text, spec.conversion)
            if not suppressed:
                values.append(value)
    return values


def oversscanf(text: str, fmt: str, *args) -> list:
    """Scan ``text`` according to ``fmt`` and return the converted values."""
    return _scan(_Reader(io.StringIO(text)), fmt, args)


def overfscanf(stream: IO[str], fmt: str, *args) -> list:
    """Scan ``stream`` according to ``fmt`` and return the converted values."""
    reader = _Reader(stream)
    try:
        return _scan(reader, fmt, args)
    finally:
        reader.release()


_DEMO_FORMAT = "%Ro %s %d %Zr %CV %Cv %f"


def main(argv: Sequence[str] | None = None) -> int:
    """Scan the demonstration format from standard input, or from the file named as argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if args:
            with open(args[0], encoding="utf-8") as source:
                values = overfscanf(source, _DEMO_FORMAT, 16, 17)
        else:
            values = overfscanf(sys.stdin, _DEMO_FORMAT, 16, 17)
    except OSError as error:
        print(f"Couldn't open file: {error}", file=sys.stderr)
        return 1
    except (ScanError, OverflowError):
        print("Invalid input")
        return 1
    roman, word, digit, zeck, in_16_base, in_17_base, float_value = values
    print(f"roman {roman}")
    print(f"string {word}")
    print(f"digit {digit}")
    print(f"zeck {zeck}")
    print(f"FF in 16 base {in_16_base}")
    print(f"ff in 17 base {in_17_base}")
    print(f"float value {float_value:f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())