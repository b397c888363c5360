"""Interpreter for a small language over 26 named 64-bit bit vectors ``A`` .. ``Z``.

Statements end with ``;``.  Whitespace is ignored, letters are upper-cased,
``%`` starts a comment running to the end of the line and ``{ ... }`` is a
block comment.  The statements are::

    READ(A, base);      read a value for A in the given base
    WRITE(A, base);     print A in the given base
    A := \\B;           bitwise negation
    A := B op C;        op is one of + & -> <- ~ <> +> ? !

Every change of a vector is traced as its 64 bits, lowest bit first.
"""

from __future__ import annotations

import os
import re
import string
import sys
from contextlib import ExitStack
from typing import IO, Iterator, Sequence

LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1
LONG_BITS = 64

_NAMES = string.ascii_uppercase
_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_OPERATIONS = ("+", "&", "->", "<-", "~", "<>", "+>", "?", "!")
_READ = re.compile(r"READ\((.),([^)]{1,9})\)(.)", re.DOTALL)
_WRITE = re.compile(r"WRITE\((.),([^)]{1,9})\)(.)", re.DOTALL)


class _StatementError(ValueError):
    """A statement was rejected; its message has already been traced."""


def _digit_value(char: str) -> int:
    if char.isascii() and char.isalnum():
        return int(char, 36)
    return len(_DIGITS)


def parse_long(text: str, base: int) -> int:
    """Read the whole of ``text`` as a signed 64-bit integer in ``base``.

    Leading whitespace, a sign and, in base 16, a ``0x`` prefix are accepted.
    An empty string reads as 0.  The extreme values of the 64-bit range are
    rejected, as is anything left over after the digits.
    """
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, got {base}")
    length = len(text)
    pos = 0
    while pos < length and text[pos] in " \t\n\v\f\r":
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        sign = -1 if text[pos] == "-" else 1
        pos += 1
    if (
        base == 16
        and text[pos:pos + 2].lower() == "0x"
        and pos + 2 < length
        and _digit_value(text[pos + 2]) < 16
    ):
        pos += 2
    start = pos
    value = 0
    while pos < length and _digit_value(text[pos]) < base:
        value = value * base + _digit_value(text[pos])
        pos += 1
    if pos == start:
        if text:
            raise ValueError(f"no digits in {text!r}")
        return 0
    if pos != length:
        raise ValueError(f"unexpected characters in {text!r}")
    value *= sign
    if not LONG_MIN < value < LONG_MAX:
        raise ValueError(f"{text!r} is out of range")
    return value


def to_base(num: int, base: int) -> str:
    """Write ``num`` in ``base`` with upper-case digits and a leading ``-`` if negative."""
    if not 2 <= base <= 36:
        raise ValueError(f"base must be between 2 and 36, got {base}")
    if num == 0:
        return "0"
    magnitude = abs(num)
    digits = []
    while magnitude:
        magnitude, digit = divmod(magnitude, base)
        digits.append(_DIGITS[digit])
    if num < 0:
        digits.append("-")
    return "".join(reversed(digits))


def to_bitstring(num: int) -> str:
    """Return the 64 bits of ``num``, bit 0 first."""
    return "".join("1" if (num >> bit) & 1 else "0" for bit in range(LONG_BITS))


def apply_operation(a: int, b: int, op: str) -> int:
    """Apply a binary operation; ``->``, ``<-``, ``~``, ``+>``, ``?`` and ``!`` use logical negation."""
    not_a = int(a == 0)
    not_b = int(b == 0)
    if op == "+":
        return a | b
    if op == "&":
        return a & b
    if op == "->":
        return not_a | b
    if op == "<-":
        return a | not_b
    if op == "~":
        return (not_a | b) & (a | not_b)
    if op == "<>":
        return a ^ b
    if op == "+>":
        return a & not_b
    if op == "?":
        return not_a | not_b
    if op == "!":
        return not_a & not_b
    raise ValueError(f"unknown operation {op!r}")


def read_statements(stream: IO[str]) -> Iterator[str]:
    """Yield the statements of ``stream``, normalised and each ending with ``;``.

    The last statement lacks the ``;`` if the text ends without one.  An
    unterminated ``{`` comment raises ``ValueError``.
    """
    chars = iter(stream.read())
    while True:
        statement: list[str] = []
        terminated = False
        for char in chars:
            if char == ";":
                statement.append(char)
                terminated = True
                break
            if char == "%":
                for char in chars:
                    if char == "\n":
                        break
            elif char == "{":
                for char in chars:
                    if char == "}":
                        break
                else:
                    raise ValueError("unterminated '{' comment")
            elif not char.isspace():
                statement.append(char.upper())
        if not statement:
            return
        yield "".join(statement)
        if not terminated:
            return


class Interpreter:
    """Executes statements against the vectors ``A`` .. ``Z``.

    ``source`` supplies the values asked for by ``READ``; prompts and ``WRITE``
    results go to ``out``; the trace goes to ``trace``, or to ``out`` when no
    trace stream is given.
    """

    def __init__(
        self,
        source: IO[str] | None = None,
        out: IO[str] | None = None,
        trace: IO[str] | None = None,
    ) -> None:
        self.source = sys.stdin if source is None else source
        self.out = sys.stdout if out is None else out
        self.trace = trace
        self.vectors: dict[str, int] = {}

    def _log(self, text: str) -> None:
        (self.out if self.trace is None else self.trace).write(text)

    def _fail(self, message: str) -> None:
        self._log(message)
        raise _StatementError(message.strip())

    def _before(self, name: str) -> str:
        if name in self.vectors:
            return to_bitstring(self.vectors[name])
        return "not init"

    def _read_word(self) -> str:
        chars = []
        while True:
            char = self.source.read(1)
            if not char or char.isspace():
                return "".join(chars)
            chars.append(char)

    @staticmethod
    def _match_io(pattern: re.Pattern, statement: str) -> tuple[str, int] | None:
        match = pattern.match(statement)
        if not match or match.group(1) not in _NAMES or match.group(3) != ";":
            return None
        try:
            base = parse_long(match.group(2), 10)
        except ValueError:
            return None
        if not 2 <= base <= 36:
            return None
        return match.group(1), base

    def _read(self, statement: str) -> None:
        parsed = self._match_io(_READ, statement)
        if parsed is None:
            self._fail("Read: input error\n")
        name, base = parsed
        self.out.write(f"Enter value ({name}): ")
        self.out.flush()
        word = self._read_word()
        self._log(f"READ ({name}):\nbefore: {self._before(name)}\n")
        try:
            value = parse_long(word, base)
        except ValueError:
            self._fail("Read: input error\n")
        self.vectors[name] = value
        self._log(f"after: {to_bitstring(value)}\n\n")

    def _write(self, statement: str) -> None:
        parsed = self._match_io(_WRITE, statement)
        if parsed is None:
            self._fail("Write: input error\n")
        name, base = parsed
        if name not in self.vectors:
            self._log("Write: vector missing\n\n")
            return
        text = to_base(self.vectors[name], base)
        self._log(f"WRITE({name}, {base}) = {text}\n\n")
        self.out.write(f"{name} = {text}\n")

    def _negate(self, statement: str) -> None:
        target, operand, check = statement[0], statement[4], statement[5]
        if (
            statement[1:3] != ":="
            or target not in _NAMES
            or operand not in _NAMES
            or check != ";"
        ):
            self._fail("Negation: input error\n")
        if operand not in self.vectors:
            self._fail("Negation: vector not init\n")
        self._log(f"({target}) := \\({operand}):\nbefore: {self._before(target)}\n")
        value = ~self.vectors[operand]
        self.vectors[target] = value
        self._log(f"after: {to_bitstring(value)}\n\n")

    @staticmethod
    def _scan_binary(statement: str) -> tuple[str, str, str, str, str] | None:
        if len(statement) < 4 or statement[1:3] != ":=":
            return None
        pos = 4
        op = ""
        while pos < len(statement) and len(op) < 2 and statement[pos] not in _NAMES:
            op += statement[pos]
            pos += 1
        if not op or pos + 2 > len(statement):
            return None
        return statement[0], statement[3], op, statement[pos], statement[pos + 1]

    def _binary(self, statement: str) -> None:
        scanned = self._scan_binary(statement)
        if scanned is None:
            self._fail("Input error: command incorrect\n")
        target, first, op, second, check = scanned
        if (
            target not in _NAMES
            or first not in _NAMES
            or second not in _NAMES
            or check != ";"
            or op not in _OPERATIONS
        ):
            self._fail("Input error: command incorrect\n")
        if first not in self.vectors or second not in self.vectors:
            self._fail("Vector in expression not init\n")
        self._log(
            f"({target}) := ({first}) {op} ({second}):\n"
            f"before: {self._before(target)}\n"
        )
        value = apply_operation(self.vectors[first], self.vectors[second], op)
        self.vectors[target] = value
        self._log(f"after: {to_bitstring(value)}\n\n")

    def execute(self, statement: str) -> None:
        """Execute one normalised statement; a rejected statement raises ``ValueError``."""
        if "READ" in statement:
            self._read(statement)
        elif "WRITE" in statement:
            self._write(statement)
        elif len(statement) == 6 and statement[3] == "\\":
            self._negate(statement)
        else:
            self._binary(statement)

    def run(self, stream: IO[str]) -> None:
        """Execute every statement of ``stream`` in order."""
        for statement in read_statements(stream):
            self.execute(statement)


def main(argv: Sequence[str] | None = None) -> int:
    """Run a program file: ``bitvectors <program> [/trace <trace file>]``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) not in (1, 3):
        print("Input error.")
        return 1
    input_path = args[0]
    trace_path = None
    if len(args) == 3:
        if (
            args[1] != "/trace"
            or not os.path.exists(input_path)
            or os.path.realpath(input_path) == os.path.realpath(args[2])
        ):
            print("Input error.")
            return 1
        trace_path = args[2]

    with ExitStack() as stack:
        trace = None
        if trace_path is not None:
            try:
                trace = stack.enter_context(open(trace_path, "w", encoding="utf-8"))
            except OSError:
                print("File openning error")
                return 4
        try:
            source = stack.enter_context(open(input_path, encoding="utf-8"))
        except OSError:
            print("File open error")
            return 4
        interpreter = Interpreter(sys.stdin, sys.stdout, trace)
        try:
            interpreter.run(source)
        except _StatementError:
            return 1
        except ValueError as error:
            print(f"Read string: {error}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())