"""Interpreter for assignments to named integer cells and ``print`` statements.

Lines look like ``x = 5;``, ``y = x * 2 + 1;``, ``print x;`` or ``print;``.
Expressions are evaluated strictly from left to right; division and
remainder truncate toward zero.
"""

from __future__ import annotations

import re
import string
import sys
from typing import IO, Iterator, Sequence

_OPERATORS = "+-*/%"
_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class MemoryStore:
    """Named integer cells, listed in name order."""

    def __init__(self) -> None:
        self._cells: dict[str, int] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def set(self, name: str, value: int) -> None:
        """Create or update the cell ``name``."""
        self._cells[name] = value

    def get(self, name: str) -> int:
        """Return the value of ``name``; an unknown name raises ``KeyError``."""
        return self._cells[name]

    def items(self) -> list[tuple[str, int]]:
        """Return all cells as ``(name, value)`` pairs sorted by name."""
        return sorted(self._cells.items())


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _terms(expr: str) -> Iterator[tuple[str, str]]:
    pos = 0
    length = len(expr)
    op = "+"
    while pos < length:
        while pos < length and expr[pos] == " ":
            pos += 1
        start = pos
        if pos + 1 < length and expr[pos] == "-" and expr[pos + 1] in string.digits:
            pos += 1
        while pos < length and expr[pos] not in _OPERATORS:
            pos += 1
        yield op, expr[start:pos].strip()
        if pos >= length:
            return
        op = expr[pos]
        pos += 1


def _operand(store: MemoryStore, text: str) -> int:
    if text[:1] in string.digits and text or (
        text[:1] == "-" and text[1:2] and text[1] in string.digits
    ):
        return _atoi(text)
    return store.get(text)


def _truncated_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def evaluate_expression(store: MemoryStore, expr: str) -> int:
    """Evaluate ``expr`` from left to right.

    An unknown name raises ``KeyError``; division or remainder by zero raises
    ``ZeroDivisionError``.
    """
    value = 0
    for op, text in _terms(expr):
        operand = _operand(store, text)
        if op == "+":
            value += operand
        elif op == "-":
            value -= operand
        elif op == "*":
            value *= operand
        else:
            if operand == 0:
                raise ZeroDivisionError("division by zero")
            quotient = _truncated_div(value, operand)
            value = quotient if op == "/" else value - operand * quotient
    return value


def execute_line(store: MemoryStore, line: str, out: IO[str] | None = None) -> None:
    """Execute one line, writing ``print`` output and expression errors to ``out``.

    A line that is neither a ``print`` nor an assignment raises ``ValueError``.
    """
    out = sys.stdout if out is None else out
    line = line.strip()
    if not line:
        return
    if "print" in line:
        _, _, rest = line.partition(" ")
        names = [token for token in re.split(r"[ \n;]", rest) if token]
        if names:
            name = names[0]
            if name in store:
                out.write(f"{name} = {store.get(name)}\n")
            else:
                out.write("undefined\n")
        else:
            for name, value in store.items():
                out.write(f"{name} = {value}\n")
        return
    lhs, sep, rest = line.lstrip("=").partition("=")
    rhs_match = re.match(r"[;\n]*([^;\n]+)", rest)
    name = lhs.strip()
    if not sep or rhs_match is None or not name:
        raise ValueError(f"malformed line {line!r}")
    rhs = rhs_match.group(1)
    if any(op in rhs for op in _OPERATORS):
        try:
            value = evaluate_expression(store, rhs)
        except ZeroDivisionError:
            out.write("division by zero\n")
            return
        except KeyError as error:
            out.write(f"undefined variable {error.args[0]!r}\n")
            return
    else:
        value = _atoi(rhs)
    store.set(name, value)


def main(argv: Sequence[str] | None = None) -> int:
    """Run every line of a file: ``memcells <filename>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: memcells <filename>")
        return 1
    store = MemoryStore()
    try:
        with open(args[0], encoding="utf-8") as source:
            for line in source:
                execute_line(store, line, sys.stdout)
    except OSError:
        print("Error opening file")
        return 4
    except ValueError as error:
        print(f"Invalid input: {error}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())