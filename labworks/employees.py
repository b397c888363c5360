"""Sorting of employee records read from a file, by wages then names then id."""

from __future__ import annotations

import functools
import itertools
import os
import re
import sys
from dataclasses import dataclass
from typing import IO, Iterable, Sequence

EPS = 1e-9
_UNSIGNED = re.compile(r"\+?[0-9]+")


@dataclass
class Employee:
    """One employee record."""

    id: int
    name: str
    last_name: str
    wages: float

    def sort_key(self) -> tuple[float, str, str, int]:
        """Return the fields in the order they are compared."""
        return (self.wages, self.last_name, self.name, self.id)


def parse_flag(flag: str) -> str:
    """Return ``a`` or ``d`` for a flag such as ``-a`` or ``/d``; anything else raises ``ValueError``."""
    if len(flag) >= 2 and flag[0] in "-/" and flag[1] in "ad":
        return flag[1]
    raise ValueError(f"unknown flag {flag!r}")


def _is_name(text: str) -> bool:
    return text.isascii() and text.isalpha()


def load_employees(stream: IO[str]) -> list[Employee]:
    """Read records ``id name last_name wages`` until the input ends or no id can be read.

    A record cut short, a bad wage or a name that is not made of Latin letters
    raises ``ValueError``.
    """
    tokens = iter(stream.read().split())
    employees = []
    for id_text in tokens:
        if not _UNSIGNED.fullmatch(id_text) or int(id_text) > 0xFFFFFFFF:
            break
        rest = list(itertools.islice(tokens, 3))
        if len(rest) < 3:
            raise ValueError("incomplete employee record")
        name, last_name, wages_text = rest
        try:
            wages = float(wages_text)
        except ValueError:
            raise ValueError(f"bad wages {wages_text!r}") from None
        if not _is_name(name) or not _is_name(last_name):
            raise ValueError(f"bad name in record {id_text}")
        employees.append(Employee(int(id_text), name, last_name, wages))
    return employees


def _compare(first: Employee, second: Employee) -> int:
    if first.wages - second.wages > EPS:
        return 1
    if second.wages - first.wages > EPS:
        return -1
    a, b = first.sort_key()[1:], second.sort_key()[1:]
    return (a > b) - (a < b)


def sort_employees(employees: Iterable[Employee], descending: bool = False) -> list[Employee]:
    """Return the employees sorted; wages within ``EPS`` of each other count as equal."""
    key = functools.cmp_to_key(_compare)
    return sorted(employees, key=key, reverse=descending)


def format_employee(employee: Employee) -> str:
    """Return the record as one line of output, without the newline."""
    return f"{employee.id} {employee.name} {employee.last_name} {employee.wages:f}"


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``employees <input> <-a|-d> <output>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 3:
        print("Invalid input")
        return 1
    input_path, flag_text, output_path = args
    try:
        flag = parse_flag(flag_text)
    except ValueError:
        print("Error handling")
        return 1
    if not os.path.exists(input_path):
        print("Error realpath")
        return 1
    if os.path.realpath(input_path) == os.path.realpath(output_path):
        print("The same paths")
        return 1
    try:
        with open(input_path, encoding="utf-8") as source:
            employees = load_employees(source)
    except OSError:
        print("Couldn't open input file")
        return 6
    except ValueError:
        print("Invalid input")
        return 1
    try:
        with open(output_path, "w", encoding="utf-8") as output:
            for employee in sort_employees(employees, flag == "d"):
                output.write(format_employee(employee) + "\n")
    except OSError:
        print("Couldn't open output file")
        return 6
    return 0


if __name__ == "__main__":
    sys.exit(main())