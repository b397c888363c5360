"""Find every occurrence of a substring in files, with line numbers and positions."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, replace
from typing import Sequence


@dataclass(frozen=True)
class Occurrence:
    """A match: its line, its 1-based character position in the whole text, and the file."""

    line: int
    position: int
    path: str | None = None


def find_occurrences(text: str, substring: str, start_line: int = 1) -> list[Occurrence]:
    """Return every, possibly overlapping, occurrence of ``substring`` in ``text``.

    A newline is counted before the match at its own position, so a match that
    starts with a newline belongs to the following line.
    """
    found = []
    line = start_line
    for index, char in enumerate(text):
        if char == "\n":
            line += 1
        if text.startswith(substring, index):
            found.append(Occurrence(line, index + 1))
    return found


def find_in_file(path: str | os.PathLike, substring: str) -> list[Occurrence]:
    """Return the occurrences of ``substring`` in the file at ``path``."""
    name = os.fspath(path)
    with open(name, encoding="utf-8", newline="") as source:
        text = source.read()
    return [replace(occurrence, path=name) for occurrence in find_occurrences(text, substring, 1)]


def find_in_files(substring: str, *args: str | os.PathLike) -> list[Occurrence]:
    """Return the occurrences of ``substring`` in each file in turn; a missing file raises OSError."""
    found: list[Occurrence] = []
    for path in args:
        found.extend(find_in_file(path, substring))
    return found


def main(argv: Sequence[str] | None = None) -> int:
    """Search files: ``substring <text> <file> ...``; without arguments search the demo files."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        substring, paths = args[0], args[1:]
    else:
        substring, paths = "abaa", ["file1.txt", "file2.txt"]
    for path in paths:
        try:
            occurrences = find_in_file(path, substring)
        except OSError:
            print(f"Error opening file: {path}")
            print("Error file opening")
            return 4
        for occurrence in occurrences:
            print(
                f"Substr found on line {occurrence.line}, "
                f"position {occurrence.position} in file {occurrence.path}"
            )
    return 0


if __name__ == "__main__":
    sys.exit(main())