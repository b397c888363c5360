"""Substitution of ``#define`` macros, kept in a chained hash table keyed in base 62."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

INITIAL_HASHSIZE = 128
BASE = 62
MAX_HASHSIZE = 1 << 16
REBUILD_THRESHOLD = 10
_U64 = (1 << 64) - 1


def _char_value(char: str) -> int | None:
    if "0" <= char <= "9":
        return ord(char) - ord("0")
    if "A" <= char <= "Z":
        return ord(char) - ord("A") + 10
    if "a" <= char <= "z":
        return ord(char) - ord("a") + 36
    return None


def hash_key(key: str, size: int) -> int:
    """Read the alphanumeric characters of ``key`` as a 64-bit base-62 number, modulo ``size``."""
    if size < 1:
        raise ValueError(f"size must be positive, got {size}")
    value = 0
    for char in key:
        digit = _char_value(char)
        if digit is not None:
            value = (value * BASE + digit) & _U64
    return value % size


@dataclass
class _Entry:
    key: str
    value: str


class MacroTable:
    """Hash table of macros; it doubles its size when its chains become uneven."""

    def __init__(self, size: int = INITIAL_HASHSIZE) -> None:
        if size < 1:
            raise ValueError(f"size must be positive, got {size}")
        self._reset(size)

    def _reset(self, size: int) -> None:
        self._buckets: list[list[_Entry]] = [[] for _ in range(size)]
        self.num_items = 0
        self.max_chain_length = 0
        self.min_chain_length: int | None = None

    @property
    def size(self) -> int:
        return len(self._buckets)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        for bucket in self._buckets:
            for entry in bucket:
                yield entry.key, entry.value

    def _place(self, entry: _Entry) -> None:
        bucket = self._buckets[hash_key(entry.key, self.size)]
        bucket.insert(0, entry)
        self.num_items += 1
        length = len(bucket)
        self.max_chain_length = max(self.max_chain_length, length)
        if self.min_chain_length is None or length < self.min_chain_length:
            self.min_chain_length = length

    def _rebuild(self) -> None:
        old = self._buckets
        self._reset(self.size * 2)
        for bucket in old:
            for entry in bucket:
                self._place(entry)

    def insert(self, key: str, value: str) -> None:
        """Define ``key``; a redefinition replaces the earlier value."""
        bucket = self._buckets[hash_key(key, self.size)]
        for entry in bucket:
            if entry.key == key:
                bucket.remove(entry)
                self.num_items -= 1
                break
        self._place(_Entry(key, value))
        if (
            self.num_items > REBUILD_THRESHOLD
            and self.min_chain_length is not None
            and self.max_chain_length >= 2 * self.min_chain_length
            and self.size < MAX_HASHSIZE
        ):
            self._rebuild()

    def find(self, key: str) -> str | None:
        """Return the value of ``key``, or None if it is not defined."""
        for entry in self._buckets[hash_key(key, self.size)]:
            if entry.key == key:
                return entry.value
        return None


def _parse_define(line: str) -> tuple[str, str] | None:
    rest = line[8:].lstrip(" ")
    end = rest.find(" ")
    if not rest or end == -1:
        return None
    key = rest[:end]
    value = rest[end + 1:].lstrip("\n").split("\n", 1)[0]
    if not value:
        return None
    return key, value


def process_lines(lines: Iterable[str], table: MacroTable) -> Iterator[str]:
    """Record ``#define`` lines in ``table`` and yield every other line with macros replaced.

    A line in which something was replaced loses its carriage returns.
    """
    for line in lines:
        if line.startswith("#define"):
            definition = _parse_define(line)
            if definition is not None:
                table.insert(*definition)
            continue
        result = line
        for key, value in table:
            if key not in result:
                continue
            if key in value:
                raise ValueError(f"macro {key!r} expands to itself")
            while key in result:
                result = result.replace(key, value, 1).replace("\r", "")
        yield result


def main(argv: Sequence[str] | None = None) -> int:
    """Print a file with its macros substituted: ``macros <file_path>``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Usage: macros <file_path>", file=sys.stderr)
        return 1
    table = MacroTable()
    try:
        with open(args[0], encoding="utf-8", newline="\n") as source:
            for line in process_lines(source, table):
                sys.stdout.write(line)
    except OSError as error:
        print(f"Couldn't open file: {error}", file=sys.stderr)
        return 4
    except ValueError as error:
        print(f"Invalid input: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())