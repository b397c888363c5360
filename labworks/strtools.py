"""String utilities selected by a command-line flag.

``-l`` length, ``-r`` reverse, ``-u`` upper-case every second character,
``-n`` digits then letters then the rest, ``-c`` concatenation of strings in an
order drawn from a seeded pseudo-random generator.
"""

from __future__ import annotations

import re
import string
import sys
from collections import deque
from typing import Iterable, Sequence

FLAGS = "lrunc"
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_U32 = 0xFFFFFFFF
_INTEGER = re.compile(r"[ \t\n\v\f\r]*[+-]?[0-9]+")


class _SeededRandom:
    """Additive-feedback generator with the same output as the C library's ``srand``/``rand``."""

    def __init__(self, seed: int) -> None:
        seed &= _U32
        if seed == 0:
            seed = 1
        word = seed - (1 << 32) if seed >= 1 << 31 else seed
        state = [word & _U32]
        for _ in range(1, 31):
            hi = abs(word) // 127773 * (1 if word >= 0 else -1)
            lo = word - hi * 127773
            word = 16807 * lo - 2836 * hi
            if word < 0:
                word += 2147483647
            state.append(word & _U32)
        state.extend(state[:3])
        self._history: deque[int] = deque(state, maxlen=34)
        for _ in range(310):
            self._step()

    def _step(self) -> int:
        value = (self._history[-31] + self._history[-3]) & _U32
        self._history.append(value)
        return value

    def next(self) -> int:
        """Return the next value in 0 .. 2**31 - 1."""
        return self._step() >> 1


def parse_flag(flag: str) -> str:
    """Return the letter of a flag such as ``-l``; anything else raises ``ValueError``."""
    if len(flag) >= 2 and flag[0] == "-" and flag[1] in FLAGS:
        return flag[1]
    raise ValueError(f"unknown flag {flag!r}")


def string_length(text: str) -> int:
    """Return the number of characters of ``text``."""
    return len(text)


def alternate_upper(text: str) -> str:
    """Upper-case the characters at odd positions, leaving the others as they are."""
    return "".join(char.upper() if index % 2 else char for index, char in enumerate(text))


def reverse(text: str) -> str:
    """Return ``text`` backwards."""
    return "".join(reversed(text))


def group_characters(text: str) -> str:
    """Return the digits of ``text``, then its letters, then everything else, each in order."""
    digits = [char for char in text if char in string.digits]
    letters = [char for char in text if char in string.ascii_letters]
    others = [char for char in text if char not in string.digits and char not in string.ascii_letters]
    return "".join(digits + letters + others)


def concat_shuffled(strings: Iterable[str], seed: int) -> str:
    """Concatenate ``strings`` in an order drawn from a generator seeded with ``seed``."""
    items = list(strings)
    count = len(items)
    generator = _SeededRandom(seed)
    used: set[int] = set()
    parts = []
    while len(used) < count:
        index = generator.next() % count
        if index in used:
            continue
        used.add(index)
        parts.append(items[index])
    return "".join(parts)


def _parse_int(text: str) -> int:
    if text == "":
        return 0
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"{text!r} is not an integer")
    value = int(text.strip())
    if not INT_MIN <= value <= INT_MAX:
        raise OverflowError(f"{text!r} does not fit in an int")
    return value


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``strtools <flag> <string> [<strings> ...]``."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("Invalid input")
        return 1
    try:
        flag = parse_flag(args[0])
    except ValueError:
        print("Invalid input")
        return 1
    text = args[1]
    if flag != "c":
        if len(args) != 2:
            print("Invalid amount arguments")
            return 1
        if flag == "l":
            print(string_length(text))
        elif flag == "r":
            print(reverse(text))
        elif flag == "u":
            print(alternate_upper(text))
        else:
            print(group_characters(text))
        return 0
    try:
        seed = _parse_int(text)
    except OverflowError:
        print("Overflow")
        return 3
    except ValueError:
        print("Invalid input of number, bye")
        return 1
    if seed < 0:
        print("This number is negative")
        return 1
    print(concat_shuffled(args[2:], seed))
    return 0


if __name__ == "__main__":
    sys.exit(main())