"""Word frequency tree built from a text file split on separator characters."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import IO, Iterable, Iterator, Sequence

MAX_LENGTH = 100

_MENU = (
    "\nchoose:\n"
    "1. count of occurrences\n"
    "2. print the first n most common words\n"
    "3. find the shortest and the longest word\n"
    "4. get depth of tree\n"
    "5. save tree to file\n"
    "6. load tree from file\n"
    "7. Exit\n"
)


@dataclass
class _Node:
    word: str
    count: int = 1
    left: _Node | None = None
    right: _Node | None = None


class WordTree:
    """Binary search tree of words, each with the number of times it was added."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root: _Node | None = None
        for word in words:
            self.add(word)

    def __len__(self) -> int:
        return sum(1 for _ in self._inorder())

    def _inorder(self) -> Iterator[_Node]:
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def _preorder(self) -> Iterator[_Node]:
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def add(self, word: str) -> None:
        """Add one occurrence of ``word``."""
        if self._root is None:
            self._root = _Node(word)
            return
        node = self._root
        while True:
            if word == node.word:
                node.count += 1
                return
            if word < node.word:
                if node.left is None:
                    node.left = _Node(word)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(word)
                    return
                node = node.right

    def count(self, word: str) -> int:
        """Return how many times ``word`` was added."""
        node = self._root
        while node is not None:
            if word == node.word:
                return node.count
            node = node.left if word < node.word else node.right
        return 0

    def top(self, n: int) -> list[tuple[str, int]]:
        """Return the ``n`` most frequent words with their counts; ties in alphabetical order."""
        nodes = sorted(self._inorder(), key=lambda node: -node.count)
        return [(node.word, node.count) for node in nodes[:max(n, 0)]]

    def longest_and_shortest(self) -> tuple[str, str]:
        """Return the longest and the shortest word; the first found in pre-order wins ties."""
        longest = ""
        shortest = ""
        for node in self._preorder():
            if len(node.word) > len(longest):
                longest = node.word
            if not shortest or len(node.word) < len(shortest):
                shortest = node.word
        return longest, shortest

    def depth(self) -> int:
        """Return the number of levels of the tree."""
        levels = 0
        level = [self._root] if self._root is not None else []
        while level:
            levels += 1
            level = [child for node in level for child in (node.left, node.right) if child is not None]
        return levels

    def save(self, stream: IO[str], separator: str) -> None:
        """Write every occurrence of every word in pre-order, each followed by ``separator``."""
        for node in self._preorder():
            stream.write((node.word + separator) * node.count)

    def load(self, stream: IO[str], separators: str) -> None:
        """Add the words of ``stream``; any character of ``separators`` ends a word."""
        chars: list[str] = []
        for char in stream.read():
            if char in separators:
                if chars:
                    self.add("".join(chars))
                    chars = []
            else:
                chars.append(char)
        if chars:
            self.add("".join(chars))


def read_words(stream: IO[str], separators: Sequence[str]) -> Iterator[str]:
    """Yield the words of ``stream``.

    The first character of each separator ends a word; other whitespace is
    dropped, and words are cut to ``MAX_LENGTH - 1`` characters.
    """
    stops = {separator[0] for separator in separators if separator}
    chars: list[str] = []
    for char in stream.read():
        if char in stops:
            if chars:
                yield "".join(chars)
                chars = []
        elif len(chars) < MAX_LENGTH - 1 and not char.isspace():
            chars.append(char)
    if chars:
        yield "".join(chars)


def _tokens(stream: IO[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def interactive_dialog(
    tree: WordTree,
    separators: Sequence[str],
    stdin: IO[str] | None = None,
    stdout: IO[str] | None = None,
) -> WordTree:
    """Answer menu requests read from ``stdin`` until ``7`` or end of input; return the tree in use."""
    source = sys.stdin if stdin is None else stdin
    out = sys.stdout if stdout is None else stdout
    tokens = _tokens(source)
    while True:
        out.write(_MENU)
        token = next(tokens, None)
        if token is None:
            return tree
        try:
            choice = int(token)
        except ValueError:
            choice = 0
        if choice == 1:
            word = next(tokens, None)
            if word is None:
                return tree
            out.write(f"count of occurrences '{word}' --- {tree.count(word)}\n")
        elif choice == 2:
            out.write("enter n:")
            token = next(tokens, None)
            if token is None:
                return tree
            try:
                n = int(token)
            except ValueError:
                out.write("Invalid number.\n")
                continue
            if len(tree):
                out.write(f"first {n} most common words:\n")
                for word, count in tree.top(n):
                    out.write(f"{word}: {count}\n")
        elif choice == 3:
            longest, shortest = tree.longest_and_shortest()
            out.write(f"the longest {longest}\n")
            out.write(f"the shortest {shortest}\n")
        elif choice == 4:
            out.write(f"depth: {tree.depth()}\n")
        elif choice == 5:
            out.write("Enter file name for saving: ")
            filename = next(tokens, None)
            if filename is None:
                return tree
            try:
                with open(filename, "w", encoding="utf-8") as output:
                    tree.save(output, separators[0][0])
            except OSError:
                out.write("Couldn't open file for writing\n")
                continue
            out.write("Tree saved successfully\n")
        elif choice == 6:
            out.write("Enter file name for loading: ")
            filename = next(tokens, None)
            if filename is None:
                return tree
            try:
                with open(filename, encoding="utf-8") as source_file:
                    loaded = WordTree()
                    loaded.load(source_file, separators[0])
            except OSError:
                out.write("Couldn't open file for reading\n")
                continue
            tree = loaded
            out.write("Tree loaded successfully\n")
        elif choice == 7:
            return tree
        else:
            out.write("Invalid choice.\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Build a word tree: ``word_tree <file> <separator> [<separator> ...]``, then run the menu."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("Invalid amount of arguments")
        return 1
    separators = args[1:]
    try:
        with open(args[0], encoding="utf-8") as source:
            tree = WordTree(read_words(source, separators))
    except OSError:
        print("Couldn't open file")
        print("Error processing file")
        return 6
    interactive_dialog(tree, separators, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())