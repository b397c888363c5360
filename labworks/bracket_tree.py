"""Trees written as ``a(b(c),d)`` printed one node per line with indentation.

Each input line holds one expression.  Letters name nodes, ``(`` opens the
children of the current node, ``,`` starts a sibling and ``)`` returns to the
parent; other characters are ignored.  A node without a letter ends the
printing of its run of siblings.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import Sequence


@dataclass(eq=False)
class TreeNode:
    """A node with a one-letter name, its children and its parent."""

    data: str = ""
    children: list[TreeNode] = field(default_factory=list)
    parent: TreeNode | None = field(default=None, repr=False)

    def add_child(self, child: TreeNode) -> None:
        """Append ``child`` after the existing children."""
        child.parent = self
        self.children.append(child)


def parse_bracket_line(line: str) -> list[TreeNode]:
    """Parse one expression and return its top-level nodes; the first is the root."""
    top = [TreeNode()]
    current = top[0]
    for char in line:
        if char == "(":
            child = TreeNode()
            current.add_child(child)
            current = child
        elif char == ")":
            if current.parent is not None:
                current = current.parent
        elif char == ",":
            sibling = TreeNode()
            if current.parent is None:
                top.append(sibling)
            else:
                current.parent.add_child(sibling)
            current = sibling
        elif char.isascii() and char.isalpha():
            current.data = char
    return top


def _render(nodes: Sequence[TreeNode], depth: int, lines: list[str]) -> None:
    for node in nodes:
        if not node.data:
            return
        lines.append("  " * depth + node.data + "\n")
        _render(node.children, depth + 1, lines)


def _render_forest(nodes: Sequence[TreeNode]) -> str:
    lines: list[str] = []
    _render(nodes, 0, lines)
    return "".join(lines)


def render_tree(root: TreeNode) -> str:
    """Return ``root`` and its descendants, one per line, indented two spaces per level."""
    return _render_forest([root])


def convert_text(text: str) -> str:
    """Render every line of ``text``; the renderings are separated by empty lines."""
    return "\n".join(_render_forest(parse_bracket_line(line)) for line in text.split("\n"))


def main(argv: Sequence[str] | None = None) -> int:
    """Convert a file of expressions: ``bracket_tree <input> <output>``; both files must exist."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print("invalid amount of argumnets")
        return 1
    input_path, output_path = args
    if not (os.path.exists(input_path) and os.path.exists(output_path)):
        print("Incorrect path")
        return 1
    if os.path.realpath(input_path) == os.path.realpath(output_path):
        print("The same paths")
        return 1
    try:
        with open(input_path, encoding="utf-8") as source:
            text = source.read()
        with open(output_path, "w", encoding="utf-8") as output:
            output.write(convert_text(text))
    except OSError:
        return 6
    return 0


if __name__ == "__main__":
    sys.exit(main())