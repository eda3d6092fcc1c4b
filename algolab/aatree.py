"""Ordered multiset of integers kept in a self-balancing AA-tree."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

_COMMAND = re.compile(r"\s*(\S)\s*([+-]?\d+)")
_COUNT = re.compile(r"\s*(\d+)")


@dataclass
class _Node:
    value: int
    level: int = 1
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _skew(node: Optional[_Node]) -> Optional[_Node]:
    if node is None or node.left is None:
        return node
    if node.left.level == node.level:
        left = node.left
        node.left = left.right
        left.right = node
        return left
    return node


def _split(node: Optional[_Node]) -> Optional[_Node]:
    if node is None or node.right is None or node.right.right is None:
        return node
    if node.level == node.right.right.level:
        pivot = node.right
        node.right = pivot.left
        pivot.left = node
        pivot.level += 1
        return pivot
    return node


def _decrease_level(node: _Node) -> _Node:
    should_be = min(
        node.left.level if node.left else 0,
        node.right.level if node.right else 0,
    ) + 1
    if should_be < node.level:
        node.level = should_be
        if node.right is not None and should_be < node.right.level:
            node.right.level = should_be
    return node


def _insert(value: int, node: Optional[_Node]) -> _Node:
    if node is None:
        return _Node(value)
    if value < node.value:
        node.left = _insert(value, node.left)
    else:
        node.right = _insert(value, node.right)
    return _split(_skew(node))


def _remove(value: int, node: Optional[_Node]) -> Optional[_Node]:
    if node is None:
        return None
    if value > node.value:
        node.right = _remove(value, node.right)
    elif value < node.value:
        node.left = _remove(value, node.left)
    else:
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        successor = node.right
        while successor.left is not None:
            successor = successor.left
        node.value = successor.value
        node.right = _remove(successor.value, node.right)

    node = _skew(_decrease_level(node))
    node.right = _skew(node.right)
    if node.right is not None:
        node.right.right = _skew(node.right.right)
    node = _split(node)
    node.right = _split(node.right)
    return node


class AATree:
    """A multiset of integers; equal values may be stored more than once."""

    def __init__(self) -> None:
        self._root: Optional[_Node] = None

    def insert(self, value: int) -> None:
        """Add one occurrence of value."""
        self._root = _insert(value, self._root)

    def remove(self, value: int) -> None:
        """Remove one occurrence of value; a missing value is ignored."""
        self._root = _remove(value, self._root)

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node is not None:
            if node.value == value:
                return True
            node = node.left if value < node.value else node.right  # type: ignore[operator]
        return False

    def height(self) -> int:
        """Level of the root, or 0 for an empty tree."""
        return self._root.level if self._root is not None else 0


def run_commands(lines: Iterable[str]) -> List[str]:
    """Apply "+ X", "- X" and "? X" commands and return the output lines."""
    tree = AATree()
    output: List[str] = []
    for line in lines:
        if not line.strip():
            continue
        match = _COMMAND.match(line)
        if match is None:
            raise ValueError(f"malformed command: {line!r}")
        sign, value = match.group(1), int(match.group(2))
        if sign == "+":
            tree.insert(value)
            output.append(str(tree.height()))
        elif sign == "-":
            tree.remove(value)
            output.append(str(tree.height()))
        elif sign == "?":
            output.append("true" if value in tree else "false")
    return output


def _read_commands(text: str) -> List[str]:
    header = _COUNT.match(text)
    if header is None:
        raise ValueError("input does not start with a command count")
    count = int(header.group(1))
    commands = []
    for match in _COMMAND.finditer(text, header.end()):
        if len(commands) == count:
            break
        commands.append(f"{match.group(1)} {match.group(2)}")
    return commands


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2:
        print("usage: aatree INPUT OUTPUT", file=sys.stderr)
        return 2
    commands = _read_commands(Path(args[0]).read_text())
    output = run_commands(commands)
    Path(args[1]).write_text("".join(line + "\n" for line in output))
    return 0


if __name__ == "__main__":
    sys.exit(main())