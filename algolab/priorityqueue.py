"""Priority queue on a binomial heap with extract-min and decrease-key."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional


@dataclass(eq=False)
class _Node:
    key: int
    number: int
    parent: Optional["_Node"] = None
    children: List["_Node"] = field(default_factory=list)

    @property
    def degree(self) -> int:
        return len(self.children)


def _link(child: _Node, parent: _Node) -> None:
    child.parent = parent
    parent.children.insert(0, child)


class BinomialHeap:
    """Min-heap of integer keys, each entry labelled by a unique number."""

    def __init__(self) -> None:
        self._roots: List[_Node] = []
        self._nodes: Dict[int, _Node] = {}

    def _unite(self, added: List[_Node]) -> None:
        if not self._roots:
            self._roots = list(added)
            return
        if not added:
            return
        merged: List[_Node] = []
        own, other = iter(self._roots), iter(added)
        own_node, other_node = next(own, None), next(other, None)
        while own_node is not None and other_node is not None:
            if own_node.degree < other_node.degree:
                merged.append(own_node)
                own_node = next(own, None)
            else:
                merged.append(other_node)
                other_node = next(other, None)
        for rest_node, rest in ((own_node, own), (other_node, other)):
            if rest_node is not None:
                merged.append(rest_node)
                merged.extend(rest)

        position = 0
        while position + 1 < len(merged):
            current, following = merged[position], merged[position + 1]
            if current.degree != following.degree or (
                position + 2 < len(merged)
                and merged[position + 2].degree == current.degree
            ):
                position += 1
            elif current.key <= following.key:
                _link(following, current)
                del merged[position + 1]
            else:
                _link(current, following)
                del merged[position]
        self._roots = merged

    def push(self, key: int, number: int) -> None:
        """Insert key under the label number."""
        if number in self._nodes:
            raise ValueError(f"number {number} is already in the heap")
        node = _Node(key, number)
        self._nodes[number] = node
        self._unite([node])

    def extract_min(self) -> int:
        """Remove and return the smallest key."""
        if not self._roots:
            raise IndexError("extract from an empty heap")
        best = min(range(len(self._roots)), key=lambda index: self._roots[index].key)
        node = self._roots.pop(best)
        children = node.children[::-1]
        for child in children:
            child.parent = None
        del self._nodes[node.number]
        self._unite(children)
        return node.key

    def decrease(self, number: int, key: int) -> None:
        """Give the entry labelled number the new key and lift it to the root of its tree."""
        node = self._nodes.get(number)
        if node is None:
            raise KeyError(number)
        node.key = key
        while node.parent is not None:
            parent = node.parent
            node.key, parent.key = parent.key, node.key
            node.number, parent.number = parent.number, node.number
            self._nodes[node.number] = node
            self._nodes[parent.number] = parent
            node = parent

    def __bool__(self) -> bool:
        return bool(self._roots)

    def __len__(self) -> int:
        return len(self._nodes)


def run_commands(lines: Iterable[str]) -> List[str]:
    """Apply "push X", "extract-min" and "decrease-key N X" commands.

    Every command is numbered from 1 in order; decrease-key refers to the
    number of the push that added the entry. Returns one line per extract-min,
    "*" when the heap was empty.
    """
    heap = BinomialHeap()
    output: List[str] = []
    operation = 0
    for line in lines:
        parts = line.split()
        if not parts:
            continue
        operation += 1
        kind = parts[0][0]
        if kind == "p":
            heap.push(int(parts[1]), operation)
        elif kind == "e":
            output.append(str(heap.extract_min()) if heap else "*")
        elif kind == "d":
            heap.decrease(int(parts[1]), int(parts[2]))
        else:
            raise ValueError(f"unknown command: {line!r}")
    return output


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2:
        print("usage: priorityqueue INPUT OUTPUT", file=sys.stderr)
        return 2
    output = run_commands(Path(args[0]).read_text().splitlines())
    Path(args[1]).write_text("".join(line + "\n" for line in output))
    return 0


if __name__ == "__main__":
    sys.exit(main())