"""Check whether a dumped B-tree index satisfies the B-tree properties."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from itertools import pairwise
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Set, Tuple

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_HEADER = re.compile(r"\s*(-?\d+)\s+(-?\d+)\s+(-?\d+)")
_NODE = re.compile(r"\s*([a-z]+)\s*:\s*0x(\d+)\s*\(\s*(\d+)\s*:([^()]*)\)")
_CHILDREN = re.compile(r"\s*\(\s*(\d+)\s*:([^()]*)\)")


class DumpError(ValueError):
    """The dump text does not follow the expected format."""


@dataclass(frozen=True)
class BTreeNode:
    """One node of a dumped B-tree: its keys and the ids of its children."""

    id: int
    keys: Tuple[int, ...] = ()
    children: Tuple[int, ...] = ()
    leaf: bool = True


def _numbers(field: str, declared: int, node_id: int) -> Tuple[int, ...]:
    try:
        values = tuple(int(token) for token in field.split())
    except ValueError as error:
        raise DumpError(f"node {node_id}: non-numeric entry in {field!r}") from error
    if len(values) != declared:
        raise DumpError(
            f"node {node_id}: {declared} entries declared, {len(values)} given"
        )
    return values


def parse_dump(text: str) -> Tuple[int, int, List[BTreeNode]]:
    """Parse a dump into (minimum degree t, root id, nodes in file order)."""
    header = _HEADER.match(text)
    if header is None:
        raise DumpError("dump must start with node count, t and root id")
    count, order, root_id = (int(group) for group in header.groups())
    if count < 0:
        raise DumpError(f"negative node count {count}")
    position = header.end()
    nodes: List[BTreeNode] = []
    for number in range(1, count + 1):
        match = _NODE.match(text, position)
        if match is None:
            raise DumpError(f"malformed description of node #{number}")
        kind, raw_id, key_count, key_field = match.groups()
        node_id = int(raw_id)
        keys = _numbers(key_field, int(key_count), node_id)
        position = match.end()
        if kind == "leaf":
            nodes.append(BTreeNode(node_id, keys))
        elif kind == "branch":
            child_match = _CHILDREN.match(text, position)
            if child_match is None:
                raise DumpError(f"branch {node_id} lacks its list of children")
            child_count, child_field = child_match.groups()
            children = _numbers(child_field, int(child_count), node_id)
            position = child_match.end()
            nodes.append(BTreeNode(node_id, keys, children, leaf=False))
        else:
            raise DumpError(f"unknown node kind {kind!r}")
    return order, root_id, nodes


def _node_fits(node: BTreeNode, order: int, root_id: int) -> bool:
    if len(node.keys) > 2 * order - 1:
        return False
    if node.id != root_id and len(node.keys) < order - 1:
        return False
    if any(left > right for left, right in pairwise(node.keys)):
        return False
    if not node.leaf and len(node.children) != len(node.keys) + 1:
        return False
    return True


def is_btree(nodes: Iterable[BTreeNode], root_id: int) -> bool:
    """Check key ranges below the root and that all leaves share one depth."""
    nodes = list(nodes)
    index: Dict[int, int] = {}
    for position, node in enumerate(nodes):
        index.setdefault(node.id, position)
    if root_id not in index:
        return False

    depths: Dict[int, int] = {}
    visited: Set[int] = set()

    def visit(position: int, depth: int, low: int, high: int, check: bool) -> bool:
        if position in visited:
            return False
        visited.add(position)
        node = nodes[position]
        depths[position] = depth
        if check and node.keys and not low < node.keys[0] < high:
            return False
        if node.children and len(node.children) != len(node.keys) + 1:
            return False
        last = len(node.children) - 1
        for slot, child_id in enumerate(node.children):
            child = index.get(child_id)
            if child is None:
                return False
            child_low = low if slot == 0 else node.keys[slot - 1]
            child_high = high if slot == last else node.keys[slot]
            if not visit(child, depth + 1, child_low, child_high, True):
                return False
        return True

    if not visit(index[root_id], 1, _INT_MIN, _INT_MAX, False):
        return False

    leaf_depths = {
        depths.get(position, 1) for position, node in enumerate(nodes) if node.leaf
    }
    return len(leaf_depths) <= 1


def check_dump(text: str) -> bool:
    """True if the dumped tree is a correct B-tree of the declared degree."""
    order, root_id, nodes = parse_dump(text)
    if not all(_node_fits(node, order, root_id) for node in nodes):
        return False
    return is_btree(nodes, root_id)


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("usage: btreecheck DUMP_FILE", file=sys.stderr)
        return 2
    try:
        valid = check_dump(Path(args[0]).read_text())
    except DumpError:
        valid = False
    print("yes" if valid else "no")
    return 0


if __name__ == "__main__":
    sys.exit(main())