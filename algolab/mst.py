"""Weight of a minimum spanning forest by Kruskal's algorithm."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from operator import attrgetter
from pathlib import Path
from typing import Iterable, List, Optional


@dataclass(frozen=True)
class Edge:
    """Undirected weighted edge between two 0-based node indices."""

    start: int
    end: int
    weight: int


class DisjointSet:
    """Union-find over nodes 0..size-1 that sums the weights of joining edges."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self.total_weight = 0

    def _check(self, node: int) -> None:
        if not 0 <= node < len(self._parent):
            raise ValueError(f"node {node} is outside 0..{len(self._parent) - 1}")

    def find(self, x: int) -> int:
        """Representative of x's set, compressing the path on the way."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def union(self, edge: Edge) -> bool:
        """Join the sets of the edge's ends; True if they were separate."""
        start_root = self.find(edge.start)
        end_root = self.find(edge.end)
        if start_root == end_root:
            return False
        self.total_weight += edge.weight
        if edge.start != start_root and edge.end != end_root:
            self._parent = [
                end_root if parent == start_root else parent for parent in self._parent
            ]
        elif edge.start != start_root:
            self._parent[end_root] = start_root
        else:
            self._parent[start_root] = end_root
        return True


def minimum_spanning_weight(node_count: int, edges: Iterable[Edge]) -> int:
    """Total weight of a minimum spanning forest of the graph."""
    forest = DisjointSet(node_count)
    for edge in sorted(edges, key=attrgetter("weight")):
        forest.union(edge)
    return forest.total_weight


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("usage: mst GRAPH_FILE", file=sys.stderr)
        return 2
    numbers = [int(field) for field in Path(args[0]).read_text().split()]
    if len(numbers) < 2:
        raise ValueError("input must start with node and edge counts")
    node_count, edge_count = numbers[0], numbers[1]
    triples = numbers[2 : 2 + 3 * edge_count]
    if len(triples) < 3 * edge_count:
        raise ValueError(f"expected {edge_count} edges")
    edges = [
        Edge(start, end, weight)
        for start, end, weight in zip(triples[0::3], triples[1::3], triples[2::3])
    ]
    print(minimum_spanning_weight(node_count, edges))
    return 0


if __name__ == "__main__":
    sys.exit(main())