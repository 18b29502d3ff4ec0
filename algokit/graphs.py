"""Graph algorithms: minimum spanning tree weight and graph transposition."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

__all__ = ["kruskal_mst_weight", "transpose_graph"]


def kruskal_mst_weight(node_count: int, edges: Iterable[Tuple[int, int, int]]) -> int:
    """Total weight of a minimum spanning forest by Kruskal's algorithm.

    Nodes are numbered 0 to ``node_count`` inclusive; ``edges`` are
    ``(u, v, weight)`` triples. Raises ValueError for an edge whose end
    is out of range.
    """
    parent = list(range(node_count + 1))
    size = [1] * (node_count + 1)

    def find(node: int) -> int:
        root = node
        while parent[root] != root:
            root = parent[root]
        while parent[node] != root:
            parent[node], node = root, parent[node]
        return root

    ordered = sorted(edges, key=lambda edge: edge[2])
    for u, v, _ in ordered:
        for node in (u, v):
            if not 0 <= node <= node_count:
                raise ValueError(f"node out of range: {node}")

    total = 0
    for u, v, weight in ordered:
        a, b = find(u), find(v)
        if a == b:
            continue
        if size[a] < size[b]:
            a, b = b, a
        parent[b] = a
        size[a] += size[b]
        total += weight
    return total


def transpose_graph(adjacency: Sequence[Iterable[int]]) -> List[List[int]]:
    """Reverse every edge of a graph given as adjacency lists indexed by vertex.

    Raises ValueError for a neighbour that is not a vertex of the graph.
    """
    lists = [list(neighbours) for neighbours in adjacency]
    result: List[List[int]] = [[] for _ in lists]
    for source, neighbours in enumerate(lists):
        for target in neighbours:
            if not 0 <= target < len(lists):
                raise ValueError(f"vertex out of range: {target}")
            result[target].append(source)
    return result