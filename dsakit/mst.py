"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__ = ["Edge", "kruskal", "prim"]


@dataclass(frozen=True)
class Edge:
    """Weighted undirected edge between two vertex indices."""

    source: int
    destination: int
    cost: int


def _find(parents: list[int], vertex: int) -> int:
    while parents[vertex] != vertex:
        parents[vertex] = parents[parents[vertex]]
        vertex = parents[vertex]
    return vertex


def kruskal(edges: Iterable[Edge], vertex_count: int) -> list[Edge]:
    """Return the spanning-tree edges in the order Kruskal's algorithm picks them."""
    if vertex_count < 0:
        raise ValueError("vertex_count must be non-negative")
    ordered = sorted(edges, key=lambda edge: edge.cost)
    for edge in ordered:
        for vertex in (edge.source, edge.destination):
            if not 0 <= vertex < vertex_count:
                raise ValueError(f"vertex {vertex} out of range")

    parents = list(range(vertex_count))
    needed = max(vertex_count - 1, 0)
    tree: list[Edge] = []
    for edge in ordered:
        if len(tree) == needed:
            break
        root_a = _find(parents, edge.source)
        root_b = _find(parents, edge.destination)
        if root_a != root_b:
            tree.append(edge)
            parents[root_a] = root_b
    if len(tree) < needed:
        raise ValueError("graph is not connected")
    return tree


def prim(matrix: Sequence[Sequence[int]], start: int = 0) -> list[Edge]:
    """Return the spanning tree of an adjacency matrix (0 means no edge).

    One edge ``Edge(parent, vertex, cost)`` is given for each vertex other than
    ``start``, in vertex order.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if not 0 <= start < size:
        raise ValueError(f"start vertex {start} out of range")

    cost: list[float] = [math.inf] * size
    parent: list[int | None] = [None] * size
    in_tree = [False] * size
    cost[start] = 0

    for _ in range(size):
        candidates = [v for v in range(size) if not in_tree[v] and cost[v] < math.inf]
        if not candidates:
            raise ValueError("graph is not connected")
        current = min(candidates, key=lambda v: cost[v])
        in_tree[current] = True
        for neighbour, weight in enumerate(matrix[current]):
            if weight and not in_tree[neighbour] and weight < cost[neighbour]:
                parent[neighbour] = current
                cost[neighbour] = weight

    return [
        Edge(parent[v], v, matrix[v][parent[v]])
        for v in range(size)
        if v != start
    ]