"""Adjacency-matrix construction and copy-on-write mutation.

Pure functions: every transform returns a new graph and never touches its
input. Absent matrix entries read as weight ``0``.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from itertools import combinations_with_replacement

from graphfns.domain.types import Edge, Graph, Weight


def create[V: Hashable](vertices: Iterable[V]) -> Graph[V]:
    """Create a graph seeded with *vertices* and no edges.

    Duplicate vertices collapse; the first occurrence keeps its position.

    Example::

        >>> create(["A", "B"])
        {'A': {'A': 0, 'B': 0}, 'B': {'A': 0, 'B': 0}}
    """
    ordered = list(dict.fromkeys(vertices))
    return {u: dict.fromkeys(ordered, 0) for u in ordered}


def clone[V: Hashable](graph: Graph[V]) -> Graph[V]:
    """Return a deep copy of *graph* (no row is shared with the source)."""
    return {u: dict(row) for u, row in graph.items()}


def vertices[V: Hashable](graph: Graph[V]) -> set[V]:
    """Return the vertices of *graph*."""
    return set(graph)


def order(graph: Graph[Hashable]) -> int:
    """Return the number of vertices in *graph*."""
    return len(graph)


def iter_vertex_pairs[V: Hashable](graph: Graph[V]) -> Iterable[Edge[V]]:
    """Yield ``(u, v)`` for every vertex pair with ``u`` at or before ``v``.

    Pairs come out in vertex order, self-pairs included.
    """
    return combinations_with_replacement(list(graph), 2)


def vertex_pairs[V: Hashable](graph: Graph[V]) -> set[Edge[V]]:
    """Return all vertex pairs irrespective of the edges present.

    Example::

        >>> sorted(vertex_pairs(create(["A", "B"])))
        [('A', 'A'), ('A', 'B'), ('B', 'B')]
    """
    return set(iter_vertex_pairs(graph))


def add_vertex[V: Hashable](graph: Graph[V], vertex: V) -> Graph[V]:
    """Add *vertex* with no edges. A vertex that already exists is a no-op."""
    result = clone(graph)
    if vertex in result:
        return result

    for row in result.values():
        row[vertex] = 0
    result[vertex] = dict.fromkeys(result, 0)
    result[vertex][vertex] = 0
    return result


def remove_vertex[V: Hashable](graph: Graph[V], vertex: V) -> Graph[V]:
    """Remove *vertex* and every edge touching it."""
    remaining = [u for u in graph if u != vertex]
    return {u: {v: graph[u].get(v, 0) for v in remaining} for u in remaining}


def get_edge[V: Hashable](graph: Graph[V], edge: Edge[V]) -> Weight:
    """Return the stored weight of *edge* (``0`` means no edge)."""
    u, v = edge
    return graph.get(u, {}).get(v, 0)


def set_edge[V: Hashable](
    graph: Graph[V],
    edge: Edge[V],
    weight: Weight,
    *,
    undirected: bool = False,
) -> Graph[V]:
    """Set the weight of *edge*, mirrored to ``(v, u)`` when *undirected*.

    ``set_edge(g, e, 1)`` is equivalent to ``add_edge(g, e)`` on an empty
    slot and ``set_edge(g, e, 0)`` to ``remove_edge(g, e)``.
    """
    u, v = edge
    result = clone(graph)
    result[u][v] = weight
    if undirected:
        result[v][u] = weight
    return result


def add_edge[V: Hashable](
    graph: Graph[V],
    edge: Edge[V],
    *,
    undirected: bool = False,
) -> Graph[V]:
    """Add an edge of weight ``1`` from ``u`` to ``v``.

    Existing edges keep their weight, so adding twice is the same as adding
    once. With *undirected* the reverse direction is checked separately.
    """
    u, v = edge
    result = clone(graph)
    if result[u][v] == 0:
        result[u][v] = 1
    if undirected and result[v][u] == 0:
        result[v][u] = 1
    return result


def remove_edge[V: Hashable](
    graph: Graph[V],
    edge: Edge[V],
    *,
    undirected: bool = False,
) -> Graph[V]:
    """Remove *edge* (set its weight to ``0``)."""
    return set_edge(graph, edge, 0, undirected=undirected)
