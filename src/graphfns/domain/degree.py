"""Degree, size and edge-set queries.

With ``weighted=True`` degrees sum edge weights (which may be zero or
negative) instead of counting edges. With ``undirected=True`` the graph
must be undirected and each reciprocal pair is counted once.
"""

from __future__ import annotations

from collections.abc import Hashable

from graphfns.domain.structure import resolve_undirected
from graphfns.domain.types import Edge, Graph, Weight


def indegree(graph: Graph[Hashable], vertex: Hashable, *, weighted: bool = False) -> Weight:
    """Return the number (or total weight) of edges ending at *vertex*."""
    result: Weight = 0
    for row in graph.values():
        weight = row.get(vertex, 0)
        if weight != 0:
            result += weight if weighted else 1
    return result


def outdegree(graph: Graph[Hashable], vertex: Hashable, *, weighted: bool = False) -> Weight:
    """Return the number (or total weight) of edges starting at *vertex*."""
    result: Weight = 0
    for weight in graph.get(vertex, {}).values():
        if weight != 0:
            result += weight if weighted else 1
    return result


def degree(
    graph: Graph[Hashable],
    vertex: Hashable,
    *,
    weighted: bool = False,
    undirected: bool = False,
) -> Weight:
    """Return ``indegree + outdegree`` of *vertex*.

    A loop counts twice, once in each direction.

    Raises:
        DirectedGraphError: If *undirected* is requested for a directed graph.
    """
    resolved = resolve_undirected(graph, "degree", undirected=undirected)
    return indegree(resolved, vertex, weighted=weighted) + outdegree(
        resolved, vertex, weighted=weighted
    )


def size(graph: Graph[Hashable], *, undirected: bool = False) -> int:
    """Return the number of edges in *graph*.

    Raises:
        DirectedGraphError: If *undirected* is requested for a directed graph.
    """
    resolved = resolve_undirected(graph, "size", undirected=undirected)
    return sum(1 for row in resolved.values() for weight in row.values() if weight != 0)


def edges[V: Hashable](graph: Graph[V], *, undirected: bool = False) -> set[Edge[V]]:
    """Return every ``(u, v)`` with a nonzero weight.

    Raises:
        DirectedGraphError: If *undirected* is requested for a directed graph.
    """
    resolved = resolve_undirected(graph, "edges", undirected=undirected)
    return {(u, v) for u, row in resolved.items() for v, weight in row.items() if weight != 0}
