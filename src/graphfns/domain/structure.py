"""Structural predicates and directed/undirected conversion.

An undirected graph is not a separate storage format: it is a matrix in
which every edge has a reciprocal edge of equal weight. ``to_directed``
collapses each reciprocal pair into one entry of the upper triangle (by
vertex order); ``degree``, ``size``, ``edges`` and ``to_d3`` use it for
their ``undirected`` mode.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterator

from graphfns.domain.errors import CyclicGraphError, DirectedGraphError
from graphfns.domain.matrix import clone, iter_vertex_pairs
from graphfns.domain.types import Graph, MergeFn

logger = logging.getLogger(__name__)


def is_undirected(graph: Graph[Hashable]) -> bool:
    """Return True if every edge has a reciprocal edge of equal weight.

    Loops are bidirectional by definition, so they never break symmetry.
    """
    return all(
        graph[u].get(v, 0) == graph[v].get(u, 0) for u, v in iter_vertex_pairs(graph)
    )


def require_undirected(graph: Graph[Hashable], op: str) -> None:
    """Raise :class:`DirectedGraphError` unless *graph* is undirected."""
    if is_undirected(graph):
        return
    logger.debug("precondition.failed: %s %s", op, DirectedGraphError.code)
    msg = f"Unable to run {op}: expected an undirected graph, but got a directed graph"
    raise DirectedGraphError(msg, op=op)


def require_acyclic(graph: Graph[Hashable], op: str) -> None:
    """Raise :class:`CyclicGraphError` if *graph* contains a cycle."""
    if not is_cyclic(graph):
        return
    logger.debug("precondition.failed: %s %s", op, CyclicGraphError.code)
    msg = f"Unable to run {op}: the graph contains cycles"
    raise CyclicGraphError(msg, op=op)


def make_undirected[V: Hashable](graph: Graph[V], merge: MergeFn = max) -> Graph[V]:
    """Make every edge mutual.

    A one-way edge is copied to the reverse direction. When both directions
    already carry (different) weights, *merge* decides the shared weight;
    the default keeps the larger one.
    """
    result = clone(graph)
    for u, v in iter_vertex_pairs(graph):
        forward = graph[u].get(v, 0)
        backward = graph[v].get(u, 0)
        if u == v or forward == 0 or backward == 0:
            weight = forward or backward
        else:
            weight = merge(forward, backward)
        result[u][v] = weight
        result[v][u] = weight
    return result


def to_directed[V: Hashable](graph: Graph[V]) -> Graph[V]:
    """Collapse each reciprocal pair of an undirected graph to one edge.

    Keeps ``graph[u][v]`` only where ``v`` does not precede ``u`` in vertex
    order. A graph that is not undirected comes back as an unchanged copy.
    """
    if not is_undirected(graph):
        return clone(graph)

    ordered = list(graph)
    return {
        u: {v: graph[u].get(v, 0) if j >= i else 0 for j, v in enumerate(ordered)}
        for i, u in enumerate(ordered)
    }


def transpose[V: Hashable](graph: Graph[V]) -> Graph[V]:
    """Flip the orientation of every edge, keeping its weight."""
    ordered = list(graph)
    return {u: {v: graph[v].get(u, 0) for v in ordered} for u in ordered}


def resolve_undirected[V: Hashable](graph: Graph[V], op: str, *, undirected: bool) -> Graph[V]:
    """Return the matrix *op* should count over.

    With *undirected* the graph must be undirected and comes back collapsed
    by :func:`to_directed`; otherwise it is returned as is.
    """
    if not undirected:
        return graph
    require_undirected(graph, op)
    return to_directed(graph)


def is_cyclic(graph: Graph[Hashable], *, undirected: bool = False) -> bool:
    """Return True if *graph* contains a cycle.

    Loops (an edge from a vertex to itself) are cycles. In *undirected*
    mode a single reciprocal pair is not a cycle, and the graph must be
    undirected.

    Raises:
        DirectedGraphError: If *undirected* is requested for a directed graph.
    """
    if undirected:
        require_undirected(graph, "is_cyclic")

    visited: set[Hashable] = set()
    for start in graph:
        if start in visited:
            continue
        if undirected:
            found = _has_cycle_undirected(graph, visited, start)
        else:
            found = _has_cycle_directed(graph, visited, start)
        if found:
            return True
    return False


def _successors(graph: Graph[Hashable], vertex: Hashable) -> list[Hashable]:
    return [v for v, weight in graph[vertex].items() if weight != 0]


def _has_cycle_directed(
    graph: Graph[Hashable],
    visited: set[Hashable],
    start: Hashable,
) -> bool:
    """Depth-first search from *start* looking for an edge back onto the path."""
    visited.add(start)
    path = {start}
    stack = [(start, iter(_successors(graph, start)))]

    while stack:
        vertex, pending = stack[-1]
        for child in pending:
            if child in path:
                return True
            if child not in visited:
                visited.add(child)
                path.add(child)
                stack.append((child, iter(_successors(graph, child))))
                break
        else:
            stack.pop()
            path.discard(vertex)
    return False


def _has_cycle_undirected(
    graph: Graph[Hashable],
    visited: set[Hashable],
    start: Hashable,
) -> bool:
    """Depth-first search from *start*; any visited neighbour but the parent closes a cycle."""
    visited.add(start)
    stack: list[tuple[Hashable, Hashable | None, Iterator[Hashable]]] = [
        (start, None, iter(_successors(graph, start)))
    ]

    while stack:
        vertex, parent, pending = stack[-1]
        for neighbour in pending:
            if neighbour in visited:
                if neighbour != parent:
                    return True
                continue
            visited.add(neighbour)
            stack.append((neighbour, vertex, iter(_successors(graph, neighbour))))
            break
        else:
            stack.pop()
    return False
