"""Parent/child lookups, ancestor/descendant closures and topological sort.

Closures and sorting are only defined on DAGs; they reject cyclic graphs
up front. Closures use an explicit work-list, so deep graphs do not hit
the interpreter recursion limit.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Hashable

from graphfns.domain.degree import indegree
from graphfns.domain.structure import require_acyclic
from graphfns.domain.types import Graph, Weight


def children[V: Hashable](graph: Graph[V], vertex: V) -> set[V]:
    """Return the vertices reached by an edge from *vertex*.

    A loop makes *vertex* its own child.
    """
    return {v for v, weight in graph.get(vertex, {}).items() if weight != 0}


def parents[V: Hashable](graph: Graph[V], vertex: V) -> set[V]:
    """Return the vertices with an edge to *vertex*.

    A loop makes *vertex* its own parent.
    """
    return {u for u, row in graph.items() if row.get(vertex, 0) != 0}


def _closure[V: Hashable](
    graph: Graph[V],
    vertex: V,
    step: Callable[[Graph[V], V], set[V]],
) -> set[V]:
    result: set[V] = set()
    pending = list(step(graph, vertex))
    while pending:
        current = pending.pop()
        if current in result:
            continue
        result.add(current)
        pending.extend(step(graph, current))
    return result


def descendants[V: Hashable](graph: Graph[V], vertex: V) -> set[V]:
    """Return every vertex reachable from *vertex* along directed edges.

    Raises:
        CyclicGraphError: If *graph* contains a cycle.
    """
    require_acyclic(graph, "descendants")
    return _closure(graph, vertex, children)


def ancestors[V: Hashable](graph: Graph[V], vertex: V) -> set[V]:
    """Return every vertex from which *vertex* is reachable.

    Raises:
        CyclicGraphError: If *graph* contains a cycle.
    """
    require_acyclic(graph, "ancestors")
    return _closure(graph, vertex, parents)


def topological_sort[V: Hashable](graph: Graph[V]) -> list[V]:
    """Sort the vertices of a DAG so every edge points forward (Kahn's algorithm).

    Vertices without incoming edges are queued in vertex order, and ties
    are broken by the order in which vertices become free. Indegrees start
    as edge counts but are decremented by edge *weight*, so a heavy edge
    can release its target early.

    Example::

        >>> g = {"A": {"A": 0, "B": 0, "C": 1},
        ...      "B": {"A": 0, "B": 0, "C": 0},
        ...      "C": {"A": 0, "B": 1, "C": 0}}
        >>> topological_sort(g)
        ['A', 'C', 'B']

    Raises:
        CyclicGraphError: If *graph* contains a cycle.
    """
    require_acyclic(graph, "topological_sort")

    indegrees: dict[V, Weight] = {v: indegree(graph, v) for v in graph}
    queue: deque[V] = deque(v for v in graph if indegrees[v] == 0)
    visited: set[V] = set(queue)
    result: list[V] = []

    while queue:
        current = queue.popleft()
        result.append(current)
        row = graph[current]
        for v in graph:
            weight = row.get(v, 0)
            if weight == 0 or v in visited:
                continue
            indegrees[v] -= weight
            if indegrees[v] <= 0:
                queue.append(v)
                visited.add(v)

    return result
