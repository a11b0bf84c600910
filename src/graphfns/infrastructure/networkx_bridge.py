"""Bridge between adjacency matrices and NetworkX graphs.

Vertices are added before edges so isolated vertices survive the trip,
and in vertex order so order-sensitive algorithms agree on both sides.
"""

from __future__ import annotations

from collections.abc import Hashable

import networkx as nx

from graphfns.domain.matrix import create
from graphfns.domain.types import Graph


def to_networkx[V: Hashable](graph: Graph[V]) -> nx.DiGraph:
    """Build a ``DiGraph`` with one edge per nonzero entry (``weight`` attribute)."""
    g: nx.DiGraph = nx.DiGraph()
    g.add_nodes_from(graph)
    for u in graph:
        row = graph[u]
        for v in graph:
            weight = row.get(v, 0)
            if weight != 0:
                g.add_edge(u, v, weight=weight)
    return g


def from_networkx(nx_graph: nx.Graph, *, weight: str = "weight") -> Graph[Hashable]:
    """Build an adjacency matrix from any NetworkX graph.

    Edges missing the *weight* attribute import with weight ``1``. Edges of
    an undirected NetworkX graph are written in both directions. Parallel
    edges of a multigraph add up.
    """
    result = create(nx_graph.nodes)
    multigraph = nx_graph.is_multigraph()
    directed = nx_graph.is_directed()

    for u, v, attrs in nx_graph.edges(data=True):
        w = attrs.get(weight, 1)
        if multigraph:
            result[u][v] += w
        else:
            result[u][v] = w
        if not directed and u != v:
            result[v][u] = result[u][v]
    return result
