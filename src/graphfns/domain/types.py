"""Graph representation types.

A graph is a square adjacency matrix stored as a mapping of mappings:
``graph[u][v]`` is the weight of the edge from ``u`` to ``v``. A weight of
exactly ``0`` means there is no edge; any other number (negative included)
is an edge with that weight.

INVARIANT: every row key is also a column key of every row.
INVARIANT: vertex order is insertion order and is significant.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable

type Weight = float

type Graph[V: Hashable] = dict[V, dict[V, Weight]]

type Edge[V: Hashable] = tuple[V, V]

# Combines the two weights of a reciprocal pair (see make_undirected).
type MergeFn = Callable[[Weight, Weight], Weight]
