"""Text renderings of graphs.

- ``describe`` — compact human notation, e.g. ``Graph { "A" -> "B", "C" }``
- ``format_dot`` — Graphviz DOT language
- ``format_d3_json`` / ``parse_d3_json`` — D3-compatible JSON
"""

from __future__ import annotations

from collections.abc import Hashable

from graphfns.domain.d3 import D3Graph, NodeId, from_d3, to_d3
from graphfns.domain.types import Graph, Weight


def _quote(vertex: Hashable) -> str:
    return '"' + str(vertex).replace('"', '\\"') + '"'


def _weight_suffix(weight: Weight) -> str:
    return "" if weight == 1 else f" [{weight:g}]"


def describe(graph: Graph[Hashable]) -> str:
    """Render *graph* in the ``Graph { ... }`` notation.

    Each vertex lists its outgoing edges in vertex order. An equal-weight
    reciprocal pair is shown once as ``<->``. Vertices without any edge are
    listed by name. Weights other than ``1`` follow the edge in brackets.

    Example::

        >>> describe({"A": {"A": 0, "B": 1}, "B": {"A": 1, "B": 0}})
        'Graph { "A" <-> "B" }'
    """
    ordered = list(graph)
    position = {v: i for i, v in enumerate(ordered)}
    parts: list[str] = []

    for u in ordered:
        row = graph[u]
        outgoing = [(v, row.get(v, 0)) for v in ordered if row.get(v, 0) != 0]
        incoming = any(graph[w].get(u, 0) != 0 for w in ordered)
        if not outgoing and not incoming:
            parts.append(_quote(u))
            continue
        for v, weight in outgoing:
            mutual = u != v and graph[v].get(u, 0) == weight
            if mutual and position[v] < position[u]:
                continue
            arrow = "<->" if mutual else "->"
            parts.append(f"{_quote(u)} {arrow} {_quote(v)}{_weight_suffix(weight)}")

    if not parts:
        return "Graph {}"
    return "Graph { " + ", ".join(parts) + " }"


def format_dot(graph: Graph[Hashable], *, name: str = "graph") -> str:
    """Generate Graphviz DOT notation, one edge line per nonzero entry."""
    lines = [f"digraph {_quote(name)} {{", "  rankdir=LR;", "  node [shape=circle];"]

    for u in graph:
        lines.append(f"  {_quote(u)};")

    for u in graph:
        row = graph[u]
        for v in graph:
            weight = row.get(v, 0)
            if weight != 0:
                lines.append(f"  {_quote(u)} -> {_quote(v)} [weight={weight:g}];")

    lines.append("}")
    return "\n".join(lines) + "\n"


def format_d3_json(graph: Graph[NodeId], *, undirected: bool = False) -> str:
    """Serialise ``to_d3(graph)`` as indented JSON with a trailing newline.

    Raises:
        DirectedGraphError: If *undirected* is requested for a directed graph.
    """
    return to_d3(graph, undirected=undirected).model_dump_json(indent=2) + "\n"


def parse_d3_json(text: str, *, undirected: bool = False) -> Graph[NodeId]:
    """Parse D3 JSON and convert it with :func:`from_d3`.

    Raises:
        pydantic.ValidationError: If *text* is not a valid D3 graph document.
    """
    return from_d3(D3Graph.model_validate_json(text), undirected=undirected)

