"""D3 node/link interchange format.

The shape consumed by D3.js force-directed graphs::

    {"nodes": [{"id": "A"}, ...], "links": [{"source": "A", "target": "B"}, ...]}

Edge weights are encoded by repeating links, so the conversion is lossy
for fractional and negative weights. Extra keys on nodes and links are
ignored on input.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, model_validator

from graphfns.domain.structure import resolve_undirected
from graphfns.domain.types import Graph, Weight

logger = logging.getLogger(__name__)

NodeId = str | int


class D3Node(BaseModel):
    """A node entry."""

    model_config = {"frozen": True}

    id: NodeId


class D3Link(BaseModel):
    """A link entry; repeated links between the same pair add weight."""

    model_config = {"frozen": True}

    source: NodeId
    target: NodeId


class D3Graph(BaseModel):
    """A graph as lists of nodes and links.

    INVARIANT: every link endpoint is the id of a listed node.
    """

    model_config = {"frozen": True}

    nodes: list[D3Node] = Field(default_factory=list)
    links: list[D3Link] = Field(default_factory=list)

    @model_validator(mode="after")
    def _links_reference_nodes(self) -> D3Graph:
        known = {node.id for node in self.nodes}
        for link in self.links:
            for endpoint in (link.source, link.target):
                if endpoint not in known:
                    msg = f"Link endpoint {endpoint!r} is not a listed node"
                    raise ValueError(msg)
        return self


def _is_lossy(weight: Weight) -> bool:
    """True if *weight* cannot be rebuilt from a count of links."""
    return not math.isfinite(weight) or weight < 0 or not float(weight).is_integer()


def _link_count(weight: Weight) -> int:
    """Number of links a weight expands to: subtract 1 until it is no longer positive.

    At least one link is always emitted for a nonzero weight, including
    negative and non-finite ones.
    """
    if not math.isfinite(weight) or weight <= 0:
        return 1
    return math.ceil(weight)


def to_d3(graph: Graph[NodeId], *, undirected: bool = False) -> D3Graph:
    """Convert *graph* to the D3 representation.

    An edge of weight ``n`` becomes ``n`` identical links; a fractional
    weight rounds up. Negative and non-finite weights cannot be represented
    and emit a single link. With *undirected* each reciprocal pair yields
    one set of links.

    Raises:
        DirectedGraphError: If *undirected* is requested for a directed graph.
    """
    resolved = resolve_undirected(graph, "to_d3", undirected=undirected)
    ordered = list(resolved)

    nodes = [D3Node(id=u) for u in ordered]
    links: list[D3Link] = []
    for u in ordered:
        row = resolved[u]
        for v in ordered:
            weight = row.get(v, 0)
            if weight == 0:
                continue
            if _is_lossy(weight):
                logger.warning("d3.lossy_weight: %r -> %r has weight %r", u, v, weight)
            links.extend(D3Link(source=u, target=v) for _ in range(_link_count(weight)))

    return D3Graph(nodes=nodes, links=links)


def from_d3(
    d3_graph: D3Graph | Mapping[str, Any],
    *,
    undirected: bool = False,
) -> Graph[NodeId]:
    """Convert a D3 representation back to an adjacency matrix.

    Repeated links between the same pair add ``1`` each to the edge weight.
    With *undirected* every link is also counted in the reverse direction
    (a loop only once).

    Raises:
        pydantic.ValidationError: If *d3_graph* is not a valid D3 graph.
    """
    if not isinstance(d3_graph, D3Graph):
        d3_graph = D3Graph.model_validate(d3_graph)

    ids = list(dict.fromkeys(node.id for node in d3_graph.nodes))
    result: Graph[NodeId] = {u: dict.fromkeys(ids, 0) for u in ids}

    for link in d3_graph.links:
        u, v = link.source, link.target
        result[u][v] += 1
        if undirected and u != v:
            result[v][u] += 1

    return result
