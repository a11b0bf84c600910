"""graphfns — pure functions over adjacency-matrix graphs.

Every function takes plain data and returns new data; inputs are never
mutated::

    >>> from graphfns import add_edge, create, topological_sort
    >>> g = create(["A", "B", "C"])
    >>> g = add_edge(g, ("A", "C"))
    >>> g = add_edge(g, ("C", "B"))
    >>> topological_sort(g)
    ['A', 'C', 'B']
"""

from __future__ import annotations

from graphfns.domain.d3 import D3Graph, D3Link, D3Node, from_d3, to_d3
from graphfns.domain.degree import degree, edges, indegree, outdegree, size
from graphfns.domain.errors import CyclicGraphError, DirectedGraphError, GraphPreconditionError
from graphfns.domain.matrix import (
    add_edge,
    add_vertex,
    clone,
    create,
    get_edge,
    order,
    remove_edge,
    remove_vertex,
    set_edge,
    vertex_pairs,
    vertices,
)
from graphfns.domain.structure import (
    is_cyclic,
    is_undirected,
    make_undirected,
    to_directed,
    transpose,
)
from graphfns.domain.traversal import (
    ancestors,
    children,
    descendants,
    parents,
    topological_sort,
)
from graphfns.domain.types import Edge, Graph

__version__ = "0.1.0"

__all__ = [
    "CyclicGraphError",
    "D3Graph",
    "D3Link",
    "D3Node",
    "DirectedGraphError",
    "Edge",
    "Graph",
    "GraphPreconditionError",
    "__version__",
    "add_edge",
    "add_vertex",
    "ancestors",
    "children",
    "clone",
    "create",
    "degree",
    "descendants",
    "edges",
    "from_d3",
    "get_edge",
    "indegree",
    "is_cyclic",
    "is_undirected",
    "make_undirected",
    "order",
    "outdegree",
    "parents",
    "remove_edge",
    "remove_vertex",
    "set_edge",
    "size",
    "to_d3",
    "to_directed",
    "topological_sort",
    "transpose",
    "vertex_pairs",
    "vertices",
]
