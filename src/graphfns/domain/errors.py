"""Precondition errors raised by graph operations.

All failures are programming errors: callers are expected to guard with
``is_cyclic`` / ``is_undirected`` before invoking a guarded operation.
Nothing in the library catches these.
"""

from __future__ import annotations


class GraphPreconditionError(ValueError):
    """A graph did not satisfy the precondition of the requested operation.

    Attributes:
        code: Stable machine-readable error code.
        op: Name of the operation that rejected the graph.
    """

    code = "PRECONDITION"

    def __init__(self, message: str, *, op: str) -> None:
        super().__init__(message)
        self.op = op


class CyclicGraphError(GraphPreconditionError):
    """Raised by ancestors, descendants and topological_sort on a cyclic graph."""

    code = "CYCLIC_GRAPH"


class DirectedGraphError(GraphPreconditionError):
    """Raised when undirected semantics are requested for a directed graph."""

    code = "EXPECTED_UNDIRECTED"
