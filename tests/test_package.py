"""End-to-end checks against the public ``graphfns`` namespace."""

from __future__ import annotations

import pytest

import graphfns
from graphfns import (
    CyclicGraphError,
    add_edge,
    create,
    degree,
    is_cyclic,
    is_undirected,
    remove_vertex,
    topological_sort,
)


class TestPublicApi:
    def test_all_names_resolve(self) -> None:
        for name in graphfns.__all__:
            assert hasattr(graphfns, name), name

    def test_version(self) -> None:
        assert graphfns.__version__ == "0.1.0"

    def test_errors_are_value_errors(self) -> None:
        assert issubclass(graphfns.GraphPreconditionError, ValueError)
        assert issubclass(graphfns.CyclicGraphError, graphfns.GraphPreconditionError)
        assert issubclass(graphfns.DirectedGraphError, graphfns.GraphPreconditionError)


class TestWorkflows:
    def test_build_and_sort(self) -> None:
        g = create(["a", "b", "c"])
        g = add_edge(g, ("a", "b"))
        g = add_edge(g, ("b", "c"))
        assert is_cyclic(g) is False
        assert topological_sort(g) == ["a", "b", "c"]

    def test_closing_the_chain_makes_a_cycle(self) -> None:
        g = create(["a", "b", "c"])
        g = add_edge(g, ("a", "b"))
        g = add_edge(g, ("b", "c"))
        g = add_edge(g, ("c", "a"))
        assert is_cyclic(g) is True
        with pytest.raises(CyclicGraphError):
            topological_sort(g)

    def test_loop_degree(self) -> None:
        assert degree({"a": {"a": 1.5}}, "a", weighted=True) == 3
        assert degree({"a": {"a": 1.5}}, "a") == 2

    def test_undirected_pair(self) -> None:
        g = {"a": {"a": 0, "b": 1}, "b": {"a": 1, "b": 0}}
        assert is_undirected(g) is True
        assert degree(g, "a", undirected=True) == 1

    def test_remove_middle_vertex(self) -> None:
        g = {
            "a": {"a": 0, "b": 1, "c": 0},
            "b": {"a": 0, "b": 0, "c": 1},
            "c": {"a": 1, "b": 0, "c": 0},
        }
        assert remove_vertex(g, "b") == {"a": {"a": 0, "c": 0}, "c": {"a": 1, "c": 0}}

    def test_docstring_example(self) -> None:
        g = create(["A", "B", "C"])
        g = add_edge(g, ("A", "C"))
        g = add_edge(g, ("C", "B"))
        assert topological_sort(g) == ["A", "C", "B"]
