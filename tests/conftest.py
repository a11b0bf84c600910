"""Shared pytest fixtures and sample graphs for graphfns tests."""

from __future__ import annotations

from typing import Any

import pytest

from graphfns.domain.matrix import add_edge, create
from graphfns.domain.types import Graph

# ---------------------------------------------------------------------------
# Sample graphs (module constants so tests can parametrize over them)
# ---------------------------------------------------------------------------

EMPTY: Graph[str] = {}

SINGLE: Graph[str] = {"a": {"a": 0}}

LOOP: Graph[str] = {"a": {"a": 1}}

CHAIN: Graph[str] = {
    "a": {"a": 0, "b": 1, "c": 0},
    "b": {"a": 0, "b": 0, "c": 1},
    "c": {"a": 0, "b": 0, "c": 0},
}

TRIANGLE: Graph[str] = {
    "a": {"a": 0, "b": 1, "c": 0},
    "b": {"a": 0, "b": 0, "c": 1},
    "c": {"a": 1, "b": 0, "c": 0},
}

DIAMOND: Graph[str] = {
    "a": {"a": 0, "b": 1, "c": 0, "d": 0},
    "b": {"a": 0, "b": 0, "c": 1, "d": 1},
    "c": {"a": 0, "b": 0, "c": 0, "d": 1},
    "d": {"a": 0, "b": 0, "c": 0, "d": 0},
}

WEIGHTED: Graph[str] = {
    "a": {"a": 0, "b": 2, "c": 0},
    "b": {"a": 0, "b": 0, "c": 0.5},
    "c": {"a": -1, "b": 0, "c": 3},
}

UNDIRECTED_PATH: Graph[str] = {
    "a": {"a": 0, "b": 1, "c": 0},
    "b": {"a": 1, "b": 0, "c": 1},
    "c": {"a": 0, "b": 1, "c": 0},
}

SAMPLE_GRAPHS: dict[str, Graph[str]] = {
    "empty": EMPTY,
    "single": SINGLE,
    "loop": LOOP,
    "chain": CHAIN,
    "triangle": TRIANGLE,
    "diamond": DIAMOND,
    "weighted": WEIGHTED,
    "undirected_path": UNDIRECTED_PATH,
}

ACYCLIC_GRAPHS: dict[str, Graph[str]] = {
    "empty": EMPTY,
    "single": SINGLE,
    "chain": CHAIN,
    "diamond": DIAMOND,
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def chain() -> Graph[str]:
    """A -> B -> C, built through the public constructors."""
    graph = create(["a", "b", "c"])
    graph = add_edge(graph, ("a", "b"))
    return add_edge(graph, ("b", "c"))


@pytest.fixture
def layered_dag() -> Graph[int]:
    """Five layers of four vertices, each vertex linked to every vertex of the next layer."""
    layers = [list(range(i * 4, i * 4 + 4)) for i in range(5)]
    graph = create(v for layer in layers for v in layer)
    for upper, lower in zip(layers, layers[1:], strict=False):
        for u in upper:
            for v in lower:
                graph = add_edge(graph, (u, v))
    return graph


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def long_chain(length: int) -> Graph[int]:
    """Build 0 -> 1 -> ... -> length-1 directly (no per-edge copying)."""
    graph: Graph[int] = create(range(length))
    for i in range(length - 1):
        graph[i][i + 1] = 1
    return graph


def assert_square(graph: Graph[Any]) -> None:
    """Assert every row covers exactly the vertex set."""
    keys = set(graph)
    for u, row in graph.items():
        assert set(row) == keys, f"row {u!r} is not square"
