"""Shared test fixtures."""

import pytest

from adjgraph.core.graph import DirectedGraph, UndirectedGraph


@pytest.fixture
def diamond_graph() -> DirectedGraph:
    """
    Fixture providing an unweighted directed graph with a shortcut:
    A -> B -> C -> D
    |              ^
    +--------------+
    """
    return DirectedGraph([("A", "B"), ("B", "C"), ("C", "D"), ("A", "D")])


@pytest.fixture
def weighted_graph() -> DirectedGraph:
    """Fixture providing A -> B (4), A -> C (1), C -> B (1)."""
    return DirectedGraph([("A", "B", 4), ("A", "C", 1), ("C", "B", 1)])


@pytest.fixture
def cyclic_graph() -> DirectedGraph:
    """Fixture providing the directed cycle A -> B -> C -> A."""
    return DirectedGraph([("A", "B"), ("B", "C"), ("C", "A")])


@pytest.fixture
def dag() -> DirectedGraph:
    """
    Fixture providing a dressing-order DAG with two components:
    undershorts -> pants -> shoes, pants -> belt -> jacket,
    shirt -> tie -> jacket, shirt -> belt, socks -> shoes, and a lone watch.
    """
    graph = DirectedGraph(
        [
            ("undershorts", "pants"),
            ("pants", "shoes"),
            ("pants", "belt"),
            ("belt", "jacket"),
            ("shirt", "tie"),
            ("tie", "jacket"),
            ("shirt", "belt"),
            ("socks", "shoes"),
        ]
    )
    graph.add_vertex("watch")
    return graph


@pytest.fixture
def triangle() -> UndirectedGraph:
    """Fixture providing the undirected triangle A - B - C - A plus D - E."""
    return UndirectedGraph([("A", "B"), ("B", "C"), ("C", "A"), ("D", "E")])


@pytest.fixture
def undirected_tree() -> UndirectedGraph:
    """Fixture providing the undirected tree A - B, A - C, C - D."""
    return UndirectedGraph([("A", "B"), ("A", "C"), ("C", "D")])
