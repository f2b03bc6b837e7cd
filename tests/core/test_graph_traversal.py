"""Tests for graph traversal operations."""

import pytest

from adjgraph.core.graph import DirectedGraph
from adjgraph.core.traversal import (
    BFSIterator,
    DFSIterator,
    iterator,
    traverse_components,
)


def test_bfs_visits_by_layer(diamond_graph):
    """Test breadth-first order and depths."""
    assert list(BFSIterator(diamond_graph, "A")) == [("A", 0), ("B", 1), ("D", 1), ("C", 2)]


def test_dfs_goes_deep_first(diamond_graph):
    """Test depth-first pre-order and depths."""
    assert list(DFSIterator(diamond_graph, "A")) == [("A", 0), ("B", 1), ("C", 2), ("D", 3)]


def test_traversal_with_cycles(cyclic_graph):
    """Test that every vertex is yielded once on a cyclic graph."""
    for strategy in ["bfs", "dfs"]:
        visited = [vertex for vertex, _ in iterator(cyclic_graph, "B", strategy)]
        assert visited == ["B", "C", "A"]


def test_traversal_follows_direction(diamond_graph):
    """Test that directed traversal only follows outgoing edges."""
    assert list(iterator(diamond_graph, "C")) == [("C", 0), ("D", 1)]


def test_traversal_from_unknown_vertex(diamond_graph):
    """Test that an unknown start yields nothing."""
    assert list(iterator(diamond_graph, "Z")) == []
    assert list(iterator(diamond_graph, "Z", "dfs")) == []


def test_unknown_strategy(diamond_graph):
    """Test that an unknown strategy is rejected."""
    with pytest.raises(ValueError, match="Unknown traversal strategy 'random'"):
        iterator(diamond_graph, "A", "random")


def test_traversal_does_not_mutate(weighted_graph):
    """Test that traversal leaves the graph untouched."""
    before = weighted_graph.adjacency()
    list(iterator(weighted_graph, "A"))
    list(iterator(weighted_graph, "A", "dfs"))
    assert weighted_graph.adjacency() == before


def test_components_undirected(triangle):
    """Test that undirected traversal trees are connected components."""
    assert traverse_components(triangle) == [["A", "B", "C"], ["D", "E"]]


def test_components_directed(dag):
    """Test that directed traversal trees skip already reached vertices."""
    components = traverse_components(dag)
    assert components == [
        ["undershorts", "pants", "shoes", "belt", "jacket"],
        ["shirt", "tie"],
        ["socks"],
        ["watch"],
    ]
    assert sorted(v for component in components for v in component) == sorted(dag.vertices())


def test_components_empty_graph():
    """Test traversal of an empty graph."""
    assert traverse_components(DirectedGraph(), "dfs") == []
