"""
Tests for shortest path finding.
"""

import math

import pytest

from adjgraph.core.adjacency import AdjacencyStore
from adjgraph.core.config import GraphConfig
from adjgraph.core.exceptions import GraphOperationError, NegativeCycleError
from adjgraph.core.graph import DirectedGraph, UndirectedGraph
from adjgraph.core.graph_paths import (
    UNKNOWN_VERTEX_DISTANCE,
    reconstruct_path,
    reconstruct_path_strict,
)
from adjgraph.core.graph_paths.algorithms import (
    BellmanFordFinder,
    BidirectionalFinder,
    DijkstraFinder,
)
from adjgraph.core.graph_paths.models import PathResult, PerformanceMetrics
from adjgraph.core.graph_paths.utils import MemoryManager
from adjgraph.core.weights import PathStrategy


def path_weight(graph, path):
    """Sum the edge weights along a payload path."""
    return sum(graph.get_weight(u, v) for u, v in zip(path, path[1:]))


def test_unweighted_shortcut_is_taken(diamond_graph):
    """Test that the direct edge beats the long way round."""
    assert diamond_graph.path_strategy is PathStrategy.BIDIRECTIONAL
    assert diamond_graph.shortest_path("A", "D") == ["A", "D"]
    assert diamond_graph.shortest_distance("A", "D") == 1


def test_unweighted_two_hops(diamond_graph):
    """Test a two-hop unweighted path."""
    assert diamond_graph.shortest_path("A", "C") == ["A", "B", "C"]
    assert diamond_graph.shortest_distance("A", "C") == 2


def test_weighted_detour_is_cheaper(weighted_graph):
    """Test that Dijkstra prefers the cheaper two-edge route."""
    assert weighted_graph.path_strategy is PathStrategy.DIJKSTRA
    assert weighted_graph.shortest_distance("A", "B") == 2
    assert weighted_graph.shortest_path("A", "B") == ["A", "C", "B"]


def test_distance_to_self_is_zero(diamond_graph, weighted_graph):
    """Test that every known vertex is at distance zero from itself."""
    negative = DirectedGraph([("A", "B", -1)])
    for graph in [diamond_graph, weighted_graph, negative]:
        for vertex in graph.vertices():
            assert graph.shortest_distance(vertex, vertex) == 0
            assert graph.shortest_path(vertex, vertex) == [vertex]


def test_unknown_vertex_sentinels(diamond_graph, weighted_graph):
    """Test the sentinels for unknown endpoints."""
    for graph in [diamond_graph, weighted_graph]:
        assert graph.shortest_distance("A", "Z") == UNKNOWN_VERTEX_DISTANCE
        assert graph.shortest_distance("Z", "A") == -1
        assert graph.shortest_path("A", "Z") == []
        assert graph.shortest_distance(["unhashable"], "A") == -1


def test_unreachable_target(diamond_graph, weighted_graph):
    """Test that unreachable targets are at infinity with an empty path."""
    for graph in [diamond_graph, weighted_graph]:
        graph.add_vertex("island")
        assert graph.shortest_distance("A", "island") == math.inf
        assert graph.shortest_path("A", "island") == []

    # Direction matters
    assert diamond_graph.shortest_distance("D", "A") == math.inf


def test_bidirectional_uses_incoming_edges():
    """Test that the backward frontier walks edges against their direction."""
    graph = DirectedGraph([("S", "X"), ("X", "Y"), ("Y", "T"), ("T", "S")])
    assert graph.shortest_path("S", "T") == ["S", "X", "Y", "T"]
    assert graph.shortest_distance("T", "X") == 2


def test_bidirectional_picks_best_meeting_vertex():
    """Test that the best meeting vertex in a layer is chosen."""
    graph = DirectedGraph(
        [("S", "A"), ("A", "B"), ("B", "C"), ("C", "T"), ("S", "D"), ("D", "T")]
    )
    assert graph.shortest_path("S", "T") == ["S", "D", "T"]
    assert graph.shortest_distance("S", "T") == 2


def test_bidirectional_on_undirected_graph(undirected_tree):
    """Test bidirectional search over mirrored edges."""
    assert undirected_tree.shortest_path("B", "D") == ["B", "A", "C", "D"]
    assert undirected_tree.shortest_distance("D", "B") == 3


def test_dijkstra_and_path_agree():
    """Test that the path weight equals the reported distance."""
    graph = UndirectedGraph(
        [
            ("a", "b", 7),
            ("a", "c", 9),
            ("a", "f", 14),
            ("b", "c", 10),
            ("b", "d", 15),
            ("c", "d", 11),
            ("c", "f", 2),
            ("d", "e", 6),
            ("e", "f", 9),
        ]
    )
    assert graph.shortest_distance("a", "e") == 20
    path = graph.shortest_path("a", "e")
    assert path == ["a", "c", "f", "e"]
    assert path_weight(graph, path) == 20


def test_dijkstra_with_float_weights():
    """Test Dijkstra with fractional weights."""
    graph = DirectedGraph([("A", "B", 0.1), ("B", "C", 0.2), ("A", "C", 0.5)])
    assert graph.shortest_distance("A", "C") == pytest.approx(0.3)
    assert graph.shortest_path("A", "C") == ["A", "B", "C"]


def test_bellman_ford_negative_edge():
    """Test Bellman-Ford with a negative edge and no cycle."""
    graph = DirectedGraph([("A", "B", 4), ("A", "C", 5), ("C", "B", -3), ("B", "D", 1)])
    assert graph.path_strategy is PathStrategy.BELLMAN_FORD
    assert graph.shortest_distance("A", "B") == 2
    assert graph.shortest_path("A", "D") == ["A", "C", "B", "D"]
    assert path_weight(graph, graph.shortest_path("A", "D")) == 3


def test_bellman_ford_negative_cycle_propagates():
    """Test that everything reachable from a negative cycle is at -inf."""
    graph = DirectedGraph(
        [
            ("S", "A", 1),
            ("A", "B", 1),
            ("B", "C", -3),
            ("C", "A", 1),
            ("C", "D", 2),
            ("D", "E", 1),
            ("S", "F", 2),
        ]
    )
    for vertex in ["A", "B", "C", "D", "E"]:
        assert graph.shortest_distance("S", vertex) == -math.inf
        assert graph.shortest_path("S", vertex) == []

    # Not reachable from the cycle
    assert graph.shortest_distance("S", "F") == 2
    assert graph.shortest_path("S", "F") == ["S", "F"]


def test_bellman_ford_unreachable_cycle_is_ignored():
    """Test that a negative cycle outside the source's reach changes nothing."""
    graph = DirectedGraph([("S", "T", 3), ("X", "Y", -2), ("Y", "X", 1)])
    assert graph.shortest_distance("S", "T") == 3
    assert graph.shortest_distance("S", "X") == math.inf


def test_bellman_ford_negative_self_loop():
    """Test a negative self loop on a single vertex."""
    graph = DirectedGraph([("A", "A", -1)])
    assert graph.shortest_distance("A", "A") == -math.inf
    assert graph.shortest_path("A", "A") == []


def test_negative_undirected_edge_is_a_cycle():
    """Test that an undirected negative edge can be walked back and forth."""
    graph = UndirectedGraph([("A", "B", -1), ("B", "C", 2)])
    assert graph.shortest_distance("A", "C") == -math.inf


def test_find_shortest_path_result(weighted_graph):
    """Test the combined result object."""
    result = weighted_graph.find_shortest_path("A", "B")
    assert isinstance(result, PathResult)
    assert result.distance == 2
    assert result.path == ["A", "C", "B"]
    assert result.strategy is PathStrategy.DIJKSTRA
    assert result.found
    assert result.length == 2


def test_queries_do_not_mutate(weighted_graph):
    """Test that path queries leave the graph untouched."""
    before = weighted_graph.adjacency()
    weighted_graph.shortest_path("A", "B")
    weighted_graph.shortest_distance("B", "A")
    assert weighted_graph.adjacency() == before


def test_search_metrics_recorded(weighted_graph):
    """Test that the engine keeps the metrics of the last query."""
    weighted_graph.shortest_path("A", "B")
    metrics = weighted_graph._paths.last_metrics
    assert metrics.operation == "dijkstra"
    assert metrics.nodes_explored >= 1
    assert metrics.to_dict()["duration_ms"] >= 0


def test_performance_metrics_validation():
    """Test PerformanceMetrics validation."""
    with pytest.raises(ValueError, match="operation must be a non-empty string"):
        PerformanceMetrics(operation=" ", start_time=0.0)


def test_finders_on_store_directly():
    """Test the finders on identifiers."""
    store = AdjacencyStore()
    store.add_edge(1, 2, 2)
    store.add_edge(2, 3, 2)
    store.add_edge(1, 3, 5)

    dijkstra = DijkstraFinder(store).find(1, 3)
    assert dijkstra.distance == 4
    assert reconstruct_path(dijkstra.predecessors, 1, 3, dijkstra.distance) == [1, 2, 3]

    bellman_ford = BellmanFordFinder(store).find(1, 3)
    assert bellman_ford.distance == 4
    assert bellman_ford.predecessors[3] == 2

    bidirectional = BidirectionalFinder(store).find(1, 3)
    assert bidirectional.distance == 1
    assert bidirectional.path == [1, 3]


def test_reconstruct_path_strict():
    """Test the raising variant of path reconstruction."""
    with pytest.raises(NegativeCycleError):
        reconstruct_path_strict({}, 1, 2, -math.inf)
    with pytest.raises(GraphOperationError, match="No path exists"):
        reconstruct_path_strict({}, 1, 2, math.inf)
    assert reconstruct_path_strict({2: 1}, 1, 2, 1) == [1, 2]


def test_reconstruct_path_broken_chain():
    """Test that a broken predecessor chain is reported."""
    with pytest.raises(GraphOperationError, match="broken"):
        reconstruct_path({3: 2}, 1, 3, 2)


def test_memory_manager_inactive_without_budget():
    """Test that the memory guard is a no-op without a budget."""
    manager = MemoryManager()
    assert not manager.active
    manager.check_memory()


def test_memory_budget_exceeded(monkeypatch):
    """Test that exceeding the memory budget raises MemoryError."""
    readings = iter([100 * 1024 * 1024] + [500 * 1024 * 1024] * 10)
    monkeypatch.setattr(
        "adjgraph.core.graph_paths.utils.get_memory_usage", lambda: next(readings)
    )
    manager = MemoryManager(max_memory_mb=10, check_interval=0)
    with pytest.raises(MemoryError, match="exceeds limit"):
        manager.check_memory()


def test_graph_with_memory_budget_still_searches():
    """Test that a generous memory budget does not disturb queries."""
    graph = DirectedGraph([("A", "B", 2), ("B", "C", 2)], config=GraphConfig(max_memory_mb=4096))
    assert graph.shortest_distance("A", "C") == 4
