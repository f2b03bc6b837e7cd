"""Shortest path engine.

The engine picks an algorithm per query from the weight classifier:
- negative weights seen -> Bellman-Ford
- non-default weights seen -> Dijkstra
- otherwise -> bidirectional breadth-first search

Queries take caller payloads. Unknown payloads are reported with sentinels
(``UNKNOWN_VERTEX_DISTANCE`` and an empty path) rather than exceptions.
"""

import logging
import math
from time import time
from typing import Any, Generic, Hashable, List, Optional, TypeVar

from ..adjacency import AdjacencyStore
from ..registry import IdentityRegistry
from ..weights import PathStrategy, WeightClassifier
from .algorithms import BellmanFordFinder, BidirectionalFinder, DijkstraFinder
from .models import INFINITY, NEGATIVE_INFINITY, PathResult, PerformanceMetrics, SearchResult
from .utils import MemoryManager, reconstruct_path, reconstruct_path_strict

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Hashable)

# Distinct from "unreachable", which is +inf
UNKNOWN_VERTEX_DISTANCE = -1

__all__ = [
    "INFINITY",
    "NEGATIVE_INFINITY",
    "PathResult",
    "PathStrategy",
    "PerformanceMetrics",
    "SearchResult",
    "ShortestPathEngine",
    "UNKNOWN_VERTEX_DISTANCE",
    "reconstruct_path",
    "reconstruct_path_strict",
]


class ShortestPathEngine(Generic[P]):
    """
    Dispatches shortest path queries to the algorithm legal for the graph.

    The engine shares the registry, store and classifier of the graph that
    owns it and never mutates them.

    Attributes:
        registry: Payload <-> identifier mapping of the owning graph
        store: Adjacency store of the owning graph
        classifier: Weight flags of the owning graph
        max_memory_mb: Optional memory budget per query
        unit_weight: Weight of an edge added without an explicit weight
    """

    def __init__(
        self,
        registry: IdentityRegistry[P],
        store: AdjacencyStore,
        classifier: WeightClassifier,
        max_memory_mb: Optional[float] = None,
        unit_weight: float = 1,
    ):
        self.registry = registry
        self.store = store
        self.classifier = classifier
        self.max_memory_mb = max_memory_mb
        self.unit_weight = unit_weight
        self.last_metrics: Optional[PerformanceMetrics] = None

    def _resolve_endpoints(self, start: Any, end: Any) -> Optional[tuple]:
        try:
            start_id = self.registry.id_for(start)
            end_id = self.registry.id_for(end)
        except TypeError:
            # Unhashable payloads can never be vertices
            return None
        if start_id is None or end_id is None:
            return None
        return start_id, end_id

    def _create_finder(self, strategy: PathStrategy, memory_manager: MemoryManager):
        if strategy is PathStrategy.BELLMAN_FORD:
            return BellmanFordFinder(self.store, memory_manager)
        if strategy is PathStrategy.DIJKSTRA:
            return DijkstraFinder(self.store, memory_manager)
        return BidirectionalFinder(self.store, memory_manager, self.unit_weight)

    def search(self, start: Any, end: Any) -> PathResult[P]:
        """
        Run one shortest path query.

        Returns:
            PathResult: Distance and payload path. For unknown endpoints the
                distance is ``UNKNOWN_VERTEX_DISTANCE`` and the path is empty.
        """
        endpoints = self._resolve_endpoints(start, end)
        if endpoints is None:
            logger.debug(f"Shortest path query with unknown endpoint: {start!r}, {end!r}")
            return PathResult(UNKNOWN_VERTEX_DISTANCE, [])

        start_id, end_id = endpoints
        strategy = self.classifier.strategy
        metrics = PerformanceMetrics(operation=strategy.value, start_time=time())
        memory_manager = MemoryManager(self.max_memory_mb)
        logger.debug(f"Using {strategy.value} for {start!r} -> {end!r}")

        finder = self._create_finder(strategy, memory_manager)
        try:
            if isinstance(finder, BidirectionalFinder):
                found = finder.find(start_id, end_id)
                distance, id_path = found.distance, found.path
            else:
                outcome = finder.find(start_id, end_id)
                distance = outcome.distance
                id_path = reconstruct_path(outcome.predecessors, start_id, end_id, distance)
        finally:
            metrics.end_time = time()
            metrics.nodes_explored = finder.nodes_explored
            self.last_metrics = metrics
            logger.debug(f"Shortest path metrics: {metrics.to_dict()}")

        path = [self.registry.lookup(identifier) for identifier in id_path]
        return PathResult(distance, path, strategy)

    def distance(self, start: Any, end: Any) -> float:
        """Shortest distance; ``-1`` for unknown endpoints, ``inf`` if unreachable."""
        return self.search(start, end).distance

    def path(self, start: Any, end: Any) -> List[P]:
        """Shortest path as payloads; empty when unknown, unreachable or unbounded."""
        result = self.search(start, end)
        if not math.isfinite(result.distance):
            return []
        return result.path
