"""
Bellman-Ford algorithm tolerating negative edge weights.
"""

import logging
from typing import Dict

from ..base import PathFinder
from ..models import INFINITY, NEGATIVE_INFINITY, Distance, SearchResult

logger = logging.getLogger(__name__)


class BellmanFordFinder(PathFinder[SearchResult]):
    """Bellman-Ford with negative cycle propagation.

    Phase one relaxes every edge |V| - 1 times, stopping early once a round
    changes nothing. Phase two keeps relaxing: any vertex that can still be
    improved is on, or reachable from, a negative cycle and gets distance
    ``-inf``. Phase two runs for up to |V| rounds, enough for the mark to
    travel from the cycle to every vertex reachable from it, including the
    single-vertex case of a negative self loop.
    """

    def find(self, start: int, end: int) -> SearchResult:
        logger.debug(f"Starting Bellman-Ford from {start} to {end}")

        distances: Dict[int, Distance] = {start: 0}
        predecessors: Dict[int, int] = {}
        vertex_count = len(self.store)

        for _ in range(vertex_count - 1):
            self.memory_manager.check_memory()
            relaxed = False
            for source, edges in self.store.items():
                source_dist = distances.get(source, INFINITY)
                if source_dist == INFINITY:
                    continue
                self.nodes_explored += 1
                for record in edges:
                    new_dist = source_dist + record.weight
                    if new_dist < distances.get(record.target, INFINITY):
                        distances[record.target] = new_dist
                        predecessors[record.target] = source
                        relaxed = True
            if not relaxed:
                break

        for _ in range(vertex_count):
            self.memory_manager.check_memory()
            marked = False
            for source, edges in self.store.items():
                source_dist = distances.get(source, INFINITY)
                if source_dist == INFINITY:
                    continue
                for record in edges:
                    if source_dist + record.weight < distances.get(record.target, INFINITY):
                        distances[record.target] = NEGATIVE_INFINITY
                        marked = True
            if not marked:
                break

        distance = distances.get(end, INFINITY)
        if distance == NEGATIVE_INFINITY:
            logger.debug(f"Vertex {end} is affected by a negative cycle")
        return SearchResult(distance, predecessors)
