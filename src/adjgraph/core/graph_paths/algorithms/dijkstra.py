"""
Dijkstra's algorithm over non-negative edge weights.
"""

import logging
from heapq import heappop, heappush
from itertools import count
from typing import Dict, List, Set, Tuple

from ..base import PathFinder
from ..models import INFINITY, Distance, SearchResult

logger = logging.getLogger(__name__)


class DijkstraFinder(PathFinder[SearchResult]):
    """Min-heap Dijkstra with lazy deletion and early exit on the target.

    Distances are initialised lazily: a vertex missing from ``distances`` is
    at infinity. The heap may hold several entries for the same vertex; an
    entry whose distance is worse than the best known one is stale and is
    skipped when popped. Stopping as soon as the target is popped is only
    valid because weights are non-negative.
    """

    def find(self, start: int, end: int) -> SearchResult:
        logger.debug(f"Starting Dijkstra's algorithm from {start} to {end}")

        distances: Dict[int, Distance] = {start: 0}
        predecessors: Dict[int, int] = {}
        settled: Set[int] = set()
        tie_breaker = count()
        queue: List[Tuple[Distance, int, int]] = [(0, next(tie_breaker), start)]

        while queue:
            self.memory_manager.check_memory()
            current_dist, _, vertex = heappop(queue)

            if vertex in settled or current_dist > distances[vertex]:
                continue

            self.nodes_explored += 1
            if vertex == end:
                logger.debug(f"Reached {end} with distance {current_dist}")
                return SearchResult(current_dist, predecessors)

            settled.add(vertex)
            for record in self.store.edges(vertex):
                if record.target in settled:
                    continue
                new_dist = current_dist + record.weight
                if record.target not in distances or new_dist < distances[record.target]:
                    distances[record.target] = new_dist
                    predecessors[record.target] = vertex
                    heappush(queue, (new_dist, next(tie_breaker), record.target))

        logger.debug(f"No path from {start} to {end}")
        return SearchResult(INFINITY, predecessors)
