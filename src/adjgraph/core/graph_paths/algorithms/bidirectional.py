"""
Bidirectional breadth-first search for unweighted graphs.
"""

import logging
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from ...adjacency import AdjacencyStore
from ...models import EdgeRecord
from ..base import PathFinder
from ..models import INFINITY, PathResult
from ..utils import MemoryManager

logger = logging.getLogger(__name__)

Meeting = Tuple[int, int]  # (hops, meeting vertex)


class BidirectionalFinder(PathFinder[PathResult]):
    """
    Bidirectional breadth-first search.

    The forward frontier follows outgoing edges from the start, the backward
    frontier follows incoming edges from the end (the same lists for an
    undirected graph). Each round expands one full layer from the forward
    side, then one from the backward side. The first layer that discovers a
    vertex already visited by the other side ends the search; the best
    meeting vertex within that layer gives the shortest hop count.

    Every edge counts as ``unit_weight``, the graph's default edge weight.
    """

    def __init__(
        self,
        store: AdjacencyStore,
        memory_manager: Optional[MemoryManager] = None,
        unit_weight: float = 1,
    ):
        super().__init__(store, memory_manager)
        self.unit_weight = unit_weight

    def _expand_layer(
        self,
        layer: Sequence[int],
        adjacency: Mapping[int, Sequence[EdgeRecord]],
        distances: Dict[int, int],
        predecessors: Dict[int, int],
        other_distances: Dict[int, int],
    ) -> Tuple[List[int], Optional[Meeting]]:
        """Discover the next layer and report the best meeting vertex, if any."""
        next_layer: List[int] = []
        best: Optional[Meeting] = None

        for vertex in layer:
            self.memory_manager.check_memory()
            self.nodes_explored += 1
            for record in adjacency[vertex]:
                target = record.target
                if target in distances:
                    continue
                distances[target] = distances[vertex] + 1
                predecessors[target] = vertex
                next_layer.append(target)

                if target in other_distances:
                    hops = distances[target] + other_distances[target]
                    if best is None or hops < best[0]:
                        best = (hops, target)

        return next_layer, best

    def find(self, start: int, end: int) -> PathResult:
        logger.debug(f"Starting bidirectional search from {start} to {end}")

        if start == end:
            return PathResult(0, [start])

        forward_adjacency = dict(self.store.items())
        backward_adjacency = self.store.reverse()

        forward_distances: Dict[int, int] = {start: 0}
        backward_distances: Dict[int, int] = {end: 0}
        forward_predecessors: Dict[int, int] = {}
        backward_predecessors: Dict[int, int] = {}
        forward_layer: List[int] = [start]
        backward_layer: List[int] = [end]

        # An exhausted side cannot meet the other one any more
        while forward_layer and backward_layer:
            forward_layer, meeting = self._expand_layer(
                forward_layer,
                forward_adjacency,
                forward_distances,
                forward_predecessors,
                backward_distances,
            )
            if meeting is None:
                backward_layer, meeting = self._expand_layer(
                    backward_layer,
                    backward_adjacency,
                    backward_distances,
                    backward_predecessors,
                    forward_distances,
                )

            if meeting is not None:
                hops, vertex = meeting
                logger.debug(f"Frontiers met at {vertex} after {hops} hops")
                path = self._join(vertex, start, end, forward_predecessors, backward_predecessors)
                return PathResult(hops * self.unit_weight, path)

        logger.debug(f"No path from {start} to {end}")
        return PathResult(INFINITY, [])

    @staticmethod
    def _join(
        meeting: int,
        start: int,
        end: int,
        forward_predecessors: Dict[int, int],
        backward_predecessors: Dict[int, int],
    ) -> List[int]:
        """Stitch the two predecessor chains together at the meeting vertex."""
        path = [meeting]
        current = meeting
        while current != start:
            current = forward_predecessors[current]
            path.append(current)
        path.reverse()

        current = meeting
        while current != end:
            current = backward_predecessors[current]
            path.append(current)
        return path
