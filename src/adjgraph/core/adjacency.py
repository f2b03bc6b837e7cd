"""
Adjacency list storage keyed by vertex identifier.

This module provides the ``AdjacencyStore`` that maps each vertex identifier to
the ordered list of its outgoing ``EdgeRecord``s. A mirrored store (used by
undirected graphs) inserts and removes every edge on both endpoints as one
logical operation.

No reverse index is kept: in-degree queries scan every list, and backward
searches build a predecessor map on demand with ``reverse()``.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from .exceptions import AdjacencyInvariantError
from .models import EdgeRecord, Weight

logger = logging.getLogger(__name__)


class AdjacencyStore:
    """
    Identifier -> outgoing edge list mapping.

    Attributes:
        mirrored (bool): Whether edges are stored on both endpoints
        _lists (Dict[int, List[EdgeRecord]]): Adjacency lists, insertion ordered
    """

    def __init__(self, mirrored: bool = False) -> None:
        self.mirrored = mirrored
        self._lists: Dict[int, List[EdgeRecord]] = {}

    def _edges_of(self, vertex: int) -> List[EdgeRecord]:
        try:
            return self._lists[vertex]
        except KeyError:
            raise AdjacencyInvariantError(
                f"No adjacency list for vertex identifier {vertex}"
            ) from None

    def add_vertex(self, vertex: int) -> bool:
        """Ensure an adjacency list exists. Returns True if one was created."""
        if vertex in self._lists:
            return False
        self._lists[vertex] = []
        return True

    def has_vertex(self, vertex: int) -> bool:
        return vertex in self._lists

    def _append(self, source: int, target: int, weight: Weight) -> bool:
        edges = self._edges_of(source)
        if any(record.target == target for record in edges):
            return False
        edges.append(EdgeRecord(target, weight))
        return True

    def add_edge(self, source: int, target: int, weight: Weight = 1) -> bool:
        """
        Insert an edge unless one already targets the same vertex.

        Missing endpoint lists are created. Repeating the call is a no-op,
        whatever the weight.

        Returns:
            bool: True if a record was inserted
        """
        self.add_vertex(source)
        self.add_vertex(target)
        inserted = self._append(source, target, weight)
        if self.mirrored and source != target:
            self._append(target, source, weight)
        return inserted

    def _discard(self, source: int, target: int, weight: Optional[Weight]) -> bool:
        edges = self._edges_of(source)
        for index, record in enumerate(edges):
            if record.target == target and (weight is None or record.weight == weight):
                del edges[index]
                return True
        return False

    def remove_edge(self, source: int, target: int, weight: Optional[Weight] = None) -> bool:
        """
        Remove the edge between two vertices if present.

        Args:
            source: Source vertex identifier
            target: Target vertex identifier
            weight: Only remove a record carrying exactly this weight

        Returns:
            bool: True if a record was removed

        Raises:
            AdjacencyInvariantError: If an endpoint has no adjacency list
        """
        removed = self._discard(source, target, weight)
        if self.mirrored and source != target:
            mirror_removed = self._discard(target, source, weight)
            if removed != mirror_removed:
                raise AdjacencyInvariantError(
                    f"Undirected edge {source} - {target} was stored on one side only"
                )
        return removed

    def remove_vertex(self, vertex: int) -> int:
        """
        Drop a vertex and every edge referencing it.

        Returns:
            int: Number of incoming records removed from other lists
        """
        self._edges_of(vertex)
        del self._lists[vertex]
        removed = 0
        for source, edges in self._lists.items():
            kept = [record for record in edges if record.target != vertex]
            removed += len(edges) - len(kept)
            self._lists[source] = kept
        return removed

    def get_edge(self, source: int, target: int) -> Optional[EdgeRecord]:
        for record in self._lists.get(source, ()):
            if record.target == target:
                return record
        return None

    def has_edge(self, source: int, target: int) -> bool:
        return self.get_edge(source, target) is not None

    def edges(self, vertex: int) -> Tuple[EdgeRecord, ...]:
        """Read-only view of a vertex's outgoing records."""
        return tuple(self._edges_of(vertex))

    def neighbors(self, vertex: int) -> List[int]:
        return [record.target for record in self._edges_of(vertex)]

    def out_degree(self, vertex: int) -> int:
        return len(self._edges_of(vertex))

    def in_degree(self, vertex: int) -> int:
        """Count the lists holding an edge towards ``vertex`` (O(V + E))."""
        self._edges_of(vertex)
        return sum(
            1
            for edges in self._lists.values()
            if any(record.target == vertex for record in edges)
        )

    def reverse(self) -> Dict[int, List[EdgeRecord]]:
        """Build a predecessor map: vertex -> records pointing back at sources."""
        if self.mirrored:
            return self._lists
        predecessors: Dict[int, List[EdgeRecord]] = {vertex: [] for vertex in self._lists}
        for source, edges in self._lists.items():
            for record in edges:
                predecessors[record.target].append(EdgeRecord(source, record.weight))
        return predecessors

    def edge_count(self) -> int:
        """Number of logical edges (mirrored pairs count once)."""
        total = sum(len(edges) for edges in self._lists.values())
        if not self.mirrored:
            return total
        loops = sum(
            1
            for vertex, edges in self._lists.items()
            if any(record.target == vertex for record in edges)
        )
        return (total - loops) // 2 + loops

    def snapshot(self) -> Dict[int, Tuple[EdgeRecord, ...]]:
        """Copy of the whole store safe to hand to read-only collaborators."""
        return {vertex: tuple(edges) for vertex, edges in self._lists.items()}

    def items(self) -> Iterator[Tuple[int, List[EdgeRecord]]]:
        return iter(self._lists.items())

    def vertices(self) -> List[int]:
        return list(self._lists)

    def clear(self) -> None:
        self._lists.clear()

    def __len__(self) -> int:
        return len(self._lists)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._lists
