"""Undirected graph."""

from typing import Iterator, Tuple

from ..analysis import StructuralAnalysis
from ..models import EdgeRecord
from .base import BaseGraph, P


class UndirectedGraph(BaseGraph[P]):
    """
    Undirected graph over hashable payloads.

    Every edge is stored on both endpoints and inserted or removed on both
    sides as a single logical edge. A self loop is stored once.

    Example:
        >>> graph = UndirectedGraph([("A", "B"), ("B", "C")])
        >>> graph.shortest_path("C", "A")
        ['C', 'B', 'A']
        >>> graph.degree("B")
        2
    """

    mirrored = True

    def is_cyclic(self) -> bool:
        """Return True if any cycle (self loops included) exists."""
        return StructuralAnalysis.has_undirected_cycle(self._store)

    def degree(self, payload: P) -> int:
        """Number of edges incident to a vertex, ``-1`` if it is unknown."""
        identifier = self._known_id(payload)
        if identifier is None:
            return -1
        return self._store.out_degree(identifier)

    def _edge_records(self) -> Iterator[Tuple[int, EdgeRecord]]:
        # Report each mirrored pair once, from its lower identifier
        for source, record in super()._edge_records():
            if source <= record.target:
                yield source, record
