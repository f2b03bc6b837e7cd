"""Directed graph."""

from typing import List, Tuple

from ..analysis import StructuralAnalysis
from .base import BaseGraph, P


class DirectedGraph(BaseGraph[P]):
    """
    Directed graph over hashable payloads.

    Edges are stored on their source only. In-degree is computed by scanning
    every adjacency list, no reverse index is kept.

    Example:
        >>> graph = DirectedGraph([("shirt", "tie"), ("tie", "jacket")])
        >>> graph.topological_sort()
        ['shirt', 'tie', 'jacket']
        >>> graph.degree("tie")
        (1, 1)
    """

    mirrored = False

    def is_cyclic(self) -> bool:
        """Return True if any directed cycle (self loops included) exists."""
        return StructuralAnalysis.has_directed_cycle(self._store)

    def topological_sort(self) -> List[P]:
        """
        Order the vertices so that every edge (u, v) has u before v.

        Returns:
            List: Vertex payloads in topological order, empty if the graph is
                cyclic (the order is undefined)
        """
        order = StructuralAnalysis.topological_order(self._store)
        return [self._registry.lookup(identifier) for identifier in order]

    def degree(self, payload: P) -> Tuple[int, int]:
        """``(in_degree, out_degree)`` of a vertex, ``(-1, -1)`` if unknown."""
        identifier = self._known_id(payload)
        if identifier is None:
            return (-1, -1)
        return (self._store.in_degree(identifier), self._store.out_degree(identifier))

    def in_degree(self, payload: P) -> int:
        return self.degree(payload)[0]

    def out_degree(self, payload: P) -> int:
        return self.degree(payload)[1]

    def predecessors(self, payload: P) -> List[P]:
        """Sources of a vertex's incoming edges."""
        identifier = self._known_id(payload)
        if identifier is None:
            return []
        return [
            self._registry.lookup(record.target)
            for record in self._store.reverse().get(identifier, [])
        ]
