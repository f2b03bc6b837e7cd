"""Structural analysis over an adjacency store.

This module provides cycle detection and topological ordering:
- Directed cycle detection (three-color depth-first search)
- Undirected cycle detection (depth-first search tracking the parent vertex)
- Topological sort (reverse post-order of a depth-first search)

Every search runs on an explicit stack of ``(vertex, pending neighbours)``
frames, so graph depth is bounded by memory rather than by the interpreter's
recursion limit. All methods work on identifiers; the graph classes translate
results back to payloads.
"""

import logging
from typing import Dict, Iterator, List, Optional, Set, Tuple

from .adjacency import AdjacencyStore

logger = logging.getLogger(__name__)

Frame = Tuple[int, Iterator[int]]


class StructuralAnalysis:
    """Cycle and ordering analysis for adjacency stores.

    The analysis methods are static: they hold no state between calls and
    never mutate the store they inspect.
    """

    @staticmethod
    def _frame(store: AdjacencyStore, vertex: int) -> Frame:
        return vertex, iter(store.neighbors(vertex))

    @staticmethod
    def has_directed_cycle(store: AdjacencyStore) -> bool:
        """Detect a directed cycle with a white/grey/black search.

        White vertices are undiscovered, grey ones sit on the current search
        stack and black ones are fully explored. Reaching a grey vertex is a
        back edge, hence a cycle. The search restarts from any remaining white
        vertex so that disconnected components are covered.

        Args:
            store (AdjacencyStore): Directed adjacency store.

        Returns:
            bool: True if any cycle (self loops included) exists.
        """
        white: Dict[int, None] = dict.fromkeys(store.vertices())
        grey: Set[int] = set()
        black: Set[int] = set()

        while white:
            root = next(iter(white))
            del white[root]
            grey.add(root)
            stack = [StructuralAnalysis._frame(store, root)]

            while stack:
                vertex, pending = stack[-1]
                for target in pending:
                    if target in black:
                        continue
                    if target in grey:
                        logger.debug(f"Back edge {vertex} -> {target} closes a cycle")
                        return True
                    white.pop(target, None)
                    grey.add(target)
                    stack.append(StructuralAnalysis._frame(store, target))
                    break
                else:
                    stack.pop()
                    grey.discard(vertex)
                    black.add(vertex)

        return False

    @staticmethod
    def has_undirected_cycle(store: AdjacencyStore) -> bool:
        """Detect a cycle in a mirrored store.

        A visited neighbour other than the vertex we arrived from closes a
        cycle. Multi-edges are impossible in the store, so the parent link is
        seen exactly once per vertex.

        Args:
            store (AdjacencyStore): Mirrored adjacency store.

        Returns:
            bool: True if any cycle (self loops included) exists.
        """
        visited: Set[int] = set()

        for root in store.vertices():
            if root in visited:
                continue
            visited.add(root)
            stack: List[Tuple[int, Optional[int], Iterator[int]]] = [
                (root, None, iter(store.neighbors(root)))
            ]

            while stack:
                vertex, parent, pending = stack[-1]
                for target in pending:
                    if target == vertex:
                        return True
                    if target not in visited:
                        visited.add(target)
                        stack.append((target, vertex, iter(store.neighbors(target))))
                        break
                    if target != parent:
                        logger.debug(f"Edge {vertex} - {target} closes a cycle")
                        return True
                else:
                    stack.pop()

        return False

    @staticmethod
    def topological_order(store: AdjacencyStore) -> List[int]:
        """Order the vertices so that every edge points forward.

        Each vertex is written to the highest free slot when its search
        finishes, slots counting down from |V| - 1 to 0.

        Args:
            store (AdjacencyStore): Directed adjacency store.

        Returns:
            List[int]: Identifiers in topological order, empty if the store
                contains a cycle.
        """
        if StructuralAnalysis.has_directed_cycle(store):
            logger.debug("Topological order requested on a cyclic graph")
            return []

        order: List[int] = [0] * len(store)
        slot = len(store) - 1
        visited: Set[int] = set()

        for root in store.vertices():
            if root in visited:
                continue
            visited.add(root)
            stack = [StructuralAnalysis._frame(store, root)]

            while stack:
                vertex, pending = stack[-1]
                for target in pending:
                    if target not in visited:
                        visited.add(target)
                        stack.append(StructuralAnalysis._frame(store, target))
                        break
                else:
                    stack.pop()
                    order[slot] = vertex
                    slot -= 1

        return order
