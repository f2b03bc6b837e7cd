"""
Graph traversal using the iterator pattern.

This module provides read-only breadth-first and depth-first traversal over a
graph's vertex payloads. Iterators never mutate the graph; formatting or
printing the visited vertices is left to the caller.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Any, Dict, Iterator, List, Set, Tuple, Type

from .graph import BaseGraph


class GraphIterator(ABC):
    """Base class for graph traversal iterators."""

    def __init__(self, graph: BaseGraph, start: Any):
        """
        Initialize iterator.

        Args:
            graph: The graph to traverse
            start: Payload of the starting vertex
        """
        self.graph = graph
        self.start = start
        self.visited: Set[Any] = set()

    @abstractmethod
    def __iter__(self) -> Iterator[Tuple[Any, int]]:
        """
        Get iterator for traversal.

        Returns:
            Iterator yielding tuples of (payload, depth)
        """
        pass


class BFSIterator(GraphIterator):
    """Breadth-first traversal iterator."""

    def __iter__(self) -> Iterator[Tuple[Any, int]]:
        if not self.graph.has_vertex(self.start):
            return

        queue = deque([(self.start, 0)])
        self.visited.add(self.start)

        while queue:
            vertex, depth = queue.popleft()
            yield vertex, depth

            for neighbor in self.graph.neighbors(vertex):
                if neighbor not in self.visited:
                    self.visited.add(neighbor)
                    queue.append((neighbor, depth + 1))


class DFSIterator(GraphIterator):
    """Depth-first traversal iterator (pre-order)."""

    def __iter__(self) -> Iterator[Tuple[Any, int]]:
        if not self.graph.has_vertex(self.start):
            return

        stack = [(self.start, 0, iter(self.graph.neighbors(self.start)))]
        self.visited.add(self.start)
        yield self.start, 0

        while stack:
            vertex, depth, neighbors = stack[-1]
            try:
                neighbor = next(neighbors)
                if neighbor not in self.visited:
                    self.visited.add(neighbor)
                    yield neighbor, depth + 1
                    stack.append((neighbor, depth + 1, iter(self.graph.neighbors(neighbor))))
            except StopIteration:
                stack.pop()


STRATEGIES: Dict[str, Type[GraphIterator]] = {
    "bfs": BFSIterator,
    "dfs": DFSIterator,
}


def iterator(graph: BaseGraph, start: Any, strategy: str = "bfs") -> GraphIterator:
    """
    Get an iterator for traversing the graph.

    Raises:
        ValueError: If strategy is not recognized
    """
    if strategy not in STRATEGIES:
        raise ValueError(
            f"Unknown traversal strategy '{strategy}'. "
            f"Must be one of: {', '.join(STRATEGIES.keys())}"
        )
    return STRATEGIES[strategy](graph, start)


def traverse_components(graph: BaseGraph, strategy: str = "bfs") -> List[List[Any]]:
    """
    Traverse every vertex, one list per traversal tree.

    Traversals start from vertices in insertion order and skip vertices that
    an earlier traversal already reached. For undirected graphs each list is
    a connected component.
    """
    seen: Set[Any] = set()
    components: List[List[Any]] = []
    for start in graph.vertices():
        if start in seen:
            continue
        walker = iterator(graph, start, strategy)
        walker.visited.update(seen)
        component = [vertex for vertex, _ in walker]
        seen.update(component)
        components.append(component)
    return components
