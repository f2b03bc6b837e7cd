from abc import ABC, abstractmethod
from typing import Optional

from ..adjacency import AdjacencyStore
from .utils import MemoryManager


class PathFinder[R](ABC):
    """Abstract base class for shortest path algorithms over identifiers."""

    def __init__(self, store: AdjacencyStore, memory_manager: Optional[MemoryManager] = None):
        """Initialize finder with the adjacency store to search."""
        self.store = store
        self.memory_manager = memory_manager or MemoryManager()
        self.nodes_explored = 0

    @abstractmethod
    def find(self, start: int, end: int) -> R:
        """Search from ``start`` to ``end``; both identifiers must be known."""
        pass
