"""Shortest path algorithm implementations."""

from .bellman_ford import BellmanFordFinder
from .bidirectional import BidirectionalFinder
from .dijkstra import DijkstraFinder

__all__ = [
    "BellmanFordFinder",
    "BidirectionalFinder",
    "DijkstraFinder",
]
