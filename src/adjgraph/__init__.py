"""
adjgraph - In-memory graphs with pathfinding and structural analysis

This package provides generic directed and undirected graphs over hashable
vertex payloads. It includes:

- Vertex and edge management with dense internal identifiers
- Shortest paths (Dijkstra, Bellman-Ford, bidirectional search) chosen from
  the weights present in the graph
- Cycle detection and topological sort
- Breadth-first and depth-first traversal iterators
"""

__version__ = "0.1.0"
__author__ = "adjgraph Team"
__license__ = "See LICENSE file"

# Version compatibility check
import sys

if sys.version_info < (3, 12):
    raise RuntimeError("adjgraph requires Python 3.12 or higher")

# Import commonly used components for easier access
from .core.config import GraphConfig
from .core.exceptions import MutationResult, MutationStatus
from .core.graph import DirectedGraph, UndirectedGraph

__all__ = [
    "DirectedGraph",
    "GraphConfig",
    "MutationResult",
    "MutationStatus",
    "UndirectedGraph",
]
