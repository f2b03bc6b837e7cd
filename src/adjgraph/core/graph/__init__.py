"""Graph classes exposed to callers."""

from .base import BaseGraph, EdgeSpec
from .directed import DirectedGraph
from .undirected import UndirectedGraph

__all__ = [
    "BaseGraph",
    "DirectedGraph",
    "EdgeSpec",
    "UndirectedGraph",
]
