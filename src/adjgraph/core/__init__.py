"""Core graph functionality."""

from .adjacency import AdjacencyStore
from .analysis import StructuralAnalysis
from .config import GraphConfig, configure_logging
from .exceptions import (
    AdjacencyInvariantError,
    ConfigurationError,
    EdgeNotFoundError,
    GraphOperationError,
    MutationResult,
    MutationStatus,
    NegativeCycleError,
    ResourceNotFoundError,
    UnknownIdentifierError,
    VertexNotFoundError,
)
from .graph import BaseGraph, DirectedGraph, UndirectedGraph
from .graph_paths import UNKNOWN_VERTEX_DISTANCE, PathResult, ShortestPathEngine
from .models import Edge, EdgeRecord
from .registry import IdentityRegistry
from .weights import PathStrategy, WeightClassifier

__all__ = [
    "AdjacencyInvariantError",
    "AdjacencyStore",
    "BaseGraph",
    "ConfigurationError",
    "DirectedGraph",
    "Edge",
    "EdgeNotFoundError",
    "EdgeRecord",
    "GraphConfig",
    "GraphOperationError",
    "IdentityRegistry",
    "MutationResult",
    "MutationStatus",
    "NegativeCycleError",
    "PathResult",
    "PathStrategy",
    "ResourceNotFoundError",
    "ShortestPathEngine",
    "StructuralAnalysis",
    "UNKNOWN_VERTEX_DISTANCE",
    "UndirectedGraph",
    "UnknownIdentifierError",
    "VertexNotFoundError",
    "WeightClassifier",
    "configure_logging",
]
