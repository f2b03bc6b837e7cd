"""
Data models for shortest path finding.

This module provides the result containers used throughout the path finding
package:
- SearchResult: distance plus predecessor map (Dijkstra, Bellman-Ford)
- PathResult: distance plus an explicit vertex sequence
- PerformanceMetrics: timing and exploration counters of a single query

Example:
    >>> result = PathResult(distance=2, path=["A", "B", "C"])
    >>> result.found
    True
    >>> result.length
    2
"""

import math
from dataclasses import dataclass, field
from typing import Dict, Generic, List, Optional, TypeVar, Union

from ..weights import PathStrategy

V = TypeVar("V")

INFINITY = math.inf
NEGATIVE_INFINITY = -math.inf

Distance = Union[int, float]


@dataclass
class SearchResult:
    """
    Outcome of a predecessor-based search.

    Attributes:
        distance: Distance to the target; ``inf`` when unreachable, ``-inf``
            when the target is affected by a negative cycle
        predecessors: child -> parent identifier mapping
    """

    distance: Distance
    predecessors: Dict[int, int] = field(default_factory=dict)

    @property
    def reachable(self) -> bool:
        return math.isfinite(self.distance)


@dataclass
class PathResult(Generic[V]):
    """
    Container for a path together with its distance.

    Attributes:
        distance: Total weight of the path (see ``SearchResult.distance``)
        path: Vertices from start to end, empty when no well-defined path exists
        strategy: Algorithm that produced the result
    """

    distance: Distance
    path: List[V] = field(default_factory=list)
    strategy: Optional[PathStrategy] = None

    @property
    def found(self) -> bool:
        return bool(self.path)

    @property
    def length(self) -> int:
        """Number of edges in the path."""
        return max(len(self.path) - 1, 0)

    def __len__(self) -> int:
        return len(self.path)

    def __iter__(self):
        return iter(self.path)


@dataclass
class PerformanceMetrics:
    """
    Container for path finding performance metrics.

    Attributes:
        operation: Name of the path finding operation
        start_time: Operation start timestamp
        end_time: Operation end timestamp (0.0 if not completed)
        nodes_explored: Number of vertices settled or expanded
    """

    operation: str
    start_time: float
    end_time: float = 0.0
    nodes_explored: int = 0

    def __post_init__(self):
        if not isinstance(self.operation, str) or not self.operation.strip():
            raise ValueError("operation must be a non-empty string")

    @property
    def duration(self) -> float:
        """Duration in milliseconds."""
        return (self.end_time - self.start_time) * 1000 if self.end_time else 0.0

    def to_dict(self) -> Dict[str, Union[str, float, int]]:
        return {
            "operation": self.operation,
            "duration_ms": self.duration,
            "nodes_explored": self.nodes_explored,
        }
