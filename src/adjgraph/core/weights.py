"""
Weight classification for shortest path strategy selection.

The classifier watches every inserted edge weight and keeps two flags. The
flags are monotonic: removing the edge that set them does not clear them, so a
graph that once held a negative edge keeps routing through Bellman-Ford.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from .config import DEFAULT_EDGE_WEIGHT

logger = logging.getLogger(__name__)


class PathStrategy(Enum):
    """Shortest path algorithms the engine can dispatch to."""

    BELLMAN_FORD = "bellman_ford"  # Supports negative weights
    DIJKSTRA = "dijkstra"  # Non-negative weights only
    BIDIRECTIONAL = "bidirectional"  # Unweighted graphs only


@dataclass
class WeightClassifier:
    """
    Tracks whether a graph is weighted and whether it has negative weights.

    Attributes:
        default_weight: Weight considered "unweighted"
        is_weighted: True once any edge carried a non-default weight
        is_negative_weighted: True once any edge carried a negative weight
    """

    default_weight: float = DEFAULT_EDGE_WEIGHT
    is_weighted: bool = False
    is_negative_weighted: bool = False

    def observe(self, weight: float) -> None:
        """Record the weight of an inserted edge."""
        if weight != self.default_weight and not self.is_weighted:
            logger.debug(f"Weight {weight} marks the graph as weighted")
            self.is_weighted = True
        if weight < 0 and not self.is_negative_weighted:
            logger.debug(f"Weight {weight} marks the graph as negative weighted")
            self.is_negative_weighted = True

    @property
    def strategy(self) -> PathStrategy:
        """Select the shortest path algorithm legal for the observed weights."""
        if self.is_negative_weighted:
            return PathStrategy.BELLMAN_FORD
        if self.is_weighted:
            return PathStrategy.DIJKSTRA
        return PathStrategy.BIDIRECTIONAL

    def reset(self) -> None:
        self.is_weighted = False
        self.is_negative_weighted = False
