"""
Core data models for the graph storage layer.

This module defines the records kept in adjacency lists and the read-only
views handed to callers that enumerate a graph's edges.
"""

from dataclasses import dataclass
from typing import Generic, Hashable, TypeVar

P = TypeVar("P", bound=Hashable)

Weight = float


@dataclass(frozen=True, slots=True)
class EdgeRecord:
    """
    Outgoing edge stored in an adjacency list.

    Attributes:
        target: Identifier of the vertex the edge points to
        weight: Edge weight
    """

    target: int
    weight: Weight = 1


@dataclass(frozen=True)
class Edge(Generic[P]):
    """
    Edge expressed in caller payloads.

    Returned by ``edges()`` snapshots; undirected graphs report each logical
    edge once.

    Attributes:
        source: Payload of the source vertex
        target: Payload of the target vertex
        weight: Edge weight
    """

    source: P
    target: P
    weight: Weight = 1

    def as_tuple(self) -> tuple:
        return (self.source, self.target, self.weight)
