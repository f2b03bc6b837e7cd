"""
Custom exceptions and mutation results for the graph library.

This module defines the hierarchy of exceptions used inside the library and the
result types returned by mutation operations. Queries and mutations never raise
across the public graph boundary for expected conditions (unknown vertices,
missing edges); those are reported through sentinels and ``MutationResult``
values. Exceptions are reserved for internal faults and for strict helpers that
callers opt into.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class GraphOperationError(Exception):
    """
    Raised when graph operations fail.

    This exception is raised when operations on the graph structure encounter
    errors that are not covered by the sentinel conventions of the public API.

    Examples:
        * Unsupported edge specifications in batch operations
        * Strict path reconstruction on an unreachable target
    """

    def __str__(self) -> str:
        """Format graph operation error message."""
        return f"Graph Operation Error: {super().__str__()}"


class ResourceNotFoundError(Exception):
    """
    Raised when a requested resource is not found.

    Examples:
        * Vertex not found
        * Edge not found
        * Identifier not assigned
    """


class VertexNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested vertex payload is not part of the graph.

    Examples:
        * Strict lookup of a payload that was never added
        * Lookup of a payload after it was removed
    """


class EdgeNotFoundError(ResourceNotFoundError):
    """
    Raised when a requested edge is not found.

    Examples:
        * Strict lookup of an edge between unconnected vertices
    """


class UnknownIdentifierError(ResourceNotFoundError, KeyError):
    """
    Raised when an identifier was never assigned or has been retired.

    Identifiers are never reused, so looking up the identifier of a removed
    vertex always fails with this error.
    """

    def __str__(self) -> str:
        return f"Unknown identifier: {self.args[0] if self.args else ''}"


class AdjacencyInvariantError(GraphOperationError):
    """
    Raised when the adjacency store disagrees with the identity registry.

    A known identifier must always have an adjacency list. This error signals
    an internal fault, never a caller mistake.
    """


class NegativeCycleError(GraphOperationError):
    """Raised when a strict path query touches a negative cycle."""


class ConfigurationError(Exception):
    """
    Raised when configuration is invalid.

    Examples:
        * Configuration mapping failing schema validation
        * Non-numeric values in environment variables
    """


class MutationStatus(Enum):
    """Outcome of a mutation operation."""

    SUCCESS = "success"
    NOT_FOUND = "not_found"  # best-effort removal of something absent
    INVALID = "invalid"  # rejected input, graph untouched
    FAILED = "failed"  # internal fault, graph may be partially updated

    @property
    def ok(self) -> bool:
        return self in (MutationStatus.SUCCESS, MutationStatus.NOT_FOUND)


@dataclass(frozen=True)
class MutationResult:
    """
    Result of a graph mutation.

    Truthiness mirrors success, so ``if graph.add_edge(a, b):`` keeps working
    for callers that only care about a boolean flag.

    Attributes:
        status: Outcome of the operation
        detail: Human readable explanation for non-success outcomes
    """

    status: MutationStatus = MutationStatus.SUCCESS
    detail: Optional[str] = None

    def __bool__(self) -> bool:
        return self.status.ok

    @property
    def ok(self) -> bool:
        return self.status.ok

    @classmethod
    def success(cls) -> "MutationResult":
        return cls(MutationStatus.SUCCESS)

    @classmethod
    def not_found(cls, detail: str) -> "MutationResult":
        return cls(MutationStatus.NOT_FOUND, detail)

    @classmethod
    def invalid(cls, detail: str) -> "MutationResult":
        return cls(MutationStatus.INVALID, detail)

    @classmethod
    def failed(cls, detail: str) -> "MutationResult":
        return cls(MutationStatus.FAILED, detail)
