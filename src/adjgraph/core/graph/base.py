"""
Shared graph behavior for directed and undirected graphs.

This module provides the ``BaseGraph`` class that wires the identity registry,
the adjacency store, the weight classifier and the shortest path engine
together behind a payload-based API.

Mutations return ``MutationResult`` values instead of raising:
- ``SUCCESS`` when the graph now holds the requested state
- ``NOT_FOUND`` when a best-effort removal found nothing to remove
- ``INVALID`` when the input was rejected before touching the graph
- ``FAILED`` when an internal invariant broke (logged at error level)

Queries report unknown vertices with sentinels: ``-1`` distances, empty paths
and ``-1`` degrees.
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    TypeVar,
)

from ..adjacency import AdjacencyStore
from ..config import GraphConfig
from ..exceptions import (
    AdjacencyInvariantError,
    GraphOperationError,
    MutationResult,
    MutationStatus,
    UnknownIdentifierError,
    VertexNotFoundError,
)
from ..graph_paths import PathResult, ShortestPathEngine
from ..models import Edge, EdgeRecord, Weight
from ..registry import IdentityRegistry
from ..weights import PathStrategy, WeightClassifier

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Hashable)

EdgeSpec = Sequence[Any]  # (source, target) or (source, target, weight)


class BaseGraph(ABC, Generic[P]):
    """
    In-memory graph over hashable vertex payloads.

    Subclasses decide whether edges are mirrored and how cycles and degrees
    are computed.

    Attributes:
        config (GraphConfig): Settings of this graph
        _registry (IdentityRegistry): Payload <-> identifier mapping
        _store (AdjacencyStore): Adjacency lists keyed by identifier
        _classifier (WeightClassifier): Weight flags driving path strategy
        _paths (ShortestPathEngine): Shortest path dispatcher
    """

    mirrored: bool = False

    def __init__(
        self,
        edges: Optional[Iterable[EdgeSpec]] = None,
        config: Optional[GraphConfig] = None,
    ):
        """
        Initialize an empty graph, optionally seeded with edges.

        Args:
            edges: Optional ``(u, v)`` pairs or ``(u, v, weight)`` triples
            config: Graph settings (defaults to ``GraphConfig()``)

        Raises:
            GraphOperationError: If the seed edges are rejected
        """
        self.config = config or GraphConfig()
        self._registry: IdentityRegistry[P] = IdentityRegistry()
        self._store = AdjacencyStore(mirrored=self.mirrored)
        self._classifier = WeightClassifier(default_weight=self.config.default_weight)
        self._paths: ShortestPathEngine[P] = ShortestPathEngine(
            self._registry,
            self._store,
            self._classifier,
            max_memory_mb=self.config.max_memory_mb,
            unit_weight=self.config.default_weight,
        )
        if edges is not None:
            result = self.add_edges(edges)
            if not result:
                raise GraphOperationError(f"Cannot build graph: {result.detail}")

    # Validation helpers

    @staticmethod
    def _payload_problem(payload: Any) -> Optional[str]:
        try:
            hash(payload)
        except TypeError:
            return f"Vertex payload {payload!r} is not hashable"
        return None

    @staticmethod
    def _weight_problem(weight: Any) -> Optional[str]:
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            return f"Edge weight {weight!r} is not numeric"
        if not math.isfinite(weight):
            return f"Edge weight {weight!r} is not finite"
        return None

    def _edge_problem(self, source: Any, target: Any, weight: Any) -> Optional[str]:
        return (
            self._payload_problem(source)
            or self._payload_problem(target)
            or self._weight_problem(weight)
        )

    def _unpack_edge(self, spec: EdgeSpec) -> Tuple[Any, Any, Any]:
        try:
            if len(spec) == 2:
                source, target = spec
                return source, target, self.config.default_weight
            if len(spec) == 3:
                source, target, weight = spec
                return source, target, weight
        except TypeError:
            pass
        raise GraphOperationError(f"Edge specification {spec!r} must be a pair or a triple")

    def _guarded(self, operation: str, action: Callable[[], MutationResult]) -> MutationResult:
        """Run a mutation, turning internal invariant violations into FAILED."""
        try:
            return action()
        except (AdjacencyInvariantError, UnknownIdentifierError) as e:
            logger.error(f"{operation} failed on an internal invariant: {e}")
            return MutationResult.failed(str(e))

    def _known_id(self, payload: Any) -> Optional[int]:
        try:
            return self._registry.id_for(payload)
        except TypeError:
            return None

    # Mutation

    def add_vertex(self, payload: P) -> MutationResult:
        """Add a vertex if it does not exist already."""
        problem = self._payload_problem(payload)
        if problem:
            logger.warning(problem)
            return MutationResult.invalid(problem)

        def action() -> MutationResult:
            self._store.add_vertex(self._registry.resolve(payload))
            return MutationResult.success()

        return self._guarded("add_vertex", action)

    def add_vertices(self, payloads: Iterable[P]) -> MutationResult:
        """Add several vertices; nothing is added if any payload is rejected."""
        payloads = list(payloads)
        for payload in payloads:
            problem = self._payload_problem(payload)
            if problem:
                logger.warning(problem)
                return MutationResult.invalid(problem)

        def action() -> MutationResult:
            for payload in payloads:
                self._store.add_vertex(self._registry.resolve(payload))
            return MutationResult.success()

        return self._guarded("add_vertices", action)

    def _insert_edge(self, source: P, target: P, weight: Weight) -> None:
        source_id = self._registry.resolve(source)
        target_id = self._registry.resolve(target)
        if self._store.add_edge(source_id, target_id, weight):
            self._classifier.observe(weight)
        else:
            logger.debug(f"Edge {source!r} -> {target!r} already present")

    def add_edge(self, source: P, target: P, weight: Optional[Weight] = None) -> MutationResult:
        """
        Add an edge, creating missing endpoints.

        A second edge between the same ordered pair is a no-op, whatever its
        weight. Use ``remove_edge`` then ``add_edge`` to change a weight.

        Args:
            source: Source vertex payload
            target: Target vertex payload
            weight: Edge weight, ``config.default_weight`` when omitted
        """
        if weight is None:
            weight = self.config.default_weight
        problem = self._edge_problem(source, target, weight)
        if problem:
            logger.warning(problem)
            return MutationResult.invalid(problem)

        def action() -> MutationResult:
            self._insert_edge(source, target, weight)
            return MutationResult.success()

        return self._guarded("add_edge", action)

    def add_edges(self, edges: Iterable[EdgeSpec]) -> MutationResult:
        """
        Add ``(u, v)`` pairs and/or ``(u, v, weight)`` triples.

        Every specification is validated first; nothing is added if any of
        them is rejected.
        """
        unpacked: List[Tuple[Any, Any, Any]] = []
        for spec in edges:
            try:
                source, target, weight = self._unpack_edge(spec)
            except GraphOperationError as e:
                logger.warning(str(e))
                return MutationResult.invalid(str(e))
            problem = self._edge_problem(source, target, weight)
            if problem:
                logger.warning(problem)
                return MutationResult.invalid(problem)
            unpacked.append((source, target, weight))

        def action() -> MutationResult:
            for source, target, weight in unpacked:
                self._insert_edge(source, target, weight)
            return MutationResult.success()

        return self._guarded("add_edges", action)

    def remove_vertex(self, payload: P) -> MutationResult:
        """Remove a vertex and every edge referencing it, if it exists."""
        identifier = self._known_id(payload)
        if identifier is None:
            return MutationResult.not_found(f"Vertex {payload!r} not in graph")

        def action() -> MutationResult:
            self._store.remove_vertex(identifier)
            self._registry.release(payload)
            return MutationResult.success()

        return self._guarded("remove_vertex", action)

    def remove_vertices(self, payloads: Iterable[P]) -> MutationResult:
        """Remove several vertices; missing ones are skipped."""
        return self._combine(self.remove_vertex(payload) for payload in payloads)

    def remove_edge(self, source: P, target: P, weight: Optional[Weight] = None) -> MutationResult:
        """
        Remove the edge between two vertices, if it exists.

        Args:
            source: Source vertex payload
            target: Target vertex payload
            weight: When given, only an edge carrying exactly this weight is removed
        """
        source_id = self._known_id(source)
        target_id = self._known_id(target)
        if source_id is None or target_id is None:
            return MutationResult.not_found(f"Edge {source!r} -> {target!r} not in graph")

        def action() -> MutationResult:
            if self._store.remove_edge(source_id, target_id, weight):
                return MutationResult.success()
            return MutationResult.not_found(f"Edge {source!r} -> {target!r} not in graph")

        return self._guarded("remove_edge", action)

    def remove_edges(self, edges: Iterable[EdgeSpec]) -> MutationResult:
        """Remove ``(u, v)`` pairs and/or ``(u, v, weight)`` triples."""
        results = []
        for spec in edges:
            try:
                source, target, weight = self._unpack_edge(spec)
            except GraphOperationError as e:
                logger.warning(str(e))
                results.append(MutationResult.invalid(str(e)))
                continue
            if len(spec) == 2:
                weight = None
            results.append(self.remove_edge(source, target, weight))
        return self._combine(results)

    @staticmethod
    def _combine(results: Iterable[MutationResult]) -> MutationResult:
        """Fold batch results: first failure wins, then invalid, then not-found."""
        missing = 0
        invalid: Optional[MutationResult] = None
        for result in results:
            if result.status is MutationStatus.FAILED:
                return result
            if result.status is MutationStatus.INVALID and invalid is None:
                invalid = result
            elif result.status is MutationStatus.NOT_FOUND:
                missing += 1
        if invalid is not None:
            return invalid
        if missing:
            return MutationResult.not_found(f"{missing} item(s) not in graph")
        return MutationResult.success()

    def clear(self) -> None:
        """Remove every vertex and edge and reset the weight flags."""
        self._store.clear()
        self._registry.clear()
        self._classifier.reset()

    # Query

    def shortest_distance(self, start: P, end: P) -> float:
        """
        Length of the shortest path between two vertices.

        Returns:
            float: The distance; ``inf`` if unreachable, ``-inf`` if a
                negative cycle makes it unbounded, ``-1`` if either vertex
                is unknown
        """
        return self._paths.distance(start, end)

    def shortest_path(self, start: P, end: P) -> List[P]:
        """Vertices on a shortest path, empty if unknown, unreachable or unbounded."""
        return self._paths.path(start, end)

    def find_shortest_path(self, start: P, end: P) -> PathResult[P]:
        """Distance, path and strategy of one query in a single search."""
        return self._paths.search(start, end)

    @property
    def path_strategy(self) -> PathStrategy:
        return self._classifier.strategy

    @abstractmethod
    def is_cyclic(self) -> bool:
        """Return True if the graph contains a cycle."""

    @abstractmethod
    def degree(self, payload: P) -> Any:
        """Degree of a vertex, with a ``-1`` sentinel for unknown vertices."""

    def has_vertex(self, payload: Any) -> bool:
        return self._known_id(payload) is not None

    def has_edge(self, source: Any, target: Any) -> bool:
        source_id = self._known_id(source)
        target_id = self._known_id(target)
        if source_id is None or target_id is None:
            return False
        return self._store.has_edge(source_id, target_id)

    def get_weight(self, source: Any, target: Any) -> Optional[Weight]:
        """Weight of the edge between two vertices, None if there is none."""
        source_id = self._known_id(source)
        target_id = self._known_id(target)
        if source_id is None or target_id is None:
            return None
        record = self._store.get_edge(source_id, target_id)
        return record.weight if record else None

    def id_for(self, payload: Any) -> Optional[int]:
        """Internal identifier of a vertex, None if unknown."""
        return self._known_id(payload)

    def payload_for(self, identifier: int) -> P:
        """
        Payload registered under an identifier.

        Raises:
            VertexNotFoundError: If the identifier is unknown or retired
        """
        try:
            return self._registry.lookup(identifier)
        except UnknownIdentifierError as e:
            raise VertexNotFoundError(str(e)) from None

    def neighbors(self, payload: Any) -> List[P]:
        """Targets of a vertex's outgoing edges, in insertion order."""
        identifier = self._known_id(payload)
        if identifier is None:
            return []
        return [self._registry.lookup(target) for target in self._store.neighbors(identifier)]

    def vertices(self) -> List[P]:
        """Snapshot of vertex payloads in insertion order."""
        return self._registry.payloads()

    def _edge_records(self) -> Iterator[Tuple[int, EdgeRecord]]:
        for source, edges in self._store.items():
            for record in edges:
                yield source, record

    def edges(self) -> List[Edge[P]]:
        """Snapshot of the edges as payload triples."""
        return [
            Edge(self._registry.lookup(source), self._registry.lookup(record.target), record.weight)
            for source, record in self._edge_records()
        ]

    def adjacency(self) -> Dict[P, List[Tuple[P, Weight]]]:
        """Read-only copy of the adjacency lists in payload form."""
        return {
            self._registry.lookup(vertex): [
                (self._registry.lookup(record.target), record.weight) for record in records
            ]
            for vertex, records in self._store.snapshot().items()
        }

    @property
    def vertex_count(self) -> int:
        return len(self._registry)

    @property
    def edge_count(self) -> int:
        return self._store.edge_count()

    @property
    def is_weighted(self) -> bool:
        return self._classifier.is_weighted

    @property
    def is_negative_weighted(self) -> bool:
        return self._classifier.is_negative_weighted

    def is_empty(self) -> bool:
        return len(self._registry) == 0

    def __len__(self) -> int:
        return len(self._registry)

    def __contains__(self, payload: object) -> bool:
        return self.has_vertex(payload)

    def __iter__(self) -> Iterator[P]:
        return iter(self.vertices())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(vertices={self.vertex_count}, "
            f"edges={self.edge_count}, strategy={self.path_strategy.value})"
        )
