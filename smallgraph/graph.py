"""Array-backed directed graph.

A `Graph` pairs a `Nodes` sequence with a parallel `Edges` adjacency sequence.
A node's identity is its position in `Nodes`; entry `i` of `Edges` holds the
edges leaving node `i`. Both sequences are tuples, validated once at
construction and never modified afterwards.

Example:
    >>> from smallgraph.graph import Edge, Graph
    >>> g = Graph(["a", "b", "c"], [[Edge(0, 1), Edge(0, 2)], [Edge(1, 2)], None])
    >>> g.node_count()
    3
    >>> g.edges_from(2)
    ()
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from numbers import Integral, Real
from typing import Any, Iterable, Iterator, Optional, Tuple, Union

from smallgraph.exceptions import (
    DimensionMismatch,
    IndexOutOfBounds,
    InvalidEdgeSource,
    InvalidEdgeTarget,
    InvalidEdgeWeight,
)
from smallgraph.logging import get_logger

LOGGER = get_logger(__name__)

#: Position of a node in its graph.
NodeIndex = int

#: A single component of an edge weight vector.
Weight = Union[int, float]


@dataclass(frozen=True, eq=False)
class Edge:
    """
    Directed connection between two node indices.

    Attributes:
        source: Index of the node the edge leaves.
        target: Index of the node the edge enters.
        weights: Weight vector, or None for an unweighted edge. Any iterable
            is stored as a tuple.

    Two edges compare equal when their endpoints match; weights are ignored.
    """

    source: NodeIndex
    target: NodeIndex
    weights: Optional[Tuple[Weight, ...]] = None

    def __post_init__(self) -> None:
        if self.weights is not None and not isinstance(self.weights, tuple):
            object.__setattr__(self, "weights", tuple(self.weights))

    @property
    def is_weighted(self) -> bool:
        """True if the edge carries a weight vector (possibly empty)."""
        return self.weights is not None

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.source == other.source and self.target == other.target

    def __hash__(self) -> int:
        return hash((self.source, self.target))


class Nodes(Sequence):
    """Immutable sequence of node values addressed by index."""

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._values: Tuple[Any, ...] = tuple(values)

    def get(self, index: NodeIndex) -> Optional[Any]:
        """Return the value at `index`, or None if there is no such node."""
        if 0 <= index < len(self._values):
            return self._values[index]
        return None

    def first(self) -> Optional[Any]:
        """Return the first node value, or None when empty."""
        return self.get(0)

    def last(self) -> Optional[Any]:
        """Return the last node value, or None when empty."""
        return self.get(len(self._values) - 1)

    def __getitem__(self, index):
        return self._values[index]

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Nodes):
            return NotImplemented
        return self._values == other._values

    def __hash__(self) -> int:
        return hash(self._values)

    def __repr__(self) -> str:
        return f"Nodes({list(self._values)!r})"


class Edges(Sequence):
    """
    Immutable adjacency sequence: entry `i` lists the edges leaving node `i`.

    Entries may be given as None or as any iterable of `Edge`; None is stored
    as an empty tuple, so every entry is present after construction.
    """

    __slots__ = ("_adjacency",)

    def __init__(self, adjacency: Iterable[Optional[Iterable[Edge]]] = ()) -> None:
        entries = []
        for entry in adjacency:
            entry = () if entry is None else tuple(entry)
            for item in entry:
                if not isinstance(item, Edge):
                    raise TypeError(
                        f"Adjacency entries must contain Edge objects, got {type(item).__name__}."
                    )
            entries.append(entry)
        self._adjacency: Tuple[Tuple[Edge, ...], ...] = tuple(entries)

    def get(self, index: NodeIndex) -> Optional[Tuple[Edge, ...]]:
        """Return the edges leaving `index`, or None if there is no such entry."""
        if 0 <= index < len(self._adjacency):
            return self._adjacency[index]
        return None

    def first(self) -> Optional[Tuple[Edge, ...]]:
        """Return the first adjacency entry, or None when empty."""
        return self.get(0)

    def last(self) -> Optional[Tuple[Edge, ...]]:
        """Return the last adjacency entry, or None when empty."""
        return self.get(len(self._adjacency) - 1)

    def edge_count(self) -> int:
        """Return the total number of edges over all entries."""
        return sum(len(entry) for entry in self._adjacency)

    def __getitem__(self, index):
        return self._adjacency[index]

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[Tuple[Edge, ...]]:
        return iter(self._adjacency)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Edges):
            return NotImplemented
        return self._adjacency == other._adjacency

    def __hash__(self) -> int:
        return hash(self._adjacency)

    def __repr__(self) -> str:
        return f"Edges({[list(entry) for entry in self._adjacency]!r})"


class Graph:
    """
    Immutable directed graph over contiguous integer node indices.

    Construction enforces:
      - The node and adjacency sequences have the same length.
      - Each edge sits in the adjacency entry of its own source node.
      - Each edge source and target is an integer (not bool) node index.
      - Each weight component is a finite, non-negative real number.

    Once built, the graph exposes read-only accessors only, so a single
    instance can serve concurrent queries without locking.
    """

    __slots__ = ("_nodes", "_edges", "_edge_count")

    def __init__(
        self,
        nodes: Union[Nodes, Iterable[Any], None] = None,
        edges: Union[Edges, Iterable[Optional[Iterable[Edge]]], None] = None,
    ) -> None:
        """
        Validate and store the node and adjacency sequences.

        Args:
            nodes: Node values, as `Nodes` or any iterable. Defaults to empty.
            edges: Adjacency entries, as `Edges` or any iterable of optional
                edge lists. Defaults to empty.

        Raises:
            DimensionMismatch: If the sequences differ in length.
            InvalidEdgeSource: If an edge is stored under another node's entry.
            InvalidEdgeTarget: If an edge targets an index outside the nodes.
            InvalidEdgeWeight: If a weight component is invalid.
        """
        if not isinstance(nodes, Nodes):
            nodes = Nodes(() if nodes is None else nodes)
        if not isinstance(edges, Edges):
            edges = Edges(() if edges is None else edges)

        _validate(nodes, edges)

        self._nodes = nodes
        self._edges = edges
        self._edge_count = edges.edge_count()
        LOGGER.debug(
            "Built graph with %d nodes and %d edges", len(nodes), self._edge_count
        )

    @property
    def nodes(self) -> Nodes:
        """The node sequence."""
        return self._nodes

    @property
    def edges(self) -> Edges:
        """The adjacency sequence."""
        return self._edges

    def node_count(self) -> int:
        """Return the number of nodes."""
        return len(self._nodes)

    def edge_count(self) -> int:
        """Return the number of edges."""
        return self._edge_count

    def validate_index(self, index: NodeIndex) -> NodeIndex:
        """
        Return `index` if it addresses a node of this graph.

        Negative indices are rejected rather than counted from the end.

        Raises:
            IndexOutOfBounds: If `index` is not an integer in [0, node_count()).
                Floats and bools are rejected even when integral.
        """
        if not _is_index(index) or not 0 <= index < len(self._nodes):
            raise IndexOutOfBounds(index, len(self._nodes))
        return index

    def node_at(self, index: NodeIndex) -> Any:
        """
        Return the value stored at `index`.

        Raises:
            IndexOutOfBounds: If `index` is not a valid node index.
        """
        return self._nodes[self.validate_index(index)]

    def edges_from(self, index: NodeIndex) -> Tuple[Edge, ...]:
        """
        Return the edges leaving `index`; empty if the node has none.

        Raises:
            IndexOutOfBounds: If `index` is not a valid node index.
        """
        return self._edges[self.validate_index(index)]

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={self._edge_count})"


def _validate(nodes: Nodes, edges: Edges) -> None:
    node_count = len(nodes)
    if node_count != len(edges):
        raise DimensionMismatch(node_count, len(edges))

    for position, entry in enumerate(edges):
        for edge in entry:
            if not _is_index(edge.source) or edge.source != position:
                raise InvalidEdgeSource(position, edge.source)
            if not _is_index(edge.target) or not 0 <= edge.target < node_count:
                raise InvalidEdgeTarget(edge.source, edge.target, node_count)
            if edge.weights is not None:
                for weight in edge.weights:
                    if not _is_valid_weight(weight):
                        raise InvalidEdgeWeight(edge.source, edge.target, weight)


def _is_valid_weight(weight: Any) -> bool:
    if isinstance(weight, bool) or not isinstance(weight, Real):
        return False
    if isinstance(weight, float) and not math.isfinite(weight):
        return False
    return weight >= 0


def _is_index(value: Any) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)
