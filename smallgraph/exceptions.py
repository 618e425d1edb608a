"""Error types raised by graph construction and path queries.

Every error derives from `GraphError` and from the closest builtin exception,
so callers may catch either `GraphError` or, e.g., `ValueError`.

A query that is well-formed but has no route is not an error: the path
functions return `None` for it.
"""

from __future__ import annotations


class GraphError(Exception):
    """Base class for all SmallGraph errors."""


class DimensionMismatch(GraphError, ValueError):
    """Node and adjacency sequences have different lengths."""

    def __init__(self, node_count: int, edge_count: int) -> None:
        self.node_count = node_count
        self.edge_count = edge_count
        super().__init__(
            f"Graph has {node_count} nodes but {edge_count} adjacency entries."
        )


class InvalidEdgeSource(GraphError, ValueError):
    """An edge is stored under an adjacency entry other than its source."""

    def __init__(self, position: int, source: int) -> None:
        self.position = position
        self.source = source
        super().__init__(
            f"Edge with source {source} found in adjacency entry {position}."
        )


class InvalidEdgeTarget(GraphError, ValueError):
    """An edge points at an index outside the node sequence."""

    def __init__(self, source: int, target: int, node_count: int) -> None:
        self.source = source
        self.target = target
        self.node_count = node_count
        super().__init__(
            f"Edge {source}->{target} targets a node outside [0, {node_count})."
        )


class InvalidEdgeWeight(GraphError, ValueError):
    """An edge weight component is negative, non-finite or not a number."""

    def __init__(self, source: int, target: int, weight: object) -> None:
        self.source = source
        self.target = target
        self.weight = weight
        super().__init__(
            f"Edge {source}->{target} has invalid weight component {weight!r}; "
            "weights must be finite non-negative numbers."
        )


class IndexOutOfBounds(GraphError, IndexError):
    """A node index is outside the valid range of the graph."""

    def __init__(self, index: object, node_count: int) -> None:
        self.index = index
        self.node_count = node_count
        super().__init__(f"Node index {index!r} is outside [0, {node_count}).")


class CostOverflow(GraphError, OverflowError):
    """A path cost exceeded the representable range."""

    def __init__(self, cost: object, max_cost: int) -> None:
        self.cost = cost
        self.max_cost = max_cost
        super().__init__(f"Path cost {cost!r} exceeds the maximum of {max_cost}.")
