from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Iterator, Tuple

from smallgraph.algorithms.base import Cost
from smallgraph.graph import Graph, NodeIndex


@dataclass(frozen=True, eq=False)
class Path:
    """
    A route through a graph, from source to target inclusive.

    The path stores node indices only; node values are looked up in the
    owning graph on demand, so payloads are never copied.

    Attributes:
        graph (Graph):
            The graph the indices refer to.
        indices (Tuple[NodeIndex, ...]):
            Node indices in traversal order.
        cost (Cost):
            Total scalar cost of the traversed edges.

    Two paths are equal only if they refer to the same graph object and have
    the same indices and cost.
    """

    graph: Graph = field(repr=False)
    indices: Tuple[NodeIndex, ...]
    cost: Cost = 0

    def __post_init__(self) -> None:
        if not isinstance(self.indices, tuple):
            object.__setattr__(self, "indices", tuple(self.indices))
        if not self.indices:
            raise ValueError("A path must contain at least one node.")

    @cached_property
    def nodes(self) -> Tuple[Any, ...]:
        """Node values along the path, resolved from the graph."""
        return tuple(self.graph.node_at(i) for i in self.indices)

    @property
    def src(self) -> NodeIndex:
        """Index of the first node."""
        return self.indices[0]

    @property
    def dst(self) -> NodeIndex:
        """Index of the last node."""
        return self.indices[-1]

    @property
    def hops(self) -> int:
        """Number of edges traversed."""
        return len(self.indices) - 1

    def __getitem__(self, idx: int) -> Any:
        """Return the node value at position `idx` of the path."""
        return self.graph.node_at(self.indices[idx])

    def __iter__(self) -> Iterator[Any]:
        """Iterate over node values in traversal order."""
        return (self.graph.node_at(i) for i in self.indices)

    def __len__(self) -> int:
        return len(self.indices)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.cost < other.cost

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return (
            self.graph is other.graph
            and self.indices == other.indices
            and self.cost == other.cost
        )

    def __hash__(self) -> int:
        return hash((id(self.graph), self.indices, self.cost))

    def __repr__(self) -> str:
        return f"Path({list(self.indices)}, cost={self.cost})"
