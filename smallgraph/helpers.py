"""Builder functions for assembling graphs from literal lists.

Example:
    >>> from smallgraph.helpers import (
    ...     edge, edges, graph, neighbors, nodes, weighted_edge,
    ... )
    >>> g = graph(
    ...     nodes([0, 1, 2]),
    ...     edges([[weighted_edge(0, 1, [1]), weighted_edge(0, 2, [10])],
    ...            [weighted_edge(1, 2, [1])],
    ...            None]),
    ... )
    >>> neighbors(g, 0)
    (1, 2)
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Tuple

from smallgraph.graph import Edge, Edges, Graph, NodeIndex, Nodes, Weight


def nodes(values: Iterable[Any]) -> Nodes:
    """Wrap node values into a `Nodes` sequence."""
    return Nodes(values)


def edges(adjacency: Iterable[Optional[Iterable[Edge]]]) -> Edges:
    """Wrap per-node edge lists (or None) into an `Edges` sequence."""
    return Edges(adjacency)


def edge(source: NodeIndex, target: NodeIndex) -> Edge:
    """Create an unweighted edge from `source` to `target`."""
    return Edge(source, target)


def weighted_edge(
    source: NodeIndex, target: NodeIndex, weights: Iterable[Weight]
) -> Edge:
    """
    Create an edge carrying a weight vector.

    Args:
        source: Index of the node the edge leaves.
        target: Index of the node the edge enters.
        weights: Cost components; summed into the edge cost.

    Returns:
        The new `Edge`.
    """
    return Edge(source, target, tuple(weights))


def graph(
    node_values: Iterable[Any], adjacency: Iterable[Optional[Iterable[Edge]]]
) -> Graph:
    """Build and validate a `Graph`; see `Graph.__init__` for the errors raised."""
    return Graph(node_values, adjacency)


def neighbors(g: Graph, index: NodeIndex) -> Tuple[NodeIndex, ...]:
    """
    Return the target indices of the edges leaving `index`, in edge order.

    Raises:
        IndexOutOfBounds: If `index` is not a valid node index.
    """
    return tuple(e.target for e in g.edges_from(index))
