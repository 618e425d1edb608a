"""SmallGraph: compact array-backed graphs with shortest-path queries.

Nodes are addressed by contiguous integer indices; each edge carries a weight
vector whose components are summed into one cost during path finding.

Primary API:
    Graph, Nodes, Edges, Edge - Immutable graph container
    nodes(), edges(), edge(), weighted_edge(), graph() - Builder helpers
    shortest_path() - Minimum-cost path between two nodes
    spf() - Minimal costs from one node to all reachable nodes
    from_networkx(), to_networkx() - NetworkX conversion

Example:
    from smallgraph import graph, nodes, edges, weighted_edge, shortest_path

    g = graph(
        nodes([0, 1, 2]),
        edges([
            [weighted_edge(0, 1, [1]), weighted_edge(0, 2, [10])],
            [weighted_edge(1, 2, [1])],
            None,
        ]),
    )
    path = shortest_path(g, 0, 2)
    assert list(path) == [0, 1, 2] and path.cost == 2
"""

from __future__ import annotations

from smallgraph import logging
from smallgraph._version import __version__
from smallgraph.algorithms import edge_cost, shortest_path, spf
from smallgraph.config import PATH_CONFIG, PathConfig
from smallgraph.exceptions import (
    CostOverflow,
    DimensionMismatch,
    GraphError,
    IndexOutOfBounds,
    InvalidEdgeSource,
    InvalidEdgeTarget,
    InvalidEdgeWeight,
)
from smallgraph.graph import Edge, Edges, Graph, Nodes
from smallgraph.helpers import edge, edges, graph, neighbors, nodes, weighted_edge
from smallgraph.nx import NodeMap, from_networkx, to_networkx
from smallgraph.path import Path

__all__ = [
    # Version
    "__version__",
    # Container
    "Graph",
    "Nodes",
    "Edges",
    "Edge",
    "Path",
    # Builders
    "nodes",
    "edges",
    "edge",
    "weighted_edge",
    "graph",
    "neighbors",
    # Algorithms
    "shortest_path",
    "spf",
    "edge_cost",
    # Configuration
    "PathConfig",
    "PATH_CONFIG",
    # Errors
    "GraphError",
    "DimensionMismatch",
    "InvalidEdgeSource",
    "InvalidEdgeTarget",
    "InvalidEdgeWeight",
    "IndexOutOfBounds",
    "CostOverflow",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
