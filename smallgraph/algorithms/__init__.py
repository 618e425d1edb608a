"""Path-finding algorithms over `smallgraph.graph.Graph`."""

from smallgraph.algorithms.base import Cost, edge_cost
from smallgraph.algorithms.dijkstra import shortest_path, spf

__all__ = ["Cost", "edge_cost", "shortest_path", "spf"]
