from __future__ import annotations

from typing import Optional, Union

from smallgraph.config import PATH_CONFIG, PathConfig
from smallgraph.graph import Edge

#: Scalar cost of an edge or a path (sum of weight components).
Cost = Union[int, float]


def edge_cost(edge: Edge, config: Optional[PathConfig] = None) -> Cost:
    """
    Collapse an edge's weight vector into a single comparable cost.

    The cost is the sum of the weight components. An unweighted edge costs
    `config.default_edge_cost`; an empty weight vector costs 0.

    Args:
        edge: The edge to price.
        config: Cost limits; defaults to `PATH_CONFIG`.

    Returns:
        The scalar edge cost.

    Raises:
        CostOverflow: If the sum exceeds `config.max_cost` or is not finite.
    """
    config = config or PATH_CONFIG
    if edge.weights is None:
        return config.default_edge_cost
    return config.check_cost(sum(edge.weights))
