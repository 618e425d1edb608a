from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Dict, List, Optional, Tuple

from smallgraph.algorithms.base import Cost, edge_cost
from smallgraph.config import PATH_CONFIG, PathConfig
from smallgraph.graph import Graph, NodeIndex
from smallgraph.logging import get_logger
from smallgraph.path import Path

LOGGER = get_logger(__name__)


def _dijkstra(
    graph: Graph,
    src_node: NodeIndex,
    dst_node: Optional[NodeIndex],
    config: PathConfig,
) -> Tuple[List[Optional[Cost]], List[Optional[NodeIndex]]]:
    """
    Dijkstra's SPF over the dense adjacency of `graph`.

    Heap entries are (cost, sequence, node). The sequence number grows with
    every push, so entries of equal cost leave the heap in insertion order
    and repeated runs on the same graph make identical choices.

    Args:
        graph: Graph to search.
        src_node: Validated source index.
        dst_node: Stop as soon as this index is settled; None runs to exhaustion.
        config: Cost limits.

    Returns:
        A tuple of (costs, pred) lists indexed by node:
          - costs: Minimal known cost from src_node, None if unreached.
          - pred: Predecessor on the chosen path, None for src_node and
            unreached nodes.

    Raises:
        CostOverflow: If a cumulative cost exceeds `config.max_cost`.
    """
    adjacency = graph.edges
    costs: List[Optional[Cost]] = [None] * graph.node_count()
    pred: List[Optional[NodeIndex]] = [None] * graph.node_count()
    costs[src_node] = 0

    sequence = count()
    min_pq: List[Tuple[Cost, int, NodeIndex]] = [(0, next(sequence), src_node)]

    while min_pq:
        current_cost, _, node = heappop(min_pq)
        if node == dst_node:
            break
        if current_cost > costs[node]:
            continue

        for e in adjacency[node]:
            new_cost = config.check_cost(current_cost + edge_cost(e, config))
            known_cost = costs[e.target]
            if known_cost is None or new_cost < known_cost:
                costs[e.target] = new_cost
                pred[e.target] = node
                heappush(min_pq, (new_cost, next(sequence), e.target))

    return costs, pred


def spf(
    graph: Graph,
    src_node: NodeIndex,
    config: Optional[PathConfig] = None,
) -> Tuple[Dict[NodeIndex, Cost], Dict[NodeIndex, NodeIndex]]:
    """
    Compute minimal costs from a source node to every reachable node.

    Args:
        graph: The graph to search.
        src_node: The source node index.
        config: Cost limits; defaults to `PATH_CONFIG`.

    Returns:
        A tuple of (costs, pred):
          - costs: Maps each reachable node to its minimal cost from src_node.
          - pred: Maps each reachable node other than src_node to its
            predecessor on the selected shortest path.

    Raises:
        IndexOutOfBounds: If src_node is not a valid node index.
        CostOverflow: If a cumulative cost exceeds the configured maximum.
    """
    graph.validate_index(src_node)
    cost_list, pred_list = _dijkstra(graph, src_node, None, config or PATH_CONFIG)

    costs = {i: c for i, c in enumerate(cost_list) if c is not None}
    pred = {i: p for i, p in enumerate(pred_list) if p is not None}
    return costs, pred


def shortest_path(
    graph: Graph,
    src_node: NodeIndex,
    dst_node: NodeIndex,
    config: Optional[PathConfig] = None,
) -> Optional[Path]:
    """
    Find a minimum-cost path between two nodes.

    Edge costs are the sums of their weight vectors. When several paths share
    the minimal cost, the choice is deterministic for a given graph.

    Args:
        graph: The graph to search. It is never modified.
        src_node: Index of the first node of the path.
        dst_node: Index of the last node of the path.
        config: Cost limits; defaults to `PATH_CONFIG`.

    Returns:
        The `Path` from src_node to dst_node, or None if dst_node cannot be
        reached. A query with src_node == dst_node yields the one-node path.

    Raises:
        IndexOutOfBounds: If either index is not a valid node index.
        CostOverflow: If a cumulative cost exceeds the configured maximum.
    """
    graph.validate_index(src_node)
    graph.validate_index(dst_node)

    if src_node == dst_node:
        return Path(graph, (src_node,), 0)

    costs, pred = _dijkstra(graph, src_node, dst_node, config or PATH_CONFIG)
    if costs[dst_node] is None:
        LOGGER.debug("No path from %d to %d", src_node, dst_node)
        return None

    indices = [dst_node]
    while indices[-1] != src_node:
        indices.append(pred[indices[-1]])
    indices.reverse()

    LOGGER.debug(
        "Shortest path %d -> %d: %d hops, cost %s",
        src_node,
        dst_node,
        len(indices) - 1,
        costs[dst_node],
    )
    return Path(graph, tuple(indices), costs[dst_node])
