"""Shared graph fixtures.

Diagrams show edge costs (sum of the weight vector) in brackets.
"""

from __future__ import annotations

import pytest

from smallgraph.helpers import edge, edges, graph, nodes, weighted_edge


@pytest.fixture
def triangle():
    #        [1]      [1]
    #   0 ───────► 1 ───────► 2
    #   │                     ▲
    #   └─────────────────────┘
    #            [10]
    return graph(
        nodes([0, 1, 2]),
        edges(
            [
                [weighted_edge(0, 1, [1]), weighted_edge(0, 2, [10])],
                [weighted_edge(1, 2, [1])],
                None,
            ]
        ),
    )


@pytest.fixture
def square_tie():
    # Two equal-cost routes from A to D:
    #       [2]        [2]
    #   ┌────────►B─────────┐
    #   │                   ▼
    #   A                   D
    #   │                   ▲
    #   └────────►C─────────┘
    #       [1]        [3]
    return graph(
        nodes(["A", "B", "C", "D"]),
        edges(
            [
                [weighted_edge(0, 1, [2]), weighted_edge(0, 2, [1])],
                [weighted_edge(1, 3, [2])],
                [weighted_edge(2, 3, [3])],
                [],
            ]
        ),
    )


@pytest.fixture
def multi_weight():
    # Weight vectors are (distance, time); costs are their sums.
    #
    #        (5, 1) [6]        (1, 1) [2]
    #   0 ──────────────► 1 ──────────────► 3
    #   │                                   ▲
    #   │    (1, 1) [2]        (2, 1) [3]   │
    #   └──────────────► 2 ─────────────────┘
    return graph(
        nodes(["depot", "north", "south", "port"]),
        edges(
            [
                [weighted_edge(0, 1, [5, 1]), weighted_edge(0, 2, [1, 1])],
                [weighted_edge(1, 3, [1, 1])],
                [weighted_edge(2, 3, [2, 1])],
                None,
            ]
        ),
    )


@pytest.fixture
def disconnected():
    #   0 ──► 1      2 ──► 3
    return graph(
        nodes(["a", "b", "c", "d"]),
        edges([[edge(0, 1)], None, [edge(2, 3)], None]),
    )


@pytest.fixture
def unweighted_line():
    #   0 ──► 1 ──► 2 ──► 3, plus a shortcut 0 ──► 3
    return graph(
        nodes(["w", "x", "y", "z"]),
        edges([[edge(0, 1), edge(0, 3)], [edge(1, 2)], [edge(2, 3)], None]),
    )
