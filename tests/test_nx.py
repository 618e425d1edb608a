"""Tests for smallgraph.nx NetworkX conversion utilities."""

import networkx as nx
import pytest

from smallgraph.algorithms.dijkstra import shortest_path
from smallgraph.exceptions import InvalidEdgeWeight
from smallgraph.graph import Edge, Graph
from smallgraph.nx import NodeMap, from_networkx, to_networkx


class TestNodeMap:
    """Tests for NodeMap class."""

    def test_from_names_creates_bidirectional_mapping(self):
        node_map = NodeMap.from_names(["A", "B", "C"])
        assert node_map.to_index == {"A": 0, "B": 1, "C": 2}
        assert node_map.to_name == {0: "A", 1: "B", 2: "C"}

    def test_from_names_empty_list(self):
        node_map = NodeMap.from_names([])
        assert len(node_map) == 0

    def test_len_returns_node_count(self):
        assert len(NodeMap.from_names(["X", "Y", "Z"])) == 3


class TestFromNetworkx:
    """Tests for from_networkx conversion."""

    def test_digraph_nodes_sorted_and_stored_as_values(self):
        G = nx.DiGraph()
        G.add_edge("C", "A", cost=1)
        G.add_edge("A", "B", cost=2)

        graph, node_map = from_networkx(G)

        assert graph.node_count() == 3
        assert list(graph.nodes) == ["A", "B", "C"]
        assert node_map.to_index == {"A": 0, "B": 1, "C": 2}
        assert graph.edges_from(0) == (Edge(0, 1),)
        assert graph.edges_from(0)[0].weights == (2,)
        assert graph.edges_from(2)[0].weights == (1,)

    def test_multiple_weight_attributes(self):
        G = nx.DiGraph()
        G.add_edge("a", "b", distance=3, time=4)
        G.add_edge("b", "c", distance=1)

        graph, _ = from_networkx(G, weight_attrs=("distance", "time"), default_weight=0)

        assert graph.edges_from(0)[0].weights == (3, 4)
        assert graph.edges_from(1)[0].weights == (1, 0)

    def test_missing_attribute_uses_default(self):
        G = nx.DiGraph()
        G.add_edge("a", "b")
        graph, _ = from_networkx(G)
        assert graph.edges_from(0)[0].weights == (1,)

    def test_undirected_adds_both_directions(self):
        G = nx.Graph()
        G.add_edge("a", "b", cost=5)

        graph, _ = from_networkx(G)

        assert graph.edge_count() == 2
        assert graph.edges_from(0) == (Edge(0, 1),)
        assert graph.edges_from(1) == (Edge(1, 0),)

    def test_multidigraph_parallel_edges(self):
        G = nx.MultiDiGraph()
        G.add_edge("a", "b", cost=5)
        G.add_edge("a", "b", cost=2)

        graph, _ = from_networkx(G)

        assert [e.weights for e in graph.edges_from(0)] == [(5,), (2,)]
        assert shortest_path(graph, 0, 1).cost == 2

    def test_isolated_nodes(self):
        G = nx.DiGraph()
        G.add_nodes_from(["x", "y"])
        graph, _ = from_networkx(G)
        assert graph.node_count() == 2
        assert graph.edge_count() == 0

    def test_negative_weight_rejected(self):
        G = nx.DiGraph()
        G.add_edge("a", "b", cost=-1)
        with pytest.raises(InvalidEdgeWeight):
            from_networkx(G)

    def test_non_networkx_input(self):
        with pytest.raises(TypeError, match="Expected NetworkX graph"):
            from_networkx({"a": ["b"]})

    def test_shortest_path_agrees_with_networkx(self):
        G = nx.DiGraph()
        G.add_edge("s", "a", cost=1)
        G.add_edge("a", "t", cost=1)
        G.add_edge("s", "t", cost=5)
        G.add_edge("s", "b", cost=2)
        G.add_edge("b", "t", cost=1)

        graph, node_map = from_networkx(G)
        path = shortest_path(graph, node_map.to_index["s"], node_map.to_index["t"])

        assert list(path) == nx.shortest_path(G, "s", "t", weight="cost")
        assert path.cost == nx.shortest_path_length(G, "s", "t", weight="cost")


class TestToNetworkx:
    """Tests for to_networkx conversion."""

    def test_index_labels_with_values(self, triangle):
        G = to_networkx(triangle)

        assert isinstance(G, nx.MultiDiGraph)
        assert sorted(G.nodes()) == [0, 1, 2]
        assert G.nodes[1]["value"] == 1
        assert G.number_of_edges() == 3
        assert G.edges[0, 2, 0]["cost"] == 10

    def test_round_trip_names(self):
        G = nx.DiGraph()
        G.add_edge("A", "B", cost=10, time=2)
        G.add_edge("B", "C", cost=5, time=1)

        graph, node_map = from_networkx(G, weight_attrs=("cost", "time"))
        G_out = to_networkx(graph, node_map, weight_attrs=("cost", "time"))

        assert sorted(G_out.nodes()) == ["A", "B", "C"]
        assert G_out.edges["A", "B", 0] == {"cost": 10, "time": 2}

    def test_unweighted_edges_have_no_attributes(self, disconnected):
        G = to_networkx(disconnected)
        assert G.edges[0, 1, 0] == {}

    def test_weight_length_mismatch(self, multi_weight):
        with pytest.raises(ValueError, match="weight components"):
            to_networkx(multi_weight)

    def test_empty_graph(self):
        G = to_networkx(Graph())
        assert G.number_of_nodes() == 0
