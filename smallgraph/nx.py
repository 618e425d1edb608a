"""NetworkX graph conversion utilities.

Converts between NetworkX graphs (arbitrary hashable node names) and the
index-based `Graph` used by the path-finding algorithms.

Example:
    >>> import networkx as nx
    >>> from smallgraph.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", cost=10, time=2)
    >>> G.add_edge("B", "C", cost=5, time=1)
    >>>
    >>> graph, node_map = from_networkx(G, weight_attrs=("cost", "time"))
    >>> node_map.to_index["B"]
    1
    >>> G_out = to_networkx(graph, node_map, weight_attrs=("cost", "time"))
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional, Sequence, Tuple, Union

from smallgraph.graph import Edge, Graph, Weight
from smallgraph.logging import get_logger

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any

LOGGER = get_logger(__name__)


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer indices.

    Attributes:
        to_index: Maps original node names to integer indices
        to_name: Maps integer indices back to original node names

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: Sequence[Hashable]) -> "NodeMap":
        """Create a NodeMap from node names listed in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def __len__(self) -> int:
        return len(self.to_index)


def from_networkx(
    G: NxGraph,
    *,
    weight_attrs: Sequence[str] = ("cost",),
    default_weight: Weight = 1,
) -> Tuple[Graph, NodeMap]:
    """Convert a NetworkX graph to a `Graph`.

    Node names are sorted by their string form and numbered from 0; the node
    value stored at each index is the original name. Every edge becomes a
    weighted edge whose weight vector holds the `weight_attrs` attributes in
    order. Undirected graphs produce one edge in each direction.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph)
        weight_attrs: Edge attribute names forming the weight vector
        default_weight: Component value when an attribute is missing

    Returns:
        Tuple of (graph, node_map).

    Raises:
        TypeError: If G is not a NetworkX graph
        InvalidEdgeWeight: If an attribute value is not a valid weight
    """
    import networkx as nx

    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    node_names = sorted(G.nodes(), key=str)
    node_map = NodeMap.from_names(node_names)
    adjacency: List[List[Edge]] = [[] for _ in node_names]

    for u, v, data in G.edges(data=True):
        src_idx = node_map.to_index[u]
        dst_idx = node_map.to_index[v]
        weights = tuple(data.get(attr, default_weight) for attr in weight_attrs)

        adjacency[src_idx].append(Edge(src_idx, dst_idx, weights))
        if not G.is_directed() and src_idx != dst_idx:
            adjacency[dst_idx].append(Edge(dst_idx, src_idx, weights))

    graph = Graph(node_names, adjacency)
    LOGGER.debug(
        "Converted %s with %d nodes into graph with %d edges",
        type(G).__name__,
        len(node_names),
        graph.edge_count(),
    )
    return graph, node_map


def to_networkx(
    graph: Graph,
    node_map: Optional[NodeMap] = None,
    *,
    weight_attrs: Sequence[str] = ("cost",),
) -> "nx.MultiDiGraph":
    """Convert a `Graph` to a NetworkX MultiDiGraph.

    With a NodeMap, nodes are labelled by their original names; otherwise
    they are labelled by index and carry the node value in a `value`
    attribute. Weight components become edge attributes named by
    `weight_attrs`; unweighted edges get no weight attributes.

    Args:
        graph: Graph to convert
        node_map: Optional NodeMap to restore original node names
        weight_attrs: Attribute names for the weight components, in order

    Returns:
        nx.MultiDiGraph with one edge per graph edge

    Raises:
        ValueError: If an edge's weight vector length differs from
            the number of weight_attrs
    """
    import networkx as nx

    G = nx.MultiDiGraph()

    def label(idx: int) -> Hashable:
        if node_map is None:
            return idx
        return node_map.to_name.get(idx, idx)

    for idx, value in enumerate(graph.nodes):
        if node_map is None:
            G.add_node(idx, value=value)
        else:
            G.add_node(label(idx))

    for entry in graph.edges:
        for e in entry:
            attrs: Dict[str, Weight] = {}
            if e.weights is not None:
                if len(e.weights) != len(weight_attrs):
                    raise ValueError(
                        f"Edge {e.source}->{e.target} has {len(e.weights)} weight "
                        f"components but {len(weight_attrs)} attribute names were given"
                    )
                attrs = dict(zip(weight_attrs, e.weights))
            G.add_edge(label(e.source), label(e.target), **attrs)

    return G
