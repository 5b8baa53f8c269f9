"""Graph conversion utilities between `Graph` and NetworkX graphs.

Control-flow graphs are often produced with NetworkX, where nodes can be any
hashable value. `from_networkx` maps those nodes onto contiguous vertex
indices and returns a `NodeMap` so enumeration results can be translated back
with `NodeMap.to_names`.

Example:
    >>> import networkx as nx
    >>> G = nx.DiGraph([("entry", "body"), ("body", "exit")])
    >>> graph, node_map = from_networkx(G)
    >>> node_map.to_names([0, 1, 2])
    ['entry', 'body', 'exit']
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional, Sequence, Tuple

import networkx as nx

from primepath.graph.digraph import Graph


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and vertex indices.

    Attributes:
        to_index: Maps original node names to vertex indices.
        to_name: Maps vertex indices back to original node names.
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: Sequence[Hashable]) -> "NodeMap":
        """Create a NodeMap from node names listed in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def to_names(self, vertices: Sequence[int]) -> List[Hashable]:
        """Translate a vertex sequence (path or cycle) into node names."""
        return [self.to_name[v] for v in vertices]

    def __len__(self) -> int:
        return len(self.to_index)


def from_networkx(
    G: Any,
    *,
    nodelist: Optional[Sequence[Hashable]] = None,
) -> Tuple[Graph, NodeMap]:
    """Convert a NetworkX graph into a `Graph`.

    Directed graphs keep edge direction. Undirected graphs contribute both
    directions of every edge. Multigraphs contribute one edge per key, so
    parallel edges survive the conversion.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph or MultiGraph).
        nodelist: Optional explicit node order; defaults to ``G.nodes`` order.

    Returns:
        Tuple of the converted graph and the node mapping.

    Raises:
        ValueError: If ``nodelist`` repeats a node or does not cover every
            node of ``G``.
    """
    names = list(G.nodes) if nodelist is None else list(nodelist)
    duplicates = sorted({repr(n) for n in names if names.count(n) > 1})
    if duplicates:
        raise ValueError(
            f"Nodes {', '.join(duplicates)} appear more than once in nodelist."
        )
    node_map = NodeMap.from_names(names)
    missing = [n for n in G.nodes if n not in node_map.to_index]
    if missing:
        raise ValueError(f"Nodes {missing!r} are missing from nodelist.")

    graph = Graph(len(names))
    for u, v in G.edges():
        graph.add_edge(node_map.to_index[u], node_map.to_index[v])
        if not G.is_directed() and u != v:
            graph.add_edge(node_map.to_index[v], node_map.to_index[u])
    return graph, node_map


def to_networkx(graph: Graph, node_map: Optional[NodeMap] = None) -> nx.MultiDiGraph:
    """Convert a `Graph` into a NetworkX MultiDiGraph.

    Args:
        graph: The graph to convert.
        node_map: Optional mapping to restore original node names; vertex
            indices are used as node names when omitted.

    Returns:
        A MultiDiGraph with one edge per `Graph` edge, parallel edges included.
    """
    nx_graph = nx.MultiDiGraph()

    def name(v: int) -> Hashable:
        return v if node_map is None else node_map.to_name[v]

    nx_graph.add_nodes_from(name(v) for v in graph.vertices())
    nx_graph.add_edges_from((name(u), name(v)) for u, v in graph.edges())
    return nx_graph
