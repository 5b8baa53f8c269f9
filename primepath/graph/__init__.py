"""Graph primitives and helpers.

This package provides the integer-vertex directed graph `Graph`, its error
types, and conversion helpers to and from NetworkX (`convert`).
"""

from primepath.graph.convert import NodeMap, from_networkx, to_networkx
from primepath.graph.digraph import Edge, Graph, InvalidArgument, InvalidVertex, Vertex

__all__ = [
    "Edge",
    "Graph",
    "InvalidArgument",
    "InvalidVertex",
    "NodeMap",
    "Vertex",
    "from_networkx",
    "to_networkx",
]
