"""Directed graph over integer vertices backed by adjacency lists.

`Graph` holds a fixed number of vertices ``0..n-1`` and, for each vertex, the
ordered list of its successors. Edges are kept exactly as added: parallel
edges and self-loops are allowed and never deduplicated, and successor order
is edge-insertion order. Enumeration results depend on that order, so it is
part of the contract.

Vertex indices are validated on insertion and lookup; out-of-range indices
raise `InvalidVertex` naming the offending value.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

Vertex = int
Edge = Tuple[Vertex, Vertex]


class InvalidArgument(ValueError):
    """Raised when a graph or graph input is structurally invalid."""


class InvalidVertex(InvalidArgument):
    """Raised when a vertex index falls outside ``[0, n)``.

    Attributes:
        vertex: The offending vertex value.
        vertex_count: Number of vertices in the graph it was checked against.
    """

    def __init__(self, vertex: object, vertex_count: int) -> None:
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(
            f"Vertex {vertex!r} is out of range for a graph with "
            f"{vertex_count} vertices (expected 0..{vertex_count - 1})."
        )


class Graph:
    """Directed multigraph over vertices ``0..n-1``.

    Example:
        >>> g = Graph(3)
        >>> g.add_edge(0, 1)
        >>> g.add_edge(1, 2)
        >>> g.neighbors(1)
        [2]
    """

    __slots__ = ("_vertex_count", "_adjacency")

    def __init__(self, vertex_count: int) -> None:
        """Allocate ``vertex_count`` empty successor lists.

        Args:
            vertex_count: Number of vertices. Must be a non-negative integer.

        Raises:
            InvalidArgument: If ``vertex_count`` is negative or not an integer.
        """
        if isinstance(vertex_count, bool) or not isinstance(vertex_count, int):
            raise InvalidArgument(
                f"Vertex count must be an integer, got {vertex_count!r}."
            )
        if vertex_count < 0:
            raise InvalidArgument(
                f"Vertex count must be non-negative, got {vertex_count}."
            )
        self._vertex_count = vertex_count
        self._adjacency: List[List[Vertex]] = [[] for _ in range(vertex_count)]

    @classmethod
    def from_edges(cls, vertex_count: int, edges: Iterable[Edge]) -> Graph:
        """Build a graph and add ``edges`` in iteration order.

        Args:
            vertex_count: Number of vertices.
            edges: Iterable of ``(source, destination)`` pairs.

        Returns:
            A new Graph.
        """
        graph = cls(vertex_count)
        for u, v in edges:
            graph.add_edge(u, v)
        return graph

    def _check_vertex(self, vertex: object) -> None:
        if (
            isinstance(vertex, bool)
            or not isinstance(vertex, int)
            or not 0 <= vertex < self._vertex_count
        ):
            raise InvalidVertex(vertex, self._vertex_count)

    #
    # Mutation
    #
    def add_edge(self, u: Vertex, v: Vertex) -> None:
        """Append ``v`` to the successors of ``u``.

        Args:
            u: Source vertex.
            v: Destination vertex.

        Raises:
            InvalidVertex: If either endpoint is outside ``[0, n)``.
        """
        self._check_vertex(u)
        self._check_vertex(v)
        self._adjacency[u].append(v)

    #
    # Queries
    #
    def neighbors(self, v: Vertex) -> List[Vertex]:
        """Return the successors of ``v`` in edge-insertion order.

        The returned list is a copy; mutating it does not affect the graph.

        Raises:
            InvalidVertex: If ``v`` is outside ``[0, n)``.
        """
        self._check_vertex(v)
        return list(self._adjacency[v])

    def out_degree(self, v: Vertex) -> int:
        self._check_vertex(v)
        return len(self._adjacency[v])

    def has_edge(self, u: Vertex, v: Vertex) -> bool:
        if u not in self or v not in self:
            return False
        return v in self._adjacency[u]

    def vertices(self) -> range:
        return range(self._vertex_count)

    def edges(self) -> Iterator[Edge]:
        """Yield ``(source, destination)`` pairs grouped by source vertex."""
        for u, successors in enumerate(self._adjacency):
            for v in successors:
                yield u, v

    def self_loops(self) -> List[Vertex]:
        """Vertices with at least one edge back to themselves."""
        return [u for u, successors in enumerate(self._adjacency) if u in successors]

    def parallel_edge_count(self) -> int:
        """Number of edges that repeat an already present ``(u, v)`` pair."""
        return sum(
            len(successors) - len(set(successors)) for successors in self._adjacency
        )

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def edge_count(self) -> int:
        return sum(len(successors) for successors in self._adjacency)

    def __contains__(self, vertex: object) -> bool:
        return (
            isinstance(vertex, int)
            and not isinstance(vertex, bool)
            and 0 <= vertex < self._vertex_count
        )

    def __len__(self) -> int:
        return self._vertex_count

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count}, edges={self.edge_count})"
