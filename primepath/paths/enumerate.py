"""Exhaustive enumeration of simple paths and simple cycles.

Both enumerators run a recursive depth-first search that keeps two pieces of
transient state per top-level search: a visited marker per vertex and the
current path buffer. A vertex is marked on entry and unmarked on return, and
every appended neighbor is popped after its subtree is explored, so the state
is exactly restored after each child call. Each top-level search (one per
vertex pair for paths, one per start vertex for cycles) gets fresh state.

The searches are generators. ``iter_*`` methods produce results lazily and can
be restarted by calling them again; ``get_*`` methods materialize lists. The
output size is exponential in graph density: this is a brute-force enumerator
for small graphs.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

from primepath.config import ENUMERATION_CONFIG, EnumerationConfig
from primepath.graph.digraph import Graph, InvalidVertex, Vertex
from primepath.logging import get_logger

logger = get_logger(__name__)

VertexSequence = List[Vertex]


def _warn_if_expensive(graph: Graph, config: EnumerationConfig, what: str) -> None:
    if config.is_expensive(graph.vertex_count, graph.edge_count):
        logger.warning(
            f"Enumerating {what} on {graph!r}; exhaustive search may be slow "
            f"and produce very large output"
        )


class PathEnumerator:
    """Enumerate every simple path between every ordered pair of vertices.

    Pairs are visited in row-major order ``(0, 0), (0, 1), ..., (n-1, n-1)``.
    The pair ``(i, i)`` always yields exactly the trivial path ``[i]``, even
    when ``i`` has a self-loop, because the search stops as soon as it stands
    on the target vertex.
    """

    def __init__(
        self, graph: Graph, config: Optional[EnumerationConfig] = None
    ) -> None:
        self._graph = graph
        self._config = config or ENUMERATION_CONFIG

    def iter_paths(self) -> Iterator[VertexSequence]:
        """Lazily yield all simple paths in pair order."""
        for start in self._graph.vertices():
            for end in self._graph.vertices():
                yield from self.iter_paths_between(start, end)

    def iter_paths_between(self, start: Vertex, end: Vertex) -> Iterator[VertexSequence]:
        """Lazily yield the simple paths from ``start`` to ``end``."""
        for vertex in (start, end):
            if vertex not in self._graph:
                raise InvalidVertex(vertex, self._graph.vertex_count)
        visited = [False] * self._graph.vertex_count
        yield from self._search(start, end, visited, [start])

    def _search(
        self,
        current: Vertex,
        end: Vertex,
        visited: List[bool],
        buffer: VertexSequence,
    ) -> Iterator[VertexSequence]:
        if current == end:
            yield list(buffer)
            return

        visited[current] = True
        for neighbor in self._graph.neighbors(current):
            if not visited[neighbor]:
                buffer.append(neighbor)
                yield from self._search(neighbor, end, visited, buffer)
                buffer.pop()
        visited[current] = False

    def get_paths_between(self, start: Vertex, end: Vertex) -> List[VertexSequence]:
        return list(self.iter_paths_between(start, end))

    def get_all_paths(self) -> List[VertexSequence]:
        """Return all simple paths, trivial single-vertex paths included.

        Returns:
            Paths for each pair ``(i, j)`` concatenated in pair order.
        """
        _warn_if_expensive(self._graph, self._config, "paths")
        paths = list(self.iter_paths())
        logger.debug(f"Found {len(paths)} paths in {self._graph!r}")
        return paths


class CycleEnumerator:
    """Enumerate simple cycles by searching from every start vertex.

    A cycle is recorded when an edge closes back onto the start vertex of the
    current search, so each simple cycle is reported once for every vertex on
    it, as the rotation beginning at that vertex. Parallel closing edges
    report the same cycle more than once. A self-loop ``v -> v`` yields
    ``[v, v]``.
    """

    def __init__(
        self, graph: Graph, config: Optional[EnumerationConfig] = None
    ) -> None:
        self._graph = graph
        self._config = config or ENUMERATION_CONFIG

    def iter_cycles(self) -> Iterator[VertexSequence]:
        """Lazily yield all cycles in start-vertex order."""
        for start in self._graph.vertices():
            yield from self.iter_cycles_from(start)

    def iter_cycles_from(self, start: Vertex) -> Iterator[VertexSequence]:
        """Lazily yield the cycles that begin and end at ``start``."""
        if start not in self._graph:
            raise InvalidVertex(start, self._graph.vertex_count)
        visited = [False] * self._graph.vertex_count
        yield from self._search(start, visited, [start])

    def _search(
        self,
        current: Vertex,
        visited: List[bool],
        buffer: VertexSequence,
    ) -> Iterator[VertexSequence]:
        visited[current] = True
        for neighbor in self._graph.neighbors(current):
            if not visited[neighbor]:
                buffer.append(neighbor)
                yield from self._search(neighbor, visited, buffer)
                buffer.pop()
            elif neighbor == buffer[0]:
                # closing edge back to the start of this search
                yield buffer + [neighbor]
        visited[current] = False

    def get_cycles_from(self, start: Vertex) -> List[VertexSequence]:
        return list(self.iter_cycles_from(start))

    def get_all_cycles(self) -> List[VertexSequence]:
        """Return all simple cycles, each closed by repeating its first vertex.

        Returns:
            Cycles for each start vertex concatenated in vertex order.
        """
        _warn_if_expensive(self._graph, self._config, "cycles")
        cycles = list(self.iter_cycles())
        logger.debug(f"Found {len(cycles)} cycles in {self._graph!r}")
        return cycles
