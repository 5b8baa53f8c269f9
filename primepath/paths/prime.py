"""Prime path filtering.

A prime path is an element of the combined path and cycle set that is not a
contiguous sub-sequence of any *other* element of that set. Comparison is by
index, not by value: when the same sequence appears twice (parallel edges
produce such repeats), each copy is a sub-path of the other and both are
dropped.

The filter compares every pair of elements, which is quadratic in the size of
the union on top of the exponential enumeration. It is meant for the same
small graphs as the enumerators.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from primepath.config import EnumerationConfig
from primepath.graph.digraph import Graph, Vertex
from primepath.logging import get_logger
from primepath.paths.enumerate import CycleEnumerator, PathEnumerator

logger = get_logger(__name__)


def is_sub_path(candidate: Sequence[Vertex], other: Sequence[Vertex]) -> bool:
    """Return True if ``candidate`` occurs as a contiguous run inside ``other``.

    Args:
        candidate: The potential sub-path.
        other: The sequence to search in.

    Returns:
        True when ``len(candidate) <= len(other)`` and some offset of
        ``other`` starts an exact element-wise match of ``candidate``.

    Examples:
        >>> is_sub_path([1, 2], [0, 1, 2])
        True
        >>> is_sub_path([0, 2], [0, 1, 2])
        False
    """
    size = len(candidate)
    if size > len(other):
        return False
    candidate = list(candidate)
    other = list(other)
    return any(
        other[offset : offset + size] == candidate
        for offset in range(len(other) - size + 1)
    )


def filter_prime_paths(sequences: Sequence[Sequence[Vertex]]) -> List[List[Vertex]]:
    """Keep the sequences that are not a sub-path of any other index.

    Args:
        sequences: Paths and cycles in their union order.

    Returns:
        The surviving sequences as new lists, in input order.
    """
    primes: List[List[Vertex]] = []
    for i, candidate in enumerate(sequences):
        if not any(
            i != j and is_sub_path(candidate, other)
            for j, other in enumerate(sequences)
        ):
            primes.append(list(candidate))
    return primes


class PrimePathFilter:
    """Compute prime paths of a graph from its paths and cycles.

    The union is built as all paths (`PathEnumerator` order) followed by all
    cycles (`CycleEnumerator` order) before filtering.
    """

    def __init__(
        self, graph: Graph, config: Optional[EnumerationConfig] = None
    ) -> None:
        self._graph = graph
        self._paths = PathEnumerator(graph, config)
        self._cycles = CycleEnumerator(graph, config)

    def get_all_paths_and_cycles(self) -> List[List[Vertex]]:
        """Return the union of all paths followed by all cycles."""
        return self._paths.get_all_paths() + self._cycles.get_all_cycles()

    def get_unique_paths(self) -> List[List[Vertex]]:
        """Return the prime paths in union order."""
        union = self.get_all_paths_and_cycles()
        primes = filter_prime_paths(union)
        logger.debug(
            f"Kept {len(primes)} prime paths out of {len(union)} "
            f"paths and cycles in {self._graph!r}"
        )
        return primes
