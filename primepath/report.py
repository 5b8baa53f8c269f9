"""Ordering and rendering of enumeration results.

Results are ordered shortest first; sequences of equal length are compared at
the first position where they differ. `compare_paths` is that comparator and
`path_sort_key` the equivalent key for ``sorted``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence, Tuple

from primepath.graph.digraph import Graph, Vertex
from primepath.io import graph_to_dict
from primepath.paths.enumerate import CycleEnumerator, PathEnumerator
from primepath.paths.prime import filter_prime_paths

VertexSequence = List[Vertex]


def compare_paths(first: Sequence[Vertex], second: Sequence[Vertex]) -> int:
    """Three-way compare two vertex sequences.

    Returns:
        Negative if ``first`` sorts before ``second``, positive if after, and
        zero if they are identical.
    """
    if len(first) != len(second):
        return len(first) - len(second)
    for a, b in zip(first, second):
        if a != b:
            return a - b
    return 0


def path_sort_key(sequence: Sequence[Vertex]) -> Tuple[int, Tuple[Vertex, ...]]:
    """Sort key consistent with `compare_paths`."""
    return len(sequence), tuple(sequence)


def sort_paths(sequences: Sequence[Sequence[Vertex]]) -> List[VertexSequence]:
    """Return a sorted copy of ``sequences``."""
    return [list(s) for s in sorted(sequences, key=path_sort_key)]


def format_path(sequence: Sequence[Vertex]) -> str:
    """Render a sequence as ``[a, b, c]``."""
    return "[" + ", ".join(str(v) for v in sequence) + "]"


@dataclass
class CoverageResults:
    """Paths, cycles and prime paths of one graph, in enumeration order.

    Attributes:
        graph: The analysed graph.
        paths: All simple paths.
        cycles: All simple cycles.
        prime_paths: Maximal elements of ``paths + cycles``.
    """

    graph: Graph
    paths: List[VertexSequence]
    cycles: List[VertexSequence]
    prime_paths: List[VertexSequence]

    @classmethod
    def compute(cls, graph: Graph) -> "CoverageResults":
        """Run both enumerators once and filter their union."""
        paths = PathEnumerator(graph).get_all_paths()
        cycles = CycleEnumerator(graph).get_all_cycles()
        return cls(
            graph=graph,
            paths=paths,
            cycles=cycles,
            prime_paths=filter_prime_paths(paths + cycles),
        )

    @property
    def paths_and_cycles(self) -> List[VertexSequence]:
        return self.paths + self.cycles

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-ready dict with every result list sorted."""
        return {
            "graph": graph_to_dict(self.graph),
            "paths": sort_paths(self.paths),
            "cycles": sort_paths(self.cycles),
            "prime_paths": sort_paths(self.prime_paths),
            "counts": {
                "paths": len(self.paths),
                "cycles": len(self.cycles),
                "paths_and_cycles": len(self.paths) + len(self.cycles),
                "prime_paths": len(self.prime_paths),
            },
        }


def _format_section(title: str, total_label: str, sequences: List[VertexSequence]) -> List[str]:
    lines = [f"{title}:"]
    lines.extend(format_path(s) for s in sort_paths(sequences))
    lines.append(f"Total of {total_label}: {len(sequences)}")
    return lines


def format_report(results: CoverageResults) -> str:
    """Render the text report with both sorted sections and their totals."""
    lines = _format_section(
        "All paths and cycles", "paths and cycles", results.paths_and_cycles
    )
    lines.append("")
    lines.extend(_format_section("All Prime paths", "Prime paths", results.prime_paths))
    return "\n".join(lines) + "\n"
