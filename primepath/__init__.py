"""primepath: prime-path coverage for small directed graphs.

primepath enumerates every simple path, every simple cycle, and the prime
paths (those not contained in any other path or cycle) of a directed graph,
the artifacts needed for prime-path test coverage of a control-flow graph.

Primary API:
    Graph - Directed graph over vertices 0..n-1
    PathEnumerator - All simple paths between every ordered vertex pair
    CycleEnumerator - All simple cycles, once per start vertex
    PrimePathFilter - Maximal elements of the path and cycle union
    from_networkx() / to_networkx() - NetworkX interoperability

Example:
    from primepath import Graph, PrimePathFilter

    g = Graph(3)
    g.add_edge(0, 1)
    g.add_edge(1, 2)
    g.add_edge(2, 0)

    primes = PrimePathFilter(g).get_unique_paths()
"""

from __future__ import annotations

from primepath import cli, logging
from primepath.config import ENUMERATION_CONFIG, EnumerationConfig
from primepath.graph import (
    Graph,
    InvalidArgument,
    InvalidVertex,
    NodeMap,
    from_networkx,
    to_networkx,
)
from primepath.io import load_graph, load_graph_yaml, parse_graph_text, read_graph
from primepath.paths import (
    CycleEnumerator,
    PathEnumerator,
    PrimePathFilter,
    filter_prime_paths,
    is_sub_path,
)
from primepath.report import CoverageResults, compare_paths, format_report, sort_paths

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Graph
    "Graph",
    "InvalidArgument",
    "InvalidVertex",
    # Enumeration
    "PathEnumerator",
    "CycleEnumerator",
    "PrimePathFilter",
    "filter_prime_paths",
    "is_sub_path",
    # Input
    "load_graph",
    "load_graph_yaml",
    "parse_graph_text",
    "read_graph",
    # Results
    "CoverageResults",
    "compare_paths",
    "format_report",
    "sort_paths",
    # Configuration
    "EnumerationConfig",
    "ENUMERATION_CONFIG",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
