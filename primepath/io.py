"""Readers that build a `Graph` from text or YAML input.

Two input forms are supported.

Whitespace-delimited integers, as typed at an interactive prompt::

    3 3
    0 1
    1 2
    2 0

The first token is the vertex count, the second the edge count, followed by
that many ``source destination`` pairs. Line breaks carry no meaning and
tokens after the last edge are ignored.

A YAML mapping::

    vertices: 3
    edges:
      - [0, 1]
      - [1, 2]
      - [2, 0]
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, TextIO, Union

import yaml

from primepath.graph.digraph import Graph, InvalidArgument
from primepath.logging import get_logger

logger = get_logger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


def _parse_count(value: Any, what: str) -> int:
    if isinstance(value, bool):
        raise InvalidArgument(f"{what} must be an integer, got {value!r}.")
    try:
        count = int(value)
    except (TypeError, ValueError):
        raise InvalidArgument(f"{what} must be an integer, got {value!r}.") from None
    if isinstance(value, float) and count != value:
        raise InvalidArgument(f"{what} must be an integer, got {value!r}.")
    if count <= 0:
        raise InvalidArgument(f"{what} must be positive, got {count}.")
    return count


def _parse_vertex(token: Any, position: int) -> int:
    if isinstance(token, bool) or isinstance(token, float):
        raise InvalidArgument(
            f"Edge endpoint #{position} must be an integer, got {token!r}."
        )
    try:
        return int(token)
    except (TypeError, ValueError):
        raise InvalidArgument(
            f"Edge endpoint #{position} must be an integer, got {token!r}."
        ) from None


def parse_graph_text(text: str) -> Graph:
    """Build a graph from whitespace-delimited integer tokens.

    Args:
        text: Vertex count, edge count, then ``source destination`` pairs.

    Returns:
        The constructed graph, edges added in input order.

    Raises:
        InvalidArgument: On missing or non-integer tokens, or non-positive
            counts.
        InvalidVertex: If an edge endpoint is outside ``[0, vertex_count)``.
    """
    tokens = text.split()
    if len(tokens) < 2:
        raise InvalidArgument(
            "Input must start with a vertex count and an edge count."
        )

    vertex_count = _parse_count(tokens[0], "Vertex count")
    edge_count = _parse_count(tokens[1], "Edge count")

    endpoints = tokens[2 : 2 + 2 * edge_count]
    if len(endpoints) < 2 * edge_count:
        raise InvalidArgument(
            f"Expected {edge_count} edges ({2 * edge_count} endpoints), "
            f"got {len(endpoints)} endpoints."
        )
    if len(tokens) > 2 + 2 * edge_count:
        logger.debug(
            f"Ignoring {len(tokens) - 2 - 2 * edge_count} trailing tokens after the edge list"
        )

    graph = Graph(vertex_count)
    for i in range(edge_count):
        u = _parse_vertex(endpoints[2 * i], 2 * i + 1)
        v = _parse_vertex(endpoints[2 * i + 1], 2 * i + 2)
        graph.add_edge(u, v)
    logger.debug(f"Parsed {graph!r} from text input")
    return graph


def read_graph(stream: TextIO) -> Graph:
    """Read an entire text stream and parse it with `parse_graph_text`."""
    return parse_graph_text(stream.read())


def load_graph_yaml(text: str) -> Graph:
    """Build a graph from a YAML document.

    Args:
        text: YAML with a ``vertices`` integer and an ``edges`` list of
            two-element sequences.

    Returns:
        The constructed graph.

    Raises:
        InvalidArgument: If the document is not a mapping of the expected
            shape.
        InvalidVertex: If an edge endpoint is outside ``[0, vertices)``.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise InvalidArgument(f"Invalid YAML graph document: {e}") from e

    if not isinstance(data, dict):
        raise InvalidArgument("YAML graph document must be a mapping.")

    unknown = set(map(str, data)) - {"vertices", "edges"}
    if unknown:
        raise InvalidArgument(
            f"Unrecognized keys in YAML graph document: {sorted(unknown)}."
        )
    if "vertices" not in data:
        raise InvalidArgument("YAML graph document must define 'vertices'.")

    vertex_count = _parse_count(data["vertices"], "Vertex count")
    edges: Any = data.get("edges")
    if edges is None:
        edges = []
    if not isinstance(edges, list):
        raise InvalidArgument("'edges' must be a list of [source, destination] pairs.")
    _parse_count(len(edges), "Edge count")

    graph = Graph(vertex_count)
    for i, edge in enumerate(edges):
        if not isinstance(edge, (list, tuple)) or len(edge) != 2:
            raise InvalidArgument(
                f"Edge #{i + 1} must be a [source, destination] pair, got {edge!r}."
            )
        graph.add_edge(
            _parse_vertex(edge[0], 2 * i + 1), _parse_vertex(edge[1], 2 * i + 2)
        )
    logger.debug(f"Parsed {graph!r} from YAML input")
    return graph


def load_graph(path: Union[str, Path]) -> Graph:
    """Load a graph from a file, choosing the format by suffix.

    ``.yaml`` and ``.yml`` files are parsed as YAML; any other file is parsed
    as whitespace-delimited text. The special path ``-`` reads text from
    standard input.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    if str(path) == "-":
        logger.info("Reading graph from standard input")
        return read_graph(sys.stdin)

    path = Path(path)
    logger.info(f"Loading graph from: {path}")
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in YAML_SUFFIXES:
        return load_graph_yaml(text)
    return parse_graph_text(text)


def graph_to_dict(graph: Graph) -> Dict[str, Any]:
    """Return the YAML/JSON-ready ``{vertices, edges}`` form of ``graph``."""
    return {
        "vertices": graph.vertex_count,
        "edges": [[u, v] for u, v in graph.edges()],
    }
