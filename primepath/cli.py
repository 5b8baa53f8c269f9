"""Command-line interface for primepath."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

from primepath.graph.digraph import Graph
from primepath.io import load_graph
from primepath.logging import get_logger, set_global_log_level
from primepath.report import CoverageResults, format_path, format_report

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 8,
    max_col_width: Optional[int] = None,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width
        max_col_width: Clip cells longer than this many characters

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    def clip(val: Any) -> str:
        s = str(val)
        if max_col_width is not None and len(s) > max_col_width:
            return s[: max_col_width - 3] + "..."
        return s

    clipped_headers = [clip(h) for h in headers]
    clipped_rows = [[clip(item) for item in row] for row in rows]

    all_data = [clipped_headers] + clipped_rows
    col_widths = []
    for col_idx in range(len(clipped_headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(clipped_headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in clipped_rows:
        lines.append(format_row(row))

    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    """Return grammatically correct unit for count n."""
    if n == 1:
        return singular
    return plural if plural is not None else f"{singular}s"


def _print_graph_structure(graph: Graph) -> None:
    print("Graph:")
    print(
        f"   {graph.vertex_count} {_plural(graph.vertex_count, 'vertex', 'vertices')}, "
        f"{graph.edge_count} {_plural(graph.edge_count, 'edge')}"
    )

    loops = graph.self_loops()
    print(f"   Self-loops: {format_path(loops) if loops else 'none'}")
    print(f"   Parallel edges: {graph.parallel_edge_count()}")

    rows = [
        [str(v), str(graph.out_degree(v)), format_path(graph.neighbors(v))]
        for v in graph.vertices()
    ]
    table = _format_table(["Vertex", "Out", "Successors"], rows, max_col_width=60)
    if table:
        print()
        print(table)


def _inspect_graph(path: Path) -> None:
    """Load a graph and print a structural summary without enumerating."""
    try:
        graph = load_graph(path)
        _print_graph_structure(graph)
    except FileNotFoundError:
        logger.error(f"Graph file not found: {path}")
        print(f"❌ ERROR: Graph file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to inspect graph: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to inspect graph: {type(e).__name__}: {e}")
        sys.exit(1)


def _run_graph(
    path: Path,
    as_json: bool = False,
    results_path: Optional[Path] = None,
) -> None:
    """Enumerate paths, cycles and prime paths of a graph and print them.

    Args:
        path: Graph file (text or YAML), or ``-`` for standard input.
        as_json: Print the JSON results instead of the text report.
        results_path: Optional file to write the JSON results to.
    """
    _start_time = perf_counter()

    try:
        graph = load_graph(path)
        logger.info(f"Enumerating paths and cycles of {graph!r}")
        results = CoverageResults.compute(graph)
        logger.info(
            f"Found {len(results.paths)} paths, {len(results.cycles)} cycles "
            f"and {len(results.prime_paths)} prime paths"
        )

        json_str: Optional[str] = None
        if as_json or results_path is not None:
            json_str = json.dumps(results.to_dict(), indent=2)

        if results_path is not None:
            results_path.parent.mkdir(parents=True, exist_ok=True)
            logger.info(f"Writing results to: {results_path}")
            results_path.write_text(json_str)

        if as_json:
            print(json_str)
        else:
            print(format_report(results), end="")

        _elapsed = perf_counter() - _start_time
        logger.info(f"Enumeration completed in {_format_duration(_elapsed)}")

    except FileNotFoundError:
        logger.error(f"Graph file not found: {path}")
        print(f"❌ ERROR: Graph file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to enumerate graph: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to enumerate graph: {type(e).__name__}: {e}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``primepath`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="primepath",
        description="Enumerate simple paths, cycles and prime paths of a directed graph.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,inspect}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser(
        "run", help="Enumerate paths, cycles and prime paths"
    )
    run_parser.add_argument(
        "graph",
        type=Path,
        help="Graph file (whitespace text, or YAML with .yaml/.yml suffix); '-' reads stdin",
    )
    run_parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON instead of the text report",
    )
    run_parser.add_argument(
        "--results",
        "-r",
        type=Path,
        default=None,
        help="Also write JSON results to this file",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Show graph structure without enumerating"
    )
    inspect_parser.add_argument("graph", type=Path, help="Graph file, or '-' for stdin")

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "run":
        _run_graph(args.graph, as_json=args.json, results_path=args.results)
    elif args.command == "inspect":
        _inspect_graph(args.graph)


if __name__ == "__main__":
    main()
