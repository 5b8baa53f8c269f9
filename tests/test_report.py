import json
from functools import cmp_to_key

import pytest

from primepath.graph.digraph import Graph
from primepath.report import (
    CoverageResults,
    compare_paths,
    format_path,
    format_report,
    path_sort_key,
    sort_paths,
)


@pytest.mark.parametrize(
    "first,second,sign",
    [
        ([5], [0, 1], -1),
        ([0, 1, 2], [9, 9], 1),
        ([0, 2], [0, 1], 1),
        ([1, 0], [1, 3], -1),
        ([2, 0, 1], [2, 0, 1], 0),
    ],
)
def test_compare_paths(first, second, sign):
    result = compare_paths(first, second)
    assert (result > 0) - (result < 0) == sign


def test_sort_key_agrees_with_comparator():
    sequences = [[2, 0, 1, 2], [1], [0, 1], [2, 0], [0], [1, 2, 0], [0, 1, 2]]
    assert sorted(sequences, key=path_sort_key) == sorted(
        sequences, key=cmp_to_key(compare_paths)
    )


def test_sort_paths_returns_sorted_copies():
    original = [[1, 2], [0]]
    result = sort_paths(original)
    assert result == [[0], [1, 2]]
    result[0].append(5)
    assert original == [[1, 2], [0]]


def test_format_path():
    assert format_path([0, 1, 2]) == "[0, 1, 2]"
    assert format_path([]) == "[]"


def test_results_for_while_loop(while_loop):
    results = CoverageResults.compute(while_loop)
    assert results.cycles == [[1, 2, 1], [2, 1, 2]]
    assert len(results.paths) == 11
    assert results.paths_and_cycles == results.paths + results.cycles
    assert results.prime_paths == [
        [0, 1, 2],
        [0, 1, 3],
        [2, 1, 3],
        [1, 2, 1],
        [2, 1, 2],
    ]


def test_format_report_single_edge(single_edge):
    report = format_report(CoverageResults.compute(single_edge))
    assert report == (
        "All paths and cycles:\n"
        "[0]\n"
        "[1]\n"
        "[0, 1]\n"
        "Total of paths and cycles: 3\n"
        "\n"
        "All Prime paths:\n"
        "[0, 1]\n"
        "Total of Prime paths: 1\n"
    )


def test_format_report_triangle_sorted(triangle):
    lines = format_report(CoverageResults.compute(triangle)).splitlines()
    assert lines[:4] == ["All paths and cycles:", "[0]", "[1]", "[2]"]
    assert "Total of paths and cycles: 12" in lines
    prime_start = lines.index("All Prime paths:")
    assert lines[prime_start + 1 :] == [
        "[0, 1, 2, 0]",
        "[1, 2, 0, 1]",
        "[2, 0, 1, 2]",
        "Total of Prime paths: 3",
    ]


def test_to_dict_is_json_ready(self_loop):
    data = CoverageResults.compute(self_loop).to_dict()
    assert json.loads(json.dumps(data)) == {
        "graph": {"vertices": 1, "edges": [[0, 0]]},
        "paths": [[0]],
        "cycles": [[0, 0]],
        "prime_paths": [[0, 0]],
        "counts": {
            "paths": 1,
            "cycles": 1,
            "paths_and_cycles": 2,
            "prime_paths": 1,
        },
    }


def test_empty_graph_report():
    report = format_report(CoverageResults.compute(Graph(0)))
    assert "Total of paths and cycles: 0" in report
    assert "Total of Prime paths: 0" in report
