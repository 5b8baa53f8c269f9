import io
import json
import logging
from pathlib import Path

import pytest

from primepath import cli


@pytest.fixture
def triangle_file(tmp_path: Path) -> Path:
    path = tmp_path / "triangle.txt"
    path.write_text("3 3\n0 1\n1 2\n2 0\n")
    return path


def test_run_prints_text_report(triangle_file: Path, capsys) -> None:
    cli.main(["run", str(triangle_file)])
    out = capsys.readouterr().out

    assert out.startswith("All paths and cycles:\n[0]\n")
    assert "Total of paths and cycles: 12" in out
    assert "All Prime paths:\n[0, 1, 2, 0]\n[1, 2, 0, 1]\n[2, 0, 1, 2]\n" in out
    assert out.endswith("Total of Prime paths: 3\n")


def test_run_json_stdout(triangle_file: Path, capsys) -> None:
    cli.main(["run", str(triangle_file), "--json"])
    payload = json.loads(capsys.readouterr().out)

    assert payload["graph"] == {"vertices": 3, "edges": [[0, 1], [1, 2], [2, 0]]}
    assert payload["cycles"] == [[0, 1, 2, 0], [1, 2, 0, 1], [2, 0, 1, 2]]
    assert payload["counts"]["prime_paths"] == 3


def test_run_writes_results_file(triangle_file: Path, tmp_path: Path, capsys) -> None:
    results_path = tmp_path / "out" / "res.json"
    cli.main(["run", str(triangle_file), "--results", str(results_path)])

    assert results_path.exists()
    data = json.loads(results_path.read_text())
    assert data["counts"] == {
        "paths": 9,
        "cycles": 3,
        "paths_and_cycles": 12,
        "prime_paths": 3,
    }
    # text report still goes to stdout
    assert "All Prime paths:" in capsys.readouterr().out


def test_run_yaml_input(tmp_path: Path, capsys) -> None:
    path = tmp_path / "loop.yaml"
    path.write_text("vertices: 1\nedges:\n  - [0, 0]\n")
    cli.main(["run", str(path)])
    out = capsys.readouterr().out

    assert "All Prime paths:\n[0, 0]\nTotal of Prime paths: 1\n" in out


def test_run_reads_stdin(monkeypatch, capsys) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("2 1\n0 1\n"))
    cli.main(["run", "-"])
    out = capsys.readouterr().out

    assert "All Prime paths:\n[0, 1]\nTotal of Prime paths: 1\n" in out


def test_run_missing_file_exits_1(tmp_path: Path, capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["run", str(tmp_path / "nope.txt")])
    assert exc_info.value.code == 1
    assert "ERROR: Graph file not found" in capsys.readouterr().out


def test_run_invalid_vertex_exits_1(tmp_path: Path, capsys, caplog) -> None:
    path = tmp_path / "bad.txt"
    path.write_text("2 1\n0 5\n")
    with caplog.at_level(logging.ERROR, logger="primepath"):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["run", str(path)])
    assert exc_info.value.code == 1
    out = capsys.readouterr().out
    assert "ERROR: Failed to enumerate graph: InvalidVertex" in out
    assert any("Vertex 5 is out of range" in r.message for r in caplog.records)


def test_inspect_prints_structure(tmp_path: Path, capsys) -> None:
    path = tmp_path / "g.txt"
    path.write_text("3 4\n0 1\n0 1\n1 2\n2 2\n")
    cli.main(["inspect", str(path)])
    out = capsys.readouterr().out

    assert "3 vertices, 4 edges" in out
    assert "Self-loops: [2]" in out
    assert "Parallel edges: 1" in out
    assert "Successors" in out
    assert "[1, 1]" in out


def test_inspect_single_vertex_wording(tmp_path: Path, capsys) -> None:
    path = tmp_path / "g.txt"
    path.write_text("1 1 0 0")
    cli.main(["inspect", str(path)])
    assert "1 vertex, 1 edge" in capsys.readouterr().out


def test_inspect_invalid_input_exits_1(tmp_path: Path, capsys) -> None:
    path = tmp_path / "g.txt"
    path.write_text("0 0")
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["inspect", str(path)])
    assert exc_info.value.code == 1
    assert "InvalidArgument" in capsys.readouterr().out


def test_no_arguments_prints_help(capsys) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 0
    assert "usage: primepath" in capsys.readouterr().out


def test_verbose_and_quiet_switch_levels(triangle_file: Path, caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="primepath"):
        cli.main(["--verbose", "run", str(triangle_file)])
    assert any("Debug logging enabled" in r.message for r in caplog.records)

    caplog.clear()
    with caplog.at_level(logging.INFO, logger="primepath"):
        cli.main(["--quiet", "run", str(triangle_file)])
    assert not any(r.levelno == logging.INFO for r in caplog.records)


def test_format_helpers() -> None:
    assert cli._format_duration(0.123) == "123.0 ms"
    assert cli._format_duration(1.234) == "1.23 s"
    assert cli._format_duration(75.2) == "1m 15.2s"
    assert cli._plural(1, "vertex", "vertices") == "vertex"
    assert cli._plural(2, "edge") == "edges"
    assert cli._format_table(["A"], []) == ""
    table = cli._format_table(["Vertex"], [["0"]])
    assert table.splitlines()[0].strip() == "Vertex"
