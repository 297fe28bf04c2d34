"""
Tests for the find_path command line script (graph source only).
"""

import importlib.util
import json

import msgpack
import pytest


@pytest.fixture
def cli(project_root):
    """Load scripts/find_path.py as a module."""
    spec = importlib.util.spec_from_file_location(
        "find_path_script", project_root / "scripts" / "find_path.py"
    )
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def graph_file(tmp_path):
    path = tmp_path / "graph.msgpack"
    path.write_bytes(msgpack.packb({0: [1, 2], 1: [3], 2: [3]}))
    return path


class TestFindPathScript:
    """End-to-end runs against a msgpack graph."""

    def test_found(self, cli, graph_file, capsys):
        """Prints the path and exits 0."""
        code = cli.main(["--source", "graph", "--graph", str(graph_file), "--start", "0", "--goal", "3"])
        out = capsys.readouterr().out
        assert code == 0
        assert "cost 2" in out
        assert "Iterations: 4" in out

    def test_not_found(self, cli, graph_file, capsys):
        """Exits 1 when the goal is unreachable."""
        code = cli.main(["--source", "graph", "--graph", str(graph_file), "--start", "3", "--goal", "0"])
        assert code == 1
        assert "No path" in capsys.readouterr().out

    def test_json_output(self, cli, graph_file, capsys):
        """--json prints the result dict."""
        code = cli.main(
            ["--source", "graph", "--graph", str(graph_file), "--start", "0", "--goal", "1", "--json"]
        )
        result = json.loads(capsys.readouterr().out)
        assert code == 0
        assert result == {
            "found": True,
            "iterations": 2,
            "cost": 1,
            "path": [{"from": 0, "to": 1, "cost": 1}],
        }

    def test_non_integer_ids(self, cli, graph_file):
        """Graph sources need integer ids."""
        code = cli.main(["--source", "graph", "--graph", str(graph_file), "--start", "a", "--goal", "b"])
        assert code == 2

    def test_missing_graph_file(self, cli, tmp_path, capsys):
        """A missing --graph file is reported instead of crashing."""
        missing = tmp_path / "nope.msgpack"
        code = cli.main(["--source", "graph", "--graph", str(missing), "--start", "0", "--goal", "1"])
        assert code == 2
        assert "link graph not found" in capsys.readouterr().err

    def test_weight_requires_heuristic(self, cli, graph_file, capsys):
        """--weight without a heuristic is rejected."""
        code = cli.main(
            ["--source", "graph", "--graph", str(graph_file), "--start", "0", "--goal", "3", "--weight", "2"]
        )
        assert code == 2
        assert "--weight needs a heuristic" in capsys.readouterr().err

    def test_weight_defaults_to_unweighted(self, cli):
        """Omitting --weight leaves the heuristic unweighted."""
        args = cli.parse_args(["--start", "a", "--goal", "b"])
        assert args.weight is None
