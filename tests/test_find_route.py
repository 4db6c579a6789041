"""
Tests for the find_route command line script.
"""

import importlib.util
import json
from pathlib import Path

import pytest

SCRIPT_PATH = Path(__file__).parent.parent / "scripts" / "find_route.py"


@pytest.fixture(scope="module")
def find_route():
    """Import scripts/find_route.py as a module."""
    spec = importlib.util.spec_from_file_location("find_route", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def edges_file(tmp_path, sample_records) -> Path:
    path = tmp_path / "edges.json"
    path.write_text(json.dumps(sample_records), encoding="utf-8")
    return path


class TestExitCodes:
    """Exit codes distinguish found, no path and usage errors."""

    def test_route_found(self, find_route, edges_file, capsys):
        code = find_route.main(["--edges", str(edges_file), "--start", "A", "--end", "C"])
        assert code == 0
        assert "Route:" in capsys.readouterr().out

    def test_no_path(self, find_route, edges_file, capsys):
        """No route exits with its own code, distinct from argparse's 2."""
        code = find_route.main(
            ["--edges", str(edges_file), "--start", "A", "--end", "D", "--no-mobility"]
        )
        assert code == find_route.NO_PATH_EXIT_CODE
        assert code != 2
        assert "No path found" in capsys.readouterr().out

    def test_usage_error(self, find_route):
        with pytest.raises(SystemExit) as exc:
            find_route.main(["--route", "Henesys"])
        assert exc.value.code == 2

    def test_missing_dataset(self, find_route, tmp_path, capsys):
        code = find_route.main(["--edges", str(tmp_path / "missing.json"), "--list-locations"])
        assert code == 1
        assert "Edge dataset not found" in capsys.readouterr().err

    def test_list_locations(self, find_route, edges_file, capsys):
        assert find_route.main(["--edges", str(edges_file), "--list-locations"]) == 0
        assert capsys.readouterr().out.split() == ["A", "B", "C", "D"]
