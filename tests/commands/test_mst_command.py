"""Tests for mst command."""

from click.testing import CliRunner
import pandas as pd
import pytest

from unionfind.commands.mst import mst


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user config files out of the tests."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)


class TestMstCommand:
    """Tests for mst command."""

    @pytest.fixture
    def runner(self):
        """Create CLI runner."""
        return CliRunner()

    @pytest.fixture
    def edges_csv(self, tmp_path):
        """Create the six-vertex weighted graph."""
        csv_file = tmp_path / "edges.csv"
        df = pd.DataFrame(
            [
                (1, 2, 4), (1, 3, 1), (2, 4, 8),
                (1, 4, 7), (3, 5, 4), (3, 4, 5),
                (4, 6, 6), (3, 6, 3), (5, 6, 2),
            ],
            columns=["source", "target", "weight"],
        )
        df.to_csv(csv_file, index=False)
        return csv_file

    def test_mst(self, runner, edges_csv):
        result = runner.invoke(mst, [str(edges_csv)])

        assert result.exit_code == 0
        assert "Minimum Spanning Tree" in result.output
        assert "(1, 3)" in result.output
        assert "Edges: 5" in result.output
        assert "Total weight: 15" in result.output
        assert "Spanning tree computed!" in result.output

    def test_mst_output(self, runner, edges_csv, tmp_path):
        output = tmp_path / "out" / "tree.csv"
        result = runner.invoke(mst, [str(edges_csv), "-o", str(output)])

        assert result.exit_code == 0
        assert output.exists()
        tree = pd.read_csv(output)
        assert list(tree.columns) == ["source", "target", "weight"]
        assert len(tree) == 5
        assert tree["weight"].sum() == 15

    def test_mst_missing_columns(self, runner, tmp_path):
        csv_file = tmp_path / "bad.csv"
        pd.DataFrame({"source": [1], "target": [2]}).to_csv(csv_file, index=False)
        result = runner.invoke(mst, [str(csv_file)])

        assert result.exit_code != 0
        assert "missing required columns: weight" in result.output

    def test_mst_nonexistent_file(self, runner):
        result = runner.invoke(mst, ["nonexistent.csv"])

        assert result.exit_code != 0
