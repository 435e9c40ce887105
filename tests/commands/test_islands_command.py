"""Tests for islands command."""

from click.testing import CliRunner
import pytest

from unionfind.commands.islands import islands

CHART = "\n  ......   .\n  .    ..\n       ..\n       .....\n  ..       .\n  .  ..... .\n         . .\n"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user config files out of the tests."""
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)


class TestIslandsCommand:
    """Tests for islands command."""

    @pytest.fixture
    def runner(self):
        """Create CLI runner."""
        return CliRunner()

    @pytest.fixture
    def chart_file(self, tmp_path):
        """Create sample chart file."""
        path = tmp_path / "chart.txt"
        path.write_text(CHART, encoding="utf-8")
        return path

    def test_islands(self, runner, chart_file):
        result = runner.invoke(islands, [str(chart_file)])

        assert result.exit_code == 0
        assert "Number of islands: 4" in result.output
        assert "Islands counted!" in result.output

    def test_islands_details(self, runner, chart_file):
        result = runner.invoke(islands, [str(chart_file), "--details"])

        assert result.exit_code == 0
        assert "island 4: 1 cells" in result.output

    def test_islands_custom_land(self, runner, tmp_path):
        path = tmp_path / "hash.txt"
        path.write_text("## #\n#  #\n", encoding="utf-8")
        result = runner.invoke(islands, [str(path), "--land", "#"])

        assert result.exit_code == 0
        assert "Number of islands: 2" in result.output

    def test_islands_invalid_land(self, runner, chart_file):
        result = runner.invoke(islands, [str(chart_file), "--land", "ab"])

        assert result.exit_code != 0
        assert "single character" in result.output

    def test_islands_nonexistent_file(self, runner):
        result = runner.invoke(islands, ["nonexistent.txt"])

        assert result.exit_code != 0
