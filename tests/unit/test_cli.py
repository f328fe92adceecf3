"""Unit tests for the command-line interface."""

import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from polyhive import __version__
from polyhive.cli.app import EXIT_MALFORMED, app

runner = CliRunner()

L_SHAPE = [[0, 0], [4, 0], [4, 2], [2, 2], [2, 4], [0, 4]]
BOWTIE = [[0, 0], [2, 2], [2, 0], [0, 2]]


@pytest.fixture(autouse=True)
def restore_root_handlers():
    """Drop the handlers each invocation adds to the root logger."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()


@pytest.fixture
def l_shape_file(tmp_path: Path) -> Path:
    path = tmp_path / "ell.json"
    path.write_text(json.dumps(L_SHAPE), encoding="utf-8")
    return path


class TestAnalyzeCommand:
    """Tests for the analyze command."""

    def test_version(self):
        """Test --version prints and exits cleanly."""
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_analyze_writes_default_output(self, l_shape_file):
        """Test a successful run writes {name}-analysis.json."""
        result = runner.invoke(app, [str(l_shape_file)])
        assert result.exit_code == 0, result.output

        out = l_shape_file.parent / "ell-analysis.json"
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["centroid"]["weight"] == pytest.approx(12.0)
        assert "Complete" in result.output

    def test_analyze_explicit_output(self, l_shape_file, tmp_path):
        """Test --output picks the destination."""
        out = tmp_path / "result.json"
        result = runner.invoke(app, [str(l_shape_file), "-o", str(out), "--quiet"])
        assert result.exit_code == 0, result.output
        assert out.exists()

    def test_quiet_prints_nothing_on_success(self, l_shape_file):
        """Test --quiet suppresses the stage output."""
        result = runner.invoke(app, [str(l_shape_file), "-q"])
        assert result.exit_code == 0
        assert "Polyhive" not in result.output

    def test_verbose_lists_pieces(self, l_shape_file):
        """Test --verbose shows the vertices of every piece."""
        result = runner.invoke(app, [str(l_shape_file), "-v"])
        assert result.exit_code == 0, result.output
        assert "2 convex pieces" in result.output
        assert "(2, 2)" in result.output

    def test_steps(self, l_shape_file):
        """Test --steps prints and records decomposer decisions."""
        result = runner.invoke(app, [str(l_shape_file), "--steps"])
        assert result.exit_code == 0, result.output
        assert "concavity" in result.output

        data = json.loads((l_shape_file.parent / "ell-analysis.json").read_text(encoding="utf-8"))
        assert any(step["kind"] == "chord_accepted" for step in data["steps"])

    def test_keep_colinear(self, tmp_path):
        """Test --keep-colinear leaves straight vertices in place."""
        path = tmp_path / "square.json"
        path.write_text(json.dumps([[0, 0], [2, 0], [4, 0], [4, 4], [0, 4]]), encoding="utf-8")
        result = runner.invoke(app, [str(path), "--keep-colinear"])
        assert result.exit_code == 0, result.output

        data = json.loads((tmp_path / "square-analysis.json").read_text(encoding="utf-8"))
        assert data["removed_points"] == []
        assert len(data["perimeter"]) == 5
        assert data["centroid"]["weight"] == pytest.approx(16.0)

    def test_malformed_polygon(self, tmp_path):
        """Test a self-crossing polygon exits with its own code."""
        path = tmp_path / "bowtie.json"
        path.write_text(json.dumps(BOWTIE), encoding="utf-8")
        result = runner.invoke(app, [str(path)])
        assert result.exit_code == EXIT_MALFORMED
        assert "Malformed polygon" in result.output

        data = json.loads((tmp_path / "bowtie-analysis.json").read_text(encoding="utf-8"))
        assert data["malformed"] is True

    def test_missing_file(self, tmp_path):
        """Test a path that does not exist."""
        result = runner.invoke(app, [str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_directory_input(self, tmp_path):
        """Test a directory instead of a file."""
        result = runner.invoke(app, [str(tmp_path)])
        assert result.exit_code == 1
        assert "not a file" in result.output

    def test_invalid_polygon_file(self, tmp_path):
        """Test a file that is not a point list."""
        path = tmp_path / "bad.json"
        path.write_text('{"points": "square"}', encoding="utf-8")
        result = runner.invoke(app, [str(path)])
        assert result.exit_code == 1
        assert "Could not load polygon" in result.output

    def test_too_few_points(self, tmp_path):
        """Test a polygon that cannot enclose area."""
        path = tmp_path / "line.json"
        path.write_text(json.dumps([[0, 0], [1, 1]]), encoding="utf-8")
        result = runner.invoke(app, [str(path)])
        assert result.exit_code == 1
        assert "at least 3" in result.output

    def test_verbose_and_quiet(self, l_shape_file):
        """Test mutually exclusive output modes."""
        result = runner.invoke(app, [str(l_shape_file), "-v", "-q"])
        assert result.exit_code == 1

    def test_invalid_log_level(self, l_shape_file):
        """Test an unknown log level."""
        result = runner.invoke(app, [str(l_shape_file), "--log-level", "LOUD"])
        assert result.exit_code == 1
        assert "Invalid log level" in result.output

    def test_log_file(self, l_shape_file, tmp_path):
        """Test --log-file receives structured records."""
        log_path = tmp_path / "run.log"
        result = runner.invoke(app, [str(l_shape_file), "-q", "--log-file", str(log_path)])
        assert result.exit_code == 0, result.output
        assert "Convex decomposition" in log_path.read_text(encoding="utf-8")
