"""Tests for the command line interface."""

import json
import os
import tempfile
from pathlib import Path

from click.testing import CliRunner

from wikigraph.cli import cli


def _setup(tmpdir: str) -> str:
    wiki = Path(tmpdir) / "wiki"
    wiki.mkdir()
    (wiki / "A.md").write_text("[x](B.md)")
    (wiki / "B.md").write_text("[y](C.md)")
    (wiki / "C.md").write_text("")
    config = Path(tmpdir) / "config.yaml"
    config.write_text(f"wiki_path: {wiki}\nmax_depth: 2\n")
    return str(config)


def test_graph_json():
    with tempfile.TemporaryDirectory() as tmpdir:
        config = _setup(tmpdir)
        result = CliRunner().invoke(cli, ["-c", config, "graph", "A.md", "-f", "json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["start_found"] is True
        pairs = {(os.path.basename(e["source"]), os.path.basename(e["target"])) for e in data["edges"]}
        assert pairs == {("A.md", "B.md"), ("B.md", "C.md")}


def test_graph_dot():
    with tempfile.TemporaryDirectory() as tmpdir:
        config = _setup(tmpdir)
        result = CliRunner().invoke(cli, ["-c", config, "graph", "A.md", "--format", "dot"])
        assert result.exit_code == 0
        assert '"A.md" -> "B.md";' in result.output


def test_graph_depth_zero():
    with tempfile.TemporaryDirectory() as tmpdir:
        config = _setup(tmpdir)
        result = CliRunner().invoke(cli, ["-c", config, "graph", "A.md", "-d", "0"])
        assert result.exit_code == 0
        assert "No links found" in result.output


def test_graph_missing_start():
    with tempfile.TemporaryDirectory() as tmpdir:
        config = _setup(tmpdir)
        result = CliRunner().invoke(cli, ["-c", config, "graph", "Nope.md"])
        assert result.exit_code == 1
        assert "not found" in result.output


def test_graph_negative_depth():
    with tempfile.TemporaryDirectory() as tmpdir:
        config = _setup(tmpdir)
        result = CliRunner().invoke(cli, ["-c", config, "graph", "A.md", "--depth=-1"])
        assert result.exit_code == 1


def test_distances_summary():
    with tempfile.TemporaryDirectory() as tmpdir:
        config = _setup(tmpdir)
        result = CliRunner().invoke(cli, ["-c", config, "distances", "A.md"])
        assert result.exit_code == 0
        assert "3 documents discovered, 1 unreachable" in result.output


def test_links_command():
    with tempfile.TemporaryDirectory() as tmpdir:
        config = _setup(tmpdir)
        result = CliRunner().invoke(cli, ["-c", config, "links", "B.md"])
        assert result.exit_code == 0
        assert "Forward (1)" in result.output
        assert "Backward (1)" in result.output
