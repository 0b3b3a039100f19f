"""Tests for configuration loading."""

import tempfile
from pathlib import Path

import pytest

from wikigraph.config import DEFAULT_CONFIG, load_config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for var in ("WIKIGRAPH_WIKI_PATH", "WIKIGRAPH_MAX_DEPTH", "WIKIGRAPH_MAX_WORKERS"):
        monkeypatch.delenv(var, raising=False)


def _write_config(tmpdir: str, text: str) -> Path:
    path = Path(tmpdir) / "config.yaml"
    path.write_text(text)
    return path


def test_defaults_with_empty_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        cfg = load_config(_write_config(tmpdir, ""))
        assert cfg["extension"] == ".md"
        assert cfg["max_depth"] == DEFAULT_CONFIG["max_depth"]
        assert cfg["wiki_path"] == str(Path("~/personal-wiki").expanduser().resolve())


def test_file_overrides():
    with tempfile.TemporaryDirectory() as tmpdir:
        cfg = load_config(_write_config(tmpdir, f"wiki_path: {tmpdir}\nmax_depth: 4\nextension: txt\n"))
        assert cfg["wiki_path"] == str(Path(tmpdir).resolve())
        assert cfg["max_depth"] == 4
        assert cfg["extension"] == ".txt"


def test_env_overrides(monkeypatch):
    with tempfile.TemporaryDirectory() as tmpdir:
        monkeypatch.setenv("WIKIGRAPH_WIKI_PATH", tmpdir)
        monkeypatch.setenv("WIKIGRAPH_MAX_DEPTH", "5")
        monkeypatch.setenv("WIKIGRAPH_MAX_WORKERS", "3")
        cfg = load_config(_write_config(tmpdir, "max_depth: 1\n"))
        assert cfg["wiki_path"] == str(Path(tmpdir).resolve())
        assert cfg["max_depth"] == 5
        assert cfg["max_workers"] == 3


def test_bad_env_value(monkeypatch):
    with tempfile.TemporaryDirectory() as tmpdir:
        monkeypatch.setenv("WIKIGRAPH_MAX_DEPTH", "deep")
        with pytest.raises(ValueError):
            load_config(_write_config(tmpdir, ""))


def test_negative_depth():
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(ValueError):
            load_config(_write_config(tmpdir, "max_depth: -1\n"))


def test_non_mapping_file_rejected():
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(ValueError):
            load_config(_write_config(tmpdir, "- just\n- a list\n"))
