"""Configuration management for wikigraph."""

import os
from pathlib import Path
from typing import Any

import yaml


DEFAULT_CONFIG = {
    "wiki_path": "~/personal-wiki",
    "extension": ".md",
    "max_depth": 2,
    "max_workers": None,
    "timeout": None,
}

_INT_ENV = {
    "WIKIGRAPH_MAX_DEPTH": "max_depth",
    "WIKIGRAPH_MAX_WORKERS": "max_workers",
}


def _find_config_file() -> Path | None:
    """Look for config.yaml in standard locations."""
    candidates = [
        Path.cwd() / "config" / "config.yaml",
        Path.cwd() / "config.yaml",
        Path.home() / ".wikigraph" / "config.yaml",
    ]
    for p in candidates:
        if p.exists():
            return p
    return None


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """Load configuration, merging defaults with file and env vars."""
    cfg = dict(DEFAULT_CONFIG)

    path = Path(config_path) if config_path else _find_config_file()
    if path and path.exists():
        with open(path) as f:
            file_cfg = yaml.safe_load(f) or {}
        if not isinstance(file_cfg, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        cfg.update(file_cfg)

    # Env overrides
    if wiki_path := os.environ.get("WIKIGRAPH_WIKI_PATH"):
        cfg["wiki_path"] = wiki_path
    for var, key in _INT_ENV.items():
        if value := os.environ.get(var):
            try:
                cfg[key] = int(value)
            except ValueError:
                raise ValueError(f"{var} must be an integer, got {value!r}") from None

    try:
        cfg["max_depth"] = int(cfg["max_depth"])
    except (TypeError, ValueError):
        raise ValueError(f"max_depth must be an integer, got {cfg['max_depth']!r}") from None
    if cfg["max_depth"] < 0:
        raise ValueError(f"max_depth must be non-negative, got {cfg['max_depth']}")
    if not str(cfg["extension"]).startswith("."):
        cfg["extension"] = "." + str(cfg["extension"])

    cfg["wiki_path"] = str(Path(cfg["wiki_path"]).expanduser().resolve())
    return cfg

