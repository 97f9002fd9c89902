"""YAML config loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from mdviewer.config.hierarchy import build_viewer_config
from mdviewer.config.schema import ViewerConfig


def load_yaml(path: str | Path) -> dict[str, Any]:
    """Load any YAML file safely."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f)

    if not isinstance(raw, dict):
        raise ValueError(f"Expected YAML mapping, got {type(raw).__name__} in {path}")

    return raw


def load_viewer_section(path: str | Path) -> dict[str, Any]:
    """Return the raw ``viewer:`` mapping of a viewer YAML file."""
    path = Path(path)
    raw = load_yaml(path)

    if "viewer" not in raw or not isinstance(raw["viewer"], dict):
        raise ValueError(f"Invalid viewer YAML: missing top-level 'viewer' key in {path}")

    return raw["viewer"]


def load_config_yaml(path: str | Path) -> ViewerConfig:
    """Load a viewer YAML file and return a validated ViewerConfig."""
    return build_viewer_config(load_viewer_section(path))
