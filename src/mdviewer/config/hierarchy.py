"""Configuration hierarchy: merges sources in priority order.

Precedence (later overrides earlier):
  1. Package defaults
  2. Global config   (~/.mdviewer/config.yaml)
  3. Project config   (./mdviewer.yaml)
  4. Environment variables (MDVIEWER_*)
  5. Runtime arguments
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from mdviewer.config.defaults import get_defaults
from mdviewer.config.schema import ViewerConfig
from mdviewer.errors.exceptions import ConfigError
from mdviewer.types import HighlightOptions

logger = logging.getLogger(__name__)

_GLOBAL_CONFIG_PATH = Path.home() / ".mdviewer" / "config.yaml"
_PROJECT_CONFIG_NAME = "mdviewer.yaml"

# Map of environment variables to config keys
_ENV_MAP: dict[str, str] = {
    "MDVIEWER_TITLE": "title",
    "MDVIEWER_STYLE": "style",
    "MDVIEWER_OVERALL_CLASS": "overall_class",
    "MDVIEWER_TEMPLATE_DIR": "template_dir",
    "MDVIEWER_LOG_LEVEL": "log_level",
    "MDVIEWER_MARKDOWN_EXTENSIONS": "markdown_extensions",
}

# Keys holding comma-separated lists when read from the environment
_LIST_KEYS = {"markdown_extensions", "preprocessing"}


def load_config_hierarchy(**runtime_overrides: Any) -> dict[str, Any]:
    """Load and merge configuration from all sources.

    ``highlight`` mappings merge key by key across layers. A flat
    ``overall_class`` counts as ``highlight.overall_class`` of its own layer.

    Returns a merged dict with the final resolved values.
    """
    config = get_defaults()

    # Layer 2: Global config
    global_cfg = _load_yaml_config(_GLOBAL_CONFIG_PATH)
    if global_cfg:
        _merge_layer(config, global_cfg)

    # Layer 3: Project config (search from cwd upward)
    project_path = _find_project_config()
    if project_path:
        project_cfg = _load_yaml_config(project_path)
        if project_cfg:
            _merge_layer(config, project_cfg)

    # Layer 4: Environment variables
    _merge_layer(config, _load_env_vars())

    # Layer 5: Runtime arguments, only when explicitly set
    _merge_layer(config, {k: v for k, v in runtime_overrides.items() if v is not None})

    return config


def load_viewer_config(**runtime_overrides: Any) -> ViewerConfig:
    """Resolve the hierarchy into a validated ViewerConfig."""
    return build_viewer_config(load_config_hierarchy(**runtime_overrides))


def build_viewer_config(raw: dict[str, Any]) -> ViewerConfig:
    """Validate a flat config mapping.

    A flat ``overall_class`` key overrides ``highlight.overall_class``.
    """
    raw = dict(raw)
    highlight = dict(raw.pop("highlight", None) or {})
    overall_class = raw.pop("overall_class", None)
    if overall_class:
        highlight["overall_class"] = overall_class

    fields = {k: v for k, v in raw.items() if k in ViewerConfig.model_fields}
    unknown = sorted(set(raw) - set(fields))
    if unknown:
        logger.debug("Ignoring unknown config keys: %s", ", ".join(unknown))

    try:
        return ViewerConfig(highlight=HighlightOptions(**highlight), **fields)
    except ValidationError as e:
        raise ConfigError(f"Invalid viewer configuration: {e}") from e


def _load_yaml_config(path: Path) -> dict[str, Any] | None:
    """Load a YAML config file if it exists."""
    if not path.exists() or not path.is_file():
        return None
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if isinstance(data, dict):
            return data
        logger.warning("Config file %s is not a mapping, ignoring", path)
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load config %s: %s", path, e)
    return None


def _merge_layer(config: dict[str, Any], layer: dict[str, Any]) -> None:
    layer = dict(layer)
    overall_class = layer.pop("overall_class", None)
    highlight = layer.pop("highlight", None)
    config.update(layer)

    if highlight is None and not overall_class:
        return
    merged = dict(config.get("highlight") or {})
    if isinstance(highlight, dict):
        merged.update(highlight)
    elif highlight is not None:
        logger.warning("Ignoring non-mapping 'highlight' setting: %r", highlight)
    if overall_class:
        merged["overall_class"] = overall_class
    config["highlight"] = merged


def _find_project_config() -> Path | None:
    """Search for mdviewer.yaml from cwd upward."""
    cwd = Path.cwd()
    for parent in [cwd, *cwd.parents]:
        candidate = parent / _PROJECT_CONFIG_NAME
        if candidate.exists():
            return candidate
    return None


def _load_env_vars() -> dict[str, Any]:
    """Read MDVIEWER_* environment variables."""
    result: dict[str, Any] = {}
    for env_key, config_key in _ENV_MAP.items():
        value = os.environ.get(env_key)
        if value is None:
            continue
        result[config_key] = _coerce_env_value(config_key, value)
    return result


def _coerce_env_value(key: str, value: str) -> Any:
    """Coerce an environment variable string to the appropriate type."""
    if key in _LIST_KEYS:
        return [item.strip() for item in value.split(",") if item.strip()]
    if key == "log_level":
        return value.upper()
    return value
