"""Configuration hierarchy — merges sources in priority order.

Precedence (later overrides earlier):
  1. Package defaults
  2. Global config   (~/.markdowntool/config.yaml)
  3. Project config   (./markdowntool.yaml, nearest to cwd)
  4. Environment variables (MARKDOWNTOOL_*)
  5. Runtime arguments

Scalar keys are replaced by later layers. The ``sections`` table is merged
title by title, so a project file can add or redefine one section without
dropping the titles a global file declares.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from markdowntool.config.defaults import get_defaults
from markdowntool.config.loader import load_sections_yaml
from markdowntool.config.schema import ToolConfig
from markdowntool.errors.exceptions import ConfigError

logger = logging.getLogger(__name__)

_GLOBAL_CONFIG_PATH = Path.home() / ".markdowntool" / "config.yaml"
_PROJECT_CONFIG_NAME = "markdowntool.yaml"

_ENV_PREFIX = "MARKDOWNTOOL_"
_ENV_KEYS = ("steps", "encoding", "glob", "sections_file", "log_level")

# Keys given as comma-separated lists in the environment
_LIST_KEYS = {"steps"}


def load_config_hierarchy(**runtime_overrides: Any) -> dict[str, Any]:
    """Load and merge configuration from all sources into one dict."""
    config = get_defaults()
    for source, layer in _iter_layers(runtime_overrides):
        logger.debug("Config layer %s: %s", source, sorted(layer))
        _merge_layer(config, layer)
    return config


def resolve_config(**runtime_overrides: Any) -> ToolConfig:
    """Merge all sources, validate, and fold the sections file into ``sections``."""
    merged = load_config_hierarchy(**runtime_overrides)
    try:
        config = ToolConfig(**merged)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e

    if config.sections_file:
        sections = dict(config.sections)
        sections.update(load_sections_yaml(config.sections_file))
        config.sections = sections

    return config


def _iter_layers(runtime_overrides: dict[str, Any]) -> Iterator[tuple[str, dict[str, Any]]]:
    global_cfg = _load_yaml_config(_GLOBAL_CONFIG_PATH)
    if global_cfg:
        yield str(_GLOBAL_CONFIG_PATH), global_cfg

    project_path = _find_project_config()
    if project_path:
        project_cfg = _load_yaml_config(project_path)
        if project_cfg:
            yield str(project_path), project_cfg

    env_cfg = _load_env_vars()
    if env_cfg:
        yield "environment", env_cfg

    # None means "not given" for runtime arguments
    runtime = {key: value for key, value in runtime_overrides.items() if value is not None}
    if runtime:
        yield "runtime", runtime


def _merge_layer(config: dict[str, Any], layer: dict[str, Any]) -> None:
    for key, value in layer.items():
        current = config.get(key)
        if key == "sections" and isinstance(value, dict) and isinstance(current, dict):
            config[key] = {**current, **value}
        else:
            config[key] = value


def _load_yaml_config(path: Path) -> dict[str, Any] | None:
    """Load an optional YAML config file; unreadable files are logged and skipped."""
    if not path.is_file():
        return None
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, yaml.YAMLError) as e:
        logger.warning("Failed to load config %s: %s", path, e)
        return None
    if not isinstance(data, dict):
        logger.warning("Config file %s is not a mapping, ignoring", path)
        return None
    return data


def _find_project_config() -> Path | None:
    cwd = Path.cwd()
    candidates = (directory / _PROJECT_CONFIG_NAME for directory in (cwd, *cwd.parents))
    return next((path for path in candidates if path.exists()), None)


def _load_env_vars() -> dict[str, Any]:
    """Read MARKDOWNTOOL_* variables; empty values count as unset."""
    result: dict[str, Any] = {}
    for key in _ENV_KEYS:
        value = os.environ.get(_ENV_PREFIX + key.upper(), "").strip()
        if value:
            result[key] = _coerce_env_value(key, value)
    return result


def _coerce_env_value(key: str, value: str) -> Any:
    if key in _LIST_KEYS:
        return [item.strip() for item in value.split(",") if item.strip()]
    return value
