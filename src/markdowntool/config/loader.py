"""YAML config loading and validation."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from markdowntool.errors.exceptions import ConfigError


def load_yaml(path: str | Path) -> dict[str, Any]:
    """Load any YAML file safely."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read YAML file {path}: {e}", key="sections") from e

    if not isinstance(raw, dict):
        raise ValueError(f"Expected YAML mapping, got {type(raw).__name__} in {path}")

    return raw


def load_sections_yaml(path: str | Path) -> dict[str, str]:
    """Load a section table: a top-level ``sections`` mapping of title to description.

    File order is preserved; it decides the order sections are normalized.
    """
    path = Path(path)
    raw = load_yaml(path)

    if "sections" not in raw:
        raise ConfigError(
            f"Invalid sections YAML: missing top-level 'sections' key in {path}", key="sections"
        )
    return validate_sections(raw["sections"], source=str(path))


def validate_sections(sections: Any, source: str = "config") -> dict[str, str]:
    """Check that a section table maps string titles to string descriptions."""
    if sections is None:
        return {}
    if not isinstance(sections, dict):
        raise ConfigError(
            f"'sections' must be a mapping in {source}, got {type(sections).__name__}",
            key="sections",
        )

    result: dict[str, str] = {}
    for title, description in sections.items():
        if not isinstance(title, str) or not title.strip():
            raise ConfigError(f"Section title must be a non-empty string in {source}", key="sections")
        if not isinstance(description, str):
            raise ConfigError(
                f"Description for section '{title}' must be a string in {source}",
                key=f"sections.{title}",
            )
        # Block scalars (``|``) carry a trailing newline the line store would split on
        result[title] = description.rstrip("\n")
    return result
