"""Package-level default configuration values."""

from __future__ import annotations

from typing import Any

# Transforms run in this order unless configured otherwise
DEFAULT_STEPS = ["emphasis", "sections"]

# Document IO
DEFAULT_ENCODING = "utf-8"
DEFAULT_GLOB = "*.md"

# Section table: inline entries and an optional YAML file layered on top
DEFAULT_SECTIONS: dict[str, str] = {}
DEFAULT_SECTIONS_FILE = None

# Log level
DEFAULT_LOG_LEVEL = "WARNING"


def get_defaults() -> dict[str, Any]:
    """Return all defaults as a flat dictionary for merging."""
    return {
        "steps": list(DEFAULT_STEPS),
        "encoding": DEFAULT_ENCODING,
        "glob": DEFAULT_GLOB,
        "sections": dict(DEFAULT_SECTIONS),
        "sections_file": DEFAULT_SECTIONS_FILE,
        "log_level": DEFAULT_LOG_LEVEL,
    }
