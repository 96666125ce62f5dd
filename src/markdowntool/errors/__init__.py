"""Error handling — exception hierarchy for markdowntool."""

from markdowntool.errors.exceptions import (
    ConfigError,
    DocumentNotFoundError,
    MarkdownToolError,
    TransformError,
)

__all__ = [
    "MarkdownToolError",
    "ConfigError",
    "DocumentNotFoundError",
    "TransformError",
]
