"""Custom exception hierarchy for markdowntool."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class MarkdownToolError(Exception):
    """Base exception for all markdowntool errors."""

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message


class ConfigError(MarkdownToolError):
    """Invalid configuration.

    Examples: section description that is not a string, unknown transform
    name in ``steps``, malformed sections file.
    """

    def __init__(self, message: str = "", key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class DocumentNotFoundError(MarkdownToolError):
    """The markdown document to normalize does not exist."""

    def __init__(self, message: str = "", path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class TransformError(MarkdownToolError):
    """A transform is unknown or raised while running."""

    def __init__(
        self,
        message: str = "",
        step: str = "",
        original: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.step = step
        self.original = original
