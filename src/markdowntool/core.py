"""Top-level entry point: MarkdownTool."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import markdowntool.transforms  # noqa: F401
from markdowntool.config.hierarchy import resolve_config
from markdowntool.config.schema import ToolConfig
from markdowntool.document import (
    lines_from_text,
    lines_to_text,
    read_document,
    write_document,
)
from markdowntool.pipeline.runner import run_transforms
from markdowntool.types import Line

logger = logging.getLogger(__name__)


class MarkdownTool:
    """Applies the configured transforms to lines, text, or files."""

    def __init__(self, config: ToolConfig | None = None, **overrides: Any) -> None:
        self._config = config or resolve_config(**overrides)

    @property
    def config(self) -> ToolConfig:
        return self._config

    @property
    def sections(self) -> Mapping[str, str]:
        return self._config.sections

    def normalize_lines(self, lines: list[Line]) -> list[Line]:
        """Run every configured step over ``lines`` in place."""
        return run_transforms(lines, self._config.steps, defaults=self._config.sections)

    def normalize_text(self, text: str) -> str:
        return lines_to_text(self.normalize_lines(lines_from_text(text)))

    def normalize_file(self, path: str | Path, output: str | Path | None = None) -> Path:
        """Normalize a markdown file.

        Writes to ``output`` when given, otherwise rewrites ``path``.
        Returns the path written.
        """
        path = Path(path)
        lines = read_document(path, encoding=self._config.encoding)
        self.normalize_lines(lines)

        target = Path(output) if output else path
        write_document(target, lines, encoding=self._config.encoding)
        logger.info("Normalized %s -> %s", path, target)
        return target
