"""Transform: give known section headings their default description."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from markdowntool.pipeline.runner import register_transform
from markdowntool.pipeline.sections import normalize_sections
from markdowntool.types import Line


@register_transform("sections")
def default_sections(
    lines: list[Line],
    defaults: Mapping[str, str] | None = None,
    **kwargs: Any,
) -> list[Line]:
    """Insert or repair the description block under each known heading.

    ``defaults`` maps canonical section titles to description text. With no
    table the document passes through untouched.
    """
    if not defaults:
        return lines
    return normalize_sections(lines, defaults)
