"""Transform: convert underscore emphasis to asterisks."""

from __future__ import annotations

from typing import Any

from markdowntool.pipeline.emphasis import normalize_emphasis
from markdowntool.pipeline.runner import register_transform
from markdowntool.types import Line


@register_transform("emphasis")
def correct_emphasis(lines: list[Line], **kwargs: Any) -> list[Line]:
    """Rewrite ``_`` as ``*`` outside code fences, inline code and URLs.

    Delegates to the emphasis pass.
    """
    return normalize_emphasis(lines)
