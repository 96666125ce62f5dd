"""markdowntool — line-oriented markdown normalization."""

from markdowntool.core import MarkdownTool
from markdowntool.pipeline.emphasis import normalize_emphasis
from markdowntool.pipeline.sections import normalize_sections
from markdowntool.types import Line

__version__ = "0.1.0"

__all__ = [
    "Line",
    "MarkdownTool",
    "normalize_emphasis",
    "normalize_sections",
]
