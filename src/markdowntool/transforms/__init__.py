"""Built-in document transforms — auto-registered on import."""

from markdowntool.transforms.correct_emphasis import correct_emphasis
from markdowntool.transforms.default_sections import default_sections

__all__ = [
    "correct_emphasis",
    "default_sections",
]
