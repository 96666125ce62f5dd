"""Shared Pydantic models for markdowntool."""

from __future__ import annotations

from pydantic import BaseModel


class Line(BaseModel):
    """One line of a markdown document.

    A line has no identity of its own: its meaning comes from its position
    in the containing list. ``content`` is mutated in place by the
    normalizers.
    """

    content: str = ""
    model_config = {"validate_assignment": True}
