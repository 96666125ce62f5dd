"""Emphasis normalization — rewrite ``_`` emphasis markers as ``*``.

Only lines outside fenced code blocks, without inline code, and without a
URL are rewritten. URL detection is the bare substring ``http``, which also
excludes prose that merely mentions http.
"""

from __future__ import annotations

import logging
from enum import StrEnum

from markdowntool.types import Line

logger = logging.getLogger(__name__)

FENCE_DELIMITER = "```"
INLINE_CODE_MARKER = "`"
URL_MARKER = "http"


class FenceState(StrEnum):
    OUTSIDE = "outside"
    INSIDE = "inside"


def fence_transition(state: FenceState, content: str) -> tuple[FenceState, bool]:
    """Advance the fence state machine by one line.

    Returns the state after ``content`` and whether the line is eligible
    for rewriting. Eligibility is judged on the state before this line's
    own delimiter is seen. A delimiter line always leaves the machine
    INSIDE, including one that closes a block.
    """
    eligible = (
        state is FenceState.OUTSIDE
        and INLINE_CODE_MARKER not in content
        and URL_MARKER not in content
    )

    if state is FenceState.INSIDE and FENCE_DELIMITER in content:
        state = FenceState.OUTSIDE
    if FENCE_DELIMITER in content:
        state = FenceState.INSIDE

    return state, eligible


def eligible_lines(lines: list[Line]) -> list[Line]:
    """Collect the lines emphasis normalization may rewrite, in order."""
    state = FenceState.OUTSIDE
    result: list[Line] = []
    for line in lines:
        state, eligible = fence_transition(state, line.content)
        if eligible:
            result.append(line)
    return result


def normalize_emphasis(lines: list[Line]) -> list[Line]:
    """Replace every underscore with an asterisk on eligible lines.

    Mutates ``lines`` in place and returns the same list.
    """
    rewritten = 0
    for line in eligible_lines(lines):
        if "_" in line.content:
            line.content = line.content.replace("_", "*")
            rewritten += 1

    logger.debug("Emphasis: rewrote %d of %d lines", rewritten, len(lines))
    return lines
