"""Section normalization — canonical headings followed by a description block.

For every ``title -> description`` entry, each ``### title`` heading is
made to read::

    ### title

    description

Headings that match case-insensitively are renamed to the canonical
casing, and the legacy ``### Learning outcomes`` heading becomes
``### Lesson overview``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from markdowntool.document import LineCursor
from markdowntool.types import Line

logger = logging.getLogger(__name__)

HEADING_PREFIX = "### "
LEGACY_OVERVIEW_HEADING = "### learning outcomes"
OVERVIEW_HEADING = "### Lesson overview"

# A description slot that starts with one of these already holds a list.
_LIST_MARKERS = ("-", "1")


def normalize_sections(lines: list[Line], defaults: Mapping[str, str]) -> list[Line]:
    """Ensure every known section heading carries its description block.

    Entries are processed in ``defaults`` order, each one re-scanning the
    current document. Mutates ``lines`` in place and returns the same list.
    """
    for title, description in defaults.items():
        _normalize_section(lines, title, description)
    return lines


def _normalize_section(lines: list[Line], title: str, description: str) -> None:
    heading = HEADING_PREFIX + title
    needle = heading.lower()
    cursor = LineCursor(lines)

    for index, line in cursor:
        if LEGACY_OVERVIEW_HEADING in line.content.lower():
            _rename(line, OVERVIEW_HEADING)
        if needle in line.content.lower():
            _rename(line, heading)
        if line.content == heading:
            _ensure_block(cursor, index, heading, description)


def _rename(line: Line, heading: str) -> None:
    if line.content != heading:
        logger.debug("WAS: %r NOW: %r", line.content, heading)
        line.content = heading


def _ensure_block(cursor: LineCursor, index: int, heading: str, description: str) -> None:
    """Make ``lines[index + 2]`` the description, followed by a blank line."""
    lines = cursor.lines
    cursor.ensure_index(index + 2)

    # List content right under the heading: the blank/description pair was
    # never written, so open two lines above and rebuild the block.
    if lines[index + 2].content.strip().startswith(_LIST_MARKERS):
        cursor.insert_blank(index, 2)
        lines[index + 2].content = description
        lines[index].content = heading
        logger.debug("Inserted description block under %r at line %d", heading, index)

    if lines[index + 2].content != description:
        lines[index + 2].content = description
        cursor.insert_blank(index + 3)
        logger.debug("Set description under %r at line %d", heading, index + 2)
