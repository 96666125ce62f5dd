"""Line store — load, save, and splice documents as lists of Line records."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from markdowntool.errors.exceptions import DocumentNotFoundError
from markdowntool.types import Line

logger = logging.getLogger(__name__)


def lines_from_text(text: str) -> list[Line]:
    """Split markdown text into one Line per ``\\n``-separated line.

    An empty string gives an empty document. A trailing newline gives a
    final blank line, so ``lines_to_text(lines_from_text(t)) == t``.
    """
    if not text:
        return []
    return [Line(content=part) for part in text.split("\n")]


def lines_to_text(lines: list[Line]) -> str:
    return "\n".join(line.content for line in lines)


def insert_blank(lines: list[Line], index: int, count: int = 1) -> list[Line]:
    """Insert ``count`` blank lines at ``index`` and return them."""
    created = [Line() for _ in range(count)]
    lines[index:index] = created
    return created


def ensure_index(lines: list[Line], index: int) -> list[Line]:
    """Append blank lines until ``lines[index]`` exists and return them."""
    missing = index + 1 - len(lines)
    if missing <= 0:
        return []
    return insert_blank(lines, len(lines), missing)


def read_document(path: str | Path, encoding: str = "utf-8") -> list[Line]:
    """Read a markdown file into a list of Line records."""
    path = Path(path)
    if not path.exists() or not path.is_file():
        raise DocumentNotFoundError(f"Markdown document not found: {path}", path=path)

    text = path.read_text(encoding=encoding)
    logger.debug("Read %s (%d chars)", path, len(text))
    return lines_from_text(text)


def write_document(path: str | Path, lines: list[Line], encoding: str = "utf-8") -> Path:
    """Write Line records back to a markdown file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(lines_to_text(lines), encoding=encoding)
    logger.debug("Wrote %s (%d lines)", path, len(lines))
    return path


class LineCursor:
    """Forward cursor over a document that may grow while it is walked.

    The loop bound is re-read from ``len(lines)`` on every step. Lines
    created through the cursor are remembered and never yielded, so a
    splice never causes a freshly inserted line to be matched again.
    Insertions at or before the current position are visible on the next
    step exactly as they would be in a plain index loop.
    """

    def __init__(self, lines: list[Line]) -> None:
        self.lines = lines
        self._inserted: set[int] = set()

    def __iter__(self) -> Iterator[tuple[int, Line]]:
        index = 0
        while index < len(self.lines):
            line = self.lines[index]
            if id(line) not in self._inserted:
                yield index, line
            index += 1

    def insert_blank(self, index: int, count: int = 1) -> None:
        self._track(insert_blank(self.lines, index, count))

    def ensure_index(self, index: int) -> None:
        self._track(ensure_index(self.lines, index))

    def _track(self, created: list[Line]) -> None:
        self._inserted.update(id(line) for line in created)
