import pytest

from markdowntool.config import hierarchy
from markdowntool.types import Line


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and project config files and MARKDOWNTOOL_* env out of tests."""
    monkeypatch.setattr(
        hierarchy, "_GLOBAL_CONFIG_PATH", tmp_path / "home" / ".markdowntool" / "config.yaml"
    )
    for key in hierarchy._ENV_KEYS:
        monkeypatch.delenv(hierarchy._ENV_PREFIX + key.upper(), raising=False)
    workdir = tmp_path / "work"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def make_lines():
    """Build a document from plain strings."""

    def _make(*contents: str) -> list[Line]:
        return [Line(content=c) for c in contents]

    return _make


@pytest.fixture
def sections_yaml(tmp_path):
    """Write a minimal section table and return its path."""
    content = """
sections:
  Setup: "Intro text."
  Usage: "How to use it."
"""
    path = tmp_path / "sections.yaml"
    path.write_text(content)
    return path


@pytest.fixture
def lesson_md(tmp_path):
    """Write a small lesson document and return its path."""
    content = "\n".join(
        [
            "# Lesson",
            "",
            "Some _emphasis_ here.",
            "",
            "### setup",
            "",
            "- install the_tool",
            "",
        ]
    )
    path = tmp_path / "lesson.md"
    path.write_text(content)
    return path
