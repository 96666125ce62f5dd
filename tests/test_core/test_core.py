"""Tests for the MarkdownTool entry point."""

import pytest

from markdowntool import Line, MarkdownTool
from markdowntool.config.schema import ToolConfig
from markdowntool.errors.exceptions import DocumentNotFoundError

EXPECTED_LESSON = "\n".join(
    [
        "# Lesson",
        "",
        "Some *emphasis* here.",
        "",
        "### Setup",
        "",
        "Intro text.",
        "",
        "- install the*tool",
        "",
    ]
)


class TestMarkdownTool:
    def test_default_config(self):
        tool = MarkdownTool()
        assert tool.config.steps == ["emphasis", "sections"]
        assert tool.sections == {}

    def test_explicit_config(self):
        config = ToolConfig(steps=["emphasis"], sections={"Setup": "x"})
        tool = MarkdownTool(config=config)
        assert tool.config is config
        assert tool.sections == {"Setup": "x"}

    def test_overrides(self, sections_yaml):
        tool = MarkdownTool(sections_file=str(sections_yaml))
        assert list(tool.sections) == ["Setup", "Usage"]

    def test_normalize_lines_in_place(self):
        tool = MarkdownTool(sections={"Setup": "Intro."})
        lines = [Line(content="### setup"), Line(), Line(content="- a_b")]
        assert tool.normalize_lines(lines) is lines
        assert [line.content for line in lines] == ["### Setup", "", "Intro.", "", "- a*b"]

    def test_normalize_text(self, lesson_md, sections_yaml):
        tool = MarkdownTool(sections_file=str(sections_yaml))
        assert tool.normalize_text(lesson_md.read_text()) == EXPECTED_LESSON

    def test_normalize_text_empty(self):
        assert MarkdownTool().normalize_text("") == ""

    def test_only_configured_steps_run(self):
        tool = MarkdownTool(steps=["sections"], sections={"Setup": "Intro."})
        assert tool.normalize_text("### Setup\n\n- a_b") == "### Setup\n\nIntro.\n\n- a_b"


class TestNormalizeFile:
    def test_in_place(self, lesson_md, sections_yaml):
        tool = MarkdownTool(sections_file=str(sections_yaml))
        assert tool.normalize_file(lesson_md) == lesson_md
        assert lesson_md.read_text() == EXPECTED_LESSON

    def test_to_output(self, lesson_md, sections_yaml, tmp_path):
        original = lesson_md.read_text()
        out = tmp_path / "out" / "lesson.md"
        tool = MarkdownTool(sections_file=str(sections_yaml))
        assert tool.normalize_file(lesson_md, output=out) == out
        assert out.read_text() == EXPECTED_LESSON
        assert lesson_md.read_text() == original

    def test_missing(self, tmp_path):
        with pytest.raises(DocumentNotFoundError):
            MarkdownTool().normalize_file(tmp_path / "missing.md")
