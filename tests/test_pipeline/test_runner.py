"""Tests for the transform registry and runner."""

import pytest

# Import to trigger registration
import markdowntool.transforms  # noqa: F401
from markdowntool.errors.exceptions import TransformError
from markdowntool.pipeline import runner
from markdowntool.pipeline.runner import (
    available_transforms,
    get_transform,
    register_transform,
    run_transforms,
)


def _contents(lines):
    return [line.content for line in lines]


class TestRegistry:
    def test_builtins_registered(self):
        assert "emphasis" in available_transforms()
        assert "sections" in available_transforms()

    def test_unknown_lookup(self):
        assert get_transform("nope") is None

    def test_register_decorator(self, monkeypatch):
        monkeypatch.setattr(runner, "_TRANSFORM_REGISTRY", dict(runner._TRANSFORM_REGISTRY))

        @register_transform("upper")
        def upper(lines, **kwargs):
            for line in lines:
                line.content = line.content.upper()
            return lines

        assert get_transform("upper") is upper


class TestRunTransforms:
    def test_emphasis_then_sections(self, make_lines):
        lines = make_lines("### Setup", "", "- use my_var")
        run_transforms(lines, ["emphasis", "sections"], defaults={"Setup": "Intro_text."})
        assert _contents(lines) == ["### Setup", "", "Intro_text.", "", "- use my*var"]

    def test_sections_then_emphasis(self, make_lines):
        lines = make_lines("### Setup", "", "- use my_var")
        run_transforms(lines, ["sections", "emphasis"], defaults={"Setup": "Intro_text."})
        assert _contents(lines) == ["### Setup", "", "Intro*text.", "", "- use my*var"]

    def test_returns_same_list(self, make_lines):
        lines = make_lines("a_b")
        assert run_transforms(lines, ["emphasis"]) is lines

    def test_no_defaults_skips_sections(self, make_lines):
        lines = make_lines("### Setup", "", "- a")
        run_transforms(lines, ["sections"])
        assert _contents(lines) == ["### Setup", "", "- a"]

    def test_unknown_step_raises(self, make_lines):
        with pytest.raises(TransformError) as exc_info:
            run_transforms(make_lines("a"), ["nope"])
        assert exc_info.value.step == "nope"

    def test_failure_wrapped(self, make_lines, monkeypatch):
        def boom(lines, **kwargs):
            raise RuntimeError("kaput")

        monkeypatch.setitem(runner._TRANSFORM_REGISTRY, "boom", boom)
        with pytest.raises(TransformError) as exc_info:
            run_transforms(make_lines("a"), ["boom"])
        assert exc_info.value.step == "boom"
        assert isinstance(exc_info.value.original, RuntimeError)
        assert "kaput" in str(exc_info.value)
