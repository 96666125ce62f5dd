"""Pydantic model for the resolved tool configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from markdowntool.config.defaults import (
    DEFAULT_ENCODING,
    DEFAULT_GLOB,
    DEFAULT_LOG_LEVEL,
    DEFAULT_STEPS,
)
from markdowntool.config.loader import validate_sections

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class ToolConfig(BaseModel):
    steps: list[str] = Field(default_factory=lambda: list(DEFAULT_STEPS))
    encoding: str = DEFAULT_ENCODING
    glob: str = DEFAULT_GLOB
    sections: dict[str, str] = Field(default_factory=dict)
    sections_file: Path | None = None
    log_level: str = DEFAULT_LOG_LEVEL
    model_config = {"extra": "ignore"}

    @field_validator("steps", mode="before")
    @classmethod
    def split_steps(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [s.strip() for s in value.split(",") if s.strip()]
        return value

    @field_validator("steps")
    @classmethod
    def known_steps(cls, value: list[str]) -> list[str]:
        import markdowntool.transforms  # noqa: F401
        from markdowntool.pipeline.runner import available_transforms

        known = available_transforms()
        unknown = [s for s in value if s not in known]
        if unknown:
            raise ValueError(f"unknown transform(s) {unknown}; available: {known}")
        return value

    @field_validator("sections", mode="before")
    @classmethod
    def check_sections(cls, value: Any) -> dict[str, str]:
        return validate_sections(value)

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}, got {value!r}")
        return level
