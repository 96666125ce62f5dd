"""Transform registry and runner — applies named passes to one document."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from markdowntool.errors.exceptions import MarkdownToolError, TransformError
from markdowntool.types import Line

logger = logging.getLogger(__name__)

TransformFn = Callable[..., list[Line]]

# Registry of document transforms
_TRANSFORM_REGISTRY: dict[str, TransformFn] = {}


def register_transform(name: str) -> Callable:
    """Decorator to register a document transform.

    A transform takes the line list plus keyword parameters and returns the
    same (mutated) list.
    """

    def decorator(fn: TransformFn) -> TransformFn:
        _TRANSFORM_REGISTRY[name] = fn
        return fn

    return decorator


def get_transform(name: str) -> TransformFn | None:
    """Look up a transform by name."""
    return _TRANSFORM_REGISTRY.get(name)


def available_transforms() -> list[str]:
    return sorted(_TRANSFORM_REGISTRY)


def run_transforms(
    lines: list[Line],
    steps: list[str],
    defaults: Mapping[str, str] | None = None,
    **params: Any,
) -> list[Line]:
    """Run a sequence of transforms over the same line list.

    Each step is identified by its registered name and sees the edits of
    the steps before it.
    """
    params["defaults"] = defaults or {}
    for step_name in steps:
        fn = _TRANSFORM_REGISTRY.get(step_name)
        if fn is None:
            raise TransformError(f"Unknown transform '{step_name}'", step=step_name)

        logger.debug("Running transform '%s' on %d lines", step_name, len(lines))
        try:
            lines = fn(lines, **params)
        except MarkdownToolError:
            raise
        except Exception as e:
            raise TransformError(
                f"Transform '{step_name}' failed: {e}", step=step_name, original=e
            ) from e

    return lines
