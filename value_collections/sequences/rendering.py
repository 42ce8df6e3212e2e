"""
JSON rendering of collection snapshots.

Collections render as a JSON array of their elements. Pydantic models and
dataclasses are serialized by `pydantic_core`; any other object is rendered
from its public attributes, falling back to `str()` for objects without an
attribute dictionary.

Elements must be acyclic. A plain object, list or dict that contains itself
(directly or through other plain objects) raises `ValueError` instead of
recursing forever. The same object appearing twice without a cycle renders
twice.
"""

import dataclasses
import enum
from collections.abc import Sequence
from typing import Any

from pydantic_core import to_json


def _is_plain_object(value: Any) -> bool:
    return (
        hasattr(value, "__dict__")
        and not hasattr(value, "__pydantic_serializer__")
        and not dataclasses.is_dataclass(value)
        and not isinstance(value, (type, enum.Enum))
    )


def _plain(value: Any, active: set[int]) -> Any:
    """JSON-ready copy of `value`, tracking the objects on the current path."""
    if not isinstance(value, (list, tuple, dict)) and not _is_plain_object(value):
        return value

    if id(value) in active:
        raise ValueError(
            f"Circular reference detected while rendering {type(value).__name__}"
        )

    active.add(id(value))
    try:
        if isinstance(value, (list, tuple)):
            return [_plain(item, active) for item in value]
        if isinstance(value, dict):
            return {key: _plain(item, active) for key, item in value.items()}
        return {
            name: _plain(attribute, active)
            for name, attribute in vars(value).items()
            if not name.startswith("_")
        }
    finally:
        active.discard(id(value))


def _fallback(value: Any) -> Any:
    # Plain objects nested inside models or dataclasses land here.
    if _is_plain_object(value):
        return _plain(value, set())
    return str(value)


def render_item(value: Any) -> str:
    """Compact JSON text of a single element."""
    return to_json(_plain(value, set()), fallback=_fallback).decode("utf-8")


def render_items(items: Sequence[Any], indent: int | None = None) -> str:
    """
    JSON text of a whole snapshot.

    Args:
        items: The elements to render, in order.
        indent: Spaces per nesting level. `None` renders compact JSON.

    Raises:
        ValueError: If an element refers back to itself.

    Example:
        ```python
        render_items([Task(title="a")])  # '[{"title":"a"}]'
        ```
    """
    return to_json(
        _plain(list(items), set()), indent=indent, fallback=_fallback
    ).decode("utf-8")
