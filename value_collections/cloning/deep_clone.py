import copy
from collections.abc import Iterable


def deep_clone[V](value: V) -> V:
    """
    Returns a fully independent copy of `value`.

    The copy shares no mutable sub-structure with the original. References that
    are shared *inside* `value` stay shared inside the copy, so a list holding the
    same object twice is cloned into a list holding one new object twice.

    Pydantic models are handled by their own `__deepcopy__`.
    """
    return copy.deepcopy(value)


def deep_clone_items[V](items: Iterable[V]) -> list[V]:
    """Deep clones `items` into a new list that the caller owns."""
    return copy.deepcopy(list(items))
