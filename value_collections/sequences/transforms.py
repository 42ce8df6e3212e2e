"""
Pure list helpers shared by the collection types.

None of these functions touch a collection's storage directly: they receive a
list (or snapshot) and either return a new list or, for `splice_items`, mutate
only the list they were handed. Index arguments follow relative-index rules:
negative values count back from the end and everything is clamped to
`[0, len(items)]`.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from value_collections.cloning.deep_clone import deep_clone
from value_collections.sequences.rendering import render_item
from value_collections.sequences.sequence_operations import SequenceOperations

logger = logging.getLogger(__name__)


def relative_index(index: int | None, length: int, default: int) -> int:
    if index is None:
        return default

    if index < 0:
        return max(length + index, 0)

    return min(index, length)


def is_spreadable(value: Any) -> bool:
    """Whether `concat`/`flat` should expand `value` instead of keeping it whole."""
    if isinstance(value, (list, tuple)):
        return True

    return isinstance(value, SequenceOperations)


def _spread(value: Any) -> Sequence[Any]:
    if isinstance(value, (list, tuple)):
        return value
    return value.items


def flatten_items(values: Iterable[Any], depth: int) -> list[Any]:
    flattened: list[Any] = []
    for value in values:
        if depth > 0 and is_spreadable(value):
            flattened.extend(flatten_items(_spread(value), depth - 1))
        else:
            flattened.append(value)
    return flattened


def sort_items[T](
    items: Sequence[T],
    comparator: Callable[[T, T], int] | None = None,
    *,
    key: Callable[[T], Any] | None = None,
    reverse: bool = False,
) -> list[T]:
    """
    Stable sort of `items` into a new list.

    `comparator` is a three-way function returning a negative number, zero or a
    positive number. `key` follows `sorted`. With neither, elements are sorted
    by their natural ordering, or by their JSON text when they are not mutually
    orderable.

    Raises:
        ValueError: If both `comparator` and `key` are given.
    """
    if comparator is not None and key is not None:
        raise ValueError("Pass either a comparator or a key to sort, not both.")

    if comparator is not None:
        return sorted(items, key=functools.cmp_to_key(comparator), reverse=reverse)

    if key is not None:
        return sorted(items, key=key, reverse=reverse)

    try:
        return sorted(items, reverse=reverse)  # type: ignore[type-var]
    except TypeError:
        logger.warning(
            "Elements are not mutually orderable. Sorting by their JSON text instead."
        )
        return sorted(items, key=render_item, reverse=reverse)


def fill_items[T](
    items: Sequence[T], value: T, start: int | None = None, end: int | None = None
) -> list[T]:
    """A copy of `items` where each slot of `[start, end)` holds a clone of `value`."""
    length = len(items)
    lower = relative_index(start, length, default=0)
    upper = relative_index(end, length, default=length)

    filled = list(items)
    for position in range(lower, upper):
        filled[position] = deep_clone(value)

    return filled


def copy_within_items[T](
    items: Sequence[T], target: int, start: int = 0, end: int | None = None
) -> list[T]:
    """A copy of `items` with the `[start, end)` slice cloned over `target`."""
    length = len(items)
    destination = relative_index(target, length, default=0)
    source = relative_index(start, length, default=0)
    final = relative_index(end, length, default=length)
    count = min(final - source, length - destination)

    copied = list(items)
    if count > 0:
        copied[destination : destination + count] = [
            deep_clone(item) for item in items[source : source + count]
        ]

    return copied


def splice_items[T](
    items: list[T], start: int, delete_count: int | None, inserts: Sequence[T]
) -> list[T]:
    """
    Removes `delete_count` elements of `items` at `start` and inserts `inserts` there.

    Mutates `items`. An omitted (`None`) `delete_count` removes everything from
    `start` to the end; `0` removes nothing.

    Returns:
        The removed elements, in order.
    """
    length = len(items)
    lower = relative_index(start, length, default=0)
    if delete_count is None:
        count = length - lower
    else:
        count = min(max(delete_count, 0), length - lower)

    removed = items[lower : lower + count]
    items[lower : lower + count] = list(inserts)
    return removed
