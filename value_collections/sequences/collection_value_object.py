"""
Base class for domain collections of value-equal entities.

A domain collection (`Tasks`, `LineItems`, ...) subclasses `CollectionValueObject`
with its element type and gets the whole `SequenceOperations` set for free. The
sequence mechanics live in a `ValueEqualSequence` the collection owns; this class
only delegates to it, and rebuilds new-instance results through the subclass's own
constructor.
"""

from __future__ import annotations

import builtins
import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Self, overload

from value_collections.equality.equatable import Equatable
from value_collections.sequences.transforms import (
    copy_within_items,
    fill_items,
    sort_items,
)
from value_collections.sequences.value_equal_sequence import ValueEqualSequence

logger = logging.getLogger(__name__)

_MISSING: Any = object()


class CollectionValueObject[T: Equatable]:
    """
    A domain collection backed by a privately owned `ValueEqualSequence`.

    Subclasses only pick the element type and, optionally, add domain behavior.
    New-instance transforms (`sort`, `fill`, `copy_within`) call
    `type(self)(items)`, so a subclass that overrides `__init__` must keep
    accepting the items as its first positional argument.

    Example:
        ```python
        class Task(EquatableModel):
            equality_fields = ("title",)

            title: str
            done: bool = False


        class Tasks(CollectionValueObject[Task]):
            def pending(self) -> list[Task]:
                return self.filter(lambda task: not task.done)


        tasks = Tasks([Task(title="write"), Task(title="review", done=True)])
        tasks.pending()                  # [Task(title='write', done=False)]
        tasks.sort(key=lambda task: task.title)  # new Tasks, `tasks` unchanged
        ```
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._sequence: ValueEqualSequence[T] = ValueEqualSequence(items)

    @property
    def items(self) -> tuple[T, ...]:
        return self._sequence.items

    @property
    def length(self) -> int:
        return self._sequence.length

    def at(self, index: int) -> T | None:
        return self._sequence.at(index)

    def slice(self, start: int | None = None, end: int | None = None) -> list[T]:
        return self._sequence.slice(start, end)

    def join(self, separator: str = ",") -> str:
        return self._sequence.join(separator)

    def concat(self, *values: Any) -> list[Any]:
        return self._sequence.concat(*values)

    def entries(self) -> Iterator[tuple[int, T]]:
        return self._sequence.entries()

    def keys(self) -> Iterator[int]:
        return self._sequence.keys()

    def values(self) -> Iterator[T]:
        return self._sequence.values()

    def to_string(self, indent: int | None = None) -> str:
        return self._sequence.to_string(indent)

    def to_locale_string(self, indent: int | None = None) -> str:
        return self._sequence.to_locale_string(indent)

    def index_of(self, search_element: T, from_index: int = 0) -> int:
        return self._sequence.index_of(search_element, from_index)

    def last_index_of(self, search_element: T, from_index: int | None = None) -> int:
        return self._sequence.last_index_of(search_element, from_index)

    def includes(self, search_element: T, from_index: int = 0) -> bool:
        return self._sequence.includes(search_element, from_index)

    def find(self, predicate: Callable[..., object]) -> T | None:
        return self._sequence.find(predicate)

    def find_index(self, predicate: Callable[..., object]) -> int:
        return self._sequence.find_index(predicate)

    def filter(self, predicate: Callable[..., object]) -> list[T]:
        return self._sequence.filter(predicate)

    def some(self, predicate: Callable[..., object]) -> bool:
        return self._sequence.some(predicate)

    def every(self, predicate: Callable[..., object]) -> bool:
        return self._sequence.every(predicate)

    def for_each(self, callback: Callable[..., object]) -> None:
        self._sequence.for_each(callback)

    def map[U](self, callback: Callable[..., U]) -> list[U]:
        return self._sequence.map(callback)

    @overload
    def reduce(self, callback: Callable[..., T]) -> T: ...

    @overload
    def reduce[U](self, callback: Callable[..., U], initial_value: U) -> U: ...

    def reduce(
        self, callback: Callable[..., Any], initial_value: Any = _MISSING
    ) -> Any:
        if initial_value is _MISSING:
            return self._sequence.reduce(callback)
        return self._sequence.reduce(callback, initial_value)

    @overload
    def reduce_right(self, callback: Callable[..., T]) -> T: ...

    @overload
    def reduce_right[U](self, callback: Callable[..., U], initial_value: U) -> U: ...

    def reduce_right(
        self, callback: Callable[..., Any], initial_value: Any = _MISSING
    ) -> Any:
        if initial_value is _MISSING:
            return self._sequence.reduce_right(callback)
        return self._sequence.reduce_right(callback, initial_value)

    def flat_map(self, callback: Callable[..., Any]) -> list[Any]:
        return self._sequence.flat_map(callback)

    def flat(self, depth: int = 1) -> list[Any]:
        return self._sequence.flat(depth)

    def push(self, *items: T) -> int:
        return self._sequence.push(*items)

    def pop(self) -> T | None:
        return self._sequence.pop()

    def shift(self) -> T | None:
        return self._sequence.shift()

    def unshift(self, *items: T) -> int:
        return self._sequence.unshift(*items)

    def splice(
        self, start: int, delete_count: int | None = None, *inserts: T
    ) -> list[T]:
        return self._sequence.splice(start, delete_count, *inserts)

    def remove(self, predicate: Callable[..., object]) -> None:
        """Deletes every element matching `predicate`. Mutates this collection."""
        self._sequence.remove(predicate)

    def reverse(self) -> Self:
        """Reverses this collection in place and returns it."""
        self._sequence.reverse()
        return self

    def sort(
        self,
        comparator: Callable[[T, T], int] | None = None,
        *,
        key: Callable[[T], Any] | None = None,
        reverse: bool = False,
    ) -> Self:
        """A new, sorted collection of the same type. This one keeps its order."""
        return self._rebuild(
            "sort", sort_items(self.items, comparator, key=key, reverse=reverse)
        )

    def fill(self, value: T, start: int | None = None, end: int | None = None) -> Self:
        """A new collection where `[start, end)` holds clones of `value`."""
        return self._rebuild("fill", fill_items(self.items, value, start, end))

    def copy_within(self, target: int, start: int = 0, end: int | None = None) -> Self:
        """A new collection with the `[start, end)` slice copied over `target`."""
        return self._rebuild(
            "copy_within", copy_within_items(self.items, target, start, end)
        )

    def _rebuild(self, operation: str, items: list[T]) -> Self:
        logger.debug(
            f"{type(self).__name__}.{operation} produced a new collection "
            + f"with {len(items)} elements"
        )
        return type(self)(items)

    def __len__(self) -> int:
        return len(self._sequence)

    def __iter__(self) -> Iterator[T]:
        return iter(self._sequence)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._sequence)

    def __contains__(self, item: object) -> bool:
        return item in self._sequence

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: builtins.slice) -> list[T]: ...

    def __getitem__(self, index: int | builtins.slice) -> T | list[T]:
        return self._sequence[index]

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._sequence.items)!r})"
