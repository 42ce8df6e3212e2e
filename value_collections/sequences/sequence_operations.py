"""
The operation set every value-equal collection exposes.

Concrete domain collections do not inherit sequence mechanics from a deep class
hierarchy. They satisfy this protocol by delegating to a `ValueEqualSequence`
they own (see `CollectionValueObject`).

The operations fall into three families with different aliasing behavior:

- Read operations never change the collection and never hand out a reference to
  its storage: sequences come back as tuples (snapshots) or fresh lists.
- In-place operations (`push`, `pop`, `shift`, `unshift`, `splice`, `remove`,
  `reverse`) mutate the collection itself.
- New-instance transforms (`sort`, `fill`, `copy_within`) leave the collection
  untouched and return a freshly constructed collection of the same type that
  owns deep clones of its elements.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Protocol, Self, overload, runtime_checkable


@runtime_checkable
class SequenceOperations[T](Protocol):
    # Read operations.

    @property
    def items(self) -> tuple[T, ...]: ...

    @property
    def length(self) -> int: ...

    def at(self, index: int) -> T | None: ...

    def slice(self, start: int | None = None, end: int | None = None) -> list[T]: ...

    def join(self, separator: str = ",") -> str: ...

    def concat(self, *values: Any) -> list[Any]: ...

    def entries(self) -> Iterator[tuple[int, T]]: ...

    def keys(self) -> Iterator[int]: ...

    def values(self) -> Iterator[T]: ...

    def to_string(self, indent: int | None = None) -> str: ...

    def to_locale_string(self, indent: int | None = None) -> str: ...

    # Value-equality search.

    def index_of(self, search_element: T, from_index: int = 0) -> int: ...

    def last_index_of(
        self, search_element: T, from_index: int | None = None
    ) -> int: ...

    def includes(self, search_element: T, from_index: int = 0) -> bool: ...

    # Predicate combinators.

    def find(self, predicate: Callable[..., object]) -> T | None: ...

    def find_index(self, predicate: Callable[..., object]) -> int: ...

    def filter(self, predicate: Callable[..., object]) -> list[T]: ...

    def some(self, predicate: Callable[..., object]) -> bool: ...

    def every(self, predicate: Callable[..., object]) -> bool: ...

    def for_each(self, callback: Callable[..., object]) -> None: ...

    def map[U](self, callback: Callable[..., U]) -> list[U]: ...

    @overload
    def reduce(self, callback: Callable[..., T]) -> T: ...

    @overload
    def reduce[U](self, callback: Callable[..., U], initial_value: U) -> U: ...

    @overload
    def reduce_right(self, callback: Callable[..., T]) -> T: ...

    @overload
    def reduce_right[U](self, callback: Callable[..., U], initial_value: U) -> U: ...

    def flat_map(self, callback: Callable[..., Any]) -> list[Any]: ...

    def flat(self, depth: int = 1) -> list[Any]: ...

    # In-place operations.

    def push(self, *items: T) -> int: ...

    def pop(self) -> T | None: ...

    def shift(self) -> T | None: ...

    def unshift(self, *items: T) -> int: ...

    def splice(
        self, start: int, delete_count: int | None = None, *inserts: T
    ) -> list[T]: ...

    def remove(self, predicate: Callable[..., object]) -> None: ...

    def reverse(self) -> Self: ...

    # New-instance transforms.

    def sort(
        self,
        comparator: Callable[[T, T], int] | None = None,
        *,
        key: Callable[[T], Any] | None = None,
        reverse: bool = False,
    ) -> Self: ...

    def fill(
        self, value: T, start: int | None = None, end: int | None = None
    ) -> Self: ...

    def copy_within(
        self, target: int, start: int = 0, end: int | None = None
    ) -> Self: ...

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[T]: ...

    def __contains__(self, item: object) -> bool: ...

