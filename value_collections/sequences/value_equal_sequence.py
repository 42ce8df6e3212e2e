from __future__ import annotations

import builtins
import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Self, overload

from value_collections.cloning.deep_clone import deep_clone_items
from value_collections.equality.equatable import Equatable
from value_collections.sequences.callbacks import adapt_callback
from value_collections.sequences.empty_sequence_error import EmptySequenceError
from value_collections.sequences.rendering import render_items
from value_collections.sequences.transforms import (
    copy_within_items,
    fill_items,
    flatten_items,
    relative_index,
    sort_items,
    splice_items,
)

logger = logging.getLogger(__name__)

_MISSING: Any = object()


class ValueEqualSequence[T: Equatable]:
    """
    An ordered, mutable collection whose searches use the elements' `compare`.

    The sequence exclusively owns its storage. Nothing outside the instance can
    obtain a reference to the underlying list:

    - The constructor stores a deep clone of the given items, so later changes
      to the caller's list (or to the elements in it) never leak in.
    - Every accessor returns a snapshot (`items` is a tuple) or a fresh list.

    Operations come in two deliberately different families:

    - In-place: `push`, `pop`, `shift`, `unshift`, `splice`, `remove` and
      `reverse` mutate this instance, like their list counterparts.
    - New-instance: `sort`, `fill` and `copy_within` leave this instance as it
      is and return a new instance of the same concrete type, built through
      `type(self)(items)` so subclass constructors still run.

    `index_of`, `last_index_of`, `includes` and `in` all match elements through
    `Equatable.compare`, never through identity or `==`.

    Example:
        ```python
        class Task(EquatableModel):
            equality_fields = ("title",)
            title: str

        tasks = ValueEqualSequence([Task(title="a"), Task(title="b")])
        tasks.push(Task(title="c"))                   # 3
        tasks.remove(lambda task: task.title == "b")
        Task(title="c") in tasks                      # True
        ```

    The sequence has no internal locking. Callers sharing an instance between
    threads must serialize access to it.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = deep_clone_items(items)

    @property
    def items(self) -> tuple[T, ...]:
        """Snapshot of the current elements, in order."""
        return tuple(self._items)

    @property
    def length(self) -> int:
        return len(self._items)

    def at(self, index: int) -> T | None:
        """The element at `index` (negative counts from the end), or None."""
        length = len(self._items)
        position = index + length if index < 0 else index
        if 0 <= position < length:
            return self._items[position]
        return None

    def slice(self, start: int | None = None, end: int | None = None) -> list[T]:
        return self._items[start:end]

    def join(self, separator: str = ",") -> str:
        return separator.join("" if item is None else str(item) for item in self._items)

    def concat(self, *values: Any) -> list[Any]:
        """
        A new list with this sequence's elements followed by `values`.

        Lists, tuples and other collections among `values` are expanded one
        level. Anything else is appended as a single element.
        """
        return [*self._items, *flatten_items(values, depth=1)]

    def entries(self) -> Iterator[tuple[int, T]]:
        return enumerate(self.items)

    def keys(self) -> Iterator[int]:
        return iter(range(len(self._items)))

    def values(self) -> Iterator[T]:
        return iter(self.items)

    def index_of(self, search_element: T, from_index: int = 0) -> int:
        """
        Position of the first element that compares equal to `search_element`.

        Args:
            search_element: The value to look for.
            from_index: Where to start scanning forward. Negative values count
                back from the end.

        Returns:
            The matching position, or -1.
        """
        length = len(self._items)
        for position in range(relative_index(from_index, length, default=0), length):
            if self._items[position].compare(search_element):
                return position
        return -1

    def last_index_of(self, search_element: T, from_index: int | None = None) -> int:
        """
        Position of the last element that compares equal to `search_element`.

        Scans backwards from `from_index` (the last element when omitted;
        negative values count back from the end).

        Returns:
            The matching position, or -1.
        """
        length = len(self._items)
        if from_index is None:
            start = length - 1
        elif from_index < 0:
            start = length + from_index
        else:
            start = min(from_index, length - 1)

        for position in range(start, -1, -1):
            if self._items[position].compare(search_element):
                return position
        return -1

    def includes(self, search_element: T, from_index: int = 0) -> bool:
        return self.index_of(search_element, from_index) != -1

    def find(self, predicate: Callable[..., object]) -> T | None:
        test = adapt_callback(predicate, max_args=3)
        snapshot = self.items
        for index, item in enumerate(snapshot):
            if test(item, index, snapshot):
                return item
        return None

    def find_index(self, predicate: Callable[..., object]) -> int:
        test = adapt_callback(predicate, max_args=3)
        snapshot = self.items
        for index, item in enumerate(snapshot):
            if test(item, index, snapshot):
                return index
        return -1

    def filter(self, predicate: Callable[..., object]) -> list[T]:
        test = adapt_callback(predicate, max_args=3)
        snapshot = self.items
        return [
            item for index, item in enumerate(snapshot) if test(item, index, snapshot)
        ]

    def some(self, predicate: Callable[..., object]) -> bool:
        test = adapt_callback(predicate, max_args=3)
        snapshot = self.items
        return any(test(item, index, snapshot) for index, item in enumerate(snapshot))

    def every(self, predicate: Callable[..., object]) -> bool:
        test = adapt_callback(predicate, max_args=3)
        snapshot = self.items
        return all(test(item, index, snapshot) for index, item in enumerate(snapshot))

    def for_each(self, callback: Callable[..., object]) -> None:
        visit = adapt_callback(callback, max_args=3)
        snapshot = self.items
        for index, item in enumerate(snapshot):
            visit(item, index, snapshot)

    def map[U](self, callback: Callable[..., U]) -> list[U]:
        transform = adapt_callback(callback, max_args=3)
        snapshot = self.items
        return [transform(item, index, snapshot) for index, item in enumerate(snapshot)]

    @overload
    def reduce(self, callback: Callable[..., T]) -> T: ...

    @overload
    def reduce[U](self, callback: Callable[..., U], initial_value: U) -> U: ...

    def reduce(
        self, callback: Callable[..., Any], initial_value: Any = _MISSING
    ) -> Any:
        """
        Folds the elements from first to last.

        The callback receives `(accumulator, element, index, snapshot)`. When
        `initial_value` is passed it seeds the fold, whatever its value (`0`,
        `""` and `False` included). When it is omitted the first element is the
        seed and folding starts at the second one.

        Raises:
            EmptySequenceError: If the sequence is empty and no `initial_value`
                was passed.
        """
        return self._fold("reduce", callback, initial_value, backwards=False)

    @overload
    def reduce_right(self, callback: Callable[..., T]) -> T: ...

    @overload
    def reduce_right[U](self, callback: Callable[..., U], initial_value: U) -> U: ...

    def reduce_right(
        self, callback: Callable[..., Any], initial_value: Any = _MISSING
    ) -> Any:
        """Same as `reduce`, folding from last to first."""
        return self._fold("reduce_right", callback, initial_value, backwards=True)

    def _fold(
        self,
        operation: str,
        callback: Callable[..., Any],
        initial_value: Any,
        backwards: bool,
    ) -> Any:
        step = adapt_callback(callback, max_args=4, min_args=2)
        snapshot = self.items
        positions = list(range(len(snapshot)))
        if backwards:
            positions.reverse()

        if initial_value is _MISSING:
            if not positions:
                raise EmptySequenceError(operation)
            accumulator = snapshot[positions[0]]
            positions = positions[1:]
        else:
            accumulator = initial_value

        for index in positions:
            accumulator = step(accumulator, snapshot[index], index, snapshot)

        return accumulator

    def flat_map(self, callback: Callable[..., Any]) -> list[Any]:
        return flatten_items(self.map(callback), depth=1)

    def flat(self, depth: int = 1) -> list[Any]:
        return flatten_items(self.items, depth=depth)

    # In-place operations: these mutate this instance.

    def push(self, *items: T) -> int:
        """Appends `items` and returns the new length."""
        self._items.extend(items)
        return len(self._items)

    def pop(self) -> T | None:
        """Removes and returns the last element, or None when empty."""
        if not self._items:
            return None
        return self._items.pop()

    def shift(self) -> T | None:
        """Removes and returns the first element, or None when empty."""
        if not self._items:
            return None
        return self._items.pop(0)

    def unshift(self, *items: T) -> int:
        """Prepends `items` (keeping their order) and returns the new length."""
        self._items[0:0] = items
        return len(self._items)

    def splice(
        self, start: int, delete_count: int | None = None, *inserts: T
    ) -> list[T]:
        """
        Removes `delete_count` elements at `start` and inserts `inserts` in their place.

        Omitting `delete_count` removes everything from `start` to the end.
        Passing `0` removes nothing, so the call only inserts.

        Returns:
            The removed elements.
        """
        return splice_items(self._items, start, delete_count, inserts)

    def remove(self, predicate: Callable[..., object]) -> None:
        """
        Deletes every element for which `predicate` holds.

        The remaining elements keep their relative order. The predicate receives
        `(element, index, snapshot)` and may accept only the element.
        """
        matches = adapt_callback(predicate, max_args=3)
        snapshot = self.items
        kept = [
            item
            for index, item in enumerate(snapshot)
            if not matches(item, index, snapshot)
        ]
        self._items[:] = kept
        logger.debug(
            f"Removed {len(snapshot) - len(kept)} of {len(snapshot)} elements "
            + f"from {type(self).__name__}"
        )

    def reverse(self) -> Self:
        """Reverses this instance in place and returns it."""
        self._items.reverse()
        return self

    # New-instance transforms: these return a new instance and leave self untouched.

    def sort(
        self,
        comparator: Callable[[T, T], int] | None = None,
        *,
        key: Callable[[T], Any] | None = None,
        reverse: bool = False,
    ) -> Self:
        """
        A new instance holding the elements in sorted order.

        The sort is stable. This instance keeps its order.

        Args:
            comparator: Three-way comparison returning a negative number, zero or
                a positive number.
            key: Sort key, as in `sorted`. Cannot be combined with `comparator`.
            reverse: Sort in descending order.

        Example:
            ```python
            by_title = tasks.sort(key=lambda task: task.title)
            urgent_first = tasks.sort(lambda a, b: b.priority - a.priority)
            ```
        """
        return self._spawn(
            "sort", sort_items(self.items, comparator, key=key, reverse=reverse)
        )

    def fill(self, value: T, start: int | None = None, end: int | None = None) -> Self:
        """A new instance where positions `[start, end)` hold clones of `value`."""
        return self._spawn("fill", fill_items(self.items, value, start, end))

    def copy_within(self, target: int, start: int = 0, end: int | None = None) -> Self:
        """A new instance with the `[start, end)` slice copied over `target`."""
        return self._spawn(
            "copy_within", copy_within_items(self.items, target, start, end)
        )

    def _spawn(self, operation: str, items: list[T]) -> Self:
        logger.debug(
            f"{type(self).__name__}.{operation} produced a new instance "
            + f"with {len(items)} elements"
        )
        return type(self)(items)

    def to_string(self, indent: int | None = None) -> str:
        """The elements as a JSON array."""
        return render_items(self.items, indent=indent)

    def to_locale_string(self, indent: int | None = None) -> str:
        return render_items(self.items, indent=indent)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self.items)

    def __contains__(self, item: object) -> bool:
        return self.includes(item)  # type: ignore[arg-type]

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: builtins.slice) -> list[T]: ...

    def __getitem__(self, index: int | builtins.slice) -> T | list[T]:
        return self._items[index]

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
