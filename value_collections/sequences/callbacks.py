"""
Callback arity adaptation for sequence combinators.

Combinators hand their callbacks the full `(element, index, snapshot)` shape
(`(accumulator, element, index, snapshot)` for folds), but most callers only
care about the leading arguments. `adapt_callback` inspects the callable once
and forwards only as many positional arguments as it accepts, so both
`lambda task: task.done` and `lambda task, index, tasks: ...` work.
"""

import inspect
from collections.abc import Callable
from typing import Any

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def positional_capacity(callback: Callable[..., Any], fallback: int) -> int | None:
    """
    Returns how many positional arguments `callback` accepts.

    `None` means "any number" (the callable takes `*args`). Callables whose
    signature cannot be inspected, like some builtins, get `fallback`.
    """
    try:
        signature = inspect.signature(callback)
    except (TypeError, ValueError):
        return fallback

    capacity = 0
    for parameter in signature.parameters.values():
        if parameter.kind == inspect.Parameter.VAR_POSITIONAL:
            return None
        if parameter.kind in _POSITIONAL_KINDS:
            capacity += 1

    return capacity


def adapt_callback[R](
    callback: Callable[..., R], *, max_args: int, min_args: int = 1
) -> Callable[..., R]:
    """
    Wraps `callback` so it can always be called with `max_args` positional arguments.

    Args:
        callback: The caller supplied function.
        max_args: How many arguments the combinator passes.
        min_args: How many arguments uninspectable callables receive.

    Returns:
        A callable that drops the trailing arguments `callback` does not accept.

    Example:
        ```python
        predicate = adapt_callback(lambda task: task.done, max_args=3)
        predicate(task, 0, snapshot)  # calls the lambda with `task` only
        ```
    """
    capacity = positional_capacity(callback, fallback=min_args)
    if capacity is None or capacity >= max_args:
        return callback

    def adapted(*args: Any) -> R:
        return callback(*args[:capacity])

    return adapted
