"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/functional.py
Small functional helpers: partial application, left-to-right piping, identity.
"""
import inspect
from typing import Any, Callable, Sequence, TypeVar

T = TypeVar("T")


def _positional_arity(fn: Callable) -> int:
    """Count positional parameters of fn (without *args)."""
    params = inspect.signature(fn).parameters.values()
    return sum(
        1 for p in params
        if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
    )


def purry(fn: Callable, args: Sequence[Any]) -> Any:
    """
    Call fn now or later depending on how many arguments were supplied.

    - all positional arguments given: returns fn(*args)
    - exactly one missing: returns a function awaiting it as the FIRST argument
    - anything else: TypeError

    Example:
        purry(_sort, [items, rules])   # -> sorted list
        purry(_sort, [rules])          # -> lambda items: _sort(items, rules)
    """
    args = tuple(args)
    missing = _positional_arity(fn) - len(args)

    if missing == 0:
        return fn(*args)
    if missing == 1:
        return lambda data: fn(data, *args)

    raise TypeError(
        f"wrong number of arguments: {getattr(fn, '__name__', fn)} "
        f"expects {len(args) + missing}, got {len(args)}"
    )


def pipe(value: Any, *fns: Callable[[Any], Any]) -> Any:
    """Pass value through fns from left to right."""
    for fn in fns:
        value = fn(value)
    return value


def identity(value: T) -> T:
    return value
