"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/sorter.py
Pure multi-key sorting — zero dependencies outside core and utils.
Rules are applied lexicographically: the first rule decides, later rules only break ties.
"""
import logging
from functools import cmp_to_key
from typing import Any, Callable, Iterable, List, Sequence, Tuple, TypeVar, Union, overload

from multisort.core.comparator import build_comparator
from multisort.core.dispatcher import split_call
from multisort.core.models import SortRule
from multisort.utils.functional import purry

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Sorter:
    """
    Sorts a COPY of the given items according to an ordered list of rules.
    The input is never modified.
    Sorting priority (applied lexicographically):
    1. First rule decides the order
    2. Each following rule resolves the ties left by the previous ones
    3. Items equal under every rule keep their input order (list.sort is stable)
    """

    @staticmethod
    def sort_copy(items: Iterable[T], rules: Sequence[SortRule]) -> List[T]:
        if not rules:
            raise ValueError("invalid argument: at least one sort rule required")

        comparator = build_comparator(tuple(rules))

        # Sorting happens in place, so work on a shallow copy
        result = list(items)
        logger.debug(f"Sorting {len(result)} item(s) by {len(rules)} rule(s)")
        result.sort(key=cmp_to_key(comparator))
        return result


def _sort_by(items: Iterable[T], rules: Sequence[SortRule]) -> List[T]:
    return Sorter.sort_copy(items, rules)


def _sort_by_strict(items: Iterable[T], rules: Sequence[SortRule]) -> Union[List[T], Tuple[T, ...]]:
    result = Sorter.sort_copy(items, rules)
    if isinstance(items, tuple):
        return tuple(result)
    return result


def sort_by(*args: Any) -> Any:
    """
    Sort items by one or more rules, data-first or rules-first.

    A rule is a projection `item -> comparable` or a pair `(projection, "asc" | "desc")`.
    Directions default to ascending.

    Usage:
        sort_by([{"a": 1}, {"a": 3}, {"a": 2}], lambda x: x["a"])
        # -> [{"a": 1}, {"a": 2}, {"a": 3}]

        sort_by(records, (lambda r: r.weight, "asc"), lambda r: r.color)

        by_weight = sort_by((lambda r: r.weight, "desc"))
        by_weight(records)
        pipe(records, sort_by(lambda r: r.weight))
    """
    if not args:
        raise ValueError("invalid argument: at least one sort rule required")
    return purry(_sort_by, split_call(args[0], args[1:]))


@overload
def sort_by_strict(items: Tuple[T, ...], *rules: SortRule) -> Tuple[T, ...]: ...


@overload
def sort_by_strict(items: Sequence[T], *rules: SortRule) -> List[T]: ...


@overload
def sort_by_strict(*rules: SortRule) -> Callable[[Sequence[T]], Union[List[T], Tuple[T, ...]]]: ...


def sort_by_strict(*args):
    """
    Same as sort_by, but the result keeps the container shape of the input:
    a tuple comes back as a tuple of the same length, anything else as a list.
    """
    if not args:
        raise ValueError("invalid argument: at least one sort rule required")
    return purry(_sort_by_strict, split_call(args[0], args[1:]))
