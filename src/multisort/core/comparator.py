"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/comparator.py
Builds a single cmp-style comparator out of an ordered list of sort rules.
"""
from typing import Any, Callable, Optional, Sequence, Tuple

from multisort.core.models import Comparator, Direction, Projection, SortRule


def _greater_than(a: Any, b: Any) -> bool:
    return a > b


def _less_than(a: Any, b: Any) -> bool:
    return a < b


def direction_predicate(direction) -> Callable[[Any, Any], bool]:
    """
    Return the predicate telling whether projected `a` ranks after projected `b`.
    Ascending ranks the greater value later, descending the lesser one.
    """
    if direction == Direction.ASC:
        return _greater_than
    if direction == Direction.DESC:
        return _less_than
    raise ValueError(f"unrecognized sort direction: {direction!r}")


def normalize_rule(rule: SortRule) -> Tuple[Projection, Direction]:
    """Split a rule into (projection, direction); a bare projection is ascending."""
    if callable(rule):
        return rule, Direction.ASC

    projection, direction = rule
    if not Direction.is_direction(direction):
        raise ValueError(f"unrecognized sort direction: {direction!r}")
    return projection, Direction(direction)


def build_comparator(rules: Sequence[SortRule]) -> Comparator:
    """
    Build a comparator returning 1, -1 or 0 for a pair of elements.

    The head rule decides unless it finds both elements equal, in which case
    the comparator built from the remaining rules is consulted. Without any
    remaining rule the elements are considered fully equal.
    """
    if not rules:
        raise ValueError("invalid argument: at least one sort rule required")

    projection, direction = normalize_rule(rules[0])
    ranks_after = direction_predicate(direction)

    next_comparator: Optional[Comparator] = (
        build_comparator(rules[1:]) if len(rules) > 1 else None
    )

    def compare(a, b) -> int:
        projected_a = projection(a)
        projected_b = projection(b)

        if ranks_after(projected_a, projected_b):
            return 1
        if ranks_after(projected_b, projected_a):
            return -1

        # Equal under this rule
        return next_comparator(a, b) if next_comparator is not None else 0

    return compare
