"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/dispatcher.py
Tells a sort rule apart from the sequence to sort, so one entry point serves
both the data-first and the rules-first (curried) call shapes.
"""
import logging
from typing import Any

from multisort.core.models import Direction

logger = logging.getLogger(__name__)


def is_sort_rule(value: Any) -> bool:
    """
    Decide whether value is a sort rule rather than a sequence.

    - a callable is a bare projection
    - a tuple/list of exactly two items, callable first and a known direction
      second, is a rule pair
    - anything else (including longer pair-shaped lists) is the sequence
    """
    if callable(value):
        return True

    if not isinstance(value, (tuple, list)) or len(value) != 2:
        return False

    maybe_projection, maybe_direction = value
    return callable(maybe_projection) and Direction.is_direction(maybe_direction)


def split_call(first: Any, rules: tuple) -> tuple:
    """
    Turn raw call arguments into the argument list for the sort target.
    Returns (rules,) for the curried shape or (sequence, rules) for the eager one.
    """
    if is_sort_rule(first):
        logger.debug(f"Rules-first call with {len(rules) + 1} rule(s)")
        return ((first, *rules),)

    if not rules:
        raise ValueError("invalid argument: at least one sort rule required")

    logger.debug(f"Data-first call with {len(rules)} rule(s)")
    return (first, tuple(rules))
