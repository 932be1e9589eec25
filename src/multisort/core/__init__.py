"""
Core sorting engine — rule dispatch, comparator building, sort execution.

This package contains the whole algorithm of multisort:
- Direction and rule type aliases shared across modules
- is_sort_rule / split_call: data-first vs rules-first call shapes
- build_comparator: recursive multi-key comparator with per-rule direction
- Sorter, sort_by, sort_by_strict: copy-then-sort entry points
- SortKey, SortParams: field-based configuration for record sorting

All components are pure Python with no I/O, suitable for library and CLI usage.
"""

from .models import ALL_DIRECTIONS, Direction, SortKey
from .comparator import build_comparator, direction_predicate, normalize_rule
from .dispatcher import is_sort_rule, split_call
from .sorter import Sorter, sort_by, sort_by_strict
from .params import SortParams

__all__ = [
    "ALL_DIRECTIONS",
    "Direction",
    "SortKey",
    "build_comparator",
    "direction_predicate",
    "normalize_rule",
    "is_sort_rule",
    "split_call",
    "Sorter",
    "sort_by",
    "sort_by_strict",
    "SortParams",
]
