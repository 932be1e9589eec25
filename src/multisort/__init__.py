"""
multisort — multi-key sorting by projections with per-rule directions.

Core features:
- sort_by(items, *rules): data-first, returns a sorted copy
- sort_by(*rules): rules-first, returns a reusable function for pipe()
- Rules are projections or (projection, "asc" | "desc") pairs; ties cascade left to right
- Stable: items equal under every rule keep their input order
- CLI for sorting JSON records by field keys
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("multisort")
except Exception:
    import tomllib  # Python 3.11+
    from pathlib import Path

    with open(Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API — only what users should import directly
from multisort.core import (
    ALL_DIRECTIONS, Direction, SortKey, SortParams, Sorter,
    build_comparator, is_sort_rule, sort_by, sort_by_strict)
from multisort.utils import ConvertUtils, identity, pipe, purry
from multisort.services import RecordService
from multisort.commands import SortCommand

__all__ = [
    "ALL_DIRECTIONS",
    "Direction",
    "SortKey",
    "SortParams",
    "Sorter",
    "build_comparator",
    "is_sort_rule",
    "sort_by",
    "sort_by_strict",
    "ConvertUtils",
    "identity",
    "pipe",
    "purry",
    "RecordService",
    "SortCommand",
    "__version__",
]
