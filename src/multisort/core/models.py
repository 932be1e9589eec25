"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Sort directions and the type aliases shared by the dispatcher, comparator and sorter.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Tuple, TypeVar, Union

T = TypeVar("T")


# =============================
# Enums
# =============================

class Direction(str, Enum):
    """
    Sort direction of a single rule.
    Str-based so plain "asc" / "desc" compare equal to the members.
    """
    ASC = "asc"
    DESC = "desc"

    @property
    def display_name(self) -> str:
        """Human-readable name for CLI output."""
        mapping = {
            Direction.ASC: "Ascending",
            Direction.DESC: "Descending",
        }
        return mapping.get(self, self.value)

    @classmethod
    def is_direction(cls, value: Any) -> bool:
        """True if value is a member or one of the member values."""
        if isinstance(value, cls):
            return True
        return isinstance(value, str) and value in ALL_DIRECTIONS

    def __repr__(self) -> str:
        return self.value


ALL_DIRECTIONS: Tuple[str, ...] = tuple(d.value for d in Direction)


# ======================
#  Type aliases
# ======================

# Anything natively ordered with < and >: numbers, strings, booleans, dates...
Comparable = Any

Projection = Callable[[T], Comparable]
SortPair = Union[Tuple[Projection, Union[Direction, str]], List[Any]]
SortRule = Union[Projection, SortPair]
Comparator = Callable[[T, T], int]


# ======================
#  Record keys
# ======================

@dataclass
class SortKey:
    """
    One field-based sort key for record sorting (CLI, SortCommand).
    `field` is a dotted path into a record: "owner.name", "tags.0".
    """
    field: str
    direction: Direction = Direction.ASC

    def __post_init__(self):
        self.field = self.field.strip()
        if not self.field:
            raise ValueError("Sort key field cannot be empty")
        if not Direction.is_direction(self.direction):
            raise ValueError(f"unrecognized sort direction: {self.direction!r}")
        self.direction = Direction(self.direction)

    def __repr__(self):
        return f"<SortKey {self.field}:{self.direction.value}>"
