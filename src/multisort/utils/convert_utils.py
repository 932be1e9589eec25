"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

utils/convert_utils.py
"""
from typing import Any, Callable, Tuple

from multisort.aliases import DIRECTION_ALIASES
from multisort.core.models import Direction, SortKey

_MISSING = object()


class ConvertUtils:
    @staticmethod
    def human_to_direction(direction_str: str) -> Direction:
        """
        Convert a direction alias to Direction.
        Supports: 'asc', 'ascending', 'up', 'desc', 'descending', 'down' (case-insensitive).
        Raises ValueError for anything else.
        """
        key = direction_str.strip().lower()
        try:
            return DIRECTION_ALIASES[key]
        except KeyError:
            raise ValueError(
                f"unrecognized sort direction: '{direction_str}'. "
                f"Supported: {', '.join(DIRECTION_ALIASES)}"
            )

    @staticmethod
    def parse_key_spec(spec: str) -> SortKey:
        """
        Parse 'field[:direction]' into a SortKey.
        The direction is split off the LAST colon only when it is a known alias,
        so field names containing colons still work ('time:utc' stays a field).
        """
        spec = spec.strip()
        if not spec:
            raise ValueError("Sort key cannot be empty")

        field, sep, tail = spec.rpartition(":")
        if sep and not tail.strip():
            raise ValueError(f"Sort key direction cannot be empty: '{spec}'")
        if sep and tail.strip().lower() in DIRECTION_ALIASES:
            return SortKey(field=field, direction=ConvertUtils.human_to_direction(tail))
        return SortKey(field=spec)

    @staticmethod
    def get_field(record: Any, path: str, default: Any = _MISSING) -> Any:
        """
        Resolve a dotted path inside nested dicts/lists.
        Numeric segments index into lists. Raises KeyError when a segment is
        missing and no default was given.
        """
        current = record
        for segment in path.split("."):
            try:
                if isinstance(current, (list, tuple)) and segment.lstrip("-").isdigit():
                    current = current[int(segment)]
                else:
                    current = current[segment]
            except (KeyError, IndexError, TypeError):
                if default is not _MISSING:
                    return default
                raise KeyError(f"Field '{path}' not found in record")
        return current

    @staticmethod
    def field_projection(key: SortKey, strict: bool = False) -> Callable[[Any], Any]:
        """
        Build a projection for a record field.
        Strict mode raises KeyError on missing fields. Otherwise the projection
        yields (is_missing, value) so missing values group together after the
        present ones in ascending order (before them in descending order).
        """
        path = key.field
        if strict:
            return lambda record: ConvertUtils.get_field(record, path)

        def project(record: Any) -> Tuple[bool, Any]:
            value = ConvertUtils.get_field(record, path, default=None)
            return value is None, value

        return project
