"""
DTO for record-sorting parameters with built-in validation.
Interface-agnostic: used by the CLI and by library callers of SortCommand.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from multisort.core.models import SortKey, SortRule
from multisort.utils.convert_utils import ConvertUtils


@dataclass
class SortParams:
    """Parameters for a record-sorting operation with validation."""
    input_path: str
    keys: List[SortKey] = field(default_factory=list)
    output_path: str = "-"
    strict_keys: bool = False
    indent: Optional[int] = 2

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if not self.input_path:
            raise ValueError("Input path cannot be empty")

        if not self.keys:
            raise ValueError("invalid argument: at least one sort rule required")

        if self.indent is not None and self.indent < 0:
            raise ValueError("Indent cannot be negative")

        if not self.output_path:
            self.output_path = "-"

    def to_rules(self) -> List[SortRule]:
        """Turn keys into (projection, direction) rules for sort_by."""
        return [
            (ConvertUtils.field_projection(key, strict=self.strict_keys), key.direction)
            for key in self.keys
        ]

    @staticmethod
    def from_key_specs(
            input_path: str,
            key_specs: List[str],
            output_path: str = "-",
            strict_keys: bool = False,
            indent: Optional[int] = 2,
    ) -> 'SortParams':
        """
        Factory method to create params from 'field[:direction]' strings.
        Useful for CLI argument parsing.
        """
        keys = [ConvertUtils.parse_key_spec(spec) for spec in key_specs if spec.strip()]

        return SortParams(
            input_path=input_path,
            keys=keys,
            output_path=output_path,
            strict_keys=strict_keys,
            indent=indent,
        )
