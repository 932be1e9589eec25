"""
Command orchestrator for record sorting.
Single entry point for the business logic, used by the CLI and by library callers.
"""
from typing import Any, List

from multisort.core.params import SortParams
from multisort.core.sorter import sort_by
from multisort.services.record_service import RecordService


class SortCommand:
    """
    Orchestrates the record-sorting workflow:
    1. Load records from params.input_path
    2. Sort a copy of them by params.keys
    3. Write the result to params.output_path (optional)

    Usage:
        params = SortParams.from_key_specs("people.json", ["age:desc", "name"])
        command = SortCommand()
        records = command.execute(params)
        command.write(params)
    """

    def __init__(self):
        self._records: List[Any] = []
        self._sorted: List[Any] = []

    def execute(self, params: SortParams) -> List[Any]:
        """
        Execute sorting with given parameters.

        Returns:
            Sorted copy of the loaded records

        Raises:
            FileNotFoundError: If the input file does not exist
            ValueError: If the input is not a JSON array
            KeyError: If strict keys are requested and a record lacks one
            TypeError: If a key holds values that cannot be ordered together
        """
        self._records = RecordService.load_records(params.input_path)
        self._sorted = sort_by(self._records, *params.to_rules())
        return self._sorted

    def write(self, params: SortParams) -> None:
        """Write the last sorted result to params.output_path."""
        RecordService.dump_records(self._sorted, params.output_path, indent=params.indent)

    def get_records(self) -> List[Any]:
        """Get loaded records in their original order."""
        return self._records.copy()  # Return copy to prevent external mutation
