"""
Tests for SortCommand — load, sort, write.
"""
import json

import pytest

from multisort.commands import SortCommand
from multisort.core.params import SortParams


class TestSortCommand:

    def test_execute_sorts_records(self, people_file):
        params = SortParams.from_key_specs(str(people_file), ["address.city", "name"])
        result = SortCommand().execute(params)

        assert [p["name"] for p in result] == ["Bob", "alice", "Carol", "Dave"]

    def test_execute_keeps_loaded_order(self, people_file, people):
        command = SortCommand()
        command.execute(SortParams.from_key_specs(str(people_file), ["name"]))

        assert command.get_records() == people

    def test_write_to_file(self, people_file, tmp_path):
        out = tmp_path / "sorted.json"
        params = SortParams.from_key_specs(str(people_file), ["age"], output_path=str(out))
        command = SortCommand()
        command.execute(params)
        command.write(params)

        names = [p["name"] for p in json.loads(out.read_text(encoding="utf-8"))]
        assert names == ["alice", "Carol", "Bob", "Dave"]

    def test_strict_keys_missing_field(self, people_file):
        params = SortParams.from_key_specs(str(people_file), ["age"], strict_keys=True)
        with pytest.raises(KeyError, match="age"):
            SortCommand().execute(params)
