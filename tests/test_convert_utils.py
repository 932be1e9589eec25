"""
Tests for key-spec and field-path utilities, which decide what the CLI sorts by.
"""
import pytest

from multisort.core.models import Direction, SortKey
from multisort.utils.convert_utils import ConvertUtils


class TestHumanToDirection:
    """Test conversion from direction aliases to Direction."""

    def test_ascending_aliases(self):
        for alias in ("asc", "ascending", "up"):
            assert ConvertUtils.human_to_direction(alias) is Direction.ASC

    def test_descending_aliases(self):
        for alias in ("desc", "descending", "down"):
            assert ConvertUtils.human_to_direction(alias) is Direction.DESC

    def test_case_and_whitespace_insensitive(self):
        assert ConvertUtils.human_to_direction(" DESC ") is Direction.DESC
        assert ConvertUtils.human_to_direction("Ascending") is Direction.ASC

    def test_rejects_unknown(self):
        with pytest.raises(ValueError, match="unrecognized sort direction"):
            ConvertUtils.human_to_direction("sideways")


class TestParseKeySpec:
    """Test 'field[:direction]' parsing."""

    def test_field_only_defaults_to_ascending(self):
        assert ConvertUtils.parse_key_spec("age") == SortKey("age", Direction.ASC)

    def test_field_with_direction(self):
        assert ConvertUtils.parse_key_spec("age:desc") == SortKey("age", Direction.DESC)
        assert ConvertUtils.parse_key_spec("owner.name:DOWN") == SortKey("owner.name", Direction.DESC)

    def test_colon_in_field_name_kept(self):
        """Only a known direction alias is split off."""
        assert ConvertUtils.parse_key_spec("time:utc") == SortKey("time:utc")
        assert ConvertUtils.parse_key_spec("ns:key:asc") == SortKey("ns:key", Direction.ASC)

    def test_empty_spec(self):
        with pytest.raises(ValueError, match="cannot be empty"):
            ConvertUtils.parse_key_spec("   ")

    def test_trailing_colon_without_direction(self):
        """'age:' is a typo, not a field named 'age:'."""
        with pytest.raises(ValueError, match="direction cannot be empty"):
            ConvertUtils.parse_key_spec("age:")
        with pytest.raises(ValueError, match="direction cannot be empty"):
            ConvertUtils.parse_key_spec("owner.name:  ")

    def test_direction_without_field(self):
        with pytest.raises(ValueError, match="field cannot be empty"):
            ConvertUtils.parse_key_spec(":desc")


class TestGetField:
    """Test dotted path lookup."""

    def test_top_level(self):
        assert ConvertUtils.get_field({"a": 1}, "a") == 1

    def test_nested(self):
        assert ConvertUtils.get_field({"a": {"b": {"c": 3}}}, "a.b.c") == 3

    def test_list_index(self):
        record = {"tags": ["x", "y"]}
        assert ConvertUtils.get_field(record, "tags.1") == "y"
        assert ConvertUtils.get_field(record, "tags.-1") == "y"

    def test_missing_raises_key_error(self):
        with pytest.raises(KeyError, match="a.b"):
            ConvertUtils.get_field({"a": {}}, "a.b")

    def test_missing_through_scalar(self):
        with pytest.raises(KeyError):
            ConvertUtils.get_field({"a": 5}, "a.b")

    def test_default_returned_when_missing(self):
        assert ConvertUtils.get_field({}, "a.b", default=None) is None


class TestFieldProjection:
    """Test projections built from SortKey."""

    def test_strict_projection_returns_value(self):
        project = ConvertUtils.field_projection(SortKey("a"), strict=True)
        assert project({"a": 2}) == 2

    def test_strict_projection_raises_on_missing(self):
        project = ConvertUtils.field_projection(SortKey("a"), strict=True)
        with pytest.raises(KeyError):
            project({})

    def test_lenient_projection_flags_missing(self):
        project = ConvertUtils.field_projection(SortKey("a"))
        assert project({"a": 2}) == (False, 2)
        assert project({}) == (True, None)
        assert project({"a": None}) == (True, None)
