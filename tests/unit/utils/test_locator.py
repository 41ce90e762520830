"""Unit tests for the recursive field locator."""

from __future__ import annotations

from pagewalk.utils import locate_field


class TestLocateField:
    """Test locate_field lookup and formatting."""

    def test_top_level_integer(self):
        assert locate_field({"offset": 250}, "offset") == "250"

    def test_top_level_float_has_no_fractional_digits(self):
        assert locate_field({"offset": 123.0}, "offset") == "123"

    def test_float_formatted_like_printf(self):
        """Test fractional values follow the %.0f convention."""
        assert locate_field({"total": 41.75}, "total") == format(41.75, ".0f")
        assert locate_field({"total": 41.75}, "total") == "42"

    def test_large_integer_is_exact(self):
        assert locate_field({"vid-offset": 9007199254740993}, "vid-offset") == "9007199254740993"

    def test_missing_returns_none(self):
        assert locate_field({"a": 1, "b": {"c": 2}}, "offset") is None

    def test_empty_document(self):
        assert locate_field({}, "offset") is None

    def test_nested_at_any_depth(self):
        doc = {"meta": {"paging": {"next": {"after": 40}}}}
        assert locate_field(doc, "after") == "40"

    def test_top_level_wins_over_nested(self):
        doc = {"paging": {"offset": 5}, "offset": 10}
        assert locate_field(doc, "offset") == "10"

    def test_first_nested_object_in_key_order_wins(self):
        """Test depth-first search visits nested objects in insertion order."""
        doc = {"first": {"deep": {"offset": 1}}, "second": {"offset": 2}}
        assert locate_field(doc, "offset") == "1"

        doc = {"second": {"offset": 2}, "first": {"deep": {"offset": 1}}}
        assert locate_field(doc, "offset") == "2"

    def test_arrays_are_not_searched(self):
        doc = {"results": [{"offset": 7}], "paging": {"offset": 3}}
        assert locate_field(doc, "offset") == "3"

        assert locate_field({"results": [{"offset": 7}]}, "offset") is None

    def test_non_numeric_value_continues_search(self):
        """Test a string under the name does not stop the search."""
        doc = {"offset": "abc", "paging": {"offset": 20}}
        assert locate_field(doc, "offset") == "20"

    def test_non_numeric_only_returns_none(self):
        assert locate_field({"offset": "abc"}, "offset") is None
        assert locate_field({"offset": None}, "offset") is None

    def test_boolean_is_not_numeric(self):
        assert locate_field({"has-more": True}, "has-more") is None

    def test_non_finite_float_is_not_numeric(self):
        assert locate_field({"offset": float("nan")}, "offset") is None
        assert locate_field({"offset": float("inf")}, "offset") is None

    def test_object_under_name_is_searched(self):
        doc = {"offset": {"offset": 15}}
        assert locate_field(doc, "offset") == "15"

    def test_negative_value(self):
        assert locate_field({"offset": -3.0}, "offset") == "-3"
