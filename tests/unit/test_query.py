"""tests/unit/test_query.py"""

import pytest

from paylink.http.query import QueryParams


class TestQueryParams:
    """Tests for QueryParams class."""

    def test_init_empty(self):
        """Test QueryParams initialization with no arguments."""
        params = QueryParams()
        assert params._params == {}
        assert len(params) == 0

    def test_init_with_dict(self):
        """Test initialization with single values and lists."""
        params = QueryParams({"amount": "100", "tags": ["a", "b"]})
        assert params._params == {"amount": ["100"], "tags": ["a", "b"]}

    def test_init_copies_lists(self):
        """Test that initial lists are not shared with the caller."""
        values = ["a"]
        params = QueryParams({"tags": values})
        params.add("tags", "b")
        assert values == ["a"]

    def test_getitem_returns_first_value(self):
        """Test that item access returns the first value."""
        params = QueryParams({"tags": ["a", "b"]})
        assert params["tags"] == "a"

    def test_getitem_missing_raises(self):
        """Test that a missing key raises KeyError."""
        with pytest.raises(KeyError):
            QueryParams()["missing"]

    def test_get_default(self):
        """Test Mapping.get() fallback."""
        assert QueryParams().get("missing", "x") == "x"

    def test_set_replaces_values(self):
        """Test that set() replaces every value of a key."""
        params = QueryParams({"tags": ["a", "b"]})
        params.set("tags", "c")
        assert params.get_all("tags") == ["c"]

    def test_add_appends_values(self):
        """Test that add() keeps earlier values."""
        params = QueryParams()
        params.add("tags", "a")
        params.add("tags", "b")
        assert params.get_all("tags") == ["a", "b"]
        assert len(params) == 1

    def test_get_all_missing(self):
        """Test get_all() on a missing key."""
        assert QueryParams().get_all("missing") == []

    def test_remove(self):
        """Test remove() drops the key and ignores missing keys."""
        params = QueryParams({"a": "1"})
        params.remove("a")
        params.remove("b")
        assert "a" not in params

    def test_insertion_order(self):
        """Test that keys keep insertion order."""
        params = QueryParams()
        params.set("z", "1")
        params.set("a", "2")
        params.set("m", "3")
        assert list(params) == ["z", "a", "m"]

    def test_multi_items(self):
        """Test multi_items() flattens repeated keys."""
        params = QueryParams()
        params.add("a", "1")
        params.set("b", "2")
        params.add("a", "3")
        assert params.multi_items() == [("a", "1"), ("a", "3"), ("b", "2")]

    def test_to_dict_is_a_copy(self):
        """Test to_dict() returns independent lists."""
        params = QueryParams({"a": "1"})
        data = params.to_dict()
        data["a"].append("2")
        assert params.get_all("a") == ["1"]

    def test_encode(self):
        """Test form encoding escapes keys and values."""
        params = QueryParams()
        params.set("card[name]", "John Doe")
        params.add("tags", "a&b")
        params.add("tags", "c")
        assert params.encode() == "card%5Bname%5D=John+Doe&tags=a%26b&tags=c"

    def test_encode_empty(self):
        """Test encoding an empty set."""
        assert QueryParams().encode() == ""

    def test_equality(self):
        """Test equality between parameter sets."""
        assert QueryParams({"a": "1"}) == QueryParams({"a": ["1"]})
        assert QueryParams({"a": "1"}) != QueryParams({"a": "2"})
