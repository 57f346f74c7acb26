"""Unit tests for query string construction."""

from urllib.parse import unquote

from mite_tools.api.query import build_query_string, filter_params
from mite_tools.models import TimeEntriesFilter


class TestBuildQueryString:
    """Tests for build_query_string()."""

    def test_scalars_in_insertion_order(self):
        assert build_query_string({"project_id": 42, "billable": True}) == "?project_id=42&billable=true"

    def test_false_is_lowercase(self):
        assert build_query_string({"locked": False}) == "?locked=false"

    def test_list_is_comma_joined(self):
        assert build_query_string({"note": ["a", "b"]}) == "?note=a,b"

    def test_nested_mapping_uses_brackets(self):
        query = build_query_string({"at": "today", "custom": {"a": 1, "b": "x"}})
        assert query == "?at=today&custom[a]=1&custom[b]=x"

    def test_none_values_are_skipped(self):
        query = build_query_string({"user_id": None, "page": 2, "limit": None})
        assert query == "?page=2"
        assert "user_id" not in query
        assert "limit" not in query

    def test_empty_inputs_give_empty_string(self):
        assert build_query_string(None) == ""
        assert build_query_string({}) == ""
        assert build_query_string({"at": None}) == ""

    def test_empty_nested_mapping_is_dropped(self):
        assert build_query_string({"custom": {}, "page": 1}) == "?page=1"

    def test_pairs_split_back_into_original_values(self):
        filters = {"customer_id": 7, "at": "this_month", "sort": "date", "limit": 50}
        query = build_query_string(filters)

        pairs = dict(part.split("=", 1) for part in query[1:].split("&"))
        assert pairs == {key: str(value) for key, value in filters.items()}

    def test_reserved_characters_are_escaped(self):
        assert build_query_string({"note": "R&D"}) == "?note=R%26D"
        assert build_query_string({"note": "ticket #12", "at": "today"}) == "?note=ticket%20%2312&at=today"

    def test_list_items_are_escaped_but_comma_separator_is_not(self):
        assert build_query_string({"note": ["a,b", "c=d"]}) == "?note=a%2Cb,c%3Dd"

    def test_nested_keys_and_values_are_escaped(self):
        query = build_query_string({"custom": {"a b": "x&y"}})
        assert query == "?custom[a%20b]=x%26y"

    def test_escaped_pairs_decode_to_original_values(self):
        filters = {"note": "50% & more", "at": "today"}
        query = build_query_string(filters)

        pairs = dict(part.split("=", 1) for part in query[1:].split("&"))
        assert {key: unquote(value) for key, value in pairs.items()} == filters

    def test_none_list_items_render_empty(self):
        assert build_query_string({"note": ["a", None, "b"]}) == "?note=a,,b"
        assert "None" not in build_query_string({"note": [None]})


class TestTimeEntriesFilter:
    """Query strings built from the typed filter model."""

    def test_from_uses_wire_name(self):
        filters = TimeEntriesFilter(from_="2024-01-01", to="2024-01-31")
        assert build_query_string(filters) == "?from=2024-01-01&to=2024-01-31"

    def test_unset_fields_are_omitted(self):
        filters = TimeEntriesFilter(user_id="current", billable=False)
        assert filter_params(filters) == {"user_id": "current", "billable": False}
        assert build_query_string(filters) == "?user_id=current&billable=false"

    def test_note_list(self):
        filters = TimeEntriesFilter(note=["meeting", "review"])
        assert build_query_string(filters) == "?note=meeting,review"
