"""Tests for suggestion response adapters."""

import pytest

from scout.errors import AdapterError, ConfigError
from scout.suggest import (
    JsonPathAdapter,
    OpenSearchAdapter,
    adapter_from_config,
    adapter_to_config,
)


class TestOpenSearchAdapter:
    def test_parses_candidates(self):
        body = b'["cat", ["cat videos", "cat food"], [], {"google:suggesttype": []}]'
        result = OpenSearchAdapter().parse(body, "cat")
        assert result.term == "cat"
        assert result.candidates == ("cat videos", "cat food")

    def test_term_is_the_requested_one_not_the_echo(self):
        result = OpenSearchAdapter().parse('["CAT", ["cat videos"]]', "cat ")
        assert result.term == "cat "

    def test_empty_candidate_list(self):
        assert OpenSearchAdapter().parse('["x", []]', "x").candidates == ()

    @pytest.mark.parametrize("body", [
        "not json",
        '{"a": 1}',
        '["only one"]',
        '[1, ["a"]]',
        '["x", "not a list"]',
        '["x", ["a", 2]]',
    ])
    def test_rejects_malformed_bodies(self, body):
        with pytest.raises(AdapterError):
            OpenSearchAdapter().parse(body, "x")


class TestJsonPathAdapter:
    def test_walks_nested_keys(self):
        body = '{"data": {"names": ["aww", "awwducational"]}}'
        result = JsonPathAdapter("data.names").parse(body, "aww")
        assert result.candidates == ("aww", "awwducational")

    def test_walks_list_indices(self):
        body = '{"results": [{"items": ["a", "b"]}]}'
        assert JsonPathAdapter("results.0.items").parse(body, "a").candidates == ("a", "b")

    def test_missing_segment(self):
        with pytest.raises(AdapterError, match="no segment 'missing'"):
            JsonPathAdapter("data.missing").parse('{"data": {}}', "x")

    def test_index_out_of_range(self):
        with pytest.raises(AdapterError):
            JsonPathAdapter("items.3").parse('{"items": [["a"]]}', "x")

    def test_target_must_be_string_array(self):
        with pytest.raises(AdapterError):
            JsonPathAdapter("names").parse('{"names": "aww"}', "x")


class TestAdapterConfig:
    def test_default_is_opensearch(self):
        assert adapter_from_config(None) == OpenSearchAdapter()
        assert adapter_from_config("OpenSearch") == OpenSearchAdapter()

    def test_json_path(self):
        assert adapter_from_config({"json_path": " a.b "}) == JsonPathAdapter("a.b")

    @pytest.mark.parametrize("value", ["xml", {"json_path": ""}, {"path": "a"}, 3])
    def test_invalid(self, value):
        with pytest.raises(ConfigError):
            adapter_from_config(value)

    def test_to_config_inverts_from_config(self):
        for value in ("opensearch", {"json_path": "data.children"}):
            assert adapter_to_config(adapter_from_config(value)) == value
