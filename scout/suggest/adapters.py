#!/usr/bin/env python3
# scout/suggest/adapters.py
from __future__ import annotations

"""
Response-shape adapters for suggestion endpoints.

Two variants, chosen per engine in the config:
- OpenSearchAdapter: ["term", ["cand 1", "cand 2", ...], ...]
- JsonPathAdapter:   arbitrary JSON; a dotted path leads to the candidate list,
                     e.g. "data.children" or "results.0.items".

Both expose `parse(body, term) -> SuggestionSet` and nothing else, so the
fetcher never needs to know which one it holds.
"""

import json
from dataclasses import dataclass
from typing import Any, Mapping, Union

from scout.errors import AdapterError, ConfigError


@dataclass(frozen=True, slots=True)
class SuggestionSet:
    """Candidates for one search term, in server order."""
    term: str
    candidates: tuple[str, ...] = ()


def _decode(body: Union[str, bytes]) -> Any:
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    try:
        return json.loads(body)
    except json.JSONDecodeError as exc:
        raise AdapterError(f"Response is not valid JSON: {exc}") from exc


def _string_list(value: Any, where: str) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise AdapterError(f"{where} is not an array")
    if not all(isinstance(item, str) for item in value):
        raise AdapterError(f"{where} contains non-string values")
    return tuple(value)


@dataclass(frozen=True, slots=True)
class OpenSearchAdapter:
    """OpenSearch suggestions: element 0 echoes the query, element 1 lists candidates."""

    name = "opensearch"

    def parse(self, body: Union[str, bytes], term: str) -> SuggestionSet:
        data = _decode(body)
        if not isinstance(data, list) or len(data) < 2:
            raise AdapterError("Expected a JSON array with at least two elements")
        if not isinstance(data[0], str):
            raise AdapterError("First array value is not a string")
        # Correlate on the term we asked for, not the echo; servers normalize it.
        return SuggestionSet(term=term, candidates=_string_list(data[1], "Second array value"))


@dataclass(frozen=True, slots=True)
class JsonPathAdapter:
    """Walk a dotted path of field names (or list indices) to an array of strings."""

    path: str
    name = "json_path"

    def parse(self, body: Union[str, bytes], term: str) -> SuggestionSet:
        node = _decode(body)
        for segment in self.path.split("."):
            if isinstance(node, Mapping) and segment in node:
                node = node[segment]
            elif isinstance(node, list) and segment.isdigit() and int(segment) < len(node):
                node = node[int(segment)]
            else:
                raise AdapterError(f"JsonPath '{self.path}' has no segment '{segment}'")
        return SuggestionSet(term=term, candidates=_string_list(node, f"JsonPath '{self.path}'"))


SuggestionAdapter = Union[OpenSearchAdapter, JsonPathAdapter]


def adapter_from_config(value: Any) -> SuggestionAdapter:
    """
    Build an adapter from its config form.

        "opensearch"                 -> OpenSearchAdapter()
        {"json_path": "a.b"}         -> JsonPathAdapter("a.b")
        None                         -> OpenSearchAdapter()
    """
    if value is None or (isinstance(value, str) and value.strip().lower() == "opensearch"):
        return OpenSearchAdapter()
    if isinstance(value, Mapping) and set(value) == {"json_path"}:
        path = value["json_path"]
        if not isinstance(path, str) or not path.strip():
            raise ConfigError("suggestion_adapter.json_path must be a non-empty string")
        return JsonPathAdapter(path.strip())
    raise ConfigError(
        f"Unknown suggestion_adapter {value!r}; use \"opensearch\" or {{ json_path = \"a.b\" }}")


def adapter_to_config(adapter: SuggestionAdapter) -> Any:
    """Inverse of adapter_from_config (used when writing the default config)."""
    if isinstance(adapter, JsonPathAdapter):
        return {"json_path": adapter.path}
    return "opensearch"
