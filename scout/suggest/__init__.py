#!/usr/bin/env python3
# scout/suggest/__init__.py
from __future__ import annotations

"""
Package for live autocomplete suggestions.

Provides:
- Response adapters and the SuggestionSet value (`adapters`).
- Stale-result rejection for out-of-order replies (`staleness`).
- HTTP fetch and per-request worker threads (`fetcher`).
"""

from .adapters import (
    SuggestionSet,
    SuggestionAdapter,
    OpenSearchAdapter,
    JsonPathAdapter,
    adapter_from_config,
    adapter_to_config,
)
from .staleness import PendingRequest, should_accept
from .fetcher import SuggestionFetcher, fetch_suggestions, http_get, USER_AGENT

__all__ = [
    "SuggestionSet",
    "SuggestionAdapter",
    "OpenSearchAdapter",
    "JsonPathAdapter",
    "adapter_from_config",
    "adapter_to_config",
    "PendingRequest",
    "should_accept",
    "SuggestionFetcher",
    "fetch_suggestions",
    "http_get",
    "USER_AGENT",
]
