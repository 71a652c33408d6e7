#!/usr/bin/env python3
# scout/suggest/fetcher.py
from __future__ import annotations

"""
Live suggestion retrieval.

One GET per fetch, off the main loop:
- http_get: urllib request with a conservative timeout and a UA header.
- fetch_suggestions: build the engine's suggestion URL, GET it, run the adapter.
- SuggestionFetcher.dispatch: run one fetch on a short-lived worker thread and
  report through exactly one of two callbacks.
"""

import http.client
import logging
import socket
import threading
import urllib.error
import urllib.request
from typing import TYPE_CHECKING, Callable, Optional

from scout.errors import AdapterError, FetchError
from scout.suggest.adapters import SuggestionSet

if TYPE_CHECKING:
    from scout.engines.engine_types import EngineDef


USER_AGENT = "scout/1.0 (+https://local)"

HttpGet = Callable[[str, float], bytes]


def http_get(url: str, timeout_seconds: float) -> bytes:
    """GET `url` and return the body; any failure becomes FetchError."""
    try:
        request = urllib.request.Request(url, headers={"User-Agent": USER_AGENT})
        with urllib.request.urlopen(request, timeout=timeout_seconds) as response:
            status = getattr(response, "status", 200)
            if not 200 <= status < 300:
                raise FetchError(f"GET {url} returned HTTP {status}")
            return response.read()
    except urllib.error.HTTPError as exc:
        raise FetchError(f"GET {url} returned HTTP {exc.code}") from exc
    except (urllib.error.URLError, socket.timeout, TimeoutError, OSError) as exc:
        raise FetchError(f"GET {url} failed: {exc}") from exc
    except (ValueError, http.client.HTTPException) as exc:
        # malformed URL from config, or a broken HTTP response
        raise FetchError(f"GET {url} failed: {exc}") from exc


def fetch_suggestions(
    engine: "EngineDef",
    term: str,
    *,
    timeout_seconds: float = 5.0,
    get: HttpGet = http_get,
) -> SuggestionSet:
    """
    Fetch and decode suggestions for `term` from `engine`.

    Raises:
        FetchError: no suggestion URL, network failure, non-2xx, timeout.
        AdapterError: the body does not have the adapter's expected shape.
    """
    if not engine.suggestion_url_template:
        raise FetchError(f"Engine '{engine.display_name}' has no suggestion URL")
    body = get(engine.suggestion_url(term), timeout_seconds)
    return engine.suggestion_adapter.parse(body, term)


class SuggestionFetcher:
    """Spawns one worker thread per fetch; results are reported via callbacks."""

    def __init__(
        self,
        *,
        timeout_seconds: float = 5.0,
        get: HttpGet = http_get,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.timeout_seconds = timeout_seconds
        self._get = get
        self._logger = logger or logging.getLogger("scout.fetch")

    def dispatch(
        self,
        engine: "EngineDef",
        term: str,
        on_result: Callable[[SuggestionSet], None],
        on_error: Callable[[Exception], None],
    ) -> threading.Thread:
        """Start a fetch for `term` and return its (daemon) worker thread."""
        worker = threading.Thread(
            target=self._work,
            args=(engine, term, on_result, on_error),
            name=f"fetch:{term[:32]}",
            daemon=True,
        )
        worker.start()
        return worker

    def _work(
        self,
        engine: "EngineDef",
        term: str,
        on_result: Callable[[SuggestionSet], None],
        on_error: Callable[[Exception], None],
    ) -> None:
        try:
            result = fetch_suggestions(
                engine, term, timeout_seconds=self.timeout_seconds, get=self._get)
        except (FetchError, AdapterError) as exc:
            self._logger.debug("Suggestion fetch for %r failed: %s", term, exc)
            on_error(exc)
            return
        on_result(result)
