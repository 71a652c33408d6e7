#!/usr/bin/env python3
# scout/suggest/staleness.py
from __future__ import annotations

"""
Request correlation for out-of-order suggestion replies.

There are no request ids and no cancellation: the orchestrator records the
term it wants *before* dispatching a fetch, and any reply for another term is
dropped on arrival. Replies for the same term are indistinguishable; the last
one to arrive wins.
"""

from typing import Optional

from scout.suggest.adapters import SuggestionSet


def should_accept(result: SuggestionSet, expected_term: Optional[str]) -> bool:
    """True iff `result` answers the term currently being waited on."""
    return expected_term is not None and result.term == expected_term


class PendingRequest:
    """
    Single-slot register of the one suggestion result the UI cares about.

    Only the orchestrator thread writes to it; workers never see it.
    """

    __slots__ = ("expected_term",)

    def __init__(self) -> None:
        self.expected_term: Optional[str] = None

    def expect(self, term: str) -> None:
        """Supersede whatever was pending with `term`."""
        self.expected_term = term

    def clear(self) -> None:
        self.expected_term = None

    def accepts(self, result: SuggestionSet) -> bool:
        return should_accept(result, self.expected_term)

    def __repr__(self) -> str:
        return f"PendingRequest(expected_term={self.expected_term!r})"
