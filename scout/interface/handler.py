#!/usr/bin/env python3
# scout/interface/handler.py
from __future__ import annotations

"""
Orchestrator: the single-threaded event loop behind the prompt.

Every iteration renders one frame, blocks on the inbox, and applies exactly
one message:
  KeyMessage          - a logical action from the key reader thread
  SuggestionsMessage  - a finished fetch (gated by the staleness filter)
  FetchFailedMessage  - a failed fetch (logged, otherwise ignored)

State owned here and nowhere else: the input line, the pending request, the
displayed suggestions and the selection cursor. Workers only post messages.
"""

import logging
import queue
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Protocol, Union

from scout.engines import EngineDef, EngineRegistry, MatchResult
from scout.interface.keys import Action, BindableAction, InsertChar
from scout.interface.matcher import match_engine
from scout.interface.navigator import select_next, select_prev
from scout.interface.opener import open_url
from scout.interface.reconstruct import reconstruct_line
from scout.suggest import PendingRequest, SuggestionSet
from scout.ui import Frame

# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class KeyMessage:
    action: Action


@dataclass(frozen=True, slots=True)
class SuggestionsMessage:
    suggestions: SuggestionSet


@dataclass(frozen=True, slots=True)
class FetchFailedMessage:
    term: str
    error: Exception


Message = Union[KeyMessage, SuggestionsMessage, FetchFailedMessage]


@dataclass(frozen=True, slots=True)
class LoopOutcome:
    """How the loop ended: submitted (with the opened URL) or exited."""
    submitted: bool
    url: Optional[str] = None


class LoopState(str, Enum):
    IDLE = "idle"
    FETCH_PENDING = "fetch_pending"
    DISPLAYING = "displaying"


# ---------------------------------------------------------------------------
# Collaborator protocols
# ---------------------------------------------------------------------------


class Renderer(Protocol):
    def begin(self) -> None: ...

    def draw(self, frame: Frame) -> None: ...

    def finish(self, message: Optional[str] = None) -> None: ...


class Fetcher(Protocol):
    def dispatch(
        self,
        engine: EngineDef,
        term: str,
        on_result: Callable[[SuggestionSet], None],
        on_error: Callable[[Exception], None],
    ) -> object: ...


# What triggers a refetch: a different endpoint/decoder or a different term.
_RefreshKey = tuple[str, object, str]

_EDIT_ACTIONS = {
    BindableAction.DELETE_CHAR,
    BindableAction.DELETE_WORD,
    BindableAction.CLEAR_INPUT,
}


def delete_word(line: str) -> str:
    """Drop trailing whitespace, then the last word."""
    trimmed = line.rstrip()
    end = len(trimmed)
    while end > 0 and not trimmed[end - 1].isspace():
        end -= 1
    return trimmed[:end]


class Orchestrator:
    """Owns the input line and wires matcher -> fetch -> render together."""

    def __init__(
        self,
        registry: EngineRegistry,
        *,
        fetcher: Fetcher,
        renderer: Renderer,
        opener: Callable[[str], None] = open_url,
        inbox: Optional["queue.Queue[Message]"] = None,
        max_suggestions: int = 15,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.registry = registry
        self.max_suggestions = max_suggestions
        self.inbox: "queue.Queue[Message]" = inbox if inbox is not None else queue.Queue()
        self._fetcher = fetcher
        self._renderer = renderer
        self._opener = opener
        self._logger = logger or logging.getLogger("scout.loop")

        self.input_line = ""
        self.pending = PendingRequest()
        self.suggestions: Optional[SuggestionSet] = None
        self.cursor: Optional[int] = None
        self.state = LoopState.IDLE
        self._refresh_key: Optional[_RefreshKey] = None

        self._refresh()

    # ---------------- Derived views ----------------

    @property
    def match(self) -> MatchResult:
        return match_engine(self.input_line, self.registry)

    def selectable_count(self) -> int:
        if self.suggestions is None:
            return 0
        return min(len(self.suggestions.candidates), self.max_suggestions)

    def frame(self) -> Frame:
        prompt = self.match.engine.prompt
        return Frame(
            prompt=prompt.render(),
            short_prompt=prompt.render_short(),
            input_line=self.input_line,
            suggestions=self.suggestions.candidates if self.suggestions else (),
            selected=self.cursor,
        )

    # ---------------- Main loop ----------------

    def run(self) -> LoopOutcome:
        """Render, wait for a message, apply it; until submit or exit."""
        self._renderer.begin()
        while True:
            self._renderer.draw(self.frame())
            outcome = self.handle_message(self.inbox.get())
            if outcome is not None:
                return outcome

    def handle_message(self, message: Message) -> Optional[LoopOutcome]:
        if isinstance(message, KeyMessage):
            return self.handle_action(message.action)
        if isinstance(message, SuggestionsMessage):
            self.handle_suggestions(message.suggestions)
        elif isinstance(message, FetchFailedMessage):
            self._logger.debug("No suggestions for %r: %s", message.term, message.error)
        return None

    # ---------------- Fetch completion ----------------

    def handle_suggestions(self, result: SuggestionSet) -> bool:
        """Display `result` if it answers the pending term; True if accepted."""
        if not self.pending.accepts(result):
            self._logger.debug(
                "Dropping stale suggestions for %r (waiting for %r)",
                result.term, self.pending.expected_term)
            return False
        self.suggestions = result
        self.cursor = None
        self.state = LoopState.DISPLAYING
        return True

    # ---------------- Actions ----------------

    def handle_action(self, action: Action) -> Optional[LoopOutcome]:
        if isinstance(action, InsertChar):
            self._insert(action.char)
        elif action in _EDIT_ACTIONS:
            self._edit(action)
        elif action is BindableAction.SELECT_NEXT:
            self._navigate(select_next)
        elif action is BindableAction.SELECT_PREV:
            self._navigate(select_prev)
        elif action is BindableAction.SUBMIT:
            return self._submit()
        elif action is BindableAction.EXIT:
            self._renderer.finish()
            return LoopOutcome(submitted=False)
        return None

    def _insert(self, char: str) -> None:
        self.cursor = None
        # single-word engines (subreddits): a space would never be searchable
        if char == " " and self.match.engine.space_becomes == "":
            return
        self.input_line += char
        self._refresh()

    def _edit(self, action: BindableAction) -> None:
        self.cursor = None
        if action is BindableAction.DELETE_CHAR:
            self.input_line = self.input_line[:-1]
        elif action is BindableAction.DELETE_WORD:
            self.input_line = delete_word(self.input_line)
        else:
            self.input_line = ""
        self._refresh()

    def _navigate(self, step: Callable[[Optional[int], int], Optional[int]]) -> None:
        count = self.selectable_count()
        if self.suggestions is None or count == 0:
            return
        self.cursor = step(self.cursor, count)
        if self.cursor is None:
            return
        selected = self.suggestions.candidates[self.cursor]
        # a preview is not an edit: no fetch now, and the refresh key still
        # holds the pre-preview term so the next edit compares against it
        self.input_line = reconstruct_line(selected, self.match.matched_prefix, self.registry)

    def _submit(self) -> LoopOutcome:
        current = self.match
        url = current.engine.search_url(current.search_term)
        self._renderer.finish(f"Opening {url}")
        self._opener(url)
        return LoopOutcome(submitted=True, url=url)

    # ---------------- Suggestion refresh ----------------

    @staticmethod
    def _key_for(match: MatchResult) -> _RefreshKey:
        engine = match.engine
        return (engine.suggestion_url_template, engine.suggestion_adapter, match.search_term)

    def _refresh(self) -> None:
        """Re-match the line and fetch if the engine endpoint or term changed."""
        current = self.match
        key = self._key_for(current)
        if key == self._refresh_key:
            return
        previous, self._refresh_key = self._refresh_key, key

        if previous is not None and previous[:2] != key[:2]:
            # different endpoint: old candidates are meaningless now
            self.suggestions = None
            self.cursor = None

        term = current.search_term
        if not term or not current.engine.suggestion_url_template:
            self.suggestions = None
            self.cursor = None
            self.pending.clear()
            self.state = LoopState.IDLE
            return

        # record interest before dispatch so a fast reply can't be missed
        self.pending.expect(term)
        self.state = LoopState.FETCH_PENDING
        self._logger.debug("Fetching suggestions for %r from %s", term, current.engine.display_name)
        self._fetcher.dispatch(
            current.engine,
            term,
            lambda result: self.inbox.put(SuggestionsMessage(result)),
            lambda error: self.inbox.put(FetchFailedMessage(term, error)),
        )
