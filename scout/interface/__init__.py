#!/usr/bin/env python3
# scout/interface/__init__.py
from __future__ import annotations

"""
Package for the interactive prompt.

Provides:
- Prefix matching and line reconstruction for engine dispatch.
- Cyclic suggestion selection.
- Logical actions and the keybinding table.
- The orchestrator (event loop) and its messages.
- The key reader frontend and session wiring.
"""

# Matching FIRST (reconstruct and the loop depend on it)
from .matcher import match_engine, ESCAPE_MARKER
from .reconstruct import reconstruct_line
from .navigator import select_next, select_prev

# Keys / actions
from .keys import (
    BindableAction,
    InsertChar,
    Action,
    KeyBindings,
    parse_key,
    format_key,
    DEFAULT_KEYBINDS,
    default_keybindings,
)

# Browser hand-off
from .opener import open_url

# Event loop
from .handler import (
    Orchestrator,
    LoopOutcome,
    LoopState,
    KeyMessage,
    SuggestionsMessage,
    FetchFailedMessage,
    delete_word,
)

# Frontend (after the loop is available)
from .cli import KeyReader, key_names, run_session

__all__ = [
    # matching
    "match_engine",
    "ESCAPE_MARKER",
    "reconstruct_line",
    "select_next",
    "select_prev",
    # keys
    "BindableAction",
    "InsertChar",
    "Action",
    "KeyBindings",
    "parse_key",
    "format_key",
    "DEFAULT_KEYBINDS",
    "default_keybindings",
    # opener
    "open_url",
    # loop
    "Orchestrator",
    "LoopOutcome",
    "LoopState",
    "KeyMessage",
    "SuggestionsMessage",
    "FetchFailedMessage",
    "delete_word",
    # frontend
    "KeyReader",
    "key_names",
    "run_session",
]
