#!/usr/bin/env python3
# scout/interface/matcher.py
from __future__ import annotations

"""
Prefix matching: which engine does the input line target?

Rules, in order:
  1) A leading '?' forces the default engine and is stripped (escape hatch,
     like Chrome's keyword search).
  2) A prefix is only recognized once it is a completed token, i.e. there is
     a second token or trailing whitespace after the first one.
  3) The first token selects an engine if it equals a registered id exactly.
  4) Anything else goes to the default engine with the whole trimmed line.
"""

from scout.engines import EngineRegistry, MatchResult

ESCAPE_MARKER = "?"


def match_engine(line: str, registry: EngineRegistry) -> MatchResult:
    """Resolve `line` to (engine, matched prefix, search term)."""
    default_engine = registry.default

    if line.startswith(ESCAPE_MARKER):
        return MatchResult(default_engine, "", line[len(ESCAPE_MARKER):])

    words = line.split()
    # still typing the first word: it can't be a prefix yet
    if not words or (len(words) == 1 and not line[-1].isspace()):
        return MatchResult(default_engine, "", line.strip())

    candidate = words[0]
    engine = registry.get(candidate)
    if engine is None:
        return MatchResult(default_engine, "", line.strip())

    remainder = line.lstrip()[len(candidate):].strip()
    return MatchResult(engine, candidate, remainder)
