#!/usr/bin/env python3
# scout/interface/reconstruct.py
from __future__ import annotations

"""
Rebuild the input line from an accepted suggestion.

The suggestion is re-matched on its own. If it starts with some *other*
engine's prefix, it is escaped with '?' so accepting it cannot switch engines;
otherwise the prefix already in effect is kept in front of it.
"""

from scout.engines import EngineRegistry
from scout.interface.matcher import ESCAPE_MARKER, match_engine


def reconstruct_line(selected: str, current_prefix: str, registry: EngineRegistry) -> str:
    interfering_prefix = match_engine(selected, registry).matched_prefix

    if interfering_prefix and interfering_prefix != current_prefix:
        return f"{ESCAPE_MARKER}{selected}"
    if current_prefix:
        return f"{current_prefix} {selected}"
    return selected
