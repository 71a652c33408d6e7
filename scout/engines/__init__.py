#!/usr/bin/env python3
# scout/engines/__init__.py
from __future__ import annotations

"""
Package for search engine definitions.

Provides:
- Data structures (`EngineDef`, `PromptStyle`, `MatchResult`).
- The immutable `EngineRegistry` and the built-in engine table.
"""

from .engine_types import EngineDef, PromptStyle, MatchResult, TERM_PLACEHOLDER
from .registry import EngineRegistry, is_valid_prefix
from .defaults import DEFAULT_ENGINES, default_registry

__all__ = [
    "EngineDef",
    "PromptStyle",
    "MatchResult",
    "TERM_PLACEHOLDER",
    "EngineRegistry",
    "is_valid_prefix",
    "DEFAULT_ENGINES",
    "default_registry",
]
