#!/usr/bin/env python3
# scout/engines/registry.py
from __future__ import annotations

"""
Engine registry.

An immutable table of engines keyed by prefix id. Built once at boot and
passed to whatever needs it; there is no process-wide instance.
"""

from types import MappingProxyType
from typing import Iterable, Iterator, Optional

from scout.engines.engine_types import EngineDef
from scout.errors import ConfigError


def is_valid_prefix(engine_id: str) -> bool:
    """Prefixes are single tokens: no whitespace anywhere."""
    return not any(ch.isspace() for ch in engine_id)


class EngineRegistry:
    """Holds all engine definitions and provides lookup utilities."""

    __slots__ = ("_engines",)

    def __init__(self, engines: Iterable[EngineDef]) -> None:
        by_id: dict[str, EngineDef] = {}
        for engine in engines:
            if engine.id in by_id:
                raise ConfigError(f"Engine prefix '{engine.id}' defined twice.")
            if not is_valid_prefix(engine.id):
                raise ConfigError(
                    f"Engine '{engine.display_name}' has prefix '{engine.id}'; "
                    "prefixes have to be a single word.")
            by_id[engine.id] = engine
        if "" not in by_id:
            raise ConfigError("No default search engine found.")
        self._engines = MappingProxyType(by_id)

    # ---------------- Lookup ----------------

    @property
    def default(self) -> EngineDef:
        return self._engines[""]

    def get(self, engine_id: str) -> Optional[EngineDef]:
        """Return the engine for an exact prefix id, or None."""
        return self._engines.get(engine_id)

    def ids(self) -> list[str]:
        """All prefix ids, default ('') first, the rest sorted."""
        return [""] + sorted(k for k in self._engines if k)

    def all(self) -> list[EngineDef]:
        return [self._engines[k] for k in self.ids()]

    def __contains__(self, engine_id: object) -> bool:
        return engine_id in self._engines

    def __iter__(self) -> Iterator[EngineDef]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._engines)

    def __repr__(self) -> str:
        return f"EngineRegistry({self.ids()!r})"
