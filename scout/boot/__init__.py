#!/usr/bin/env python3
# scout/boot/__init__.py
from __future__ import annotations
"""
Boot sequence package.

Exports:
- boot_sequence: console setup, config load and logger init with [  OK  ] / [FAILED] lines.
- BootState: Dataclass holding the loaded config and the logger.
"""


from .boot import BootState, boot_sequence

__all__ = ["boot_sequence", "BootState"]
