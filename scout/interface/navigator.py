#!/usr/bin/env python3
# scout/interface/navigator.py
from __future__ import annotations

"""Cyclic cursor over the displayed suggestion list."""

from typing import Optional


def select_next(cursor: Optional[int], count: int) -> Optional[int]:
    """None -> 0, i -> (i + 1) mod count; stays None on an empty list."""
    if count <= 0:
        return None
    if cursor is None:
        return 0
    return (cursor + 1) % count


def select_prev(cursor: Optional[int], count: int) -> Optional[int]:
    """None -> last, i -> i - 1 wrapping to the last entry at 0."""
    # 0 on an empty list; callers check for an empty list first
    last = max(count - 1, 0)
    if cursor is None or cursor == 0:
        return last
    return min(cursor - 1, last)
