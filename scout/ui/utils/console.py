#!/usr/bin/env python3
# scout/ui/utils/console.py
from __future__ import annotations

import shutil
import sys
import threading

# Single shared print mutex for all UI output (frames/logging).
PRINT_MUTEX = threading.Lock()


def print_line(text: str = "", *, file=None, flush: bool = False) -> None:
    """Thread-safe single-line print that cooperates with the frame renderer."""
    file = file or sys.stdout
    with PRINT_MUTEX:
        file.write(f"{text}\n")
        if flush:
            file.flush()


def get_terminal_columns(default: int = 80) -> int:
    """Return current terminal column width with a sensible default."""
    try:
        return shutil.get_terminal_size((default, 20)).columns
    except Exception:
        return default


def truncate_from_end(text: str, width: int) -> str:
    """
    Keep the tail of `text` so it fits in `width` columns.

    The dropped head is marked with up to three dots:
        truncate_from_end("the quick brown", 8) -> "...brown"
        truncate_from_end("abcd", 2)            -> ".."
    """
    if len(text) <= width:
        return text
    tail = text[len(text) - width:]
    with_dots = "..." + tail[min(3, len(tail)):]
    return with_dots[max(0, len(with_dots) - width):]
