#!/usr/bin/env python3
# scout/ui/__init__.py
from __future__ import annotations
# Re-export convenient top-level API
from .utils import (
    ANSI,
    CONTROL,
    strip_ansi,
    enable_windows_vt,
    cursor_up,
    colorize,
    color_sgr,
    paint,
    rgb,
    hex_color,
    PRINT_MUTEX,
    print_line,
    get_terminal_columns,
    truncate_from_end,
)
from .static import (
    format_table,
    print_table,
    Frame,
    TerminalRenderer,
    init_logger,
    ColorizingStreamHandler,
    PlainFormatter,
)

__all__ = [
    "ANSI",
    "CONTROL",
    "strip_ansi",
    "enable_windows_vt",
    "cursor_up",
    "colorize",
    "color_sgr",
    "paint",
    "rgb",
    "hex_color",
    "PRINT_MUTEX",
    "print_line",
    "get_terminal_columns",
    "truncate_from_end",
    "format_table",
    "print_table",
    "Frame",
    "TerminalRenderer",
    "init_logger",
    "ColorizingStreamHandler",
    "PlainFormatter",
]
