#!/usr/bin/env python3
# scout/ui/utils/__init__.py
from __future__ import annotations
from .ansi import (
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
    ColorSpec,
)
from .console import PRINT_MUTEX, print_line, get_terminal_columns, truncate_from_end

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
    "ColorSpec",
    "PRINT_MUTEX",
    "print_line",
    "get_terminal_columns",
    "truncate_from_end",
]
