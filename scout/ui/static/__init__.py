#!/usr/bin/env python3
# scout/ui/static/__init__.py
from __future__ import annotations
from .table import format_table, print_table
from .screen import Frame, TerminalRenderer
from .logging import (
    init_logger,
    ColorizingStreamHandler,
    PlainFormatter,
)

__all__ = [
    "format_table",
    "print_table",
    "Frame",
    "TerminalRenderer",
    "init_logger",
    "ColorizingStreamHandler",
    "PlainFormatter",
]
