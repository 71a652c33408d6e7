#!/usr/bin/env python3
# scout/ui/static/table.py
from __future__ import annotations

from typing import List, Optional, Sequence

from scout.ui.utils import print_line, strip_ansi


def _column_widths(rows: Sequence[Sequence[str]]) -> List[int]:
    """Compute visual widths ignoring ANSI sequences."""
    widths: List[int] = []
    for row in rows:
        for col_idx, cell in enumerate(row):
            cell_length = len(strip_ansi(cell))
            if col_idx >= len(widths):
                widths.append(cell_length)
            else:
                widths[col_idx] = max(widths[col_idx], cell_length)
    return widths


def format_table(
    rows: Sequence[Sequence[object]],
    headers: Optional[Sequence[object]] = None,
    *,
    gap: int = 2,
) -> str:
    """Return a left-aligned, borderless table (ANSI-safe widths)."""
    body = [[str(cell) for cell in row] for row in rows]
    head = [str(h) for h in headers] if headers is not None else None
    widths = _column_widths(([head] if head else []) + body)

    def render_row(row: Sequence[str]) -> str:
        cells = [
            cell + " " * (widths[i] - len(strip_ansi(cell)))
            for i, cell in enumerate(row)
        ]
        return (" " * gap).join(cells).rstrip()

    lines: List[str] = []
    if head:
        lines.append(render_row(head))
        lines.append(render_row(["-" * w for w in widths]))
    lines.extend(render_row(row) for row in body)
    return "\n".join(lines)


def print_table(
    rows: Sequence[Sequence[object]],
    headers: Optional[Sequence[object]] = None,
    *,
    file=None,
) -> None:
    """Print a formatted table to stdout (or the given file)."""
    text = format_table(rows, headers)
    if file is None:
        print_line(text)
    else:
        print_line(text, file=file)
