#!/usr/bin/env python3
# scout/ui/static/screen.py
from __future__ import annotations

"""
In-place frame renderer for the query prompt.

Layout (redrawn every loop iteration):
    <prompt> <input line>_
    suggestion 1
    suggestion 2          <- highlighted when selected
    ...                   (always `max_lines` rows so the frame never jumps)

The terminal is in raw mode while a session runs, so every row ends with
'\\r\\n' and the cursor is walked back up after drawing.
"""

import sys
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from scout.ui.utils import (
    ANSI,
    CONTROL,
    PRINT_MUTEX,
    cursor_up,
    get_terminal_columns,
    paint,
    strip_ansi,
    truncate_from_end,
)


@dataclass(frozen=True, slots=True)
class Frame:
    """Everything the renderer needs to draw one frame."""
    prompt: str
    short_prompt: str
    input_line: str
    suggestions: Sequence[str] = ()
    selected: Optional[int] = None


class TerminalRenderer:
    """Draws frames to a stream using plain ANSI control sequences."""

    def __init__(
        self,
        max_lines: int = 15,
        *,
        stream=None,
        columns: Callable[[], int] = get_terminal_columns,
    ) -> None:
        self.max_lines = max_lines
        self._stream = stream if stream is not None else sys.stdout
        self._columns = columns

    # ---------------- Lifecycle ----------------

    def begin(self) -> None:
        self._write(CONTROL["hide_cursor"])

    def finish(self, message: Optional[str] = None) -> None:
        """Wipe the frame area, print `message` (if any), restore the cursor."""
        rows = [f"\r{CONTROL['clear_line']}"]
        rows.extend(f"\r\n{CONTROL['clear_line']}" for _ in range(self.max_lines))
        out = "".join(rows) + cursor_up(self.max_lines) + "\r"
        if message:
            out += f"{message}\r\n"
        self._write(out + CONTROL["show_cursor"])

    # ---------------- Drawing ----------------

    def compose(self, frame: Frame) -> list[str]:
        """Return the visible rows (prompt row first) for `frame`."""
        width = max(1, self._columns())
        rows = [self._prompt_row(frame, width)]
        shown = list(frame.suggestions)[: self.max_lines]
        for index in range(self.max_lines):
            if index >= len(shown):
                rows.append("")
                continue
            text = truncate_from_end(shown[index], width)
            if frame.selected == index:
                text = paint(text, "black", "white")
            rows.append(text)
        return rows

    def draw(self, frame: Frame) -> None:
        rows = self.compose(frame)
        out = "".join(f"\r{CONTROL['clear_line']}{row}\r\n" for row in rows)
        self._write(out + cursor_up(len(rows)))

    def _prompt_row(self, frame: Frame, width: int) -> str:
        full = f"{frame.prompt}{ANSI['reset']} {frame.input_line}_"
        if len(strip_ansi(full)) < width:
            return full
        # 2 = spacer + cursor
        room = max(0, width - len(strip_ansi(frame.short_prompt)) - 2)
        return f"{frame.short_prompt}{ANSI['reset']} {truncate_from_end(frame.input_line, room)}_"

    def _write(self, text: str) -> None:
        with PRINT_MUTEX:
            self._stream.write(text)
            self._stream.flush()
