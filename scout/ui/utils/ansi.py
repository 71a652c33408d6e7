#!/usr/bin/env python3
# scout/ui/utils/ansi.py
from __future__ import annotations

import ctypes
import os
import re
from typing import Optional, Sequence, Union

# ---- Core SGR maps ----------------------------------------------------------

# Foreground: 30-37, Bright Foreground: 90-97
# Background: 40-47, Bright Background: 100-107
ANSI = {
    "reset": "\x1b[0m",

    # styles
    "bold": "\x1b[1m",
    "dim": "\x1b[2m",
    "underline": "\x1b[4m",
    "reverse": "\x1b[7m",

    # fg 8-color
    "black": "\x1b[30m",
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "magenta": "\x1b[35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",

    # fg bright 8-color
    "bright_black": "\x1b[90m",
    "bright_red": "\x1b[91m",
    "bright_green": "\x1b[92m",
    "bright_yellow": "\x1b[93m",
    "bright_blue": "\x1b[94m",
    "bright_magenta": "\x1b[95m",
    "bright_cyan": "\x1b[96m",
    "bright_white": "\x1b[97m",
}

# Terminal control (cursor movement / line clearing)
CONTROL = {
    "clear_line": "\x1b[2K",
    "hide_cursor": "\x1b[?25l",
    "show_cursor": "\x1b[?25h",
}

ANSI_REGEX = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")

# Color names accepted in engine prompt styles, normalized (lowercase, no
# separators) -> base SGR code. Covers crossterm-style names ("DarkRed") as
# well as the names used in ANSI above ("bright_red").
_NAMED_COLORS: dict[str, int] = {
    "black": 30,
    "darkred": 31, "red": 91,
    "darkgreen": 32, "green": 92,
    "darkyellow": 33, "yellow": 93,
    "darkblue": 34, "blue": 94,
    "darkmagenta": 35, "magenta": 95,
    "darkcyan": 36, "cyan": 96,
    "grey": 37, "gray": 37,
    "darkgrey": 90, "darkgray": 90,
    "white": 97,
    "brightblack": 90, "brightred": 91, "brightgreen": 92, "brightyellow": 93,
    "brightblue": 94, "brightmagenta": 95, "brightcyan": 96, "brightwhite": 97,
}

ColorSpec = Union[str, int, Sequence[int]]

_vt_enabled_cache: Optional[bool] = None  # cached across calls


# ---- Utilities --------------------------------------------------------------

def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences from text."""
    return ANSI_REGEX.sub("", text)


def enable_windows_vt() -> bool:
    """
    Enable ANSI (VT) processing on Windows consoles when possible.
    Returns True if ANSI escapes should work on the current process.
    On non-Windows systems, always returns True.
    """
    global _vt_enabled_cache
    if _vt_enabled_cache is not None:
        return _vt_enabled_cache

    if os.name != "nt":
        _vt_enabled_cache = True
        return True

    if (
        os.environ.get("WT_SESSION")                  # Windows Terminal
        or os.environ.get("ANSICON")
        or os.environ.get("ConEmuANSI") == "ON"
        or os.environ.get("TERM", "").startswith(("xterm", "vt100"))
    ):
        _vt_enabled_cache = True
        return True

    try:
        kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
        ENABLE_VIRTUAL_TERMINAL_PROCESSING = 0x0004
        STD_OUTPUT_HANDLE = -11

        handle = kernel32.GetStdHandle(STD_OUTPUT_HANDLE)
        mode = ctypes.c_uint()
        if handle in (0, -1) or not kernel32.GetConsoleMode(handle, ctypes.byref(mode)):
            _vt_enabled_cache = False
        else:
            _vt_enabled_cache = bool(kernel32.SetConsoleMode(
                handle, mode.value | ENABLE_VIRTUAL_TERMINAL_PROCESSING))
    except Exception:
        _vt_enabled_cache = False

    return _vt_enabled_cache


def cursor_up(lines: int) -> str:
    """Move the cursor up `lines` rows (no-op for 0)."""
    return f"\x1b[{lines}A" if lines > 0 else ""


# ---- Low-level color builders ----------------------------------------------

def _parse_hex(rgb_hex: str) -> tuple[int, int, int]:
    return int(rgb_hex[1:3], 16), int(rgb_hex[3:5], 16), int(rgb_hex[5:7], 16)


def rgb(r: int, g: int, b: int, *, background: bool = False) -> str:
    """Return a true-color SGR sequence for (r,g,b)."""
    r = max(0, min(255, r))
    g = max(0, min(255, g))
    b = max(0, min(255, b))
    return f"\x1b[{48 if background else 38};2;{r};{g};{b}m"


def hex_color(hex_code: str, *, background: bool = False) -> str:
    """Return a true-color SGR from '#RRGGBB'."""
    if not re.fullmatch(r"#[0-9A-Fa-f]{6}", hex_code):
        raise ValueError("hex_code must be like '#RRGGBB'.")
    r, g, b = _parse_hex(hex_code)
    return rgb(r, g, b, background=background)


def color_sgr(spec: ColorSpec, *, background: bool = False) -> str:
    """
    Build an SGR sequence from a prompt color spec.

    Accepted forms:
        - name: 'DarkRed', 'dark_red', 'bright_blue', 'White'
        - '#RRGGBB'
        - int 0-255 (ANSI 256-color palette)
        - [r, g, b]
    Raises ValueError for anything else.
    """
    if isinstance(spec, bool):
        raise ValueError(f"Invalid color: {spec!r}")
    if isinstance(spec, int):
        if not 0 <= spec <= 255:
            raise ValueError(f"ANSI color must be 0-255, got {spec}")
        return f"\x1b[{48 if background else 38};5;{spec}m"
    if isinstance(spec, str):
        if spec.startswith("#"):
            return hex_color(spec, background=background)
        key = re.sub(r"[\s_-]", "", spec).lower()
        if key not in _NAMED_COLORS:
            raise ValueError(f"Invalid color name: {spec}")
        code = _NAMED_COLORS[key] + (10 if background else 0)
        return f"\x1b[{code}m"
    if not isinstance(spec, (list, tuple)):
        raise ValueError(f"Invalid color: {spec!r}")
    parts = list(spec)
    if len(parts) != 3 or not all(isinstance(p, int) and not isinstance(p, bool) and 0 <= p <= 255 for p in parts):
        raise ValueError(f"RGB color must be three values 0-255, got {spec!r}")
    return rgb(parts[0], parts[1], parts[2], background=background)


# ---- High-level helpers -----------------------------------------------------

def colorize(text: str, *styles: str) -> str:
    """
    Wrap text with one or more SGR styles/keys from ANSI (e.g., 'red', 'bold').
    Always auto-resets at the end.
    """
    seq = "".join(ANSI[s] for s in styles if s in ANSI)
    return f"{seq}{text}{ANSI['reset']}" if seq else text


def paint(text: str, fg: ColorSpec, bg: ColorSpec) -> str:
    """Wrap text in a foreground/background color pair, reset afterwards."""
    return f"{color_sgr(fg)}{color_sgr(bg, background=True)}{text}{ANSI['reset']}"
