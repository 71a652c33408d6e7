#!/usr/bin/env python3
# scout/boot/boot.py
from __future__ import annotations
"""
Startup sequence for scout.

Runs before the prompt appears, so it stays short: console setup, config,
logging. With `verbose` each step prints a Linux-style status line; failures
are always reported.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional
import logging
import platform

from scout.config import AppConfig, get_config
from scout.ui import colorize, enable_windows_vt, init_logger, print_line


@dataclass(slots=True)
class BootState:
    config: AppConfig
    logger: logging.Logger


def _step(label: str, fn: Callable[[], Any], verbose: bool = False) -> Any:
    """Run a boot step with status output."""
    try:
        out = fn()
    except Exception as exc:
        print_line(
            colorize(f"[FAILED] {label} ({type(exc).__name__}: {exc})", "red")
        )
        raise
    if verbose:
        print_line(colorize(f"[  OK  ] {label}", "green"))
    return out


def boot_sequence(config_path: Optional[Path] = None, verbose: bool = False) -> BootState:
    # ---------- console ----------
    _step("Enable ANSI sequences", enable_windows_vt, verbose)
    _step(
        f"Detect environment: {platform.system()} {platform.release()} / Python {platform.python_version()}",
        lambda: None,
        verbose,
    )

    # ---------- config ----------
    config = _step("Load configuration", lambda: get_config(config_path), verbose)

    # ---------- logging ----------
    level = "DEBUG" if verbose else config.log_level
    logfile = str(config.log_file_path) if config.log_file_path else None
    logger = _step(
        "Initialize logger",
        lambda: init_logger("scout", level=level, logfile=logfile),
        verbose,
    )
    logger.debug("Config loaded from %s", config.config_path or "built-in defaults")

    _step(
        f"Register {len(config.engines)} engines, {len(config.keybinds)} keybinds",
        lambda: None,
        verbose,
    )
    return BootState(config=config, logger=logger)
