#!/usr/bin/env python3
# scout/config/__init__.py
from __future__ import annotations
"""
Configuration package.

Exports:
- AppConfig: validated settings, engine registry and keybindings.
- load_config / get_config: strict load vs. load-or-fall-back-to-defaults.
- default_config / write_default_config: the built-in configuration.
"""

from .loader import (
    AppConfig,
    DEFAULTS,
    config_dir,
    default_config,
    default_config_path,
    get_config,
    load_config,
    render_default_toml,
    write_default_config,
)

__all__ = [
    "AppConfig",
    "DEFAULTS",
    "config_dir",
    "default_config",
    "default_config_path",
    "get_config",
    "load_config",
    "render_default_toml",
    "write_default_config",
]
