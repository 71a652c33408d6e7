#!/usr/bin/env python3
# scout/errors.py
from __future__ import annotations

"""
Error taxonomy.

- ConfigError: missing/unparseable configuration (recovered with defaults).
- FetchError: network failure, non-2xx status, timeout (suggestions stay as-is).
- AdapterError: response body does not have the expected shape (same recovery).
- BrowserLaunchError: the resolved URL could not be opened (fatal).
"""


class ScoutError(Exception):
    """Base class for all scout errors."""


class ConfigError(ScoutError):
    """Configuration could not be loaded or validated."""


class FetchError(ScoutError):
    """A suggestion request failed before a body was received."""


class AdapterError(ScoutError):
    """A suggestion response could not be decoded into candidates."""


class BrowserLaunchError(ScoutError):
    """The browser could not be launched for a resolved URL."""
