#!/usr/bin/env python3
# scout/interface/opener.py
from __future__ import annotations

"""Hand a resolved search URL to the user's default browser."""

import webbrowser

from scout.errors import BrowserLaunchError


def open_url(url: str) -> None:
    """Open `url`; raises BrowserLaunchError when no browser takes it."""
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as exc:
        raise BrowserLaunchError(f"Couldn't open browser for {url}: {exc}") from exc
    if not opened:
        raise BrowserLaunchError(f"Couldn't open browser for {url}.")
