#!/usr/bin/env python3
# scout/__init__.py
"""scout: type a prefix and a query, get suggestions, open the search."""

__version__ = "0.1.0"
