"""Shared utilities for the catalog console.

Output helpers are kept here so every command prints titles, notices and
errors the same way.
"""

from catalog_console.utils import console

__all__ = ['console']
