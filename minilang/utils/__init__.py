"""
Utility modules for minilang.

This package contains helpers used by the command-line interface.
"""

from .settings import Settings, DEFAULT_SETTINGS

__all__ = [
    "Settings",
    "DEFAULT_SETTINGS",
]
