"""Utility functions for font-enumeration.

This module provides logging setup and configuration.
"""

from font_enumeration.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
