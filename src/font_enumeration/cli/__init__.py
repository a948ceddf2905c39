"""Command-line interface for font-enumeration.

This module provides the ``font-info`` CLI using Typer with rich output.

Key features:
- Metrics of every face in a font file, a stdin stream, or a system font family
- Human-readable or JSON output
- Optional layout feature and writing system listings
- Listing of the system font collection
"""

from font_enumeration.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
