"""Command-line interface for quadpath.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- SVG path data from an argument or a file
- SVG or JSON output
- Verbose/quiet output modes
- Iteration cap reporting
"""

from quadpath.cli.app import cli, main

__all__ = ["cli", "main"]
