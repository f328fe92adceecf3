"""Command-line interface for polyhive.

This module provides the CLI using Typer with rich output for
stage-by-stage feedback on a polygon analysis.

Key features:
- Crossing table for malformed polygons
- Step-by-step decomposer trace
- Verbose/quiet output modes
- Detailed error reporting
"""

from polyhive.cli.app import cli, main

__all__ = ["cli", "main"]
