"""Command-line interface for plotfence.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Progress bar while regions are measured
- Verbose/quiet output modes
- Region listing and JSON output
- Detailed error reporting
"""

from plotfence.cli.app import cli, main

__all__ = ["cli", "main"]
