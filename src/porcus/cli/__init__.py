"""Command-line interface for porcus.

This module provides the CLI using Typer, with rich output on stderr for
errors and the optional run summary.

Key features:
- Reads standard input or files, writes standard output or a file
- Custom consonant and vowel suffixes
- Quiet mode and structured log files
"""

from porcus.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
