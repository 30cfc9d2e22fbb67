"""
CLI package for scriptcore.

Provides a rich command-line interface using Typer.
"""

from scriptcore.cli.app import app, main

__all__ = ["app", "main"]
