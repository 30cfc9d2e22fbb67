"""
Console utilities for scriptcore CLI.

Provides styled console output and message helpers.
"""

from __future__ import annotations

from rich.console import Console
from rich.theme import Theme


# Custom theme for scriptcore
SCRIPTCORE_THEME = Theme({
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "bold green",
    "script": "bold cyan",
    "pack": "bold magenta",
    "reference": "blue",
    "namespace": "green",
})

# Global console instance
console = Console(theme=SCRIPTCORE_THEME)


def print_error(message: str, prefix: str = "Error") -> None:
    """Print an error message."""
    console.print(f"[error]{prefix}:[/] {message}")


def print_warning(message: str, prefix: str = "Warning") -> None:
    """Print a warning message."""
    console.print(f"[warning]{prefix}:[/] {message}")


def print_success(message: str, prefix: str = "Success") -> None:
    """Print a success message."""
    console.print(f"[success]{prefix}:[/] {message}")


def print_info(message: str, prefix: str = "Info") -> None:
    """Print an info message."""
    console.print(f"[info]{prefix}:[/] {message}")
