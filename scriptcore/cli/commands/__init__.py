"""CLI commands package."""

from scriptcore.cli.commands import config, execute, info

__all__ = ["config", "execute", "info"]
