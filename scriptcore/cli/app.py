"""
Main CLI application.

This module defines the main Typer application and entry point.
"""

from __future__ import annotations

import os
from typing import Optional

import typer
from rich.console import Console

from scriptcore import __version__
from scriptcore.cli.commands import config, execute, info

# Create the main app
app = typer.Typer(
    name="scriptcore",
    help="Script execution orchestrator",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Add sub-commands
app.add_typer(config.app, name="config", help="Configuration management")

console = Console()


def version_callback(value: bool):
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]scriptcore[/] v{__version__}")
        raise typer.Exit()


# Global state for CLI options
class CLIState:
    """Global CLI state for options like quiet, debug and config path."""

    quiet: bool = False
    debug: bool = False
    config: str | None = None


cli_state = CLIState()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-essential output",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging",
    ),
    config_file: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file (default: scriptcore.yaml)",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
):
    """
    scriptcore - Script execution orchestrator

    Pre-processes scripts, tracks their references and namespaces, injects
    the shared script library once per session and hands the result to a
    script engine.
    """
    cli_state.quiet = quiet
    cli_state.debug = debug
    cli_state.config = config_file

    # Set environment variable for no-color (used by Rich)
    if no_color:
        os.environ["NO_COLOR"] = "1"


@app.command()
def run(
    script: str = typer.Argument(..., help="Script file to execute"),
    script_args: Optional[list[str]] = typer.Argument(
        None,
        help="Arguments passed to the script (after --)",
    ),
    pack: Optional[list[str]] = typer.Option(
        None,
        "--pack",
        "-p",
        help="Script pack to load (module:Class), repeatable",
    ),
    reference: Optional[list[str]] = typer.Option(
        None,
        "--reference",
        "-r",
        help="Additional reference, repeatable",
    ),
):
    """
    Execute a script file.

    Example:
        scriptcore run hello.csx
        scriptcore run build.csx --pack mypacks:WebPack -- --target release
    """
    result = execute.run_script(
        script=script,
        script_args=script_args or [],
        packs=pack or [],
        references=reference or [],
        config_path=cli_state.config,
        debug=cli_state.debug,
    )
    if not cli_state.quiet:
        execute.show_result(result)
    elif not result.success:
        raise typer.Exit(1)


@app.command("eval")
def eval_(
    code: str = typer.Argument(..., help="Script text to execute"),
    script_args: Optional[list[str]] = typer.Argument(
        None,
        help="Arguments passed to the script (after --)",
    ),
    pack: Optional[list[str]] = typer.Option(
        None,
        "--pack",
        "-p",
        help="Script pack to load (module:Class), repeatable",
    ),
):
    """Execute script text given on the command line."""
    result = execute.run_script(
        code=code,
        script_args=script_args or [],
        packs=pack or [],
        config_path=cli_state.config,
        debug=cli_state.debug,
    )
    if not cli_state.quiet:
        execute.show_result(result)
    elif not result.success:
        raise typer.Exit(1)


@app.command()
def defaults():
    """Show the default references and namespaces."""
    info.show_defaults(cli_state.config)


@app.command()
def library(
    directory: Optional[str] = typer.Argument(
        None,
        help="Script directory (default: current directory)",
    ),
):
    """Show where the script library bundle is looked up."""
    info.show_library(directory, cli_state.config)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
