"""
Configuration commands for scriptcore CLI.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.panel import Panel

app = typer.Typer(help="Configuration management")
console = Console()


@app.command("show")
def config_show(
    config_file: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Configuration file to show",
    ),
):
    """Show current configuration."""
    from scriptcore.models.config import ScriptCoreConfig

    try:
        config = ScriptCoreConfig.load(config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error loading config: {e}[/]")
        raise typer.Exit(1)

    packs = ", ".join(config.execution.script_packs) or "[dim]none[/]"
    console.print(
        Panel.fit(
            f"[bold]File System:[/]\n"
            f"  Current Directory: {config.filesystem.current_directory or '[dim]process cwd[/]'}\n"
            f"  Bin Folder: {config.filesystem.bin_folder}\n"
            f"  Cache Folder: {config.filesystem.dll_cache_folder}\n"
            f"  Packages Folder: {config.filesystem.packages_folder}\n"
            f"\n[bold]Script Library:[/]\n"
            f"  File Name: {config.library.file_name}\n"
            f"\n[bold]Execution:[/]\n"
            f"  Engine: {config.execution.engine}\n"
            f"  Pre-processor: {config.execution.preprocessor}\n"
            f"  Script Packs: {packs}\n"
            f"  Extra References: {len(config.execution.references)}\n"
            f"  Extra Namespaces: {len(config.execution.namespaces)}\n"
            f"\n[bold]Logging:[/]\n"
            f"  Level: {config.logging.level}",
            title="[bold blue]scriptcore Configuration[/]",
        )
    )


@app.command("init")
def config_init(
    config_file: str = typer.Option(
        "scriptcore.yaml",
        "--config",
        "-c",
        help="Configuration file path",
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
):
    """Write a configuration file with default values."""
    from scriptcore.models.config import ScriptCoreConfig

    path = Path(config_file)
    if path.exists() and not force:
        console.print(f"[yellow]{path} already exists; use --force to overwrite[/]")
        raise typer.Exit(1)

    ScriptCoreConfig().save(path)
    console.print(f"[green]Configuration written to {path}[/]")
