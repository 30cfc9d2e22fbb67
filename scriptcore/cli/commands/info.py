"""
Environment inspection commands for scriptcore CLI.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.markup import escape

from scriptcore.cli.ui.console import console, print_error, print_info, print_success
from scriptcore.cli.ui.panels import create_list_table
from scriptcore.core.errors import ScriptCoreError
from scriptcore.core.executor import ScriptExecutor
from scriptcore.core.factory import build_executor
from scriptcore.models.config import ScriptCoreConfig


def _load_config(config_path: str | None) -> ScriptCoreConfig:
    try:
        return ScriptCoreConfig.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        print_error(f"Cannot load configuration: {escape(str(e))}")
        raise typer.Exit(1)


def _build(config_path: str | None) -> ScriptExecutor:
    try:
        return build_executor(_load_config(config_path))
    except ScriptCoreError as e:
        print_error(escape(str(e)))
        raise typer.Exit(1)


def show_defaults(config_path: str | None = None) -> None:
    """Print the references and namespaces every execution starts from."""
    executor = _build(config_path)
    
    console.print(create_list_table("Default references", "Reference", executor.references.paths))
    console.print(create_list_table("Default namespaces", "Namespace", executor.namespaces.names))


def show_library(directory: str | None = None, config_path: str | None = None) -> None:
    """Print where the script library is looked up and whether it exists."""
    executor = _build(config_path)
    working_directory = str(Path(directory).resolve()) if directory else (
        executor.file_system.current_directory
    )
    path = executor.injector.library_path(working_directory)
    
    if executor.file_system.file_exists(path):
        print_success(path, prefix="Script library found")
    else:
        print_info(path, prefix="No script library at")
