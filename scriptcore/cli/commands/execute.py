"""
Script execution commands for scriptcore CLI.
"""

from __future__ import annotations

import time

import typer
from rich.markup import escape

from scriptcore.cli.ui.console import console, print_error, print_warning
from scriptcore.cli.ui.panels import create_result_panel
from scriptcore.core.errors import ScriptCoreError
from scriptcore.core.factory import build_executor
from scriptcore.models.config import ScriptCoreConfig
from scriptcore.packs.registry import ScriptPackRegistry
from scriptcore.utils.logger import get_logger, log_execution, setup_logging
from scriptcore_contracts.results import ScriptResult


def run_script(
    script: str | None = None,
    code: str | None = None,
    script_args: list[str] | None = None,
    packs: list[str] | None = None,
    references: list[str] | None = None,
    config_path: str | None = None,
    debug: bool = False,
) -> ScriptResult:
    """
    Run a script file or raw text through a freshly built executor.
    
    One session is initialized for the run and always terminated afterwards.
    
    Args:
        script: Path of the script file
        code: Raw script text (used when script is None)
        script_args: Arguments passed through to the script
        packs: Extra script packs, as dotted import paths
        references: Extra references added at initialization
        config_path: Configuration file
        debug: Force debug logging
    
    Returns:
        The engine's result
    
    Raises:
        typer.Exit: On configuration, loading or lifecycle errors
    """
    try:
        config = ScriptCoreConfig.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        print_error(f"Cannot load configuration: {escape(str(e))}")
        raise typer.Exit(1)
    
    setup_logging(
        level="debug" if debug else config.logging.level,
        log_file=config.logging.file,
        json_format=config.logging.json_format,
    )
    logger = get_logger("scriptcore.cli")
    
    try:
        executor = build_executor(config)
        
        registry = ScriptPackRegistry()
        for dotted_path in [*config.execution.script_packs, *(packs or [])]:
            registry.register_path(dotted_path)
    except ScriptCoreError as e:
        print_error(escape(str(e)))
        raise typer.Exit(1)
    
    try:
        executor.initialize(references or [], registry.get_all(), script_args or [])
    except Exception as e:
        # Release the packs that did start
        if executor.session is not None:
            executor.terminate()
        print_error(f"Cannot initialize script packs: {escape(str(e))}")
        if debug:
            console.print_exception()
        raise typer.Exit(1)
    
    start = time.time()
    try:
        if script is not None:
            result = executor.execute(script, script_args)
        else:
            result = executor.execute_script(code or "", script_args)
    except (FileNotFoundError, ScriptCoreError) as e:
        print_error(escape(str(e)))
        raise typer.Exit(1)
    finally:
        executor.terminate()
    
    log_execution(
        logger,
        source=script or "<script>",
        success=result.success,
        duration=time.time() - start,
        error=result.get_summary() if not result.success else None,
    )
    return result


def show_result(result: ScriptResult) -> None:
    """Print a result and exit non-zero on failure."""
    console.print(create_result_panel(result))
    if not result.is_complete_submission:
        print_warning("The engine expects more input; the submission is incomplete")
    if not result.success:
        raise typer.Exit(1)
