"""
Rich panels for scriptcore CLI.

Provides styled panels for displaying execution results and the executor
environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from rich.console import Group
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

from scriptcore.models.plan import ExecutionPlan

if TYPE_CHECKING:
    from scriptcore_contracts.results import ScriptResult


def create_plan_panel(plan: ExecutionPlan, max_code_lines: int = 40) -> Panel:
    """
    Create a panel displaying what the engine was handed.
    
    Args:
        plan: Execution plan recorded by the dry-run engine
        max_code_lines: Maximum code lines to show
    
    Returns:
        Rich Panel with the plan
    """
    content: list = []
    
    if plan.file_name:
        content.append(Text.from_markup(f"[bold]File:[/] [script]{plan.file_name}[/]"))
    if plan.script_args:
        content.append(Text.from_markup(f"[bold]Args:[/] {' '.join(plan.script_args)}"))
    
    references = plan.references + plan.module_references + plan.pack_references
    content.append(Text.from_markup(f"[bold]References ({len(references)}):[/]"))
    for reference in references:
        content.append(Text(f"  {reference}", style="reference"))
    
    namespaces = plan.namespaces + [n for n in plan.pack_namespaces if n not in plan.namespaces]
    content.append(Text.from_markup(f"[bold]Namespaces ({len(namespaces)}):[/]"))
    for namespace in namespaces:
        content.append(Text(f"  {namespace}", style="namespace"))
    
    lines = plan.code.splitlines()
    content.append(Text())
    content.append(Syntax("\n".join(lines[:max_code_lines]), "csharp", line_numbers=True))
    if len(lines) > max_code_lines:
        content.append(Text(f"  ... ({len(lines) - max_code_lines} more lines)", style="dim italic"))
    
    return Panel(
        Group(*content),
        title="[bold]Execution plan[/]",
        border_style="blue",
    )


def create_result_panel(result: "ScriptResult") -> Panel:
    """
    Create a panel displaying a script result.
    
    Dry-run results are shown as their execution plan.
    """
    if isinstance(result.return_value, ExecutionPlan):
        return create_plan_panel(result.return_value)
    
    content: list = [Text(result.get_summary(), style="bold")]
    
    if result.return_value is not None:
        content.append(Text.from_markup(f"[bold]Return value:[/] {result.return_value!r}"))
    if result.invalid_namespaces:
        content.append(Text.from_markup(
            f"[warning]Invalid namespaces:[/] {', '.join(result.invalid_namespaces)}"
        ))
    
    border_style = "green" if result.success else "red"
    
    return Panel(
        Group(*content),
        title="[bold]Result[/]",
        border_style=border_style,
    )


def create_list_table(title: str, column: str, items: Iterable[str]) -> Table:
    """Create a numbered single-column table."""
    table = Table(title=title, show_header=True)
    table.add_column("#", justify="right", style="dim")
    table.add_column(column)
    
    for index, item in enumerate(items, start=1):
        table.add_row(str(index), item)
    
    return table
