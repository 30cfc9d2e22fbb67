"""
CLI UI components for scriptcore.

This module provides rich terminal UI components including:
- Styled console messages
- Result and execution plan panels
"""

from scriptcore.cli.ui.console import (
    console,
    print_error,
    print_warning,
    print_success,
    print_info,
)
from scriptcore.cli.ui.panels import (
    create_list_table,
    create_plan_panel,
    create_result_panel,
)

__all__ = [
    # Console
    "console",
    "print_error",
    "print_warning",
    "print_success",
    "print_info",
    # Panels
    "create_list_table",
    "create_plan_panel",
    "create_result_panel",
]
