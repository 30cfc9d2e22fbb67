"""
Utility modules for scriptcore.

This package provides common utilities:
- logger: Structured logging
- helpers: Helper functions
"""

from scriptcore.utils.logger import (
    get_logger,
    setup_logging,
    LogLevel,
)
from scriptcore.utils.helpers import (
    artifact_name,
    deduplicate,
    ensure_list,
    import_string,
)

__all__ = [
    # Logger
    "get_logger",
    "setup_logging",
    "LogLevel",
    # Helpers
    "artifact_name",
    "deduplicate",
    "ensure_list",
    "import_string",
]
