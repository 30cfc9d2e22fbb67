"""scriptcore models package."""

from scriptcore.models.config import (
    ScriptCoreConfig,
    FileSystemConfig,
    LibraryConfig,
    ExecutionConfig,
    LoggingConfig,
)
from scriptcore.models.plan import ExecutionPlan
from scriptcore.models.session import SessionPhase

__all__ = [
    # Config
    "ScriptCoreConfig",
    "FileSystemConfig",
    "LibraryConfig",
    "ExecutionConfig",
    "LoggingConfig",
    # Plan
    "ExecutionPlan",
    # Session
    "SessionPhase",
]
