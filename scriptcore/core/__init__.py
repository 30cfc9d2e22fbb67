"""
Core package.

This package contains the executor, its reference and namespace sets, the
execution session and script library injection.
"""

from scriptcore.core.errors import (
    InvalidArgumentError,
    PluginLoadError,
    ScriptCoreError,
    SessionStateError,
)
from scriptcore.core.executor import ScriptExecutor
from scriptcore.core.factory import build_executor
from scriptcore.core.injector import LibraryInjector
from scriptcore.core.references import (
    DEFAULT_NAMESPACES,
    DEFAULT_REFERENCES,
    NamespaceSet,
    ReferenceSet,
)
from scriptcore.core.session import ExecutionSession

__all__ = [
    "ScriptExecutor",
    "build_executor",
    "ExecutionSession",
    "LibraryInjector",
    "ReferenceSet",
    "NamespaceSet",
    "DEFAULT_REFERENCES",
    "DEFAULT_NAMESPACES",
    "ScriptCoreError",
    "InvalidArgumentError",
    "SessionStateError",
    "PluginLoadError",
]
