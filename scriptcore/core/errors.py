"""
Exceptions raised by the scriptcore executor.
"""

from __future__ import annotations

from typing import Any


class ScriptCoreError(Exception):
    """Base class for scriptcore errors."""


class InvalidArgumentError(ScriptCoreError, ValueError):
    """Raised when a public operation receives an absent argument."""
    
    def __init__(self, message: str, argument: str | None = None):
        """Initialize with message and optional argument name."""
        super().__init__(message)
        self.argument = argument
        self.message = message


class SessionStateError(ScriptCoreError, RuntimeError):
    """Raised when a session operation is invalid in the current phase."""


class PluginLoadError(ScriptCoreError, ImportError):
    """Raised when a collaborator or script pack cannot be loaded."""


def require_argument(name: str, value: Any) -> Any:
    """
    Guard against an absent argument.
    
    Args:
        name: Argument name reported in the error
        value: Argument value
    
    Returns:
        The value, unchanged
    
    Raises:
        InvalidArgumentError: If value is None
    """
    if value is None:
        raise InvalidArgumentError(f"Argument '{name}' must not be None", name)
    return value


def require_property(name: str, prop: str, value: Any) -> Any:
    """Guard against an absent property of an argument."""
    if value is None:
        raise InvalidArgumentError(
            f"Property '{prop}' of argument '{name}' must not be None",
            f"{name}.{prop}",
        )
    return value
