"""
Helper utilities for scriptcore.

Provides general-purpose helper functions for:
- List operations
- Path name normalization
- Dotted import paths
"""

from __future__ import annotations

import importlib
import re
from typing import Any, Callable, Iterable, TypeVar

T = TypeVar("T")

_SEPARATORS = re.compile(r"[\\/]")


def deduplicate(
    items: Iterable[T],
    key: Callable[[T], Any] | None = None,
) -> list[T]:
    """
    Remove duplicates from a list while preserving order.
    
    Args:
        items: Items to deduplicate
        key: Function to extract comparison key
    
    Returns:
        Deduplicated list
    """
    seen: set[Any] = set()
    result: list[T] = []
    
    for item in items:
        k = key(item) if key else item
        if k not in seen:
            seen.add(k)
            result.append(item)
    
    return result


def ensure_list(value: Any) -> list:
    """
    Ensure a value is a list.
    
    A bare string counts as a single item rather than a sequence of characters.
    
    Args:
        value: Value to convert
    
    Returns:
        List containing value(s)
    """
    if value is None:
        return []
    if isinstance(value, list):
        return value
    if isinstance(value, (str, bytes)):
        return [value]
    if isinstance(value, (tuple, set, frozenset)) or hasattr(value, "__iter__"):
        return list(value)
    return [value]


def artifact_name(path: str) -> str:
    """
    Normalized file name of a reference path.
    
    Takes the last path component regardless of separator style, ignoring
    trailing separators, and case-folds it.
    
    Example:
        >>> artifact_name("C:\\\\libs\\\\ScriptCore\\\\")
        'scriptcore'
    """
    parts = [p for p in _SEPARATORS.split(str(path).strip()) if p]
    return parts[-1].casefold() if parts else ""


def import_string(dotted_path: str) -> Any:
    """
    Import an attribute from a dotted path.
    
    Accepts both ``package.module:Attribute`` and ``package.module.Attribute``.
    
    Raises:
        ImportError: If the module cannot be imported or lacks the attribute
    """
    if ":" in dotted_path:
        module_path, _, attr = dotted_path.partition(":")
    else:
        module_path, _, attr = dotted_path.rpartition(".")
    if not module_path or not attr:
        raise ImportError(f"'{dotted_path}' is not a valid import path")
    
    module = importlib.import_module(module_path)
    try:
        return getattr(module, attr)
    except AttributeError as e:
        raise ImportError(f"Module '{module_path}' has no attribute '{attr}'") from e
