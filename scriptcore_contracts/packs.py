"""
Script pack contracts.

A script pack is an extension module that takes part in every execution
session. During initialization it can contribute references and namespaces,
store data in the session state and expose a context object to scripts.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Protocol, Sequence


class ScriptPackContext:
    """Marker base class for objects a script pack exposes to scripts."""


class PackSession(Protocol):
    """The part of the execution session visible to script packs."""
    
    script_args: Sequence[str]
    state: dict[str, Any]
    
    def add_reference(self, reference: str) -> None: ...
    
    def import_namespace(self, namespace: str) -> None: ...


class ScriptPack(ABC):
    """
    Base class for script packs.
    
    Example:
        >>> class JsonPack(ScriptPack):
        ...     name = "json"
        ...
        ...     def initialize(self, session):
        ...         session.import_namespace("Newtonsoft.Json")
        ...
        ...     def get_context(self):
        ...         return JsonContext()
    """
    
    name: str = "pack"
    
    @abstractmethod
    def initialize(self, session: PackSession) -> None:
        """Called once when the session starts."""
    
    def get_context(self) -> ScriptPackContext | None:
        """Return the context exposed to scripts, if any."""
        return None
    
    def terminate(self) -> None:
        """Called once when the session ends."""
