"""
Execution session for scriptcore.

An ExecutionSession spans one initialize...terminate cycle of the executor.
It owns the script packs and their contexts, the script arguments, the
references and namespaces contributed by packs, and the shared state map.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence, TypeVar

from scriptcore.core.errors import SessionStateError, require_argument
from scriptcore.models.session import SessionPhase
from scriptcore.utils.logger import get_logger
from scriptcore_contracts.packs import ScriptPack, ScriptPackContext

C = TypeVar("C", bound=ScriptPackContext)

logger = get_logger(__name__)


class ExecutionSession:
    """
    Lifetime-scoped bundle of script packs, arguments and shared state.
    
    The ``injected`` flag records that the script library has been spliced
    into a script during this session; ``state`` holds pack data. Both are
    cleared by reset().
    
    Example:
        >>> session = ExecutionSession([JsonPack()], ["--verbose"])
        >>> session.initialize()
        >>> session.namespaces
        ['Newtonsoft.Json']
        >>> session.terminate()
    """
    
    def __init__(
        self,
        script_packs: Iterable[ScriptPack] | None = None,
        script_args: Sequence[str] | None = None,
    ):
        """
        Initialize the session.
        
        Args:
            script_packs: Packs initialized in the given order
            script_args: Arguments passed through to every script
        """
        self.script_packs: list[ScriptPack] = list(script_packs or [])
        self.script_args: list[str] = list(script_args or [])
        self.contexts: list[ScriptPackContext] = []
        self.references: list[str] = []
        self.namespaces: list[str] = []
        self.state: dict[str, Any] = {}
        self.injected = False
        self.phase = SessionPhase.UNINITIALIZED
        self._initialized_packs: list[ScriptPack] = []
    
    @property
    def is_active(self) -> bool:
        return self.phase == SessionPhase.INITIALIZED
    
    def add_reference(self, reference: str) -> None:
        """Called by packs to contribute a reference."""
        self.references.append(require_argument("reference", reference))
    
    def import_namespace(self, namespace: str) -> None:
        """Called by packs to contribute a namespace."""
        self.namespaces.append(require_argument("namespace", namespace))
    
    def initialize(self) -> None:
        """
        Run every pack's init hook in order, then collect pack contexts.
        
        A pack that fails to initialize leaves the packs before it
        initialized; terminate() releases exactly those.
        
        Raises:
            SessionStateError: If the session is not uninitialized
        """
        if self.phase != SessionPhase.UNINITIALIZED:
            raise SessionStateError(f"Cannot initialize a session that is {self.phase.value}")
        
        for pack in self.script_packs:
            logger.debug(f"Initializing script pack [magenta]{pack.name}[/]")
            pack.initialize(self)
            self._initialized_packs.append(pack)
        
        self.contexts = [
            context
            for context in (pack.get_context() for pack in self.script_packs)
            if context is not None
        ]
        self.phase = SessionPhase.INITIALIZED
    
    def reset(self) -> None:
        """
        Clear the shared state and re-arm script library injection.
        
        Pack init hooks are not re-run and the pack list is kept.
        """
        if self.phase == SessionPhase.TERMINATED:
            raise SessionStateError("Cannot reset a terminated session")
        self.state.clear()
        self.injected = False
    
    def terminate(self) -> None:
        """
        Run the terminate hook of every initialized pack, newest first.
        
        Raises:
            SessionStateError: If the session is already terminated
        """
        if self.phase == SessionPhase.TERMINATED:
            raise SessionStateError("Session is already terminated")
        
        try:
            for pack in reversed(self._initialized_packs):
                logger.debug(f"Terminating script pack [magenta]{pack.name}[/]")
                pack.terminate()
        finally:
            self._initialized_packs = []
            self.phase = SessionPhase.TERMINATED
    
    def require(self, context_type: type[C]) -> C:
        """
        Get the first pack context of the given type.
        
        Raises:
            SessionStateError: If no pack exposes such a context
        """
        for context in self.contexts:
            if isinstance(context, context_type):
                return context
        raise SessionStateError(f"No script pack provides a {context_type.__name__} context")
    
    def __repr__(self) -> str:
        return (
            f"ExecutionSession(phase={self.phase.value}, packs={len(self.script_packs)}, "
            f"injected={self.injected})"
        )
