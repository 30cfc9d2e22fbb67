"""
Script engine contract.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Sequence

from scriptcore_contracts.results import ScriptResult

if TYPE_CHECKING:
    from scriptcore_contracts.packs import PackSession


class ScriptEngine(ABC):
    """
    Compiles and runs code handed over by the executor.
    
    The executor sets ``base_directory`` and ``cache_directory`` once per
    session and ``file_name`` before each file execution.
    """
    
    base_directory: str | None = None
    cache_directory: str | None = None
    file_name: str | None = None
    
    @abstractmethod
    def execute(
        self,
        code: str,
        script_args: Sequence[str],
        references: Any,
        namespaces: Sequence[str],
        session: PackSession,
    ) -> ScriptResult:
        """
        Run ``code``.
        
        Args:
            code: Pre-processed code, script library already spliced in
            script_args: Arguments passed through to the script
            references: The executor's reference set
            namespaces: Namespaces to open for this execution
            session: The live execution session
        
        Returns:
            ScriptResult describing the outcome
        """
