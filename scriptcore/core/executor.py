"""
Script executor for scriptcore.

The ScriptExecutor is the facade that drives a script through the
collaborators: it pre-processes the source, accumulates declared references,
computes the namespaces of the run, splices in the script library once per
session and hands everything to the script engine.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from types import ModuleType
from typing import Iterable, Sequence

from scriptcore.core.errors import SessionStateError, require_argument, require_property
from scriptcore.core.injector import LibraryInjector
from scriptcore.core.references import (
    DEFAULT_NAMESPACES,
    DEFAULT_REFERENCES,
    NamespaceSet,
    ReferenceSet,
)
from scriptcore.core.session import ExecutionSession
from scriptcore.models.session import SessionPhase
from scriptcore.utils.logger import get_logger
from scriptcore_contracts.composer import ScriptLibraryComposer
from scriptcore_contracts.engine import ScriptEngine
from scriptcore_contracts.filesystem import FileSystem
from scriptcore_contracts.packs import ScriptPack
from scriptcore_contracts.preprocessor import FilePreProcessor
from scriptcore_contracts.results import FilePreProcessorResult, ScriptResult


class ScriptExecutor:
    """
    Orchestrates script execution against a script engine.
    
    The executor owns the reference and namespace sets for its whole
    lifetime and one ExecutionSession per initialize()...terminate() cycle.
    
    Example:
        >>> executor = ScriptExecutor(fs, preprocessor, engine, composer)
        >>> executor.initialize([], script_packs=[], script_args=[])
        >>> result = executor.execute("hello.csx")
        >>> executor.terminate()
    """
    
    def __init__(
        self,
        file_system: FileSystem,
        preprocessor: FilePreProcessor,
        engine: ScriptEngine,
        composer: ScriptLibraryComposer,
        logger: logging.Logger | None = None,
        default_references: Iterable[str] = DEFAULT_REFERENCES,
        default_namespaces: Iterable[str] = DEFAULT_NAMESPACES,
    ):
        """
        Initialize the executor.
        
        Args:
            file_system: File-system provider
            preprocessor: Pre-processor for files and raw text
            engine: Engine that compiles and runs the code
            composer: Knows the script library file name
            logger: Logger to use (module logger by default)
            default_references: References restored on reset
            default_namespaces: Namespaces restored on reset
        
        Raises:
            InvalidArgumentError: If file_system or one of its bin/cache
                folder names is missing
        """
        require_argument("file_system", file_system)
        require_property("file_system", "bin_folder", getattr(file_system, "bin_folder", None))
        require_property(
            "file_system", "dll_cache_folder", getattr(file_system, "dll_cache_folder", None)
        )
        
        self.file_system = file_system
        self.preprocessor = preprocessor
        self.engine = engine
        self.composer = composer
        self.logger = logger or get_logger(__name__)
        
        self.references = ReferenceSet(default_references)
        self.namespaces = NamespaceSet(default_namespaces)
        self.session: ExecutionSession | None = None
        self.injector = LibraryInjector(file_system, preprocessor, composer, self.logger)
    
    # Environment
    
    def import_namespaces(self, namespaces: Iterable[str]) -> None:
        self.namespaces.import_(namespaces)
    
    def remove_namespaces(self, namespaces: Iterable[str]) -> None:
        self.namespaces.remove(namespaces)
    
    def add_references(self, modules: Iterable[ModuleType]) -> None:
        self.references.add(modules)
    
    def remove_references(self, modules: Iterable[ModuleType]) -> None:
        self.references.remove(modules)
    
    def add_reference_paths(self, paths: Iterable[str]) -> None:
        self.references.add_paths(paths)
    
    def remove_reference_paths(self, paths: Iterable[str]) -> None:
        self.references.remove_paths(paths)
    
    # Lifecycle
    
    def initialize(
        self,
        paths: Iterable[str],
        script_packs: Iterable[ScriptPack] | None = None,
        script_args: Sequence[str] | None = None,
    ) -> ExecutionSession:
        """
        Start a session.
        
        Adds ``paths`` as references, points the engine at the bin and cache
        folders of the current directory and initializes the script packs.
        
        Raises:
            SessionStateError: If a session is already active
        """
        if self.session is not None and self.session.is_active:
            raise SessionStateError("Executor already has an active session; terminate it first")
        
        self.add_reference_paths(paths)
        
        current = Path(self.file_system.current_directory)
        self.engine.base_directory = str(current / self.file_system.bin_folder)
        self.engine.cache_directory = str(current / self.file_system.dll_cache_folder)
        
        self.logger.debug("Initializing script packs")
        session = ExecutionSession(script_packs, script_args)
        self.session = session
        session.initialize()
        return session
    
    def reset(self) -> None:
        """
        Restore default references and namespaces and clear session state.
        
        The next execution receives the script library again.
        
        Raises:
            SessionStateError: If the session has been terminated
        """
        if self.session is not None and self.session.phase == SessionPhase.TERMINATED:
            raise SessionStateError("Cannot reset a terminated session")
        
        self.references.reset()
        self.namespaces.reset()
        
        if self.session is not None:
            self.session.reset()
    
    def terminate(self) -> None:
        """Terminate the script packs of the current session."""
        if self.session is None:
            raise SessionStateError("Executor is not initialized")
        self.logger.debug("Terminating script packs")
        self.session.terminate()
    
    # Execution
    
    def execute(self, script: str, script_args: Sequence[str] | None = None) -> ScriptResult:
        """
        Execute a script file.
        
        Relative paths are resolved against the current directory. The
        script library is looked up next to the script.
        
        Args:
            script: Path of the script
            script_args: Arguments passed through to the script
        
        Returns:
            Whatever the engine returns
        """
        session = self._require_session()
        path = script if os.path.isabs(script) else str(
            Path(self.file_system.current_directory) / script
        )
        
        result = self.preprocessor.process_file(path)
        self.engine.file_name = Path(path).name
        
        return self._run(result, str(Path(path).parent), script_args, session)
    
    def execute_script(
        self,
        script: str,
        script_args: Sequence[str] | None = None,
    ) -> ScriptResult:
        """
        Execute raw script text.
        
        The script library is looked up under the current directory.
        """
        session = self._require_session()
        result = self.preprocessor.process_script(script)
        
        return self._run(result, self.file_system.current_directory, script_args, session)
    
    def _run(
        self,
        result: FilePreProcessorResult,
        working_directory: str,
        script_args: Sequence[str] | None,
        session: ExecutionSession,
    ) -> ScriptResult:
        self.injector.inject_if_needed(working_directory, result, session)
        
        self.references.merge(result.references)
        namespaces = self.namespaces.union(result.namespaces)
        
        self.logger.debug("Starting execution in engine")
        return self.engine.execute(
            result.code,
            list(script_args or []),
            self.references,
            namespaces,
            session,
        )
    
    def _require_session(self) -> ExecutionSession:
        if self.session is None or self.session.phase == SessionPhase.UNINITIALIZED:
            raise SessionStateError("Executor is not initialized")
        if self.session.phase == SessionPhase.TERMINATED:
            raise SessionStateError("Executor session has been terminated")
        return self.session
