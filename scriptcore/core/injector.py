"""
Script library injection.

The script library is an optional bundle of shared code kept in the packages
folder. It is spliced into the first script executed in each session.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from scriptcore.core.session import ExecutionSession
from scriptcore.utils.logger import get_logger
from scriptcore_contracts.composer import ScriptLibraryComposer
from scriptcore_contracts.filesystem import FileSystem
from scriptcore_contracts.preprocessor import FilePreProcessor
from scriptcore_contracts.results import FilePreProcessorResult


class LibraryInjector:
    """
    Splices the script library into a pre-processed script at most once
    per session.
    """
    
    def __init__(
        self,
        file_system: FileSystem,
        preprocessor: FilePreProcessor,
        composer: ScriptLibraryComposer,
        logger: logging.Logger | None = None,
    ):
        self.file_system = file_system
        self.preprocessor = preprocessor
        self.composer = composer
        self.logger = logger or get_logger(__name__)
    
    def library_path(self, working_directory: str) -> str:
        """Where the bundle is expected for scripts in ``working_directory``."""
        return str(
            Path(working_directory)
            / self.file_system.packages_folder
            / self.composer.script_libraries_file
        )
    
    def load(self, working_directory: str) -> FilePreProcessorResult | None:
        """
        Pre-process the bundle if present.
        
        Returns:
            The bundle's pre-processing result, or None when there is no bundle
        """
        path = self.library_path(working_directory)
        
        if not self.file_system.file_exists(path):
            return None
        
        self.logger.debug(f"Found script library at {path}")
        return self.preprocessor.process_file(path)
    
    def inject_if_needed(
        self,
        working_directory: str,
        result: FilePreProcessorResult,
        session: ExecutionSession,
    ) -> bool:
        """
        Prepend the bundle to ``result`` unless this session already has it.
        
        The bundle's code goes before the script's code, separated by a line
        break; its references and namespaces are appended to the script's.
        A missing bundle still marks the session as injected.
        
        Args:
            working_directory: Directory whose packages folder holds the bundle
            result: Pre-processed script, mutated in place
            session: Session carrying the injected flag
        
        Returns:
            True if bundle code was spliced into ``result``
        """
        if session.injected:
            return False
        
        library = self.load(working_directory)
        
        if library is not None:
            result.code = library.code + os.linesep + result.code
            result.references.extend(library.references)
            result.namespaces.extend(library.namespaces)
        
        session.injected = True
        return library is not None
