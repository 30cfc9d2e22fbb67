"""
Pre-processor contract.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from scriptcore_contracts.results import FilePreProcessorResult


class FilePreProcessor(ABC):
    """
    Turns raw script source into runnable code plus declared dependencies.
    
    Implementations strip directives such as ``#r`` and ``#load`` out of the
    source and report them through the result's reference and namespace lists.
    """
    
    @abstractmethod
    def process_file(self, path: str) -> FilePreProcessorResult:
        """Pre-process the script stored at ``path``."""
    
    @abstractmethod
    def process_script(self, script: str) -> FilePreProcessorResult:
        """Pre-process raw script text."""
