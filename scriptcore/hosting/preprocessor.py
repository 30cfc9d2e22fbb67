"""
Pass-through pre-processor.
"""

from __future__ import annotations

from scriptcore_contracts.filesystem import FileSystem
from scriptcore_contracts.preprocessor import FilePreProcessor
from scriptcore_contracts.results import FilePreProcessorResult


class PassthroughPreProcessor(FilePreProcessor):
    """
    Hands source text over unchanged and declares no dependencies.
    
    Useful when the engine handles directives itself, and as the default
    pre-processor of the CLI.
    """
    
    def __init__(self, file_system: FileSystem):
        self.file_system = file_system
    
    def process_file(self, path: str) -> FilePreProcessorResult:
        return FilePreProcessorResult(
            code=self.file_system.read_file(path),
            load_paths=[path],
        )
    
    def process_script(self, script: str) -> FilePreProcessorResult:
        return FilePreProcessorResult(code=script)
