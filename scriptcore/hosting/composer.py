"""
Default script library composer.
"""

from __future__ import annotations

from scriptcore_contracts.composer import ScriptLibraryComposer

DEFAULT_SCRIPT_LIBRARIES_FILE = "ScriptLibraries.csx"


class DefaultScriptLibraryComposer(ScriptLibraryComposer):
    """Composer with a configurable bundle file name."""
    
    def __init__(self, file_name: str = DEFAULT_SCRIPT_LIBRARIES_FILE):
        self._file_name = file_name
    
    @property
    def script_libraries_file(self) -> str:
        return self._file_name
