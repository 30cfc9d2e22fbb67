"""
Script library composer contract.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class ScriptLibraryComposer(ABC):
    """Knows the file name of the shared script library bundle."""
    
    @property
    @abstractmethod
    def script_libraries_file(self) -> str:
        """File name of the bundle inside the packages folder."""
