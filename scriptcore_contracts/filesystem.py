"""
File-system contract.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class FileSystem(ABC):
    """
    File-system provider used by the executor.
    
    The folder names are relative to the current directory (or, for the
    packages folder, to the directory of the script being executed).
    """
    
    bin_folder: str
    dll_cache_folder: str
    packages_folder: str
    
    @property
    @abstractmethod
    def current_directory(self) -> str:
        """Absolute path of the working directory."""
    
    @abstractmethod
    def file_exists(self, path: str) -> bool:
        """Whether a regular file exists at ``path``."""
    
    @abstractmethod
    def read_file(self, path: str) -> str:
        """Read a text file."""
