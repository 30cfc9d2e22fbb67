"""
Physical file system backed by pathlib.
"""

from __future__ import annotations

import os
from pathlib import Path

from scriptcore_contracts.filesystem import FileSystem


class PhysicalFileSystem(FileSystem):
    """
    File system over the local disk.
    
    Args:
        current_directory: Working directory (process cwd when omitted)
        bin_folder: Folder for referenced binaries
        dll_cache_folder: Folder for compiled script cache
        packages_folder: Folder holding installed packages and the script library
    """
    
    def __init__(
        self,
        current_directory: str | Path | None = None,
        bin_folder: str = "bin",
        dll_cache_folder: str = ".cache",
        packages_folder: str = "packages",
    ):
        self._current_directory = (
            str(Path(current_directory).resolve()) if current_directory is not None else None
        )
        self.bin_folder = bin_folder
        self.dll_cache_folder = dll_cache_folder
        self.packages_folder = packages_folder
    
    @property
    def current_directory(self) -> str:
        return self._current_directory or os.getcwd()
    
    def file_exists(self, path: str) -> bool:
        return Path(path).is_file()
    
    def read_file(self, path: str) -> str:
        return Path(path).read_text(encoding="utf-8")
