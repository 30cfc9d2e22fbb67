"""
Reference implementations of the collaborator contracts.

None of them parses or compiles script source; they exist so the executor can
be driven from the CLI without a language-specific engine installed.
"""

from scriptcore.hosting.composer import DefaultScriptLibraryComposer, DEFAULT_SCRIPT_LIBRARIES_FILE
from scriptcore.hosting.engine import DryRunEngine
from scriptcore.hosting.filesystem import PhysicalFileSystem
from scriptcore.hosting.preprocessor import PassthroughPreProcessor

__all__ = [
    "DefaultScriptLibraryComposer",
    "DEFAULT_SCRIPT_LIBRARIES_FILE",
    "DryRunEngine",
    "PhysicalFileSystem",
    "PassthroughPreProcessor",
]
