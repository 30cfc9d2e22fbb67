"""
scriptcore contracts.

Collaborator interfaces consumed by the scriptcore executor and the data
exchanged across them. Engines, pre-processors and script packs depend only on
this package.
"""

from scriptcore_contracts.composer import ScriptLibraryComposer
from scriptcore_contracts.engine import ScriptEngine
from scriptcore_contracts.filesystem import FileSystem
from scriptcore_contracts.packs import PackSession, ScriptPack, ScriptPackContext
from scriptcore_contracts.preprocessor import FilePreProcessor
from scriptcore_contracts.results import FilePreProcessorResult, ScriptResult

__all__ = [
    "FileSystem",
    "FilePreProcessor",
    "FilePreProcessorResult",
    "PackSession",
    "ScriptEngine",
    "ScriptLibraryComposer",
    "ScriptPack",
    "ScriptPackContext",
    "ScriptResult",
]
