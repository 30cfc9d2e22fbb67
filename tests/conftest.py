"""
Test configuration and fixtures.
"""

from __future__ import annotations

import os

import pytest

from scriptcore.core.executor import ScriptExecutor
from scriptcore_contracts import (
    FilePreProcessor,
    FilePreProcessorResult,
    FileSystem,
    ScriptEngine,
    ScriptLibraryComposer,
    ScriptPack,
    ScriptPackContext,
    ScriptResult,
)

CWD = os.path.abspath(os.path.join(os.sep, "work"))
LIBRARY_CODE = "// shared library prologue"


class FakeFileSystem(FileSystem):
    """In-memory file system keyed by absolute path."""
    
    bin_folder = "bin"
    dll_cache_folder = ".cache"
    packages_folder = "packages"
    
    def __init__(self, current_directory: str = CWD):
        self._current_directory = current_directory
        self.files: dict[str, str] = {}
    
    @property
    def current_directory(self) -> str:
        return self._current_directory
    
    def file_exists(self, path: str) -> bool:
        return os.path.normpath(path) in self.files
    
    def read_file(self, path: str) -> str:
        try:
            return self.files[os.path.normpath(path)]
        except KeyError:
            raise FileNotFoundError(path) from None
    
    def add_file(self, path: str, content: str = "") -> str:
        path = os.path.normpath(path)
        self.files[path] = content
        return path


class FakePreProcessor(FilePreProcessor):
    """Returns registered results; unregistered sources become plain code."""
    
    def __init__(self, file_system: FakeFileSystem):
        self.file_system = file_system
        self.declared: dict[str, FilePreProcessorResult] = {}
        self.processed: list[str] = []
    
    def declare_file(self, path: str, references=(), namespaces=()) -> None:
        """Make the file at ``path`` declare references and namespaces."""
        self.declare_script(os.path.normpath(path), references, namespaces)
    
    def declare_script(self, script: str, references=(), namespaces=()) -> None:
        """Make the raw text ``script`` declare references and namespaces."""
        self.declared[script] = FilePreProcessorResult(
            references=list(references),
            namespaces=list(namespaces),
        )
    
    def _result(self, key: str, code: str) -> FilePreProcessorResult:
        declared = self.declared.get(key, FilePreProcessorResult())
        return FilePreProcessorResult(
            code=code,
            references=list(declared.references),
            namespaces=list(declared.namespaces),
        )
    
    def process_file(self, path: str) -> FilePreProcessorResult:
        path = os.path.normpath(path)
        self.processed.append(path)
        return self._result(path, self.file_system.read_file(path))
    
    def process_script(self, script: str) -> FilePreProcessorResult:
        self.processed.append(script)
        return self._result(script, script)


class RecordingEngine(ScriptEngine):
    """Records every call and returns a successful result."""
    
    def __init__(self):
        self.calls: list[dict] = []
    
    def execute(self, code, script_args, references, namespaces, session):
        self.calls.append({
            "code": code,
            "script_args": list(script_args),
            "references": list(references.paths),
            "namespaces": list(namespaces),
            "session": session,
            "file_name": self.file_name,
        })
        return ScriptResult(return_value=len(self.calls))
    
    @property
    def last(self) -> dict:
        return self.calls[-1]


class FakeComposer(ScriptLibraryComposer):
    @property
    def script_libraries_file(self) -> str:
        return "ScriptLibraries.csx"


class NotesContext(ScriptPackContext):
    def __init__(self, owner: str):
        self.owner = owner


class RecordingPack(ScriptPack):
    """Pack that appends its lifecycle events to a shared journal."""
    
    def __init__(self, name: str, journal: list[str], reference=None, namespace=None):
        self.name = name
        self.journal = journal
        self.reference = reference
        self.namespace = namespace
    
    def initialize(self, session) -> None:
        self.journal.append(f"init:{self.name}")
        if self.reference:
            session.add_reference(self.reference)
        if self.namespace:
            session.import_namespace(self.namespace)
        session.state[self.name] = "ready"
    
    def get_context(self):
        return NotesContext(self.name)
    
    def terminate(self) -> None:
        self.journal.append(f"terminate:{self.name}")


@pytest.fixture
def file_system():
    """In-memory file system rooted at CWD."""
    return FakeFileSystem()


@pytest.fixture
def preprocessor(file_system):
    return FakePreProcessor(file_system)


@pytest.fixture
def engine():
    return RecordingEngine()


@pytest.fixture
def executor(file_system, preprocessor, engine):
    """Executor over fakes, not yet initialized."""
    return ScriptExecutor(file_system, preprocessor, engine, FakeComposer())


@pytest.fixture
def library(file_system):
    """Script library bundle in the packages folder of CWD."""
    return file_system.add_file(
        os.path.join(CWD, "packages", "ScriptLibraries.csx"),
        LIBRARY_CODE,
    )


@pytest.fixture
def journal():
    return []
