"""
Tests for the script executor.
"""

import json
import os

import pytest

from scriptcore.core.errors import InvalidArgumentError, SessionStateError
from scriptcore.core import executor as executor_module
from scriptcore.core import references as references_module
from scriptcore.core.executor import ScriptExecutor
from scriptcore.core.references import CORE_ARTIFACT, DEFAULT_NAMESPACES, DEFAULT_REFERENCES

from tests.conftest import (
    CWD,
    LIBRARY_CODE,
    FakeComposer,
    FakeFileSystem,
    RecordingEngine,
    RecordingPack,
)


@pytest.fixture
def script(file_system):
    return file_system.add_file(os.path.join(CWD, "main.csx"), "var x = 1;")


@pytest.fixture
def initialized(executor):
    executor.initialize([], [], [])
    return executor


class TestConstruction:
    """Tests for executor construction guards."""
    
    def test_requires_file_system(self, preprocessor, engine):
        with pytest.raises(InvalidArgumentError) as exc:
            ScriptExecutor(None, preprocessor, engine, FakeComposer())
        assert exc.value.argument == "file_system"
    
    def test_requires_bin_folder(self, preprocessor, engine):
        file_system = FakeFileSystem()
        file_system.bin_folder = None
        with pytest.raises(InvalidArgumentError) as exc:
            ScriptExecutor(file_system, preprocessor, engine, FakeComposer())
        assert exc.value.argument == "file_system.bin_folder"
    
    def test_requires_cache_folder(self, preprocessor, engine):
        file_system = FakeFileSystem()
        file_system.dll_cache_folder = None
        with pytest.raises(InvalidArgumentError):
            ScriptExecutor(file_system, preprocessor, engine, FakeComposer())
    
    def test_starts_with_defaults(self, executor):
        assert executor.references.paths == list(DEFAULT_REFERENCES)
        assert executor.namespaces.names == list(DEFAULT_NAMESPACES)
        assert executor.session is None


class TestInitialize:
    """Tests for ScriptExecutor.initialize."""
    
    def test_sets_engine_directories(self, executor, engine):
        executor.initialize([], [], [])
        assert engine.base_directory == os.path.join(CWD, "bin")
        assert engine.cache_directory == os.path.join(CWD, ".cache")
    
    def test_adds_paths_filtered(self, executor):
        executor.initialize(["/libs/A.dll", "/elsewhere/scriptcore"], [], [])
        assert executor.references.paths == [*DEFAULT_REFERENCES, "/libs/A.dll"]
    
    def test_initializes_packs(self, executor, journal):
        session = executor.initialize([], [RecordingPack("a", journal)], ["arg"])
        assert journal == ["init:a"]
        assert session.script_args == ["arg"]
        assert executor.session is session
    
    def test_cannot_initialize_while_active(self, initialized):
        with pytest.raises(SessionStateError):
            initialized.initialize([], [], [])
    
    def test_can_initialize_after_terminate(self, initialized, journal):
        initialized.terminate()
        session = initialized.initialize([], [RecordingPack("b", journal)], [])
        assert session.is_active


class TestExecute:
    """Tests for file and text execution."""
    
    def test_requires_initialize(self, executor, script):
        with pytest.raises(SessionStateError):
            executor.execute(script)
        with pytest.raises(SessionStateError):
            executor.execute_script("1")
    
    def test_rejected_after_terminate(self, initialized, script):
        initialized.terminate()
        with pytest.raises(SessionStateError):
            initialized.execute(script)
    
    def test_relative_path_resolved_against_current_directory(self, initialized, engine, script):
        initialized.execute("main.csx", ["a", "b"])
        assert engine.last["code"] == "var x = 1;"
        assert engine.last["script_args"] == ["a", "b"]
        assert engine.last["file_name"] == "main.csx"
    
    def test_absolute_path_used_as_is(self, initialized, engine, file_system):
        other = file_system.add_file(os.path.join(os.sep, "scripts", "tool.csx"), "tool();")
        initialized.execute(other)
        assert engine.last["code"] == "tool();"
        assert engine.last["file_name"] == "tool.csx"
    
    def test_missing_file_propagates(self, initialized):
        with pytest.raises(FileNotFoundError):
            initialized.execute("missing.csx")
    
    def test_engine_failure_propagates(self, initialized, engine):
        def fail(*args):
            raise RuntimeError("engine down")
        
        engine.execute = fail
        with pytest.raises(RuntimeError, match="engine down"):
            initialized.execute_script("x")
    
    def test_returns_engine_result(self, initialized):
        result = initialized.execute_script("x")
        assert result.success
        assert result.return_value == 1
    
    def test_passes_session(self, initialized, engine):
        initialized.execute_script("x")
        assert engine.last["session"] is initialized.session
    
    def test_text_form_keeps_file_name(self, initialized, engine, script):
        initialized.execute(script)
        initialized.execute_script("y")
        assert engine.last["file_name"] == "main.csx"
    
    def test_declared_namespace_reaches_engine(self, initialized, engine, preprocessor):
        preprocessor.declare_script("x", namespaces=["Foo.Bar"])
        initialized.execute_script("x")
        assert engine.last["namespaces"] == [*DEFAULT_NAMESPACES, "Foo.Bar"]
    
    def test_namespaces_not_persisted(self, initialized, preprocessor):
        preprocessor.declare_script("x", namespaces=["Foo.Bar"])
        initialized.execute_script("x")
        assert initialized.namespaces.names == list(DEFAULT_NAMESPACES)
    
    def test_declared_references_accumulate(self, initialized, engine, preprocessor):
        preprocessor.declare_script("one", references=["/a.dll", "/b.dll"])
        preprocessor.declare_script("two", references=["/b.dll", "/c.dll"])
        
        initialized.execute_script("one")
        initialized.execute_script("two")
        
        assert initialized.references.paths == [*DEFAULT_REFERENCES, "/a.dll", "/b.dll", "/c.dll"]
        assert engine.last["references"] == initialized.references.paths
    
    def test_imported_namespaces_persist(self, initialized, engine):
        initialized.import_namespaces(["Extra"])
        initialized.execute_script("x")
        initialized.execute_script("y")
        assert engine.last["namespaces"][-1] == "Extra"


class TestLibraryInjection:
    """Tests for script library injection through the executor."""
    
    def test_injected_into_first_execution_only(self, initialized, engine, library, file_system):
        script1 = file_system.add_file(os.path.join(CWD, "one.csx"), "one();")
        script2 = file_system.add_file(os.path.join(CWD, "two.csx"), "two();")
        
        initialized.execute(script1)
        initialized.execute(script2)
        
        assert engine.calls[0]["code"] == LIBRARY_CODE + os.linesep + "one();"
        assert LIBRARY_CODE not in engine.calls[1]["code"]
    
    def test_file_execution_looks_next_to_script(self, initialized, engine, library, file_system):
        nested = file_system.add_file(os.path.join(CWD, "sub", "nested.csx"), "nested();")
        
        initialized.execute(nested)
        initialized.execute_script("later();")
        
        assert engine.calls[0]["code"] == "nested();"
        assert engine.calls[1]["code"] == "later();"
    
    def test_text_execution_looks_in_current_directory(self, initialized, engine, library):
        initialized.execute_script("x")
        assert engine.last["code"].startswith(LIBRARY_CODE)
    
    def test_reset_rearms_injection(self, initialized, engine, library):
        initialized.execute_script("x")
        initialized.reset()
        initialized.execute_script("y")
        
        injected = [call for call in engine.calls if call["code"].startswith(LIBRARY_CODE)]
        assert len(injected) == 2
    
    def test_library_dependencies_reach_engine(self, initialized, engine, library, preprocessor):
        preprocessor.declare_file(library, references=["/lib/Shared.dll"], namespaces=["Shared"])
        
        initialized.execute_script("x")
        
        assert "/lib/Shared.dll" in engine.last["references"]
        assert engine.last["namespaces"][-1] == "Shared"


class TestEnvironment:
    """Tests for reference and namespace management through the executor."""
    
    def test_add_own_implementation_path_is_ignored(self, executor):
        before = len(executor.references)
        executor.add_reference_paths([CORE_ARTIFACT])
        assert len(executor.references) == before
    
    def test_add_own_implementation_module_is_ignored(self, executor):
        before = len(executor.references)
        executor.add_references([executor_module, references_module])
        assert len(executor.references) == before
        assert executor.references.modules == []
    
    def test_add_and_remove_modules(self, executor):
        executor.add_references([json])
        assert json in executor.references
        executor.remove_references([json])
        assert json not in executor.references
    
    def test_remove_absent_paths(self, executor):
        executor.remove_reference_paths(["/nowhere.dll"])
        assert executor.references.paths == list(DEFAULT_REFERENCES)
    
    def test_remove_namespaces(self, executor):
        executor.remove_namespaces(["System.IO"])
        assert "System.IO" not in executor.namespaces
    
    def test_none_arguments_rejected(self, executor):
        with pytest.raises(InvalidArgumentError):
            executor.import_namespaces(None)
        with pytest.raises(InvalidArgumentError):
            executor.add_reference_paths(None)
        with pytest.raises(InvalidArgumentError):
            executor.add_references(None)
    
    def test_reset_restores_defaults(self, initialized, preprocessor):
        preprocessor.declare_script("x", references=["/a.dll"])
        initialized.execute_script("x")
        initialized.import_namespaces(["Extra"])
        initialized.add_references([json])
        
        initialized.reset()
        
        assert initialized.references.paths == list(DEFAULT_REFERENCES)
        assert initialized.references.modules == []
        assert initialized.namespaces.names == list(DEFAULT_NAMESPACES)
    
    def test_reset_clears_session_state_keeps_packs(self, executor, journal):
        pack = RecordingPack("a", journal)
        executor.initialize([], [pack], [])
        
        executor.reset()
        
        assert executor.session.state == {}
        assert executor.session.script_packs == [pack]
        assert journal == ["init:a"]
    
    def test_reset_before_initialize(self, executor):
        executor.reset()
        assert executor.references.paths == list(DEFAULT_REFERENCES)
    
    def test_reset_after_terminate_keeps_environment(self, initialized):
        initialized.add_reference_paths(["/libs/Extra.dll"])
        initialized.import_namespaces(["Extra"])
        initialized.terminate()
        
        with pytest.raises(SessionStateError):
            initialized.reset()
        
        assert "/libs/Extra.dll" in initialized.references
        assert "Extra" in initialized.namespaces
    
    def test_terminate_runs_pack_hooks(self, executor, journal):
        executor.initialize([], [RecordingPack("a", journal), RecordingPack("b", journal)], [])
        executor.terminate()
        assert journal == ["init:a", "init:b", "terminate:b", "terminate:a"]
    
    def test_terminate_before_initialize(self, executor):
        with pytest.raises(SessionStateError):
            executor.terminate()
