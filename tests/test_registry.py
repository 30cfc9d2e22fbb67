"""
Tests for script pack discovery.
"""

import pytest

from scriptcore.core.errors import PluginLoadError
from scriptcore.packs import registry as registry_module
from scriptcore.packs.registry import ScriptPackRegistry, load_pack
from scriptcore_contracts import ScriptPack


class SamplePack(ScriptPack):
    name = "sample"
    
    def initialize(self, session) -> None:
        session.import_namespace("Sample")


class NotAPack:
    pass


class FakeEntryPoint:
    def __init__(self, name, target):
        self.name = name
        self._target = target
    
    def load(self):
        if isinstance(self._target, Exception):
            raise self._target
        return self._target


class TestLoadPack:
    """Tests for load_pack."""
    
    def test_colon_path(self):
        assert isinstance(load_pack("tests.test_registry:SamplePack"), SamplePack)
    
    def test_dotted_path(self):
        assert isinstance(load_pack("tests.test_registry.SamplePack"), SamplePack)
    
    def test_missing_module(self):
        with pytest.raises(PluginLoadError):
            load_pack("tests.no_such_module:Pack")
    
    def test_missing_attribute(self):
        with pytest.raises(PluginLoadError):
            load_pack("tests.test_registry:Missing")
    
    def test_not_a_pack(self):
        with pytest.raises(PluginLoadError, match="not a ScriptPack"):
            load_pack("tests.test_registry:NotAPack")


class TestScriptPackRegistry:
    """Tests for ScriptPackRegistry."""
    
    def test_register_and_get(self):
        registry = ScriptPackRegistry(discover=False)
        pack = SamplePack()
        registry.register(pack)
        assert registry.get("sample") is pack
        assert registry.list_names() == ["sample"]
    
    def test_register_path(self):
        registry = ScriptPackRegistry(discover=False)
        registry.register_path("tests.test_registry:SamplePack")
        assert [p.name for p in registry.get_all()] == ["sample"]
    
    def test_get_unknown(self):
        assert ScriptPackRegistry(discover=False).get("nope") is None
    
    def test_discovers_entry_points(self, monkeypatch):
        monkeypatch.setattr(
            registry_module,
            "entry_points",
            lambda group: [
                FakeEntryPoint("sample", SamplePack),
                FakeEntryPoint("broken", ImportError("boom")),
                FakeEntryPoint("wrong", NotAPack),
            ],
        )
        registry = ScriptPackRegistry()
        assert registry.list_names() == ["sample"]
    
    def test_explicit_registration_wins_over_discovery(self, monkeypatch):
        monkeypatch.setattr(
            registry_module,
            "entry_points",
            lambda group: [FakeEntryPoint("sample", SamplePack)],
        )
        registry = ScriptPackRegistry()
        explicit = SamplePack()
        registry.register(explicit)
        assert registry.get("sample") is explicit
