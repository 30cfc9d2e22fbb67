"""
Script pack registry for discovering and loading script packs.
"""

from __future__ import annotations

from importlib.metadata import entry_points

from scriptcore.core.errors import PluginLoadError
from scriptcore.utils.helpers import import_string
from scriptcore.utils.logger import get_logger
from scriptcore_contracts.packs import ScriptPack

ENTRY_POINT_GROUP = "scriptcore.packs"

logger = get_logger(__name__)


def load_pack(dotted_path: str) -> ScriptPack:
    """
    Import and instantiate a script pack.
    
    Args:
        dotted_path: ``package.module:PackClass`` (or dotted form)
    
    Returns:
        New pack instance
    
    Raises:
        PluginLoadError: If the path cannot be imported or is not a ScriptPack
    """
    try:
        target = import_string(dotted_path)
    except ImportError as e:
        raise PluginLoadError(f"Cannot import script pack '{dotted_path}': {e}") from e
    
    pack = target() if isinstance(target, type) else target
    if not isinstance(pack, ScriptPack):
        raise PluginLoadError(f"'{dotted_path}' is not a ScriptPack")
    return pack


class ScriptPackRegistry:
    """
    Registry for script packs.
    
    Packs installed by other distributions are discovered through the
    ``scriptcore.packs`` entry point group on first lookup.
    
    Example:
        >>> registry = ScriptPackRegistry()
        >>> registry.register(JsonPack())
        >>> pack = registry.get("json")
    """
    
    def __init__(self, discover: bool = True):
        """
        Initialize an empty registry.
        
        Args:
            discover: Load entry point packs on first lookup
        """
        self._packs: dict[str, ScriptPack] = {}
        self._initialized = not discover
    
    def register(self, pack: ScriptPack) -> None:
        """
        Register a pack under its name, replacing any pack of the same name.
        
        Args:
            pack: Pack instance to register
        """
        self._packs[pack.name] = pack
    
    def register_path(self, dotted_path: str) -> ScriptPack:
        """Load a pack from a dotted path and register it."""
        pack = load_pack(dotted_path)
        self.register(pack)
        return pack
    
    def get(self, name: str) -> ScriptPack | None:
        """
        Get a pack by name.
        
        Args:
            name: Pack name
        
        Returns:
            Pack instance or None if not found
        """
        self._ensure_initialized()
        return self._packs.get(name)
    
    def get_all(self) -> list[ScriptPack]:
        """Get all registered packs in registration order."""
        self._ensure_initialized()
        return list(self._packs.values())
    
    def list_names(self) -> list[str]:
        """Get list of all pack names."""
        self._ensure_initialized()
        return list(self._packs.keys())
    
    def _ensure_initialized(self) -> None:
        """Ensure installed packs are registered."""
        if not self._initialized:
            self._initialized = True
            self._register_entry_points()
    
    def _register_entry_points(self) -> None:
        """Register packs advertised by installed distributions."""
        for entry_point in entry_points(group=ENTRY_POINT_GROUP):
            try:
                pack = entry_point.load()()
            except Exception as e:
                logger.warning(f"Skipping script pack [magenta]{entry_point.name}[/]: {e}")
                continue
            if isinstance(pack, ScriptPack):
                self._packs.setdefault(pack.name, pack)
            else:
                logger.warning(f"Entry point {entry_point.name} is not a ScriptPack")
