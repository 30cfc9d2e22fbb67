"""scriptcore packs package - Script pack discovery."""

from scriptcore.packs.registry import ScriptPackRegistry, load_pack

__all__ = [
    "ScriptPackRegistry",
    "load_pack",
]
