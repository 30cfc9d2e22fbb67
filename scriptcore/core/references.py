"""
Reference and namespace collections.

The executor keeps one ReferenceSet and one NamespaceSet for its whole
lifetime. Both start from fixed defaults and are restored to them on reset.
"""

from __future__ import annotations

from pathlib import Path
from types import ModuleType
from typing import Iterable, Iterator

import scriptcore
import scriptcore_contracts
from scriptcore.core.errors import require_argument
from scriptcore.utils.helpers import artifact_name, deduplicate, ensure_list
from scriptcore.utils.logger import get_logger

logger = get_logger(__name__)

# Artifacts of the orchestrator itself; handed to the engine by default but
# never accepted through add().
CORE_ARTIFACT = str(Path(scriptcore.__file__).resolve().parent)
CONTRACTS_ARTIFACT = str(Path(scriptcore_contracts.__file__).resolve().parent)

RESERVED_ARTIFACT_NAMES = frozenset({
    artifact_name(CORE_ARTIFACT),
    artifact_name(CONTRACTS_ARTIFACT),
})

DEFAULT_REFERENCES: tuple[str, ...] = (
    "System",
    "System.Core",
    "System.Data",
    "System.Data.DataSetExtensions",
    "System.Xml",
    "System.Xml.Linq",
    "System.Net.Http",
    CORE_ARTIFACT,
    CONTRACTS_ARTIFACT,
)

DEFAULT_NAMESPACES: tuple[str, ...] = (
    "System",
    "System.Collections.Generic",
    "System.Linq",
    "System.Text",
    "System.Threading.Tasks",
    "System.IO",
    "System.Net.Http",
)


def is_reserved_path(path: str) -> bool:
    """Whether ``path`` names one of the orchestrator's own artifacts."""
    return artifact_name(path) in RESERVED_ARTIFACT_NAMES


def is_reserved_module(module: ModuleType) -> bool:
    """Whether ``module`` is, or lives inside, one of the orchestrator's own packages."""
    return module.__name__.partition(".")[0].casefold() in RESERVED_ARTIFACT_NAMES


class ReferenceSet:
    """
    Deduplicated references handed to the script engine.
    
    References are tracked both as in-process handles (imported modules) and
    as path strings. Path order is the order of first insertion.
    
    Example:
        >>> refs = ReferenceSet()
        >>> refs.add_paths(["/libs/Dapper.dll"])
        >>> "/libs/Dapper.dll" in refs
        True
    """
    
    def __init__(self, defaults: Iterable[str] = DEFAULT_REFERENCES):
        """
        Initialize from a default path list.
        
        Args:
            defaults: Paths restored on reset. Taken as-is, without the
                reserved-artifact filter.
        """
        self._defaults = tuple(defaults)
        self._paths: dict[str, None] = {}
        self._modules: dict[int, ModuleType] = {}
        self.reset()
    
    @property
    def defaults(self) -> tuple[str, ...]:
        return self._defaults
    
    @property
    def paths(self) -> list[str]:
        """Path references in insertion order."""
        return list(self._paths)
    
    @property
    def modules(self) -> list[ModuleType]:
        """Module handle references in insertion order."""
        return list(self._modules.values())
    
    def add(self, modules: Iterable[ModuleType]) -> None:
        """
        Add module handles, skipping the orchestrator's own packages.
        
        Raises:
            InvalidArgumentError: If modules is None
        """
        modules = ensure_list(require_argument("modules", modules))
        
        for module in modules:
            if is_reserved_module(module):
                logger.debug(f"Skipping reserved module reference {module.__name__}")
                continue
            self._modules.setdefault(id(module), module)
    
    def remove(self, modules: Iterable[ModuleType]) -> None:
        """
        Remove module handles; absent handles are ignored.
        
        Raises:
            InvalidArgumentError: If modules is None
        """
        modules = ensure_list(require_argument("modules", modules))
        
        for module in modules:
            self._modules.pop(id(module), None)
    
    def add_paths(self, paths: Iterable[str]) -> None:
        """
        Add path references, skipping the orchestrator's own artifacts.
        
        Raises:
            InvalidArgumentError: If paths is None
        """
        paths = ensure_list(require_argument("paths", paths))
        
        for path in paths:
            if is_reserved_path(path):
                logger.debug(f"Skipping reserved reference {path}")
                continue
            self._paths.setdefault(path, None)
    
    def remove_paths(self, paths: Iterable[str]) -> None:
        """
        Remove path references; absent paths are ignored.
        
        Raises:
            InvalidArgumentError: If paths is None
        """
        paths = ensure_list(require_argument("paths", paths))
        
        for path in paths:
            self._paths.pop(path, None)
    
    def merge(self, declared: Iterable[str]) -> None:
        """Union references declared by a pre-processed script, unfiltered."""
        for path in declared:
            self._paths.setdefault(path, None)
    
    def reset(self) -> None:
        """Restore exactly the default paths and drop all module handles."""
        self._paths = dict.fromkeys(self._defaults)
        self._modules = {}
    
    def __contains__(self, item: object) -> bool:
        if isinstance(item, ModuleType):
            return id(item) in self._modules
        return item in self._paths
    
    def __iter__(self) -> Iterator[str]:
        return iter(list(self._paths))
    
    def __len__(self) -> int:
        return len(self._paths) + len(self._modules)
    
    def __repr__(self) -> str:
        return f"ReferenceSet(paths={len(self._paths)}, modules={len(self._modules)})"


class NamespaceSet:
    """
    Ordered namespaces opened for every execution.
    
    Behaves like a list: importing a name twice keeps both entries. The
    effective namespaces of one execution come from union(), which is
    de-duplicated.
    """
    
    def __init__(self, defaults: Iterable[str] = DEFAULT_NAMESPACES):
        self._defaults = tuple(defaults)
        self._names: list[str] = []
        self.reset()
    
    @property
    def defaults(self) -> tuple[str, ...]:
        return self._defaults
    
    @property
    def names(self) -> list[str]:
        return list(self._names)
    
    def import_(self, names: Iterable[str]) -> None:
        """
        Append namespaces in order.
        
        Raises:
            InvalidArgumentError: If names is None
        """
        names = ensure_list(require_argument("namespaces", names))
        self._names.extend(names)
    
    def remove(self, names: Iterable[str]) -> None:
        """
        Remove the first occurrence of each namespace if present.
        
        Raises:
            InvalidArgumentError: If names is None
        """
        names = ensure_list(require_argument("namespaces", names))
        
        for name in names:
            if name in self._names:
                self._names.remove(name)
    
    def union(self, declared: Iterable[str]) -> list[str]:
        """
        Effective namespaces for one execution.
        
        Persistent entries first, then declared names not already present.
        The persistent list is left untouched.
        """
        return deduplicate([*self._names, *declared])
    
    def reset(self) -> None:
        """Restore exactly the default namespaces."""
        self._names = list(self._defaults)
    
    def __contains__(self, item: object) -> bool:
        return item in self._names
    
    def __iter__(self) -> Iterator[str]:
        return iter(list(self._names))
    
    def __len__(self) -> int:
        return len(self._names)
    
    def __repr__(self) -> str:
        return f"NamespaceSet({self._names!r})"
