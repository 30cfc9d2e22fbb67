"""
Executor construction from configuration.
"""

from __future__ import annotations

import logging

from scriptcore.core.errors import PluginLoadError
from scriptcore.core.executor import ScriptExecutor
from scriptcore.core.references import DEFAULT_NAMESPACES, DEFAULT_REFERENCES
from scriptcore.hosting.composer import DefaultScriptLibraryComposer
from scriptcore.hosting.filesystem import PhysicalFileSystem
from scriptcore.models.config import ScriptCoreConfig
from scriptcore.utils.helpers import import_string
from scriptcore_contracts.engine import ScriptEngine
from scriptcore_contracts.filesystem import FileSystem
from scriptcore_contracts.preprocessor import FilePreProcessor


def _load_class(dotted_path: str, base: type) -> type:
    try:
        cls = import_string(dotted_path)
    except ImportError as e:
        raise PluginLoadError(f"Cannot import '{dotted_path}': {e}") from e
    if not isinstance(cls, type) or not issubclass(cls, base):
        raise PluginLoadError(f"'{dotted_path}' is not a {base.__name__} subclass")
    return cls


def build_executor(
    config: ScriptCoreConfig,
    file_system: FileSystem | None = None,
    logger: logging.Logger | None = None,
) -> ScriptExecutor:
    """
    Build a ScriptExecutor from configuration.
    
    The engine class is constructed without arguments and the pre-processor
    class with the file system as its only argument. Configured references
    and namespaces extend the defaults, so they survive reset().
    
    Args:
        config: scriptcore configuration
        file_system: File system override (physical file system by default)
        logger: Logger override
    
    Returns:
        Executor ready for initialize()
    
    Raises:
        PluginLoadError: If the engine or pre-processor cannot be loaded
    """
    fs_config = config.filesystem
    file_system = file_system or PhysicalFileSystem(
        current_directory=fs_config.current_directory,
        bin_folder=fs_config.bin_folder,
        dll_cache_folder=fs_config.dll_cache_folder,
        packages_folder=fs_config.packages_folder,
    )
    
    engine_cls = _load_class(config.execution.engine, ScriptEngine)
    preprocessor_cls = _load_class(config.execution.preprocessor, FilePreProcessor)
    
    return ScriptExecutor(
        file_system=file_system,
        preprocessor=preprocessor_cls(file_system),
        engine=engine_cls(),
        composer=DefaultScriptLibraryComposer(config.library.file_name),
        logger=logger,
        default_references=[*DEFAULT_REFERENCES, *config.execution.references],
        default_namespaces=[*DEFAULT_NAMESPACES, *config.execution.namespaces],
    )
