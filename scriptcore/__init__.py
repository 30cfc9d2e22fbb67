"""
scriptcore - Script execution orchestrator

Owns the execution environment of a scripting host (references and imported
namespaces), drives pre-processing, manages script pack sessions and injects
the shared script library into the first script of every session.
"""

__version__ = "0.1.0"
__author__ = "scriptcore Team"
__license__ = "MIT"

from scriptcore.models.config import ScriptCoreConfig

__all__ = [
    "__version__",
    "ScriptCoreConfig",
]
