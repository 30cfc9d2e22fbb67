"""
Session lifecycle models.
"""

from __future__ import annotations

from enum import Enum


class SessionPhase(str, Enum):
    """Phases of an execution session."""
    
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    TERMINATED = "terminated"
    
    @property
    def description(self) -> str:
        """Get description for the phase."""
        descriptions = {
            "uninitialized": "Script packs not yet initialized",
            "initialized": "Accepting executions",
            "terminated": "Script packs terminated, no further executions",
        }
        return descriptions.get(self.value, "Unknown phase")
