"""
Execution plan model.

Snapshot of everything the executor handed to an engine for one run.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class ExecutionPlan(BaseModel):
    """What an engine was asked to run."""
    
    timestamp: datetime = Field(default_factory=datetime.now)
    file_name: str | None = Field(default=None, description="Script file name, None for raw text")
    base_directory: str | None = Field(default=None)
    cache_directory: str | None = Field(default=None)
    code: str = Field(description="Code after script library injection")
    script_args: list[str] = Field(default_factory=list)
    references: list[str] = Field(default_factory=list, description="Path references")
    module_references: list[str] = Field(
        default_factory=list,
        description="Names of module handle references",
    )
    namespaces: list[str] = Field(default_factory=list)
    pack_references: list[str] = Field(
        default_factory=list,
        description="References contributed by script packs",
    )
    pack_namespaces: list[str] = Field(
        default_factory=list,
        description="Namespaces contributed by script packs",
    )
    
    def to_summary(self) -> str:
        """Get a brief summary."""
        source = self.file_name or "<script>"
        return (
            f"{source}: {len(self.code.splitlines())} lines, "
            f"{len(self.references) + len(self.module_references)} references, "
            f"{len(self.namespaces)} namespaces"
        )
